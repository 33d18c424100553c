"""PyQuantStream - 流式技术指标框架"""

from .data import Candle, Source
from .messages import ErrorMessage

__version__ = "0.1.0"
__all__ = [
    "Candle",
    "Source",
    "ErrorMessage",
]
