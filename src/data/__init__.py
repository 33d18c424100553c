"""数据层模块"""

from .models import Candle, Source

__all__ = [
    "Candle",
    "Source",
]
