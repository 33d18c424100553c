"""方法与指标注册表

按名称 (大小写不敏感) 查找已知的方法和指标，供外部配置文件或命令行
按字符串构造指标。
"""

from __future__ import annotations

import logging
from typing import Mapping

from src.messages import ErrorMessage
from .base import IndicatorConfig, Method
from .cross import Cross, CrossAbove, CrossUnder
from .ma import MOVING_AVERAGES
from .momentum import Change, RateOfChange
from .oscillator import ChandeMomentumOscillator
from .trend import MovingAverageCrossover
from .volatility import Highest, Lowest, StDev


logger = logging.getLogger(__name__)


METHODS: dict[str, type[Method]] = {
    **MOVING_AVERAGES,
    "change": Change,
    "rateofchange": RateOfChange,
    "stdev": StDev,
    "highest": Highest,
    "lowest": Lowest,
    "cross": Cross,
    "crossabove": CrossAbove,
    "crossunder": CrossUnder,
}

INDICATORS: dict[str, type[IndicatorConfig]] = {
    "chandemomentumoscillator": ChandeMomentumOscillator,
    "cmo": ChandeMomentumOscillator,
    "movingaveragecrossover": MovingAverageCrossover,
    "macross": MovingAverageCrossover,
}


def get_method(name: str) -> type[Method]:
    """按名称获取方法类

    Raises:
        ValueError: 未知的方法名
    """
    try:
        return METHODS[name.lower()]
    except KeyError:
        raise ValueError(ErrorMessage.UNKNOWN_METHOD.format(name=name)) from None


def get_indicator(name: str) -> type[IndicatorConfig]:
    """按名称获取指标配置类

    Raises:
        ValueError: 未知的指标名
    """
    try:
        return INDICATORS[name.lower()]
    except KeyError:
        raise ValueError(ErrorMessage.UNKNOWN_INDICATOR.format(name=name)) from None


def create_indicator(name: str, params: Mapping[str, str] | None = None) -> IndicatorConfig:
    """按名称创建指标配置，并用字符串参数覆盖默认值

    Args:
        name: 指标名称
        params: 参数名 -> 字符串值

    Returns:
        尚未 init 的指标配置

    Raises:
        ValueError: 未知的指标名
        ParameterParseError: 参数名未知或无法解析

    Example:
        >>> cfg = create_indicator("cmo", {"period": "14", "zone": "0.3"})
        >>> instance = cfg.init(candles[0])
    """
    config = get_indicator(name)()
    for key, value in (params or {}).items():
        config.set(key, value)

    logger.debug(f"已创建指标配置: {config!r}")
    return config
