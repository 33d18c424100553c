"""技术指标库

提供 O(1) 增量更新的流式方法，以及由方法和交叉检测器组合成的指标。

Example:
    >>> from src.indicators import SMA, ChandeMomentumOscillator
    >>>
    >>> sma = SMA(20, bars[0].close)
    >>> cmo = ChandeMomentumOscillator(period=14).init(bars[0])
    >>>
    >>> for bar in bars:
    ...     sma_val = sma.next(bar.close)
    ...     result = cmo.next(bar)
"""

from .window import Window
from .base import (
    Method,
    PeriodMethod,
    Signal,
    IndicatorResult,
    ParamSpec,
    IndicatorConfig,
    IndicatorInstance,
)
from .batch import fold, method_over, indicator_over
from .ma import SMA, EMA, WMA, TRIMA, MOVING_AVERAGES
from .momentum import Change, RateOfChange
from .volatility import StDev, Highest, Lowest
from .cross import Cross, CrossAbove, CrossUnder
from .oscillator import ChandeMomentumOscillator, ChandeMomentumOscillatorInstance
from .trend import MovingAverageCrossover, MovingAverageCrossoverInstance
from .registry import METHODS, INDICATORS, get_method, get_indicator, create_indicator


__all__ = [
    # 基础
    "Window",
    "Method",
    "PeriodMethod",
    "Signal",
    "IndicatorResult",
    "ParamSpec",
    "IndicatorConfig",
    "IndicatorInstance",
    # 批量驱动
    "fold",
    "method_over",
    "indicator_over",
    # 移动平均
    "SMA",
    "EMA",
    "WMA",
    "TRIMA",
    "MOVING_AVERAGES",
    # 动量
    "Change",
    "RateOfChange",
    # 波动率
    "StDev",
    "Highest",
    "Lowest",
    # 交叉检测
    "Cross",
    "CrossAbove",
    "CrossUnder",
    # 指标
    "ChandeMomentumOscillator",
    "ChandeMomentumOscillatorInstance",
    "MovingAverageCrossover",
    "MovingAverageCrossoverInstance",
    # 注册表
    "METHODS",
    "INDICATORS",
    "get_method",
    "get_indicator",
    "create_indicator",
]
