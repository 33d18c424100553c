"""趋势指标模块"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.data.models import Source
from .base import IndicatorConfig, IndicatorInstance, IndicatorResult, valid_period
from .cross import Cross
from .ma import MOVING_AVERAGES


@dataclass
class MovingAverageCrossover(IndicatorConfig):
    """均线交叉指标 (金叉 / 死叉)

    values:
        - 快线
        - 慢线

    signals:
        快线上穿慢线为买入 (金叉)，下穿为卖出 (死叉)。

    Example:
        >>> cfg = MovingAverageCrossover(fast_period=5, slow_period=20, method="sma")
        >>> results = cfg.over(candles)
    """

    NAME = "MovingAverageCrossover"

    fast_period: int = field(default=9, metadata={"minimum": 1, "description": "快线周期"})
    slow_period: int = field(default=21, metadata={"minimum": 2, "description": "慢线周期"})
    method: str = field(default="ema", metadata={"description": "均线类型: sma / ema / wma / trima"})
    source: Source = field(default=Source.CLOSE, metadata={"description": "数据源"})

    def validate(self) -> bool:
        return (
            valid_period(self.fast_period)
            and valid_period(self.slow_period)
            and self.fast_period < self.slow_period
            and self.method.lower() in MOVING_AVERAGES
        )

    def size(self) -> tuple[int, int]:
        return 2, 1

    def _create_instance(self, candle: Any) -> MovingAverageCrossoverInstance:
        return MovingAverageCrossoverInstance(self, candle)


class MovingAverageCrossoverInstance(IndicatorInstance):
    """均线交叉指标实例"""

    def __init__(self, config: MovingAverageCrossover, candle: Any) -> None:
        super().__init__(config)
        self._source = config.source

        value = self._source.extract(candle)
        ma_cls = MOVING_AVERAGES[config.method.lower()]
        self._fast = ma_cls(config.fast_period, value)
        self._slow = ma_cls(config.slow_period, value)
        # 两条均线以同一个值起步，初始为相等
        self._cross = Cross.new(None, (value, value))

    def next(self, candle: Any) -> IndicatorResult:
        value = self._source.extract(candle)

        fast = self._fast.next(value)
        slow = self._slow.next(value)
        signal = self._cross.next((fast, slow))

        return IndicatorResult.new([fast, slow], [signal])
