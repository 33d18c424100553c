"""振荡器指标模块"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.data.models import Source
from .base import IndicatorConfig, IndicatorInstance, IndicatorResult, valid_period
from .cross import CrossAbove, CrossUnder
from .momentum import Change
from .window import Window


def _split(change: float) -> tuple[float, float]:
    """拆分为 (上涨部分, 下跌部分)，均为非负"""
    if change > 0:
        return change, 0.0
    if change < 0:
        return 0.0, -change
    return 0.0, 0.0


@dataclass
class ChandeMomentumOscillator(IndicatorConfig):
    """钱德动量摆动指标 (Chande Momentum Oscillator)

    计算公式:
        CMO = (sum_up - sum_down) / (sum_up + sum_down)

    sum_up / sum_down 为最近 period 根的涨幅和跌幅之和，取值范围 [-1, 1]，
    两者都为 0 时输出 0。

    信号:
        CMO 下穿 -zone 时为买入，上穿 +zone 时为卖出，其余为无信号。

    Example:
        >>> cmo = ChandeMomentumOscillator(period=9, zone=0.5)
        >>> instance = cmo.init(candles[0])
        >>> for candle in candles:
        ...     result = instance.next(candle)
        ...     if result.signal(0) == Signal.BUY:
        ...         print("超卖反转")
    """

    NAME = "ChandeMomentumOscillator"

    period: int = field(default=9, metadata={"minimum": 2, "description": "主周期"})
    zone: float = field(default=0.5, metadata={"minimum": 0.0, "maximum": 1.0, "description": "超买超卖区间"})
    source: Source = field(default=Source.CLOSE, metadata={"description": "数据源"})

    def validate(self) -> bool:
        return 0.0 <= self.zone <= 1.0 and valid_period(self.period, minimum=2)

    def size(self) -> tuple[int, int]:
        return 1, 1

    def _create_instance(self, candle: Any) -> ChandeMomentumOscillatorInstance:
        return ChandeMomentumOscillatorInstance(self, candle)


class ChandeMomentumOscillatorInstance(IndicatorInstance):
    """CMO 指标实例

    除两个累加和外还维护窗口内上涨/下跌的根数，根数归零时对应的和置 0，
    全平的窗口输出恰好为 0。
    """

    def __init__(self, config: ChandeMomentumOscillator, candle: Any) -> None:
        super().__init__(config)
        self._source = config.source
        self._zone = config.zone

        self._change = Change(1, self._source.extract(candle))
        self._window = Window(config.period, 0.0)
        self._pos_sum = 0.0
        self._neg_sum = 0.0
        self._pos_count = 0
        self._neg_count = 0
        # 初始化时比值为 0，以此作为交叉检测的上一对值
        self._cross_under = CrossUnder.new(None, (0.0, -self._zone))
        self._cross_above = CrossAbove.new(None, (0.0, self._zone))

    def next(self, candle: Any) -> IndicatorResult:
        change = self._change.next(self._source.extract(candle))

        old_pos, old_neg = _split(self._window.push(change))
        new_pos, new_neg = _split(change)
        self._pos_count += (new_pos > 0) - (old_pos > 0)
        self._neg_count += (new_neg > 0) - (old_neg > 0)
        self._pos_sum = max(0.0, self._pos_sum + new_pos - old_pos) if self._pos_count else 0.0
        self._neg_sum = max(0.0, self._neg_sum + new_neg - old_neg) if self._neg_count else 0.0

        total = self._pos_sum + self._neg_sum
        value = (self._pos_sum - self._neg_sum) / total if total > 0 else 0.0

        signal = self._cross_under.next((value, -self._zone)) - self._cross_above.next((value, self._zone))

        return IndicatorResult.new([value], [signal])
