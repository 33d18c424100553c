"""趋势指标测试"""

import pytest

from src.core.errors import ParameterParseError, WrongConfigError
from src.data.models import Candle
from src.indicators import (
    EMA,
    SMA,
    MovingAverageCrossover,
    MovingAverageCrossoverInstance,
    Signal,
)


def _candles(prices):
    return [Candle.from_value(p) for p in prices]


class TestMovingAverageCrossoverConfig:
    """均线交叉配置测试"""

    def test_defaults(self):
        """测试默认参数"""
        cfg = MovingAverageCrossover()

        assert cfg.fast_period == 9
        assert cfg.slow_period == 21
        assert cfg.method == "ema"
        assert cfg.validate() is True
        assert cfg.size() == (2, 1)

    @pytest.mark.parametrize("kwargs", [
        {"fast_period": 21, "slow_period": 21},
        {"fast_period": 30, "slow_period": 10},
        {"fast_period": 0},
        {"method": "kama"},
    ])
    def test_validate_rejects(self, kwargs):
        """测试跨字段校验"""
        assert MovingAverageCrossover(**kwargs).validate() is False

    def test_init_wrong_config(self):
        """测试无效配置 init 失败"""
        with pytest.raises(WrongConfigError):
            MovingAverageCrossover(fast_period=5, slow_period=3).init(Candle.from_value(1.0))

    def test_set_method(self):
        """测试设置均线类型"""
        cfg = MovingAverageCrossover()
        cfg.set("method", "SMA")

        assert cfg.method == "SMA"
        assert cfg.validate() is True

    def test_set_invalid_period(self):
        """测试非数字周期"""
        with pytest.raises(ParameterParseError) as exc_info:
            MovingAverageCrossover().set("slow_period", "twenty")

        assert exc_info.value.value == "twenty"


class TestMovingAverageCrossoverInstance:
    """均线交叉实例测试"""

    def test_init_returns_instance(self):
        """测试 init 返回实例"""
        instance = MovingAverageCrossover().init(Candle.from_value(1.0))
        assert isinstance(instance, MovingAverageCrossoverInstance)

    def test_values_match_moving_averages(self, candles, closes):
        """测试输出等于两条均线"""
        cfg = MovingAverageCrossover(fast_period=3, slow_period=8, method="ema")

        results = cfg.over(candles)

        assert [r.value(0) for r in results] == EMA.new_over(3, closes)
        assert [r.value(1) for r in results] == EMA.new_over(8, closes)

    def test_golden_and_death_cross(self):
        """测试金叉买入、死叉卖出"""
        cfg = MovingAverageCrossover(fast_period=1, slow_period=3, method="sma")
        prices = [10.0, 10.0, 13.0, 13.0, 13.0, 7.0, 7.0]

        signals = [r.signal(0) for r in cfg.over(_candles(prices))]

        assert signals == [
            Signal.NONE, Signal.NONE, Signal.BUY, Signal.NONE,
            Signal.NONE, Signal.SELL, Signal.NONE,
        ]

    def test_signals_match_fast_slow_crossing(self, candles, closes):
        """测试信号与快慢线交叉定义一致"""
        cfg = MovingAverageCrossover(fast_period=2, slow_period=6, method="sma")
        results = cfg.over(candles)

        fast = SMA.new_over(2, closes)
        slow = SMA.new_over(6, closes)
        for i in range(1, len(results)):
            if fast[i - 1] <= slow[i - 1] and fast[i] > slow[i]:
                assert results[i].signal(0) is Signal.BUY
            elif fast[i - 1] >= slow[i - 1] and fast[i] < slow[i]:
                assert results[i].signal(0) is Signal.SELL
            else:
                assert results[i].signal(0) is Signal.NONE

    def test_first_tick_after_init_can_signal(self):
        """测试 init 后第一根 K 线即可离开相等状态形成金叉"""
        cfg = MovingAverageCrossover(fast_period=1, slow_period=3, method="sma")
        instance = cfg.init(Candle.from_value(10.0))

        result = instance.next(Candle.from_value(13.0))

        assert result.values == (13.0, 11.0)
        assert result.signal(0) is Signal.BUY

    def test_streaming_matches_batch_tail(self, candles):
        """测试 init(首根) 后逐根 next 与批量计算的后续输出一致"""
        cfg = MovingAverageCrossover(fast_period=3, slow_period=7, method="wma")

        instance = cfg.init(candles[0])
        streamed = [instance.next(c) for c in candles[1:]]

        assert streamed == cfg.over(candles)[1:]

    @pytest.mark.parametrize("kwargs", [
        {"fast_period": 2.5},
        {"slow_period": 21.0},
        {"fast_period": True},
    ])
    def test_non_int_period_is_invalid(self, kwargs):
        """测试非整数周期校验失败"""
        cfg = MovingAverageCrossover(**kwargs)

        assert cfg.validate() is False
        with pytest.raises(WrongConfigError):
            cfg.init(Candle.from_value(1.0))
