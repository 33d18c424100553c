"""移动平均方法模块"""

from .base import Method, PeriodMethod
from .window import Window


class SMA(PeriodMethod):
    """简单移动平均 (Simple Moving Average)

    计算公式: SMA = sum(window) / period

    窗口被挤出的值用于增量维护均值，每次更新 O(1):
        mean += (value - evicted) / period

    窗口内全部为同一个值时直接输出该值，增量累积的舍入误差在此归零。

    Example:
        >>> SMA.new_over(2, [1.0, 2.0, 3.0, 4.0])
        [1.0, 1.5, 2.5, 3.5]
    """

    name = "SMA"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._window = Window(period, value)
        self._mean = value

    def next(self, value: float) -> float:
        """更新 SMA 值

        Args:
            value: 新的价格数据

        Returns:
            SMA 值
        """
        evicted = self._window.push(value)

        # 周期为 1 的窗口总是 uniform，退化为恒等变换
        if self._window.uniform:
            self._mean = value
        else:
            self._mean += (value - evicted) / self.period
        return self._mean


class EMA(PeriodMethod):
    """指数移动平均 (Exponential Moving Average)

    计算公式:
        EMA = EMA_prev + alpha * (price - EMA_prev)
        alpha = 2 / (period + 1)

    初始 EMA 等于首个观测值。

    Example:
        >>> ema = EMA(20, bars[0].close)
        >>> for bar in bars:
        ...     result = ema.next(bar.close)
    """

    name = "EMA"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._alpha = 2.0 / (period + 1)
        self._value = value

    def next(self, value: float) -> float:
        if self.period == 1:
            self._value = value
        else:
            self._value += self._alpha * (value - self._value)
        return self._value


class WMA(PeriodMethod):
    """线性加权移动平均 (Weighted Moving Average)

    最新值权重为 period，最旧值权重为 1，分母为 period * (period + 1) / 2。

    加权和的 O(1) 递推:
        numerator = numerator + period * value - sum_prev
        sum = sum_prev + value - evicted
    """

    name = "WMA"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._window = Window(period, value)
        self._divider = period * (period + 1) / 2
        self._sum = value * period
        self._numerator = value * self._divider

    def next(self, value: float) -> float:
        self._numerator += self.period * value - self._sum
        self._sum += value - self._window.push(value)

        if self._window.uniform:
            self._sum = value * self.period
            self._numerator = value * self._divider
            return value
        return self._numerator / self._divider


class TRIMA(PeriodMethod):
    """三角移动平均 (Triangular Moving Average)

    两级级联: SMA(period) 的输出作为第二个 SMA(period) 的输入，
    没有单独的公式，周期为 1 时自然退化为恒等变换。

    Example:
        >>> trima = TRIMA(4, 1.0)
        >>> trima.next(1.0)
        1.0
        >>> trima.next(2.0)
        1.0625
        >>> trima.next(3.0)
        1.25
        >>> trima.next(4.0)
        1.625
    """

    name = "TRIMA"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._sma1 = SMA(period, value)
        self._sma2 = SMA(period, value)

    def next(self, value: float) -> float:
        return self._sma2.next(self._sma1.next(value))


# 可按名称选择的移动平均
MOVING_AVERAGES: dict[str, type[Method]] = {
    "sma": SMA,
    "ema": EMA,
    "wma": WMA,
    "trima": TRIMA,
}
