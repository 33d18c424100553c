"""波动率与极值方法模块"""

import math
from abc import abstractmethod
from collections import deque

from .base import PeriodMethod
from .window import Window


class StDev(PeriodMethod):
    """滑动窗口总体标准差

    计算公式:
        variance = sum_sq / n - (sum / n) ^ 2

    sum 与 sum_sq 都用窗口挤出的值增量维护，每次更新 O(1)。
    浮点误差导致的负方差截断为 0，窗口内全部相等时输出恰好为 0。

    Example:
        >>> std = StDev(20, bars[0].close)
        >>> for bar in bars:
        ...     width = 2 * std.next(bar.close)
    """

    name = "StDev"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._window = Window(period, value)
        self._sum = value * period
        self._sum_sq = value * value * period

    def next(self, value: float) -> float:
        evicted = self._window.push(value)
        self._sum += value - evicted
        self._sum_sq += value * value - evicted * evicted

        if self._window.uniform:
            self._sum = value * self.period
            self._sum_sq = value * value * self.period
            return 0.0

        mean = self._sum / self.period
        variance = self._sum_sq / self.period - mean * mean
        if variance <= 0:
            return 0.0
        return math.sqrt(variance)


class _Extremum(PeriodMethod):
    """滑动极值的单调队列实现

    队列保存 (序号, 值)，值单调，队首即窗口内的极值。
    每个值最多入队出队各一次，均摊 O(1)。
    """

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._index = 0
        self._queue: deque[tuple[int, float]] = deque([(0, value)])

    @abstractmethod
    def _dominates(self, new: float, old: float) -> bool:
        """新值是否使队尾的旧值不可能再成为极值"""
        pass

    def next(self, value: float) -> float:
        self._index += 1

        # 移出窗口之外的值
        if self._queue[0][0] <= self._index - self.period:
            self._queue.popleft()

        while self._queue and self._dominates(value, self._queue[-1][1]):
            self._queue.pop()
        self._queue.append((self._index, value))

        return self._queue[0][1]


class Highest(_Extremum):
    """最近 period 个值中的最大值"""

    name = "Highest"

    def _dominates(self, new: float, old: float) -> bool:
        return new >= old


class Lowest(_Extremum):
    """最近 period 个值中的最小值"""

    name = "Lowest"

    def _dominates(self, new: float, old: float) -> bool:
        return new <= old
