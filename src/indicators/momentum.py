"""动量 (差分) 方法模块

两者都用容量为 period 的窗口保存原始输入，push 挤出的值恰好就是
period 根之前的值，因此任意滞后的差分都是 O(1)。
"""

from .base import PeriodMethod
from .window import Window


class Change(PeriodMethod):
    """差分: value - value[period 根之前]

    Example:
        >>> Change.new_over(1, [1.0, 3.0, 2.0])
        [0.0, 2.0, -1.0]
    """

    name = "Change"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._window = Window(period, value)

    def next(self, value: float) -> float:
        return value - self._window.push(value)


class RateOfChange(PeriodMethod):
    """变化率: (value - old) / old

    old 为 0 时输出 0.0。
    """

    name = "RateOfChange"

    def __init__(self, period: int, value: float) -> None:
        super().__init__(period, value)
        self._window = Window(period, value)

    def next(self, value: float) -> float:
        old = self._window.push(value)
        if old == 0:
            return 0.0
        return (value - old) / old
