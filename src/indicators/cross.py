"""交叉检测方法模块

输入为同步的两条序列的一对值 (a, b)，只保存上一对值作为状态。

相等既不算「在上方」也不算「在下方」: 恰好落在边界上的值本身不构成交叉，
只有相对上一根的先后顺序发生变化的那一根才算。

Example:
    >>> CrossAbove.new_over(None, [(1.0, 2.0), (2.0, 2.0), (3.0, 2.0), (4.0, 2.0)])
    [0, 0, 1, 0]
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Optional

from .base import Method


Pair = tuple[float, float]


class _CrossBase(Method):
    """交叉检测基类

    通过 new(None, pair) 构造时，首对值作为「上一对」；
    默认构造 (无初始值) 时，第一次调用 next 的输入作为基准并返回 0。
    """

    def __init__(self, value: Optional[Pair] = None) -> None:
        self._last: Optional[Pair] = value

    @classmethod
    def new(cls, params: None, initial_value: Pair) -> _CrossBase:
        return cls(initial_value)

    @abstractmethod
    def _crossed(self, last: Pair, value: Pair) -> int:
        pass

    def next(self, value: Pair) -> int:
        last, self._last = self._last, value
        if last is None:
            return 0
        return self._crossed(last, value)


class CrossAbove(_CrossBase):
    """a 从 <= b 变为 > b 的那一根输出 1，否则输出 0"""

    name = "CrossAbove"

    def _crossed(self, last: Pair, value: Pair) -> int:
        return int(last[0] <= last[1] and value[0] > value[1])


class CrossUnder(_CrossBase):
    """a 从 >= b 变为 < b 的那一根输出 1，否则输出 0"""

    name = "CrossUnder"

    def _crossed(self, last: Pair, value: Pair) -> int:
        return int(last[0] >= last[1] and value[0] < value[1])


class Cross(_CrossBase):
    """双向交叉: 上穿输出 1，下穿输出 -1，否则输出 0"""

    name = "Cross"

    def _crossed(self, last: Pair, value: Pair) -> int:
        if last[0] <= last[1] and value[0] > value[1]:
            return 1
        if last[0] >= last[1] and value[0] < value[1]:
            return -1
        return 0
