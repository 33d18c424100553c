"""固定容量环形窗口"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from src.core.errors import MethodConfigError
from src.messages import ErrorMessage


T = TypeVar("T")


class Window(Generic[T]):
    """固定容量环形缓冲区

    窗口始终保存恰好 capacity 个元素 (构造时全部填充为 seed)，
    因此每次 push 都会写入最新值并返回被挤出的最旧值。
    滑动统计量依赖这个返回值做 O(1) 增量更新:

        running_sum += value - window.push(value)

    Example:
        >>> w = Window(3, 0.0)
        >>> w.push(1.0)
        0.0
        >>> list(w)
        [0.0, 0.0, 1.0]
    """

    __slots__ = ("_buf", "_index", "_capacity", "_run")

    def __init__(self, capacity: int, seed: T) -> None:
        """初始化窗口

        Args:
            capacity: 窗口容量，必须 >= 1
            seed: 所有槽位的初始值
        """
        if capacity < 1:
            raise MethodConfigError(ErrorMessage.INVALID_CAPACITY.component("Window").build(capacity=capacity))

        self._capacity = capacity
        self._buf: list[T] = [seed] * capacity
        # 指向最旧的槽位 (下一次写入的位置)
        self._index = 0
        # 末尾连续相等值的个数，上限为 capacity
        self._run = capacity

    def push(self, value: T) -> T:
        """写入新值并返回被挤出的最旧值"""
        if value == self._buf[self._index - 1]:
            if self._run < self._capacity:
                self._run += 1
        else:
            self._run = 1

        evicted = self._buf[self._index]
        self._buf[self._index] = value
        self._index += 1
        if self._index == self._capacity:
            self._index = 0
        return evicted

    @property
    def uniform(self) -> bool:
        """窗口内所有值都相等"""
        return self._run == self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def oldest(self) -> T:
        """最旧的值 (下一次 push 将被挤出)"""
        return self._buf[self._index]

    @property
    def newest(self) -> T:
        """最近一次写入的值"""
        return self._buf[self._index - 1]

    def __len__(self) -> int:
        return self._capacity

    def __iter__(self) -> Iterator[T]:
        """按从旧到新的顺序迭代"""
        for i in range(self._capacity):
            yield self._buf[(self._index + i) % self._capacity]

    def __repr__(self) -> str:
        return f"Window(capacity={self._capacity}, values={list(self)})"
