"""批量驱动

把任意具有 next() 的有状态对象 (方法或指标实例) 依次应用到整个输入序列上。
状态严格按顺序依赖，单个实例内部不做任何并行。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Protocol, Sequence, TypeVar

if TYPE_CHECKING:
    from .base import IndicatorConfig, IndicatorResult, Method


logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", covariant=True)


class Stateful(Protocol[OutputT]):
    """逐条消费输入并产生输出的有状态对象"""

    def next(self, value: Any) -> OutputT:
        ...


def fold(stateful: Stateful[OutputT], inputs: Iterable[Any]) -> list[OutputT]:
    """按输入顺序逐条调用 next，输出长度与输入长度一致

    Args:
        stateful: 方法或指标实例
        inputs: 输入序列

    Returns:
        每个输入对应一个输出
    """
    return [stateful.next(value) for value in inputs]


def method_over(method_cls: type[Method], params: Any, inputs: Sequence[Any]) -> list[Any]:
    """用首个输入构造方法并遍历整个序列

    空输入直接返回空列表，不会构造方法 (没有可用于初始化的值)。

    Raises:
        MethodConfigError: 参数无效
    """
    if len(inputs) == 0:
        return []

    method = method_cls.new(params, inputs[0])
    logger.debug(f"批量计算 {method.name}: {len(inputs)} 条数据")
    return fold(method, inputs)


def indicator_over(config: IndicatorConfig, candles: Sequence[Any]) -> list[IndicatorResult]:
    """用首根 K 线初始化指标并遍历全部 K 线

    Raises:
        WrongConfigError: 配置未通过校验
    """
    if len(candles) == 0:
        return []

    instance = config.init(candles[0])
    logger.debug(f"批量计算 {config.NAME}: {len(candles)} 根 K 线")
    return fold(instance, candles)
