"""错误消息模板 - 支持链式语法"""

from __future__ import annotations
from typing import Final


class MessageBuilder:
    """消息构建器 - 支持链式调用 (不可变模式)

    Example:
        >>> msg = MessageBuilder("周期必须 >= 1, 当前值: {period}").component("SMA").build(period=0)
        >>> print(msg)
        SMA: 周期必须 >= 1, 当前值: 0
    """

    def __init__(self, template: str, component: str | None = None, context: dict | None = None) -> None:
        self._template = template
        self._component = component
        self._context = context or {}

    def component(self, name: str) -> MessageBuilder:
        """设置消息前缀 (方法名或指标名，返回新实例)"""
        return MessageBuilder(self._template, component=name, context=self._context)

    def ctx(self, **kwargs) -> MessageBuilder:
        """添加通用上下文变量 (返回新实例)"""
        new_context = self._context.copy()
        new_context.update(kwargs)
        return MessageBuilder(self._template, component=self._component, context=new_context)

    def param(self, name: str, value: str) -> MessageBuilder:
        """设置参数名与原始值 (ctx Shortcut)"""
        return self.ctx(name=name, value=value)

    def build(self, **kwargs) -> str:
        """构建最终消息

        Args:
            **kwargs: 额外的模板变量 (优先级高于 context)

        Returns:
            格式化后的完整错误消息
        """
        # 合并上下文: build参数 > context > template
        final_kwargs = self._context.copy()
        final_kwargs.update(kwargs)

        msg = self._template.format(**final_kwargs)

        if self._component:
            return f"{self._component}: {msg}"
        return msg

    def __str__(self) -> str:
        """直接转字符串（用于无参数模板）"""
        if self._component is None:
            return self._template
        return f"{self._component}: {self._template}"


class ErrorMessage:
    """指标库错误消息模板

    Example:
        >>> ErrorMessage.INVALID_PERIOD.component("SMA").build(period=0, maximum=65535)
        'SMA: 周期必须在 [1, 65535] 范围内, 当前值: 0'
    """

    # ============ 方法构造相关 ============
    INVALID_PERIOD: Final[MessageBuilder] = MessageBuilder("周期必须在 [1, {maximum}] 范围内, 当前值: {period}")
    INVALID_CAPACITY: Final[MessageBuilder] = MessageBuilder("窗口容量必须 >= 1, 当前值: {capacity}")
    NON_FINITE_VALUE: Final[MessageBuilder] = MessageBuilder("初始值必须是有限数, 当前值: {value}")

    # ============ 指标配置相关 ============
    WRONG_CONFIG: Final[MessageBuilder] = MessageBuilder("指标配置无效: {config}")
    PARAMETER_PARSE: Final[MessageBuilder] = MessageBuilder("参数解析失败: {name}={value!r}")
    UNKNOWN_PARAMETER: Final[MessageBuilder] = MessageBuilder("未知参数: {name}={value!r}")

    # ============ 注册表相关 ============
    UNKNOWN_METHOD: Final[str] = "未知的方法: {name}"
    UNKNOWN_INDICATOR: Final[str] = "未知的指标: {name}"
