"""消息模块 - 统一管理错误消息、日志消息等"""

from .errorMessage import ErrorMessage, MessageBuilder

__all__ = ["ErrorMessage", "MessageBuilder"]
