"""指标库异常定义

所有异常均继承自 ValueError，调用方可以统一按参数错误处理。
"""

from src.messages import ErrorMessage


class IndicatorError(ValueError):
    """指标库异常基类"""


class MethodConfigError(IndicatorError):
    """方法 (或窗口) 构造参数无效"""


class WrongConfigError(IndicatorError):
    """指标配置未通过 validate()

    Attributes:
        name: 指标名称
        config: 出错的配置对象
    """

    def __init__(self, name: str, config: object) -> None:
        self.name = name
        self.config = config
        super().__init__(ErrorMessage.WRONG_CONFIG.component(name).build(config=config))


class ParameterParseError(IndicatorError):
    """动态设置参数失败 (未知参数名或无法解析的值)

    Attributes:
        name: 参数名
        value: 原始字符串值
    """

    def __init__(self, name: str, value: str, known: bool = True) -> None:
        self.name = name
        self.value = value
        template = ErrorMessage.PARAMETER_PARSE if known else ErrorMessage.UNKNOWN_PARAMETER
        super().__init__(template.param(name, value).build())
