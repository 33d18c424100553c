"""指标基类模块

两层抽象:

- Method: 最小的流式计算单元。用参数 + 首个观测值构造，此后每次 next()
  消费一个新值并返回一个输出。构造时所有内部状态都按「历史上一直是首个
  观测值」来填充，因此从第一个输出开始就是有定义的，不存在预热期。
- IndicatorConfig / IndicatorInstance: 由若干方法与交叉检测器组合成的指标。
  配置是可校验、可按名称动态修改的参数记录；init() 校验通过后生成实例，
  实例每根 K 线输出固定宽度的 (values, signals)。
"""

from __future__ import annotations

import copy
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, ClassVar, Iterable, Optional, Sequence, get_type_hints

from pydantic import TypeAdapter, ValidationError

from src.config.settings import settings
from src.core.errors import MethodConfigError, ParameterParseError, WrongConfigError
from src.messages import ErrorMessage
from .batch import fold, indicator_over, method_over


logger = logging.getLogger(__name__)


def valid_period(period: Any, minimum: int = 1) -> bool:
    """周期是否为 [minimum, settings.MAX_PERIOD] 内的整数 (bool 不算整数)"""
    return (
        isinstance(period, int)
        and not isinstance(period, bool)
        and minimum <= period <= settings.MAX_PERIOD
    )


def check_period(name: str, period: int) -> int:
    """校验周期参数: 1 <= period <= settings.MAX_PERIOD

    Raises:
        MethodConfigError: 周期无效
    """
    if not valid_period(period):
        raise MethodConfigError(
            ErrorMessage.INVALID_PERIOD.component(name).build(period=period, maximum=settings.MAX_PERIOD)
        )
    return period


def check_value(name: str, value: float) -> float:
    """校验初始值为有限数

    NaN 一旦进入累加器会永久污染输出，因此只在构造时拒绝。
    """
    if not math.isfinite(value):
        raise MethodConfigError(ErrorMessage.NON_FINITE_VALUE.component(name).build(value=value))
    return value


class Method(ABC):
    """方法基类 - 流式计算接口

    Example:
        >>> sma = SMA(2, 1.0)
        >>> sma.over([1.0, 2.0, 3.0])
        [1.0, 1.5, 2.5]
        >>> SMA.new_over(2, [1.0, 2.0, 3.0])
        [1.0, 1.5, 2.5]

    没有 reset()，需要重置时直接构造新实例。
    """

    # 显式声明的方法名称
    name: ClassVar[str] = "Method"

    @classmethod
    def new(cls, params: Any, initial_value: Any) -> Method:
        """用参数和首个观测值构造方法

        Raises:
            MethodConfigError: 参数无效
        """
        return cls(params, initial_value)

    @abstractmethod
    def next(self, value: Any) -> Any:
        """消费一个新观测值并返回新的输出"""
        pass

    def over(self, inputs: Iterable[Any]) -> list:
        """逐条调用 next，输出长度与输入长度一致"""
        return fold(self, inputs)

    @classmethod
    def new_over(cls, params: Any, inputs: Sequence[Any]) -> list:
        """用 inputs[0] 构造方法后遍历整个序列，空输入返回空列表"""
        return method_over(cls, params, inputs)

    def __repr__(self) -> str:
        return f"{self.name}()"


class PeriodMethod(Method):
    """带单个周期参数的方法基类"""

    def __init__(self, period: int, value: float) -> None:
        """初始化方法

        Args:
            period: 计算周期
            value: 首个观测值
        """
        self.period = check_period(self.name, period)
        check_value(self.name, value)

    def __repr__(self) -> str:
        return f"{self.name}(period={self.period})"


class Signal(IntEnum):
    """离散交易信号"""
    STRONG_SELL = -2
    SELL = -1
    NONE = 0
    BUY = 1
    STRONG_BUY = 2

    @classmethod
    def from_value(cls, value: float) -> Signal:
        """把数值截断到 [-2, 2] 后转为信号"""
        return cls(max(-2, min(2, int(value))))


@dataclass(frozen=True)
class IndicatorResult:
    """指标单根 K 线的输出

    values 与 signals 的长度由指标类型决定 (size())，不会随 K 线变化。
    """
    values: tuple[float, ...]
    signals: tuple[Signal, ...]

    @classmethod
    def new(cls, values: Iterable[float], signals: Iterable[float]) -> IndicatorResult:
        return cls(
            values=tuple(float(v) for v in values),
            signals=tuple(Signal.from_value(s) for s in signals),
        )

    @property
    def size(self) -> tuple[int, int]:
        return len(self.values), len(self.signals)

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Signal:
        return self.signals[index]


@dataclass(frozen=True)
class ParamSpec:
    """指标参数描述 (供外部渲染/配置工具使用)"""
    name: str
    type: Any
    default: Any
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    description: str = ""


class IndicatorConfig(ABC):
    """指标配置基类

    子类是 dataclass，字段即参数；字段 metadata 中的 minimum / maximum /
    description 组成对外公开的参数描述。

    状态流转:
        配置 --init(candle)--> 实例 --next(candle)--> 实例 ...

    set() 只修改配置本身，不影响已创建的实例，修改后需要重新 init()。
    """

    NAME: ClassVar[str] = "Indicator"

    @abstractmethod
    def validate(self) -> bool:
        """校验跨字段约束，纯函数"""
        pass

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """输出宽度 (values 个数, signals 个数)"""
        pass

    @abstractmethod
    def _create_instance(self, candle: Any) -> IndicatorInstance:
        """用已校验的配置构造实例"""
        pass

    def init(self, candle: Any) -> IndicatorInstance:
        """校验配置并用首根 K 线创建指标实例

        Raises:
            WrongConfigError: 配置未通过 validate()
        """
        if not self.validate():
            logger.warning(f"{self.NAME} 配置无效: {self!r}")
            raise WrongConfigError(self.NAME, self)

        # 实例持有配置副本，之后对配置的修改不会影响实例
        instance = copy.copy(self)._create_instance(candle)
        logger.debug(f"{self.NAME} 实例已创建: {self!r}")
        return instance

    def set(self, name: str, value: str) -> None:
        """按名称解析并设置参数

        Args:
            name: 参数名
            value: 参数的字符串值

        Raises:
            ParameterParseError: 参数名未知或值无法解析
        """
        hints = get_type_hints(type(self))
        if name not in {f.name for f in fields(self)}:
            raise ParameterParseError(name, value, known=False)

        try:
            parsed = TypeAdapter(hints[name]).validate_python(value)
        except ValidationError as e:
            raise ParameterParseError(name, value) from e

        setattr(self, name, parsed)
        logger.debug(f"{self.NAME} 参数已更新: {name}={parsed!r}")

    def params(self) -> list[ParamSpec]:
        """列出全部参数的 (名称, 类型, 默认值, 取值范围)"""
        hints = get_type_hints(type(self))
        return [
            ParamSpec(
                name=f.name,
                type=hints[f.name],
                default=f.default,
                minimum=f.metadata.get("minimum"),
                maximum=f.metadata.get("maximum"),
                description=f.metadata.get("description", ""),
            )
            for f in fields(self)
        ]

    def over(self, candles: Sequence[Any]) -> list[IndicatorResult]:
        """用首根 K 线初始化后遍历全部 K 线"""
        return indicator_over(self, candles)


class IndicatorInstance(ABC):
    """指标实例基类

    只能通过 IndicatorConfig.init() 创建，之后仅由 next() 推进状态。
    """

    def __init__(self, config: IndicatorConfig) -> None:
        self._config = config

    @property
    def config(self) -> IndicatorConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.NAME

    def size(self) -> tuple[int, int]:
        return self._config.size()

    @abstractmethod
    def next(self, candle: Any) -> IndicatorResult:
        """处理一根 K 线，返回固定宽度的结果"""
        pass

    def over(self, candles: Iterable[Any]) -> list[IndicatorResult]:
        return fold(self, candles)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._config!r})"
