"""
数据层数据模型

定义 K 线观测值及数据源选择器。指标只通过 Source 读取 K 线字段，
任何暴露 open/high/low/close/volume 属性的对象都可以作为输入。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass
class Candle:
    """K 线数据结构

    Attributes:
        open: 开盘价
        high: 最高价
        low: 最低价
        close: 收盘价
        volume: 成交量
        timestamp: 开盘时间戳 (毫秒)，可选

    Example:
        >>> candle = Candle(open=35000.0, high=35500.0, low=34800.0, close=35200.0, volume=1234.56)
        >>> Source.HL2.extract(candle)
        35150.0
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    timestamp: int = 0

    @classmethod
    def from_value(cls, value: float, timestamp: int = 0) -> Candle:
        """用单个价格构造 K 线 (四价相同)"""
        return cls(open=value, high=value, low=value, close=value, timestamp=timestamp)

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return {
            "timestamp": self.timestamp,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


class Source(str, Enum):
    """指标数据源

    支持大小写不敏感解析: Source("Close") == Source.CLOSE
    """
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    HL2 = "hl2"        # (high + low) / 2
    HLC3 = "hlc3"      # 典型价格 (high + low + close) / 3
    OHLC4 = "ohlc4"    # (open + high + low + close) / 4

    @classmethod
    def _missing_(cls, value: object) -> Source | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    def extract(self, candle: Any) -> float:
        """从 K 线对象中读取该数据源的数值

        Args:
            candle: 任何具有 open/high/low/close/volume 属性的对象

        Returns:
            数据源对应的浮点数
        """
        if self is Source.HL2:
            return (candle.high + candle.low) / 2
        if self is Source.HLC3:
            return (candle.high + candle.low + candle.close) / 3
        if self is Source.OHLC4:
            return (candle.open + candle.high + candle.low + candle.close) / 4
        return float(getattr(candle, self.value))
