"""pytest 全局配置"""

import random

import pytest

from src.data.models import Candle


def pytest_addoption(parser):
    """添加自定义命令行选项"""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="运行耗时较长的测试 (超大周期)"
    )


def pytest_configure(config):
    """添加自定义标记"""
    config.addinivalue_line(
        "markers", "slow: 耗时较长的测试"
    )


def pytest_collection_modifyitems(config, items):
    """根据命令行选项跳过测试"""
    if not config.getoption("--run-slow"):
        skip_slow = pytest.mark.skip(reason="需要 --run-slow 参数")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def make_candles(count: int, seed: int = 42, start: float = 100.0) -> list[Candle]:
    """生成可复现的随机游走 K 线"""
    rng = random.Random(seed)
    candles = []
    price = start
    for i in range(count):
        open_ = price
        close = max(1.0, open_ + rng.uniform(-2.0, 2.0))
        high = max(open_, close) + rng.uniform(0.0, 1.0)
        low = min(open_, close) - rng.uniform(0.0, 1.0)
        volume = rng.uniform(10.0, 1000.0)
        candles.append(Candle(open=open_, high=high, low=low, close=close, volume=volume, timestamp=i * 60_000))
        price = close
    return candles


@pytest.fixture
def candles() -> list[Candle]:
    """100 根随机 K 线"""
    return make_candles(100)


@pytest.fixture
def closes(candles) -> list[float]:
    """随机 K 线的收盘价序列"""
    return [c.close for c in candles]
