"""环形窗口测试"""

import pytest

from src.core.errors import MethodConfigError
from src.indicators import Window


class TestWindowCreation:
    """Window 构造测试"""

    def test_prefilled_with_seed(self):
        """测试构造时所有槽位为 seed"""
        w = Window(4, 7.0)

        assert list(w) == [7.0, 7.0, 7.0, 7.0]
        assert len(w) == 4
        assert w.capacity == 4

    def test_invalid_capacity_zero(self):
        """测试容量 0 无效"""
        with pytest.raises(MethodConfigError) as exc_info:
            Window(0, 1.0)

        assert "窗口容量" in str(exc_info.value)

    def test_invalid_capacity_negative(self):
        """测试负容量无效"""
        with pytest.raises(ValueError):
            Window(-3, 1.0)


class TestWindowPush:
    """Window push 测试"""

    def test_push_returns_seed_until_full_cycle(self):
        """测试前 capacity 次 push 挤出的都是 seed"""
        w = Window(3, 0.0)

        assert [w.push(v) for v in [1.0, 2.0, 3.0]] == [0.0, 0.0, 0.0]

    def test_push_returns_oldest(self):
        """测试 push 返回 capacity 次之前写入的值"""
        w = Window(3, 0.0)
        for v in [1.0, 2.0, 3.0]:
            w.push(v)

        assert w.push(4.0) == 1.0
        assert w.push(5.0) == 2.0
        assert list(w) == [3.0, 4.0, 5.0]

    def test_capacity_one(self):
        """测试容量 1 时挤出上一个值"""
        w = Window(1, 10.0)

        assert w.push(11.0) == 10.0
        assert w.push(12.0) == 11.0
        assert list(w) == [12.0]

    def test_length_is_constant(self):
        """测试长度始终等于容量"""
        w = Window(5, 0)
        for i in range(12):
            w.push(i)
            assert len(w) == 5

    def test_oldest_and_newest(self):
        """测试 oldest / newest 属性"""
        w = Window(3, 0)
        w.push(1)
        w.push(2)

        assert w.newest == 2
        assert w.oldest == 0

        w.push(3)
        w.push(4)
        assert w.newest == 4
        assert w.oldest == 2

    def test_oldest_is_next_evicted(self):
        """测试 oldest 就是下一次 push 的返回值"""
        w = Window(4, 0)
        for i in range(1, 10):
            expected = w.oldest
            assert w.push(i) == expected

    def test_generic_values(self):
        """测试可以保存任意类型"""
        w = Window(2, (0.0, 0.0))

        assert w.push((1.0, 2.0)) == (0.0, 0.0)

    def test_repr(self):
        """测试 __repr__"""
        w = Window(2, 1)
        assert "capacity=2" in repr(w)


class TestWindowUniform:
    """uniform 属性测试"""

    def test_seeded_window_is_uniform(self):
        """测试构造后窗口全部为种子值"""
        assert Window(4, 1.5).uniform is True

    def test_different_value_breaks_uniform(self):
        """测试写入不同值后不再 uniform"""
        w = Window(3, 0.0)
        w.push(1.0)

        assert w.uniform is False

    def test_uniform_after_capacity_equal_pushes(self):
        """测试连续 capacity 个相同值后恢复 uniform"""
        w = Window(3, 0.0)
        w.push(5.0)
        w.push(2.0)

        w.push(2.0)
        assert w.uniform is False

        w.push(2.0)
        assert w.uniform is True
        assert list(w) == [2.0, 2.0, 2.0]

    def test_capacity_one_always_uniform(self):
        """测试容量为 1 时总是 uniform"""
        w = Window(1, 0.0)
        for i in range(5):
            w.push(float(i))
            assert w.uniform is True

    def test_matches_window_contents(self):
        """测试与窗口内容是否全部相等一致"""
        w = Window(3, 0)
        for x in [1, 1, 2, 2, 2, 2, 3, 1, 1, 1]:
            w.push(x)
            assert w.uniform == (len(set(w)) == 1)
