"""
Tests for CompositeInterpolator.

Run with: pytest tests/test_composite.py -v
"""

import pytest

from tweening import (
    CompositeEntry,
    CompositeInterpolator,
    EasingMode,
    EasingPowerInterpolator,
    IndexOutOfRangeError,
    InvalidArgumentError,
    LinearInterpolator,
    StepInterpolator,
)


RATIOS = [0.1, 0.25, 0.5, 0.8]


class MaxComposite(CompositeInterpolator):
    """Keeps the largest weighted value instead of summing."""

    def accumulate(self, value, weight, output):
        for i in range(len(value)):
            output[i] = max(output[i], value[i] * weight)


@pytest.fixture
def composite():
    return CompositeInterpolator()


# =============================================================================
# Entry management
# =============================================================================

class TestEntries:
    """Tests for add/remove/get."""

    def test_add_returns_entry(self, composite, linear):
        entry = composite.add(linear, 0.3)
        assert isinstance(entry, CompositeEntry)
        assert entry.interpolator is linear
        assert entry.weight == 0.3

    def test_default_weight(self, composite, linear):
        assert composite.add(linear).weight == 1.0

    def test_add_existing_entry(self, composite, linear):
        entry = CompositeEntry(linear, 0.5)
        assert composite.add(entry) is entry
        assert composite.get(0) is entry

    def test_add_none_rejected(self, composite):
        with pytest.raises(InvalidArgumentError) as exc_info:
            composite.add(None, 1.0)
        assert exc_info.value.parameter == "interpolator"

    def test_add_non_interpolator_rejected(self, composite):
        with pytest.raises(InvalidArgumentError):
            composite.add(object(), 1.0)
        assert len(composite) == 0

    def test_entry_requires_interpolator(self):
        with pytest.raises(InvalidArgumentError):
            CompositeEntry(None, 1.0)

    def test_entry_interpolator_is_read_only(self, linear):
        entry = CompositeEntry(linear, 1.0)
        with pytest.raises(AttributeError):
            entry.interpolator = StepInterpolator()

    def test_insertion_order(self, composite):
        first = composite.add(LinearInterpolator(), 0.1)
        second = composite.add(StepInterpolator(), 0.2)
        assert composite.get_all() == (first, second)
        assert list(composite) == [first, second]
        assert len(composite) == 2

    def test_get_all_is_read_only(self, composite, linear):
        composite.add(linear)
        entries = composite.get_all()
        assert isinstance(entries, tuple)
        composite.add(linear)
        assert len(entries) == 1

    def test_get_all_empty(self, composite):
        assert composite.get_all() == ()

    def test_get_on_empty(self, composite):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            composite.get(0)
        assert exc_info.value.index == 0

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_get_out_of_range(self, composite, linear, index):
        composite.add(linear)
        composite.add(linear)
        with pytest.raises(IndexError):
            composite.get(index)

    def test_remove(self, composite):
        first = composite.add(LinearInterpolator())
        second = composite.add(StepInterpolator())
        composite.remove(first)
        assert composite.get_all() == (second,)

    def test_remove_unknown_and_none(self, composite, linear):
        entry = composite.add(linear)
        composite.remove(None)
        composite.remove(CompositeEntry(linear, 1.0))
        assert composite.get_all() == (entry,)

    def test_remove_all(self, composite, linear):
        composite.add(linear)
        composite.add(linear)
        composite.remove_all()
        assert len(composite) == 0

    def test_constructor_entries(self, linear):
        entry = CompositeEntry(linear, 0.5)
        composite = CompositeInterpolator([entry])
        assert composite.get(0) is entry


# =============================================================================
# Computation
# =============================================================================

class TestComputation:
    """Tests for the weighted accumulation."""

    @pytest.mark.parametrize("ratio", RATIOS)
    def test_empty_behaves_as_linear(self, composite, linear, start, end, ratio):
        got = [0.0] * 4
        expected = [0.0] * 4
        composite.interpolate(start, end, 4, ratio, got)
        linear.interpolate(start, end, 4, ratio, expected)
        assert got == expected

    @pytest.mark.parametrize("ratio", RATIOS)
    def test_split_linear_equals_linear(self, composite, linear, start, end, ratio):
        composite.add(LinearInterpolator(), 0.5)
        composite.add(LinearInterpolator(), 0.5)
        got = [0.0] * 4
        expected = [0.0] * 4
        composite.interpolate(start, end, 4, ratio, got)
        linear.interpolate(start, end, 4, ratio, expected)
        assert got == pytest.approx(expected)

    def test_weighted_blend(self, composite):
        composite.add(LinearInterpolator(), 0.25)
        composite.add(StepInterpolator(), 0.75)
        out = [0.0]
        composite.interpolate([0.0], [8.0], 1, 0.5, out)
        # 0.25 * 4 + 0.75 * 0
        assert out == pytest.approx([1.0])

    def test_weights_can_change_between_calls(self, composite):
        linear_entry = composite.add(LinearInterpolator(), 1.0)
        step_entry = composite.add(StepInterpolator(), 0.0)
        out = [0.0]

        composite.interpolate([0.0], [10.0], 1, 0.5, out)
        assert out == pytest.approx([5.0])

        linear_entry.weight = 0.0
        step_entry.weight = 1.0
        composite.interpolate([0.0], [10.0], 1, 0.5, out)
        assert out == pytest.approx([0.0])

    def test_weights_are_not_normalized(self, composite):
        composite.add(LinearInterpolator(), 1.0)
        composite.add(LinearInterpolator(), 1.0)
        out = [0.0]
        composite.interpolate([0.0], [10.0], 1, 0.5, out)
        assert out == pytest.approx([10.0])

    def test_output_is_cleared_first(self, composite):
        composite.add(LinearInterpolator(), 1.0)
        out = [100.0, 100.0]
        composite.interpolate([0.0, 0.0], [2.0, 4.0], 2, 0.5, out)
        assert out == pytest.approx([1.0, 2.0])

    def test_entries_see_ratio(self, composite):
        composite.add(EasingPowerInterpolator(EasingMode.IN), 1.0)
        out = [0.0]
        composite.interpolate([0.0], [1.0], 1, 0.5, out)
        assert out == pytest.approx([0.25])

    def test_output_aliases_from(self, composite):
        composite.add(LinearInterpolator(), 0.5)
        composite.add(StepInterpolator(), 0.5)
        values = [4.0]
        composite.interpolate(values, [8.0], 1, 0.5, values)
        # 0.5 * 6 + 0.5 * 4
        assert values == pytest.approx([5.0])

    def test_nested_composite(self, composite):
        inner = CompositeInterpolator()
        inner.add(LinearInterpolator(), 1.0)
        composite.add(inner, 0.5)
        composite.add(LinearInterpolator(), 0.5)
        out = [0.0]
        composite.interpolate([0.0], [4.0], 1, 0.25, out)
        assert out == pytest.approx([1.0])

    def test_removing_all_falls_back_to_linear(self, composite):
        composite.add(StepInterpolator(), 1.0)
        composite.remove_all()
        out = [0.0]
        composite.interpolate([0.0], [4.0], 1, 0.25, out)
        assert out == [1.0]

    def test_custom_accumulation(self):
        composite = MaxComposite()
        composite.add(LinearInterpolator(), 1.0)
        composite.add(StepInterpolator(), 1.0)
        out = [0.0]
        composite.interpolate([2.0], [10.0], 1, 0.5, out)
        assert out == pytest.approx([6.0])

    def test_endpoints_bypass_entries(self, composite):
        composite.add(LinearInterpolator(), 3.0)
        out = [0.0]
        composite.interpolate([2.0], [10.0], 1, 1.0, out)
        assert out == [10.0]
