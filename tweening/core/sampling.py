"""
Curve sampling helpers.

Interpolators write one frame at a time into a caller buffer. These
helpers run an interpolator over evenly spaced time ratios and return
numpy arrays, which is handy for previews, plots and tests.
"""

import numbers
from typing import Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..logging_config import log_performance
from .interpolator import Interpolator, Vector, check_interpolator


def _component_count(from_: Optional[Vector], to: Optional[Vector],
                     component_count: Optional[int]) -> int:
    if component_count is not None:
        if isinstance(component_count, bool) or not isinstance(component_count, numbers.Integral):
            raise InvalidArgumentError(
                "component_count must be an integer",
                parameter="component_count",
                value=component_count,
            )
        return component_count
    lengths = [len(v) for v in (from_, to) if v is not None]
    if not lengths:
        raise InvalidArgumentError("from_ and to are both None", parameter="from_")
    return min(lengths)


def interpolate_value(
    interpolator: Interpolator,
    from_: Optional[Vector],
    to: Optional[Vector],
    time_ratio: float,
    component_count: Optional[int] = None,
) -> np.ndarray:
    """
    Interpolate into a freshly allocated array.

    Args:
        interpolator: Interpolator to run
        from_: Start value
        to: End value
        time_ratio: Ratio in [0, 1]
        component_count: Components to compute, defaults to the shorter
            of from_ and to

    Returns:
        1-D float64 array with component_count values
    """
    check_interpolator(interpolator)
    n = _component_count(from_, to, component_count)
    output = np.zeros(max(n, 0), dtype=np.float64)
    interpolator.interpolate(from_, to, n, time_ratio, output)
    return output


@log_performance
def sample(
    interpolator: Interpolator,
    from_: Vector,
    to: Vector,
    num_samples: int,
    component_count: Optional[int] = None,
) -> np.ndarray:
    """
    Interpolate at ``num_samples`` evenly spaced time ratios from 0 to 1.

    Args:
        interpolator: Interpolator to run
        from_: Start value
        to: End value
        num_samples: Number of ratios, at least 2 (both endpoints included)
        component_count: Components to compute, defaults to the shorter
            of from_ and to

    Returns:
        Array of shape (num_samples, component_count); row i holds the
        value at ratio i / (num_samples - 1)
    """
    check_interpolator(interpolator)
    if num_samples < 2:
        raise InvalidArgumentError("num_samples < 2", parameter="num_samples", value=num_samples)

    n = _component_count(from_, to, component_count)
    ratios = np.linspace(0.0, 1.0, num_samples)
    result = np.zeros((num_samples, max(n, 0)), dtype=np.float64)

    for i, ratio in enumerate(ratios):
        interpolator.interpolate(from_, to, n, float(ratio), result[i])

    return result


def easing_curve(interpolator: Interpolator, num_samples: int = 101) -> np.ndarray:
    """
    Effective time-ratio curve of an interpolator.

    Runs the interpolator on the scalar 0.0 -> 1.0, so the result shows
    how it reshapes time (identity for LinearInterpolator).

    Returns:
        1-D array of num_samples values
    """
    return sample(interpolator, [0.0], [1.0], num_samples)[:, 0]


__all__ = [
    "interpolate_value",
    "sample",
    "easing_curve",
]
