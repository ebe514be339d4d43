"""
Interpolator contract and the shared validation wrapper.

An interpolator computes a value between ``from_`` (time ratio 0.0) and
``to`` (time ratio 1.0) and writes it into a caller supplied ``output``
buffer. Buffers are any indexable sequences of floats (lists, numpy
arrays, array.array); only the first ``component_count`` items are read
or written.

Example:
    >>> from tweening import LinearInterpolator
    >>> out = [0.0]
    >>> LinearInterpolator().interpolate([2.0], [6.0], 1, 0.25, out)
    >>> out
    [3.0]
"""

import numbers
from abc import ABC, abstractmethod
from typing import MutableSequence, Optional, Protocol, Sequence, runtime_checkable

from ..exceptions import InvalidArgumentError


Vector = Sequence[float]
OutputVector = MutableSequence[float]


@runtime_checkable
class Interpolator(Protocol):
    """
    Protocol for anything that can interpolate between two vectors.

    Implementations must copy ``from_`` when time_ratio is 0.0 and ``to``
    when time_ratio is 1.0. Everything in between is up to them.
    """

    def interpolate(
        self,
        from_: Optional[Vector],
        to: Optional[Vector],
        component_count: int,
        time_ratio: float,
        output: OutputVector,
    ) -> None:
        """
        Calculate an interpolated value.

        Args:
            from_: Value at the start of the timespan
            to: Value at the end of the timespan
            component_count: Number of components to interpolate (>= 1)
            time_ratio: Position in the timespan, 0.0 to 1.0
            output: Buffer receiving the result
        """
        ...


class InterpolatorBase(ABC):
    """
    Base class for interpolators.

    interpolate() validates the arguments, handles the time ratios 0.0
    and 1.0 (and identical endpoints) by copying, and hands everything
    else to _do_interpolate(). Subclasses implement only the hook, which
    may assume 0 < time_ratio < 1 and correctly sized buffers.
    """

    def interpolate(
        self,
        from_: Optional[Vector],
        to: Optional[Vector],
        component_count: int,
        time_ratio: float,
        output: OutputVector,
    ) -> None:
        """
        Calculate an interpolated value into ``output``.

        Args:
            from_: Value at time ratio 0.0
            to: Value at time ratio 1.0
            component_count: Number of components, an integer >= 1
            time_ratio: Ratio in [0.0, 1.0]; never clamped
            output: Receives ``component_count`` values

        Raises:
            InvalidArgumentError: If any argument violates the contract.
                Nothing is written to ``output`` in that case.
        """
        # NaN fails both comparisons, so test the accepted range
        if not (0.0 <= time_ratio <= 1.0):
            raise InvalidArgumentError(
                "time_ratio must be in [0, 1]", parameter="time_ratio", value=time_ratio
            )
        if isinstance(component_count, bool) or not isinstance(component_count, numbers.Integral):
            raise InvalidArgumentError(
                "component_count must be an integer",
                parameter="component_count",
                value=component_count,
            )
        if component_count < 1:
            raise InvalidArgumentError(
                "component_count < 1", parameter="component_count", value=component_count
            )
        _check_buffer(output, "output", component_count)
        if time_ratio != 0:
            _check_buffer(from_, "from_", component_count)
        if time_ratio != 1:
            _check_buffer(to, "to", component_count)
        # The endpoint copied by the shortcuts below must be valid too
        if time_ratio == 0:
            _check_buffer(from_, "from_", component_count)
        elif time_ratio == 1:
            _check_buffer(to, "to", component_count)

        if time_ratio == 0 or from_ is to:
            copy_components(from_, output, component_count)
        elif time_ratio == 1:
            copy_components(to, output, component_count)
        else:
            self._do_interpolate(from_, to, component_count, float(time_ratio), output)

    @abstractmethod
    def _do_interpolate(
        self,
        from_: Vector,
        to: Vector,
        component_count: int,
        time_ratio: float,
        output: OutputVector,
    ) -> None:
        """Variant specific computation, called with 0 < time_ratio < 1."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _check_buffer(buffer: Optional[Vector], name: str, component_count: int) -> None:
    if buffer is None:
        raise InvalidArgumentError(f"{name} is None", parameter=name)
    if len(buffer) < component_count:
        raise InvalidArgumentError(
            f"len({name}) < component_count",
            parameter=name,
            length=len(buffer),
            component_count=component_count,
        )


def copy_components(source: Vector, output: OutputVector, component_count: int) -> None:
    """Copy the first ``component_count`` components of source into output."""
    for i in range(component_count):
        output[i] = source[i]


def blend(from_: Vector, to: Vector, component_count: int, ratio: float,
          output: OutputVector) -> None:
    """Linear blend ``from_*(1-ratio) + to*ratio`` written into output."""
    inverse = 1.0 - ratio
    for i in range(component_count):
        output[i] = from_[i] * inverse + to[i] * ratio


def check_interpolator(interpolator, parameter: str = "interpolator") -> "Interpolator":
    """
    Verify that an object satisfies the Interpolator protocol.

    Raises:
        InvalidArgumentError: If interpolator is None or lacks interpolate()
    """
    if interpolator is None:
        raise InvalidArgumentError(f"{parameter} is None", parameter=parameter)
    if not isinstance(interpolator, Interpolator):
        raise InvalidArgumentError(
            f"{parameter} does not implement interpolate()",
            parameter=parameter,
            type=type(interpolator).__name__,
        )
    return interpolator


__all__ = [
    "Vector",
    "OutputVector",
    "Interpolator",
    "InterpolatorBase",
    "copy_components",
    "blend",
    "check_interpolator",
]
