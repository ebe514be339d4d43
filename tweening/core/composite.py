"""
Composite interpolator - weighted blend of several interpolators.

Usage:
    composite = CompositeInterpolator()
    ease_in = composite.add(EasingPowerInterpolator(EasingMode.IN), 1.0)
    bounce = composite.add(EasingBounceInterpolator(), 0.0)

    for i in range(11):
        ease_in.weight = (10 - i) * 0.1
        bounce.weight = i * 0.1
        composite.interpolate(start, end, 3, ratio, out)
"""

from typing import Iterator, List, Optional, Tuple

from ..exceptions import IndexOutOfRangeError, InvalidArgumentError
from ..logging_config import get_logger
from .interpolator import (
    Interpolator,
    InterpolatorBase,
    OutputVector,
    Vector,
    check_interpolator,
)
from .primitives import LinearInterpolator


logger = get_logger(__name__)

# Used when no entry is registered
DEFAULT_INTERPOLATOR = LinearInterpolator()


class CompositeEntry:
    """
    A pair of interpolator and weight.

    The interpolator is fixed at creation; the weight can be changed at any
    time, including between frames of a running animation.
    """

    __slots__ = ("_interpolator", "weight")

    def __init__(self, interpolator: Interpolator, weight: float = 1.0):
        """
        Args:
            interpolator: Interpolator producing this entry's value
            weight: Influence of the value, interpreted by accumulate()

        Raises:
            InvalidArgumentError: If interpolator is None
        """
        self._interpolator = check_interpolator(interpolator)
        self.weight = weight

    @property
    def interpolator(self) -> Interpolator:
        return self._interpolator

    def __repr__(self) -> str:
        return f"CompositeEntry({self._interpolator!r}, weight={self.weight})"


class CompositeInterpolator(InterpolatorBase):
    """
    Combine multiple interpolators.

    Each registered interpolator computes its value into a scratch buffer,
    and accumulate() folds the value into the output. The default
    accumulation is a weighted sum, which reproduces a plain blend when
    the weights add up to 1.0. Weights are used as given: they are not
    normalized or clamped.

    With no entry registered, the composite behaves as LinearInterpolator.

    Entries are read from a snapshot taken when a call starts, so adding or
    removing entries during interpolate() affects the next call only.
    """

    def __init__(self, entries: Optional[List[CompositeEntry]] = None):
        self._entries: List[CompositeEntry] = []
        for entry in entries or ():
            self.add(entry)

    def add(self, interpolator, weight: float = 1.0) -> CompositeEntry:
        """
        Register an interpolator with a weight, or an existing entry.

        Args:
            interpolator: Interpolator, or a CompositeEntry (weight ignored)
            weight: Weight given to the interpolator

        Returns:
            The entry representing the pair; use it to change the weight
            later or to remove the pair.

        Raises:
            InvalidArgumentError: If interpolator is None or not an interpolator
        """
        if interpolator is None:
            raise InvalidArgumentError("interpolator is None", parameter="interpolator")
        if isinstance(interpolator, CompositeEntry):
            entry = interpolator
        else:
            entry = CompositeEntry(interpolator, weight)
        self._entries.append(entry)
        logger.debug(f"Added {entry!r} ({len(self._entries)} entries)")
        return entry

    def remove(self, entry: Optional[CompositeEntry]) -> None:
        """Remove an entry. Unknown entries and None are ignored."""
        if entry is None:
            return
        for i, existing in enumerate(self._entries):
            if existing is entry:
                del self._entries[i]
                logger.debug(f"Removed {entry!r} ({len(self._entries)} entries)")
                return

    def remove_all(self) -> None:
        """Remove every entry."""
        self._entries = []
        logger.debug("Removed all entries")

    def get(self, index: int) -> CompositeEntry:
        """
        Get the entry at a position.

        Raises:
            IndexOutOfRangeError: If index is not in [0, len(self))
        """
        if index < 0 or index >= len(self._entries):
            raise IndexOutOfRangeError(
                "entry index out of range", index=index, size=len(self._entries)
            )
        return self._entries[index]

    def get_all(self) -> Tuple[CompositeEntry, ...]:
        """All entries in insertion order (read-only)."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CompositeEntry]:
        return iter(tuple(self._entries))

    def _do_interpolate(self, from_: Vector, to: Vector, component_count: int,
                        time_ratio: float, output: OutputVector) -> None:
        entries = tuple(self._entries)
        if not entries:
            DEFAULT_INTERPOLATOR.interpolate(from_, to, component_count, time_ratio, output)
            return

        # Entries may read from_/to after output has been modified, so
        # accumulate into a private buffer when they alias
        target = output
        if output is from_ or output is to:
            target = [0.0] * component_count

        for i in range(component_count):
            target[i] = 0.0

        for entry in entries:
            work = [0.0] * component_count
            entry.interpolator.interpolate(from_, to, component_count, time_ratio, work)
            self.accumulate(work, entry.weight, target)

        if target is not output:
            for i in range(component_count):
                output[i] = target[i]

    def accumulate(self, value: Vector, weight: float, output: OutputVector) -> None:
        """
        Fold one interpolated value into the output.

        Override to change how entries combine. The default is

            output[i] += value[i] * weight

        Args:
            value: Value computed by one registered interpolator; its
                length is the component count
            weight: The entry's weight
            output: Accumulator, zeroed before the first entry
        """
        for i in range(len(value)):
            output[i] += value[i] * weight

    def __repr__(self) -> str:
        return f"CompositeInterpolator({len(self._entries)} entries)"


__all__ = [
    "CompositeEntry",
    "CompositeInterpolator",
]
