"""
Interpolator Factory

Builds interpolators from a type name plus tunables, so animation
settings can be expressed as plain configuration:

    bounce = create_interpolator("bounce", easing_mode="out", bounce_count=4)
    config = InterpolatorConfig(kind="power", easing_mode="in_out", params={"power": 3})
    power = create_interpolator(config)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .core import (
    CompositeInterpolator,
    EasingBackInterpolator,
    EasingBounceInterpolator,
    EasingElasticInterpolator,
    EasingExponentialInterpolator,
    EasingInterpolator,
    EasingMode,
    EasingPowerInterpolator,
    EasingSineInterpolator,
    InterpolatorBase,
    LinearInterpolator,
    SlerpInterpolator,
    StepInterpolator,
)
from .exceptions import InvalidArgumentError
from .logging_config import get_logger


logger = get_logger(__name__)


class InterpolatorType(Enum):
    """Interpolators that can be built by name."""

    LINEAR = "linear"
    STEP = "step"
    SLERP = "slerp"
    COMPOSITE = "composite"

    EASING_POWER = "easing_power"
    EASING_EXPONENTIAL = "easing_exponential"
    EASING_SINE = "easing_sine"
    EASING_BACK = "easing_back"
    EASING_BOUNCE = "easing_bounce"
    EASING_ELASTIC = "easing_elastic"

    @property
    def interpolator_class(self) -> type:
        return _CLASSES[self]

    @property
    def is_easing(self) -> bool:
        return issubclass(self.interpolator_class, EasingInterpolator)

    @property
    def tunables(self) -> List[str]:
        """Names of the keyword parameters accepted by create_interpolator()."""
        return list(_TUNABLES.get(self, ()))

    @classmethod
    def parse(cls, value: Union["InterpolatorType", str]) -> "InterpolatorType":
        """Accept the enum, its value ("easing_bounce") or a short alias ("bounce")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            kind = _ALIASES.get(key)
            if kind is not None:
                return kind
        raise InvalidArgumentError(
            f"Unknown interpolator type: {value!r}", parameter="kind", value=value
        )


_CLASSES = {
    InterpolatorType.LINEAR: LinearInterpolator,
    InterpolatorType.STEP: StepInterpolator,
    InterpolatorType.SLERP: SlerpInterpolator,
    InterpolatorType.COMPOSITE: CompositeInterpolator,
    InterpolatorType.EASING_POWER: EasingPowerInterpolator,
    InterpolatorType.EASING_EXPONENTIAL: EasingExponentialInterpolator,
    InterpolatorType.EASING_SINE: EasingSineInterpolator,
    InterpolatorType.EASING_BACK: EasingBackInterpolator,
    InterpolatorType.EASING_BOUNCE: EasingBounceInterpolator,
    InterpolatorType.EASING_ELASTIC: EasingElasticInterpolator,
}

_TUNABLES = {
    InterpolatorType.EASING_POWER: ("power",),
    InterpolatorType.EASING_EXPONENTIAL: ("exponent",),
    InterpolatorType.EASING_BACK: ("amplitude",),
    InterpolatorType.EASING_BOUNCE: ("bounce_count", "bounciness"),
    InterpolatorType.EASING_ELASTIC: ("oscillation_count", "springiness"),
}

_ALIASES: Dict[str, InterpolatorType] = {}
for _kind in InterpolatorType:
    _ALIASES[_kind.value] = _kind
    if _kind.value.startswith("easing_"):
        _ALIASES[_kind.value[len("easing_"):]] = _kind
del _kind
_ALIASES["lerp"] = InterpolatorType.LINEAR
_ALIASES["quaternion"] = InterpolatorType.SLERP


@dataclass
class InterpolatorConfig:
    """Configuration for one interpolator."""
    # Interpolator type name or enum
    kind: Union[InterpolatorType, str] = InterpolatorType.LINEAR

    # Easing mode (easing types only; None keeps the default, OUT)
    easing_mode: Optional[Union[EasingMode, str]] = None

    # Curve tunables, e.g. {"bounce_count": 4, "bounciness": 1.5}
    params: Dict[str, Any] = field(default_factory=dict)


def create_interpolator(
    kind: Union[InterpolatorType, InterpolatorConfig, str] = InterpolatorType.LINEAR,
    easing_mode: Optional[Union[EasingMode, str]] = None,
    **params,
) -> InterpolatorBase:
    """
    Factory function to create an interpolator.

    Args:
        kind: Interpolator type (enum, name such as "easing_bounce" or
            "bounce") or a full InterpolatorConfig
        easing_mode: Easing mode for easing types
        **params: Tunables of the chosen type

    Returns:
        Configured interpolator instance

    Raises:
        InvalidArgumentError: Unknown type or tunable, an easing mode for a
            type that does not ease, or an out-of-range tunable
    """
    if isinstance(kind, InterpolatorConfig):
        if easing_mode is None:
            easing_mode = kind.easing_mode
        params = {**kind.params, **params}
        kind = kind.kind

    kind = InterpolatorType.parse(kind)

    unknown = sorted(set(params) - set(kind.tunables))
    if unknown:
        raise InvalidArgumentError(
            f"Unknown parameters for {kind.value}: {', '.join(unknown)}",
            parameter=unknown[0],
            accepted=kind.tunables,
        )

    if kind.is_easing:
        interpolator = kind.interpolator_class(easing_mode, **params)
    elif easing_mode is not None:
        raise InvalidArgumentError(
            f"{kind.value} does not support an easing mode",
            parameter="easing_mode",
            value=easing_mode,
        )
    else:
        interpolator = kind.interpolator_class()

    logger.debug(f"Created {interpolator!r} from {kind.value} {params}")
    return interpolator


def list_interpolators() -> List[str]:
    """Get list of available interpolator type names."""
    return sorted(kind.value for kind in InterpolatorType)


__all__ = [
    "InterpolatorType",
    "InterpolatorConfig",
    "create_interpolator",
    "list_interpolators",
]
