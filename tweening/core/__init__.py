"""
Core interpolation components - contract, primitives, easing and composite.
"""

from .interpolator import (
    Vector,
    OutputVector,
    Interpolator,
    InterpolatorBase,
    copy_components,
    blend,
    check_interpolator,
)

from .primitives import (
    SLERP_PARALLEL_THRESHOLD,
    LinearInterpolator,
    StepInterpolator,
    SlerpInterpolator,
)

from .easing import (
    EasingMode,
    DEFAULT_EASING_MODE,
    EasingInterpolator,
    EasingPowerInterpolator,
    EasingExponentialInterpolator,
    EasingSineInterpolator,
    EasingBackInterpolator,
    EasingBounceInterpolator,
    EasingElasticInterpolator,
)

from .composite import (
    CompositeEntry,
    CompositeInterpolator,
)

from .sampling import (
    interpolate_value,
    sample,
    easing_curve,
)

__all__ = [
    # Contract
    "Vector",
    "OutputVector",
    "Interpolator",
    "InterpolatorBase",
    "copy_components",
    "blend",
    "check_interpolator",
    # Primitives
    "SLERP_PARALLEL_THRESHOLD",
    "LinearInterpolator",
    "StepInterpolator",
    "SlerpInterpolator",
    # Easing
    "EasingMode",
    "DEFAULT_EASING_MODE",
    "EasingInterpolator",
    "EasingPowerInterpolator",
    "EasingExponentialInterpolator",
    "EasingSineInterpolator",
    "EasingBackInterpolator",
    "EasingBounceInterpolator",
    "EasingElasticInterpolator",
    # Composite
    "CompositeEntry",
    "CompositeInterpolator",
    # Sampling
    "interpolate_value",
    "sample",
    "easing_curve",
]
