"""
tweening - interpolation kernels for animation.

Computes values between two multi-component vectors (positions, colors,
rotation quaternions) for a normalized time ratio in [0, 1].

Usage:
    from tweening import EasingBounceInterpolator, EasingMode

    bounce = EasingBounceInterpolator(EasingMode.OUT)
    out = [0.0, 0.0, 0.0]
    bounce.interpolate([0.0, 0.0, 0.0], [10.0, 5.0, 0.0], 3, 0.3, out)

    # Blend two curves
    composite = CompositeInterpolator()
    composite.add(LinearInterpolator(), 0.25)
    composite.add(bounce, 0.75)
"""

import logging

from .exceptions import (
    TweeningException,
    InvalidArgumentError,
    IndexOutOfRangeError,
)

from .logging_config import (
    get_logger,
    setup_logging,
    configure_logging,
    LogContext,
    log_performance,
)

from .core import (
    # Contract
    Interpolator,
    InterpolatorBase,
    # Primitives
    LinearInterpolator,
    StepInterpolator,
    SlerpInterpolator,
    # Easing
    EasingMode,
    EasingInterpolator,
    EasingPowerInterpolator,
    EasingExponentialInterpolator,
    EasingSineInterpolator,
    EasingBackInterpolator,
    EasingBounceInterpolator,
    EasingElasticInterpolator,
    # Composite
    CompositeEntry,
    CompositeInterpolator,
    # Sampling
    interpolate_value,
    sample,
    easing_curve,
)

from .factory import (
    InterpolatorType,
    InterpolatorConfig,
    create_interpolator,
    list_interpolators,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "TweeningException",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    # Logging
    "get_logger",
    "setup_logging",
    "configure_logging",
    "LogContext",
    "log_performance",
    # Core - Contract
    "Interpolator",
    "InterpolatorBase",
    # Core - Primitives
    "LinearInterpolator",
    "StepInterpolator",
    "SlerpInterpolator",
    # Core - Easing
    "EasingMode",
    "EasingInterpolator",
    "EasingPowerInterpolator",
    "EasingExponentialInterpolator",
    "EasingSineInterpolator",
    "EasingBackInterpolator",
    "EasingBounceInterpolator",
    "EasingElasticInterpolator",
    # Core - Composite
    "CompositeEntry",
    "CompositeInterpolator",
    # Core - Sampling
    "interpolate_value",
    "sample",
    "easing_curve",
    # Factory
    "InterpolatorType",
    "InterpolatorConfig",
    "create_interpolator",
    "list_interpolators",
]
