"""
Easing interpolators.

An easing interpolator reshapes the time ratio with a curve before doing
a plain linear blend. The curve itself is defined by subclasses in
_do_easing(); the EasingMode decides whether it is applied to the start
(IN), the end (OUT) or both halves (IN_OUT) of the timespan.

Usage:
    bounce = EasingBounceInterpolator(EasingMode.OUT)
    bounce.bounce_count = 4
    bounce.interpolate(start, end, 3, 0.4, out)
"""

import math
import numbers
import sys
from abc import abstractmethod
from enum import Enum
from typing import Optional, Union

from ..exceptions import InvalidArgumentError
from ..logging_config import get_logger
from .interpolator import InterpolatorBase, OutputVector, Vector, blend


logger = get_logger(__name__)


class EasingMode(Enum):
    """Where the easing curve is applied within the timespan."""
    IN = "in"            # Curve drives the start
    OUT = "out"          # Curve mirrored onto the end
    IN_OUT = "in_out"    # Curve on both halves

    @classmethod
    def parse(cls, value: Union["EasingMode", str]) -> "EasingMode":
        """Accept an EasingMode, its value ("in_out") or its name ("IN_OUT")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for mode in cls:
                if mode.value == key:
                    return mode
        raise InvalidArgumentError(
            f"Unknown easing mode: {value!r}", parameter="easing_mode", value=value
        )


DEFAULT_EASING_MODE = EasingMode.OUT


def _check_easing_mode(easing_mode) -> EasingMode:
    if easing_mode is None:
        raise InvalidArgumentError("easing_mode is None", parameter="easing_mode")
    return EasingMode.parse(easing_mode)


def _check_real(name: str, value) -> float:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf
        if math.isfinite(number):
            return number
    raise InvalidArgumentError(f"{name} must be a finite number", parameter=name, value=value)


def _check_minimum(name: str, value, minimum) -> float:
    value = _check_real(name, value)
    if value < minimum:
        raise InvalidArgumentError(f"{name} < {minimum}", parameter=name, value=value)
    return value


def _check_integer(name: str, value, minimum: int) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer", parameter=name, value=value)
    if not isinstance(value, numbers.Integral):
        if isinstance(value, numbers.Real) and float(value).is_integer():
            value = int(value)
        else:
            raise InvalidArgumentError(
                f"{name} must be an integer", parameter=name, value=value
            )
    value = int(value)
    if value < minimum:
        raise InvalidArgumentError(f"{name} < {minimum}", parameter=name, value=value)
    return value


def _exponential_curve(steepness: float, time_ratio: float) -> float:
    """
    (e^(k*t) - 1) / (e^k - 1), evaluated without overflow for any finite k.

    For k > 0 numerator and denominator are divided by e^k, so every
    exponent stays <= 0.
    """
    k = steepness
    if k == 0:
        return time_ratio
    if k > 0:
        return (math.expm1(k * (time_ratio - 1.0)) - math.expm1(-k)) / -math.expm1(-k)
    return math.expm1(k * time_ratio) / math.expm1(k)


class EasingInterpolator(InterpolatorBase):
    """
    Base class of easing interpolators.

    Subclasses implement _do_easing(t), a curve that is expected (but not
    required) to map 0 to 0 and 1 to 1.
    """

    def __init__(self, easing_mode: Optional[Union[EasingMode, str]] = None):
        """
        Args:
            easing_mode: Easing mode, defaults to EasingMode.OUT

        Raises:
            InvalidArgumentError: If the mode is unknown
        """
        if easing_mode is None:
            easing_mode = DEFAULT_EASING_MODE
        self._easing_mode = _check_easing_mode(easing_mode)

    @property
    def easing_mode(self) -> EasingMode:
        """Easing mode. The default is EasingMode.OUT."""
        return self._easing_mode

    @easing_mode.setter
    def easing_mode(self, easing_mode: Union[EasingMode, str]) -> None:
        self._easing_mode = _check_easing_mode(easing_mode)
        logger.debug(f"{type(self).__name__} easing_mode set to {self._easing_mode.name}")

    def ease(self, time_ratio: float) -> float:
        """
        Map a time ratio through the curve according to the easing mode.

        Args:
            time_ratio: Ratio in (0, 1)

        Returns:
            The reshaped ratio used for the linear blend
        """
        mode = self._easing_mode
        if mode is EasingMode.IN:
            return self._do_easing(time_ratio)
        if mode is EasingMode.OUT:
            return 1.0 - self._do_easing(1.0 - time_ratio)
        if time_ratio < 0.5:
            return self._do_easing(time_ratio * 2.0) * 0.5
        return 1.0 - self._do_easing((1.0 - time_ratio) * 2.0) * 0.5 + 0.5

    def _do_interpolate(self, from_: Vector, to: Vector, component_count: int,
                        time_ratio: float, output: OutputVector) -> None:
        blend(from_, to, component_count, self.ease(time_ratio), output)

    @abstractmethod
    def _do_easing(self, time_ratio: float) -> float:
        """Raw easing curve."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(easing_mode={self._easing_mode.name})"


class EasingPowerInterpolator(EasingInterpolator):
    """Polynomial easing: t ** power."""

    DEFAULT_POWER = 2.0

    def __init__(self, easing_mode=None, power: float = DEFAULT_POWER):
        super().__init__(easing_mode)
        self.power = power

    @property
    def power(self) -> float:
        """Exponent of the curve, >= 0. The default is 2.0."""
        return self._power

    @power.setter
    def power(self, power: float) -> None:
        self._power = _check_minimum("power", power, 0)

    def _do_easing(self, time_ratio: float) -> float:
        return math.pow(time_ratio, self._power)


class EasingExponentialInterpolator(EasingInterpolator):
    """
    Exponential easing: (e^(exponent*t) - 1) / (e^exponent - 1).

    An exponent of 0 degenerates to the identity curve. Negative exponents
    are allowed and bend the curve the other way.
    """

    DEFAULT_EXPONENT = 2.0

    def __init__(self, easing_mode=None, exponent: float = DEFAULT_EXPONENT):
        super().__init__(easing_mode)
        self.exponent = exponent

    @property
    def exponent(self) -> float:
        return self._exponent

    @exponent.setter
    def exponent(self, exponent: float) -> None:
        self._exponent = _check_real("exponent", exponent)

    def _do_easing(self, time_ratio: float) -> float:
        return _exponential_curve(self._exponent, time_ratio)


class EasingSineInterpolator(EasingInterpolator):
    """
    Sine easing: 1 - sin(1 - t) * pi / 2.

    This curve does not pass through (0, 0) and (1, 1); callers relying on
    its current shape get exactly this formula.
    """

    def _do_easing(self, time_ratio: float) -> float:
        return 1.0 - math.sin(1.0 - time_ratio) * math.pi / 2.0


class EasingBackInterpolator(EasingInterpolator):
    """Back easing, pulls back before moving: t^3 - t * amplitude * sin(t * pi)."""

    DEFAULT_AMPLITUDE = 1.0

    def __init__(self, easing_mode=None, amplitude: float = DEFAULT_AMPLITUDE):
        super().__init__(easing_mode)
        self.amplitude = amplitude

    @property
    def amplitude(self) -> float:
        """Size of the pull back, >= 0. The default is 1.0."""
        return self._amplitude

    @amplitude.setter
    def amplitude(self, amplitude: float) -> None:
        self._amplitude = _check_minimum("amplitude", amplitude, 0)

    def _do_easing(self, time_ratio: float) -> float:
        t = time_ratio
        return t * t * t - t * self._amplitude * math.sin(t * math.pi)


class EasingBounceInterpolator(EasingInterpolator):
    """
    Bounce easing.

    Produces ``bounce_count`` parabolic bounces whose durations shrink
    geometrically by ``bounciness``. Each bounce is a parabola between two
    consecutive roots; the last one peaks at exactly 1.0.
    """

    DEFAULT_BOUNCE_COUNT = 3
    DEFAULT_BOUNCINESS = 2.0

    def __init__(self, easing_mode=None, bounce_count: int = DEFAULT_BOUNCE_COUNT,
                 bounciness: float = DEFAULT_BOUNCINESS):
        super().__init__(easing_mode)
        self.bounce_count = bounce_count
        self.bounciness = bounciness

    @property
    def bounce_count(self) -> int:
        """Number of bounces, >= 1. The default is 3."""
        return self._bounce_count

    @bounce_count.setter
    def bounce_count(self, bounce_count: int) -> None:
        bounce_count = _check_integer("bounce_count", bounce_count, 1)
        if bounce_count > sys.float_info.max:
            raise InvalidArgumentError("bounce_count is too large", parameter="bounce_count")
        self._bounce_count = bounce_count

    @property
    def bounciness(self) -> float:
        """Ratio between consecutive bounce durations, >= 1. The default is 2.0."""
        return self._bounciness

    @bounciness.setter
    def bounciness(self, bounciness: float) -> None:
        self._bounciness = _check_minimum("bounciness", bounciness, 1)

    def _do_easing(self, time_ratio: float) -> float:
        if time_ratio <= 0:
            return 0.0
        # log base 1 is undefined
        b1 = 1.001 if self._bounciness == 1 else self._bounciness
        log_b1 = math.log(b1)
        n_log_b1 = self._bounce_count * log_b1
        # q = (p/b2 + (1-p)/2)*b2 with p = 1 - b1^n and b2 = 1 - b1 equals
        # 1 - b1^n * (1+b1)/2 < 0, so the log argument 1 - t*q is >= 1.
        # b1^n overflows for large counts; work with
        # log(-q) = n*log(b1) + shift instead.
        half_log = math.log((1.0 + b1) * 0.5)
        shift = half_log + math.log(-math.expm1(-(n_log_b1 + half_log)))
        log_neg_q = n_log_b1 + shift
        # span = log(1 - t*q) - n*log(b1)
        u = math.log(time_ratio) + log_neg_q
        if u > 0:
            span = math.log(time_ratio) + shift + math.log1p(math.exp(-u))
        else:
            span = math.log1p(math.exp(u)) - n_log_b1
        # Index of the current bounce relative to the last one (f - n)
        g = min(math.floor(span / log_b1), 0)
        inv_neg_q = math.exp(-log_neg_q)
        s = math.exp(g * log_b1 - shift) - inv_neg_q
        e = math.exp((g + 1) * log_b1 - shift) - inv_neg_q
        m = (s + e) * 0.5
        r = m - s
        if r <= 0:
            return 0.0
        x = (time_ratio - m) / r
        # Peak height (1/b1)^(n-f)
        a = math.exp(g * log_b1)
        return a * (1.0 - x) * (1.0 + x)


class EasingElasticInterpolator(EasingInterpolator):
    """
    Elastic easing: (e^(springiness*t) - 1) / (e^springiness - 1).

    oscillation_count is kept as configuration but does not shape the
    curve.
    """

    DEFAULT_OSCILLATION_COUNT = 3
    DEFAULT_SPRINGINESS = 3.0

    def __init__(self, easing_mode=None,
                 oscillation_count: int = DEFAULT_OSCILLATION_COUNT,
                 springiness: float = DEFAULT_SPRINGINESS):
        super().__init__(easing_mode)
        self.oscillation_count = oscillation_count
        self.springiness = springiness

    @property
    def oscillation_count(self) -> int:
        """Number of oscillations, >= 0. The default is 3."""
        return self._oscillation_count

    @oscillation_count.setter
    def oscillation_count(self, oscillation_count: int) -> None:
        self._oscillation_count = _check_integer("oscillation_count", oscillation_count, 0)

    @property
    def springiness(self) -> float:
        """Stiffness of the spring, >= 0. The default is 3.0."""
        return self._springiness

    @springiness.setter
    def springiness(self, springiness: float) -> None:
        self._springiness = _check_minimum("springiness", springiness, 0)

    def _do_easing(self, time_ratio: float) -> float:
        return _exponential_curve(self._springiness, time_ratio)


__all__ = [
    "EasingMode",
    "DEFAULT_EASING_MODE",
    "EasingInterpolator",
    "EasingPowerInterpolator",
    "EasingExponentialInterpolator",
    "EasingSineInterpolator",
    "EasingBackInterpolator",
    "EasingBounceInterpolator",
    "EasingElasticInterpolator",
]
