"""
Primitive interpolators: linear, step and quaternion SLERP.
"""

import math

from ..exceptions import InvalidArgumentError
from .interpolator import InterpolatorBase, OutputVector, Vector, blend, copy_components


# Above this cosine the two rotations are treated as parallel
SLERP_PARALLEL_THRESHOLD = 0.9999


class LinearInterpolator(InterpolatorBase):
    """
    Linear interpolation.

    output[i] = from_[i] * (1 - t) + to[i] * t
    """

    def _do_interpolate(self, from_: Vector, to: Vector, component_count: int,
                        time_ratio: float, output: OutputVector) -> None:
        blend(from_, to, component_count, time_ratio, output)


class StepInterpolator(InterpolatorBase):
    """Hold ``from_`` for the whole timespan; ``to`` only appears at 1.0."""

    def _do_interpolate(self, from_: Vector, to: Vector, component_count: int,
                        time_ratio: float, output: OutputVector) -> None:
        copy_components(from_, output, component_count)


class SlerpInterpolator(InterpolatorBase):
    """
    Spherical linear interpolation of rotation quaternions.

    The first four components are read as (x, y, z, w). component_count
    must be at least 4; components after the fourth are left untouched.
    The shorter of the two arcs is always taken.
    """

    def _do_interpolate(self, from_: Vector, to: Vector, component_count: int,
                        time_ratio: float, output: OutputVector) -> None:
        if component_count < 4:
            raise InvalidArgumentError(
                "component_count < 4", parameter="component_count", value=component_count
            )

        x0, y0, z0, w0 = from_[0], from_[1], from_[2], from_[3]
        x1, y1, z1, w1 = to[0], to[1], to[2], to[3]

        cos_omega = w0 * w1 + x0 * x1 + y0 * y1 + z0 * z1

        # Opposite hemispheres: flip `to` to take the shorter arc
        if cos_omega < 0:
            x1, y1, z1, w1 = -x1, -y1, -z1, -w1
            cos_omega = -cos_omega

        if cos_omega > SLERP_PARALLEL_THRESHOLD:
            k0 = 1.0 - time_ratio
            k1 = time_ratio
        else:
            sin_omega = math.sqrt(1.0 - cos_omega * cos_omega)
            omega = math.atan2(sin_omega, cos_omega)
            one_over_sin_omega = 1.0 / sin_omega
            k0 = math.sin((1.0 - time_ratio) * omega) * one_over_sin_omega
            k1 = math.sin(time_ratio * omega) * one_over_sin_omega

        output[0] = x0 * k0 + x1 * k1
        output[1] = y0 * k0 + y1 * k1
        output[2] = z0 * k0 + z1 * k1
        output[3] = w0 * k0 + w1 * k1


__all__ = [
    "SLERP_PARALLEL_THRESHOLD",
    "LinearInterpolator",
    "StepInterpolator",
    "SlerpInterpolator",
]
