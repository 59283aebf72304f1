"""
Centre-of-Gravity calculator.

Total mass is the plain sum of component masses and each coordinate is the
mass-weighted mean of the component positions. No rounding is done here; the
report layer rounds for display.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping

from tdstool_app.models import CenterOfGravityResult, MassPoint
from tdstool_app.services.parsing import parse_float, parse_non_negative

_LOG = logging.getLogger(__name__)


def _coerce_point(point: MassPoint | Mapping[str, Any]) -> MassPoint:
    """Normalise a MassPoint or a form row dict; bad mass becomes 0, bad coordinates 0."""
    if isinstance(point, Mapping):
        get = point.get
    else:
        def get(key: str, default: Any = None) -> Any:
            return getattr(point, key, default)
    return MassPoint(
        name=str(get("name", "") or ""),
        mass=parse_non_negative(get("mass")),
        x=parse_float(get("x")),
        y=parse_float(get("y")),
        z=parse_float(get("z")),
    )


def compute_center_of_gravity(
    points: Iterable[MassPoint | Mapping[str, Any]],
) -> CenterOfGravityResult:
    """
    Combine mass points into total mass and CoG.

    An empty list, or one whose masses all coerce to zero, yields
    ``total_mass == 0`` with ``None`` coordinates. Sums that overflow the
    float range also leave the coordinates as ``None``; they are never NaN.
    """
    total_mass = 0.0
    x_moment = 0.0
    y_moment = 0.0
    z_moment = 0.0
    for raw in points:
        p = _coerce_point(raw)
        total_mass += p.mass
        x_moment += p.mass * p.x
        y_moment += p.mass * p.y
        z_moment += p.mass * p.z

    if total_mass <= 0.0:
        _LOG.debug("CoG: no mass supplied")
        return CenterOfGravityResult(total_mass=0.0)

    if not all(math.isfinite(v) for v in (total_mass, x_moment, y_moment, z_moment)):
        _LOG.debug("CoG: mass or moment sum out of range (total %r kg)", total_mass)
        return CenterOfGravityResult(total_mass=total_mass)

    result = CenterOfGravityResult(
        total_mass=total_mass,
        x=x_moment / total_mass,
        y=y_moment / total_mass,
        z=z_moment / total_mass,
    )
    _LOG.debug("CoG: total %.3f kg at (%.4f, %.4f, %.4f)", total_mass, result.x, result.y, result.z)
    return result


def axle_pair_points(
    front_mass: Any,
    front_x: Any,
    rear_mass: Any,
    rear_x: Any,
) -> List[MassPoint]:
    """Front/rear axle loads as two mass points on the centreline (y = z = 0)."""
    return [
        MassPoint(name="Axle 1", mass=parse_non_negative(front_mass), x=parse_float(front_x)),
        MassPoint(name="Axle 2", mass=parse_non_negative(rear_mass), x=parse_float(rear_x)),
    ]


def compute_axle_center_of_gravity(
    front_mass: Any,
    front_x: Any,
    rear_mass: Any,
    rear_x: Any,
) -> CenterOfGravityResult:
    return compute_center_of_gravity(axle_pair_points(front_mass, front_x, rear_mass, rear_x))
