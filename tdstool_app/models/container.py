from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class ContainerProfile:
    """Internal and door dimensions (m) plus maximum payload (kg)."""

    internal_length: float
    internal_width: float
    internal_height: float
    door_width: float
    door_height: float
    max_payload: float
    name: str = "Custom ISO"


@dataclass(frozen=True, slots=True)
class AssetBox:
    """Bounding box (m) and mass (kg) of the item being loaded."""

    length: float
    width: float
    height: float
    mass: float = 0.0


@dataclass(frozen=True, slots=True)
class Orientation:
    label: str
    length: float
    width: float
    height: float

    @property
    def dims(self) -> Tuple[float, float, float]:
        return self.length, self.width, self.height


@dataclass(frozen=True, slots=True)
class OrientationAttempt:
    """
    Gate results for one tried orientation.

    Excess values are signed (dimension minus limit, in m): positive means
    the limit is exceeded by that much, zero or negative means it clears.
    """

    orientation: Orientation
    door_ok: bool
    internal_ok: bool
    door_width_excess_m: float
    door_height_excess_m: float
    length_excess_m: float
    width_excess_m: float
    height_excess_m: float

    @property
    def fits(self) -> bool:
        return self.door_ok and self.internal_ok

    @property
    def violations(self) -> List[str]:
        checks = (
            ("door width", self.door_width_excess_m),
            ("door height", self.door_height_excess_m),
            ("internal length", self.length_excess_m),
            ("internal width", self.width_excess_m),
            ("internal height", self.height_excess_m),
        )
        return [f"exceeds {name} by {excess:.2f} m" for name, excess in checks if excess > 0.0]


@dataclass(frozen=True, slots=True)
class ContainerFitResult:
    fits: bool
    chosen_orientation: Orientation | None
    door_constraint_violated: bool
    internal_constraint_violated: bool
    payload_exceeded: bool
    effective_payload_kg: float = 0.0
    attempted_orientations: List[OrientationAttempt] = field(default_factory=list)
