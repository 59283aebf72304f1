from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MassPoint:
    """One contributing component (axle, item) with mass (kg) and position (m)."""

    name: str = ""
    mass: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class CenterOfGravityResult:
    """
    Total mass and combined CoG.

    Coordinates are ``None`` when the total mass is zero; a zero coordinate is
    a real position and must not be confused with "no data".
    """

    total_mass: float = 0.0
    x: float | None = None
    y: float | None = None
    z: float | None = None

    @property
    def has_position(self) -> bool:
        return self.x is not None
