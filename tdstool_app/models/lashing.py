from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tdstool_app.config.limits import DEFAULT_ANCHOR_MARGIN, N_PER_DAN
from tdstool_app.services.parsing import to_newtons


class LashingDirection(Enum):
    FORWARD = "Forward"
    REARWARD = "Rearward"
    LATERAL = "Lateral"


class LashingMode(Enum):
    AUTO = "auto"  # engine prescribes the strap count
    MANUAL = "manual"  # user supplies the strap count


@dataclass(frozen=True, slots=True)
class LashingConfig:
    """
    Direct-lashing set-up for one direction.

    ``strap_rating_dan`` is the lashing capacity (LC) of one strap and
    ``lashing_angle_deg`` is measured from horizontal. ``strap_count`` is only
    read in manual mode. ``None`` means the field was left blank.
    """

    mode: LashingMode = LashingMode.AUTO
    strap_count: int = 0
    strap_rating_dan: float | None = None
    lashing_angle_deg: float | None = None

    @classmethod
    def from_rating(
        cls,
        rating: float,
        unit: str = "daN",
        lashing_angle_deg: float | None = None,
        mode: LashingMode = LashingMode.AUTO,
        strap_count: int = 0,
    ) -> "LashingConfig":
        """Build a config from a strap rating given in N, daN or kN."""
        return cls(
            mode=mode,
            strap_count=strap_count,
            strap_rating_dan=to_newtons(rating, unit) / N_PER_DAN,
            lashing_angle_deg=lashing_angle_deg,
        )


@dataclass(frozen=True, slots=True)
class AnchorConstraint:
    """Safe working load (daN) of one anchor point and the allowed margin."""

    safe_working_load_dan: float
    margin_factor: float = DEFAULT_ANCHOR_MARGIN

    @property
    def max_allowed_dan(self) -> float:
        return self.safe_working_load_dan * self.margin_factor


@dataclass(frozen=True, slots=True)
class RestraintEvaluation:
    """Outcome for one direction. Forces in daN."""

    direction: LashingDirection
    required_force_dan: float
    strap_capacity_per_strap_dan: float
    required_strap_count: int
    total_capacity_dan: float
    strap_count_used: int
    passed: bool
    message: str
    anchor_warning: str | None = None
    friction_force_dan: float = 0.0
    additional_straps_needed: int = 0
    force_passed: bool = False
    anchor_checked: bool = False
    anchor_passed: bool = True
    per_strap_load_dan: float | None = None
    anchor_limit_dan: float | None = None
