"""
Domain models for the TDS load-planning calculators.

These are plain immutable value classes; results are pure functions of inputs.
"""

from tdstool_app.models.mass_point import MassPoint, CenterOfGravityResult
from tdstool_app.models.lashing import (
    AnchorConstraint,
    LashingConfig,
    LashingDirection,
    LashingMode,
    RestraintEvaluation,
)
from tdstool_app.models.container import (
    AssetBox,
    ContainerFitResult,
    ContainerProfile,
    Orientation,
    OrientationAttempt,
)

__all__ = [
    "MassPoint",
    "CenterOfGravityResult",
    "AnchorConstraint",
    "LashingConfig",
    "LashingDirection",
    "LashingMode",
    "RestraintEvaluation",
    "AssetBox",
    "ContainerFitResult",
    "ContainerProfile",
    "Orientation",
    "OrientationAttempt",
]
