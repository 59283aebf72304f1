"""
Calculation traceability: inputs snapshot, outputs, timestamp.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from tdstool_app.models import CenterOfGravityResult, ContainerFitResult, RestraintEvaluation

CALC_COG = "cog"
CALC_RESTRAINT = "restraint"
CALC_CONTAINER = "container"


@dataclass(slots=True)
class CalculationSnapshot:
    """Traceability snapshot for one "Calculate" action."""
    timestamp: datetime
    calculator: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    outputs: Dict[str, Any] = field(default_factory=dict)
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "calculator": self.calculator,
            "inputs": self.inputs,
            "outputs": self.outputs,
            "summary": self.summary,
        }


def _plain(value: Any) -> Any:
    """Convert dataclasses/enums to JSON-friendly values."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {k: _plain(v) for k, v in asdict(value).items()}
    if isinstance(value, dict):
        return {(k.value if isinstance(k, Enum) else k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _cog_outputs(result: CenterOfGravityResult) -> tuple[Dict[str, Any], str]:
    outputs = {"total_mass_kg": result.total_mass, "cog_x_m": result.x, "cog_y_m": result.y, "cog_z_m": result.z}
    if result.has_position:
        summary = f"CoG: {result.total_mass:.2f} kg at ({result.x:.2f}, {result.y:.2f}, {result.z:.2f}) m"
    elif result.total_mass > 0.0:
        summary = "CoG: mass or moments out of range"
    else:
        summary = "CoG: no mass"
    return outputs, summary


def _restraint_outputs(evaluations: List[RestraintEvaluation]) -> tuple[Dict[str, Any], str]:
    outputs: Dict[str, Any] = {}
    for ev in evaluations:
        key = ev.direction.value.lower()
        outputs[f"{key}_required_force_dan"] = ev.required_force_dan
        outputs[f"{key}_strap_count_used"] = ev.strap_count_used
        outputs[f"{key}_passed"] = ev.passed
    passed = sum(1 for ev in evaluations if ev.passed)
    failed = len(evaluations) - passed
    return outputs, f"Restraint: {passed} passed, {failed} failed"


def _container_outputs(result: ContainerFitResult) -> tuple[Dict[str, Any], str]:
    orientation = result.chosen_orientation.label if result.chosen_orientation else None
    outputs = {
        "fits": result.fits,
        "orientation": orientation,
        "payload_exceeded": result.payload_exceeded,
        "effective_payload_kg": result.effective_payload_kg,
    }
    summary = f"Container: {'fits (' + orientation + ')' if orientation else 'does not fit'}"
    if result.payload_exceeded:
        summary += ", payload exceeded"
    return outputs, summary


def create_snapshot(calculator: str, inputs: Dict[str, Any], result: object) -> CalculationSnapshot:
    """Build a traceability snapshot from calculation inputs and results."""
    if isinstance(result, CenterOfGravityResult):
        outputs, summary = _cog_outputs(result)
    elif isinstance(result, ContainerFitResult):
        outputs, summary = _container_outputs(result)
    elif isinstance(result, list) and all(isinstance(r, RestraintEvaluation) for r in result):
        outputs, summary = _restraint_outputs(result)
    else:
        raise TypeError(f"Unsupported result type for snapshot: {type(result).__name__}")

    return CalculationSnapshot(
        timestamp=datetime.now(timezone.utc),
        calculator=calculator,
        inputs=_plain(dict(inputs)),
        outputs=outputs,
        summary=summary,
    )
