"""
Direct-lashing restraint sizing.

Each direction (forward, rearward, lateral) is sized independently from the
same load mass:

    F_req = m * g * a_dir * SF_dir            (N; reported in daN)
    F_strap = LC * 10 * cos(angle)            (N per strap, LC in daN)
    n_req = ceil(F_req / F_strap)

Auto mode prescribes ``n_req`` straps. Manual mode passes when the user's
count reaches ``n_req`` and otherwise reports the shortfall in straps.
When an anchor safe working load (SWL) is given, the per-strap share of the
required force must not exceed ``SWL * margin``; without one every result
carries an explicit "SWL NOT CHECKED" advisory.

Nothing here raises for numeric input: blank or invalid fields produce a
failed evaluation with a message.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from tdstool_app.config.limits import (
    DEFAULT_ANCHOR_MARGIN,
    DEFAULT_GRAVITY_M_S2,
    DEFAULT_SAFETY_FACTOR,
    EPS,
    MAX_LASHING_ANGLE_DEG,
    N_PER_DAN,
    RESTRAINT_PRESETS,
    STARTER_PLAN,
)
from tdstool_app.models import (
    AnchorConstraint,
    LashingConfig,
    LashingDirection,
    LashingMode,
    RestraintEvaluation,
)
from tdstool_app.services.parsing import (
    parse_float,
    parse_non_negative,
    parse_optional_float,
    parse_positive_or,
)

_LOG = logging.getLogger(__name__)

MSG_MISSING_STRAP = "Enter strap rating (LC) and angle."
MSG_ZERO_CAPACITY = "Strap angle invalid; capacity becomes zero."
MSG_FORCE_OUT_OF_RANGE = "Required force out of range; check load mass, acceleration and safety factor."
SWL_NOT_CHECKED = (
    "SWL NOT CHECKED: no anchor safe working load supplied; "
    "anchor points are unverified."
)
ANCHOR_SKIPPED = "Anchor check skipped: no straps in use."
ANCHOR_NOT_EVALUATED = "Anchor check skipped: restraint not evaluated."


@dataclass(slots=True)
class PresetError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(frozen=True, slots=True)
class RestraintPreset:
    name: str
    friction_coefficient: float
    accel_by_direction: Dict[LashingDirection, float]


def get_preset(name: str) -> RestraintPreset:
    """Return a named acceleration/friction preset ("defence" or "uk")."""
    key = (name or "").strip().lower()
    data = RESTRAINT_PRESETS.get(key)
    if data is None:
        raise PresetError(f"Unknown restraint preset {name!r}. Use one of: {', '.join(RESTRAINT_PRESETS)}.")
    accel = {LashingDirection(d): float(a) for d, a in data["accel_g"].items()}
    return RestraintPreset(
        name=key,
        friction_coefficient=float(data["friction_coefficient"]),
        accel_by_direction=accel,
    )


def starter_plan() -> Dict[LashingDirection, LashingConfig]:
    """Manual lashing configs to start from before recalculating."""
    return {
        LashingDirection(direction): LashingConfig(
            mode=LashingMode.MANUAL,
            strap_count=count,
            strap_rating_dan=rating,
            lashing_angle_deg=angle,
        )
        for direction, (count, rating, angle) in STARTER_PLAN.items()
    }


def _lookup(mapping: Mapping[Any, Any] | None, direction: LashingDirection, default: Any = None) -> Any:
    """Direction-keyed lookup accepting enum members or their string values."""
    if not mapping:
        return default
    if direction in mapping:
        return mapping[direction]
    return mapping.get(direction.value, default)


def _resolve_anchor(anchor: AnchorConstraint | None) -> AnchorConstraint | None:
    """Anchor with parsed SWL and margin when usable, else None."""
    if anchor is None:
        return None
    swl = parse_float(anchor.safe_working_load_dan)
    if swl <= 0.0:
        return None
    margin = parse_positive_or(anchor.margin_factor, DEFAULT_ANCHOR_MARGIN)
    return AnchorConstraint(safe_working_load_dan=swl, margin_factor=margin)


def _strap_count_needed(ratio: float) -> int:
    # Tolerance keeps exact multiples from rounding up on float noise
    return max(0, math.ceil(ratio - EPS))


def _invalid_evaluation(
    direction: LashingDirection,
    required_force_dan: float,
    friction_force_dan: float,
    message: str,
    anchor: AnchorConstraint | None,
) -> RestraintEvaluation:
    return RestraintEvaluation(
        direction=direction,
        required_force_dan=required_force_dan,
        strap_capacity_per_strap_dan=0.0,
        required_strap_count=0,
        total_capacity_dan=0.0,
        strap_count_used=0,
        passed=False,
        message=message,
        anchor_warning=SWL_NOT_CHECKED if anchor is None else ANCHOR_NOT_EVALUATED,
        friction_force_dan=friction_force_dan,
        force_passed=False,
    )


def evaluate_direction(
    direction: LashingDirection,
    load_mass_kg: float,
    gravity_m_s2: float,
    accel_g: float,
    safety_factor: float,
    config: LashingConfig | None,
    anchor: AnchorConstraint | None = None,
    friction_coefficient: float = 0.0,
) -> RestraintEvaluation:
    """
    Size or check the lashings for a single direction.

    Auto and Manual share one rule: a direction is covered when it has at
    least ``required_strap_count`` straps.
    """
    demand_n = load_mass_kg * gravity_m_s2 * accel_g * safety_factor
    friction_n = friction_coefficient * load_mass_kg * gravity_m_s2
    anchor_limits = _resolve_anchor(anchor)
    if not (math.isfinite(demand_n) and math.isfinite(friction_n)):
        _LOG.debug("Restraint %s: force overflow (demand %r N, friction %r N)", direction.value, demand_n, friction_n)
        friction_dan = friction_n / N_PER_DAN if math.isfinite(friction_n) else math.inf
        return _invalid_evaluation(direction, math.inf, friction_dan, MSG_FORCE_OUT_OF_RANGE, anchor_limits)

    required_n = max(demand_n - friction_n, 0.0)
    required_dan = required_n / N_PER_DAN
    friction_dan = friction_n / N_PER_DAN

    rating_dan = parse_float(config.strap_rating_dan) if config is not None else 0.0
    angle_deg = parse_optional_float(config.lashing_angle_deg) if config is not None else None
    if rating_dan <= 0.0 or angle_deg is None or angle_deg < 0.0:
        return _invalid_evaluation(direction, required_dan, friction_dan, MSG_MISSING_STRAP, anchor_limits)

    per_strap_n = rating_dan * N_PER_DAN * math.cos(math.radians(angle_deg))
    if angle_deg >= MAX_LASHING_ANGLE_DEG or per_strap_n <= EPS:
        return _invalid_evaluation(direction, required_dan, friction_dan, MSG_ZERO_CAPACITY, anchor_limits)

    ratio = required_n / per_strap_n
    if not math.isfinite(ratio):
        return _invalid_evaluation(direction, required_dan, friction_dan, MSG_FORCE_OUT_OF_RANGE, anchor_limits)
    required_count = _strap_count_needed(ratio)

    if config.mode == LashingMode.MANUAL:
        used = max(0, int(parse_float(config.strap_count)))
        total_n = per_strap_n * used
        force_passed = used >= required_count
        additional = 0 if force_passed else required_count - used
        message = f"{used} strap(s) give {total_n / N_PER_DAN:.1f} daN against {required_dan:.1f} daN required"
        message += "." if force_passed else f"; add {additional} more strap(s)."
    else:
        used = required_count
        total_n = per_strap_n * used
        force_passed = True
        additional = 0
        message = f"Use {used} strap(s) rated {rating_dan:g} daN at {angle_deg:g}°."

    anchor_checked = False
    anchor_passed = True
    per_strap_load_dan: float | None = None
    anchor_limit_dan: float | None = None
    if anchor_limits is None:
        anchor_warning = SWL_NOT_CHECKED
    elif used == 0:
        anchor_warning = ANCHOR_SKIPPED
    else:
        anchor_checked = True
        per_strap_load_dan = required_dan / used
        anchor_limit_dan = anchor_limits.max_allowed_dan
        anchor_passed = per_strap_load_dan <= anchor_limit_dan
        if anchor_passed:
            anchor_warning = (
                f"Anchor OK: {per_strap_load_dan:.1f} daN per strap "
                f"within {anchor_limit_dan:.1f} daN allowed."
            )
        else:
            anchor_warning = (
                f"Anchor load {per_strap_load_dan:.1f} daN per strap "
                f"exceeds {anchor_limit_dan:.1f} daN allowed."
            )
            message = f"{message} {anchor_warning}"

    passed = force_passed and anchor_passed
    message = f"{'PASS' if passed else 'FAIL'}: {message}"

    return RestraintEvaluation(
        direction=direction,
        required_force_dan=required_dan,
        strap_capacity_per_strap_dan=per_strap_n / N_PER_DAN,
        required_strap_count=required_count,
        total_capacity_dan=total_n / N_PER_DAN,
        strap_count_used=used,
        passed=passed,
        message=message,
        anchor_warning=anchor_warning,
        friction_force_dan=friction_dan,
        additional_straps_needed=additional,
        force_passed=force_passed,
        anchor_checked=anchor_checked,
        anchor_passed=anchor_passed,
        per_strap_load_dan=per_strap_load_dan,
        anchor_limit_dan=anchor_limit_dan,
    )


def compute_restraint_plan(
    load_mass_kg: Any,
    gravity_m_s2: Any = DEFAULT_GRAVITY_M_S2,
    accel_by_direction: Mapping[Any, Any] | None = None,
    safety_factor_by_direction: Mapping[Any, Any] | None = None,
    lashing_config_by_direction: Mapping[Any, LashingConfig] | None = None,
    anchor: AnchorConstraint | None = None,
    friction_coefficient: Any = 0.0,
) -> List[RestraintEvaluation]:
    """
    Evaluate forward, rearward and lateral restraint, in that order.

    Blank gravity falls back to 9.81 m/s^2, a blank safety factor to 1.0 and
    a blank acceleration to 0 g. ``friction_coefficient`` credits ``mu*m*g``
    against the required force (0 for the Defence preset).
    """
    mass = parse_non_negative(load_mass_kg)
    gravity = parse_positive_or(gravity_m_s2, DEFAULT_GRAVITY_M_S2)
    mu = parse_non_negative(friction_coefficient)

    evaluations = []
    for direction in LashingDirection:
        evaluation = evaluate_direction(
            direction,
            load_mass_kg=mass,
            gravity_m_s2=gravity,
            accel_g=parse_non_negative(_lookup(accel_by_direction, direction)),
            safety_factor=parse_positive_or(
                _lookup(safety_factor_by_direction, direction), DEFAULT_SAFETY_FACTOR
            ),
            config=_lookup(lashing_config_by_direction, direction),
            anchor=anchor,
            friction_coefficient=mu,
        )
        _LOG.debug(
            "Restraint %s: required %.1f daN, used %d strap(s), passed=%s",
            direction.value,
            evaluation.required_force_dan,
            evaluation.strap_count_used,
            evaluation.passed,
        )
        evaluations.append(evaluation)
    return evaluations


def plan_passed(evaluations: List[RestraintEvaluation]) -> bool:
    return bool(evaluations) and all(e.passed for e in evaluations)
