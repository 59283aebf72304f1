"""
Display formatting shared by the text, PDF and Excel calculation sheets.
"""

from __future__ import annotations

import math
from typing import List

from tdstool_app.config.limits import MISSING_VALUE
from tdstool_app.models import CenterOfGravityResult, ContainerFitResult, RestraintEvaluation


def format_value(value: object, fmt: str = ".2f") -> str:
    """Format a number for display; missing or non-finite values show a dash."""
    if value is None:
        return MISSING_VALUE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isnan(number) or math.isinf(number):
        return MISSING_VALUE
    return format(number, fmt)


def cog_rows(result: CenterOfGravityResult) -> List[List[str]]:
    return [
        ["Total mass (kg)", format_value(result.total_mass)],
        ["CoG x (m)", format_value(result.x)],
        ["CoG y (m)", format_value(result.y)],
        ["CoG z (m)", format_value(result.z)],
    ]


RESTRAINT_HEADER = [
    "Direction",
    "F_req (daN)",
    "F_mu (daN)",
    "Per strap (daN)",
    "Straps req.",
    "Straps used",
    "Capacity (daN)",
    "Status",
]


def restraint_rows(evaluations: List[RestraintEvaluation]) -> List[List[str]]:
    rows = []
    for ev in evaluations:
        rows.append(
            [
                ev.direction.value,
                format_value(ev.required_force_dan, ".1f"),
                format_value(ev.friction_force_dan, ".1f"),
                format_value(ev.strap_capacity_per_strap_dan, ".1f"),
                str(ev.required_strap_count),
                str(ev.strap_count_used),
                format_value(ev.total_capacity_dan, ".1f"),
                "PASS" if ev.passed else "FAIL",
            ]
        )
    return rows


ORIENTATION_HEADER = ["Orientation", "L x W x H (m)", "Door", "Internal", "Issues"]


def orientation_rows(result: ContainerFitResult) -> List[List[str]]:
    rows = []
    for attempt in result.attempted_orientations:
        o = attempt.orientation
        rows.append(
            [
                o.label,
                f"{o.length:.2f} x {o.width:.2f} x {o.height:.2f}",
                "OK" if attempt.door_ok else "FAIL",
                "OK" if attempt.internal_ok else "FAIL",
                "; ".join(attempt.violations) or "-",
            ]
        )
    return rows
