"""
Simple text-based calculation sheet for the TDS tool.
"""

from __future__ import annotations

from typing import List

from tdstool_app.models import CenterOfGravityResult, ContainerFitResult, RestraintEvaluation
from tdstool_app.reports.formatting import cog_rows, format_value
from tdstool_app.services.container_fit_service import describe_fit


def build_tds_summary_text(
    cog: CenterOfGravityResult | None = None,
    restraint: List[RestraintEvaluation] | None = None,
    fit: ContainerFitResult | None = None,
    title: str = "",
    trace_timestamp: str = "",
) -> str:
    lines: list[str] = []
    if title:
        lines.append(f"TDS: {title}")
        lines.append("")

    if cog is not None:
        lines.append("Centre of Gravity")
        for label, value in cog_rows(cog):
            lines.append(f"  {label}: {value}")
        lines.append("")

    if restraint:
        lines.append("Restraint (direct lashings)")
        for ev in restraint:
            lines.append(
                f"  {ev.direction.value}: {'PASS' if ev.passed else 'FAIL'} "
                f"(F_req {format_value(ev.required_force_dan, '.1f')} daN, "
                f"{ev.strap_count_used} strap(s), capacity {format_value(ev.total_capacity_dan, '.1f')} daN)"
            )
            lines.append(f"    {ev.message}")
            if ev.anchor_warning:
                lines.append(f"    {ev.anchor_warning}")
        lines.append("")

    if fit is not None:
        lines.append("Container fit")
        lines.append(f"  {describe_fit(fit)}")
        lines.append("")

    if trace_timestamp:
        lines.append(f"Calculated: {trace_timestamp}")
    return "\n".join(lines).rstrip("\n")
