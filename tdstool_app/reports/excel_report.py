"""
Excel calculation sheet for the TDS load-planning calculators.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from tdstool_app.models import CenterOfGravityResult, ContainerFitResult, RestraintEvaluation
from tdstool_app.reports.formatting import (
    ORIENTATION_HEADER,
    RESTRAINT_HEADER,
    cog_rows,
    orientation_rows,
    restraint_rows,
)
from tdstool_app.services.container_fit_service import describe_fit


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, status_col: int | None = None) -> None:
    """Zebra striping, bold first column and PASS/FAIL highlighting."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    pass_fill = PatternFill(fill_type="solid", fgColor="C6EFCE")
    fail_fill = PatternFill(fill_type="solid", fgColor="FFC7CE")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if cell.row % 2 == 0:
                cell.fill = stripe_fill
            if status_col is not None and cell.column == status_col:
                if cell.value == "PASS":
                    cell.fill = pass_fill
                elif cell.value == "FAIL":
                    cell.fill = fail_fill
            cell.alignment = Alignment(
                horizontal="left" if cell.column == 1 else "right",
                vertical="center",
                wrap_text=True,
            )


def _set_widths(ws, widths: List[int]) -> None:
    for idx, width in enumerate(widths):
        ws.column_dimensions[chr(ord("A") + idx)].width = width


def export_tds_to_excel(
    filepath: Path,
    cog: CenterOfGravityResult | None = None,
    restraint: List[RestraintEvaluation] | None = None,
    fit: ContainerFitResult | None = None,
    title: str = "",
) -> None:
    """
    Generate a multi-sheet workbook: one sheet per calculator result given.

    Sheet "Summary" is always written so an empty export is still a valid file.
    """
    summary = {"Item": ["Title"], "Value": [title]}
    if cog is not None:
        for label, value in cog_rows(cog):
            summary["Item"].append(label)
            summary["Value"].append(value)
    if restraint:
        for ev in restraint:
            summary["Item"].append(f"Restraint {ev.direction.value}")
            summary["Value"].append("PASS" if ev.passed else "FAIL")
    if fit is not None:
        summary["Item"].append("Container fit")
        summary["Value"].append(describe_fit(fit))
    df_summary = pd.DataFrame(summary)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Summary", index=False)
        ws = writer.sheets["Summary"]
        _set_widths(ws, [28, 70])
        _style_header(ws)
        _style_body_table(ws)

        if restraint:
            df_restraint = pd.DataFrame(restraint_rows(restraint), columns=RESTRAINT_HEADER)
            df_restraint["Message"] = [ev.message for ev in restraint]
            df_restraint["Anchor"] = [ev.anchor_warning or "" for ev in restraint]
            df_restraint.to_excel(writer, sheet_name="Restraint", index=False)
            ws = writer.sheets["Restraint"]
            _set_widths(ws, [12, 12, 12, 14, 12, 12, 14, 10, 60, 60])
            _style_header(ws)
            _style_body_table(ws, status_col=len(RESTRAINT_HEADER))

        if fit is not None:
            df_fit = pd.DataFrame(orientation_rows(fit), columns=ORIENTATION_HEADER)
            df_fit.to_excel(writer, sheet_name="Container Fit", index=False)
            ws = writer.sheets["Container Fit"]
            _set_widths(ws, [14, 22, 10, 10, 60])
            _style_header(ws)
            _style_body_table(ws)
