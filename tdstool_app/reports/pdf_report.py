"""
PDF calculation sheet for the TDS load-planning calculators.
"""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from tdstool_app.models import CenterOfGravityResult, ContainerFitResult, RestraintEvaluation
from tdstool_app.reports.formatting import (
    ORIENTATION_HEADER,
    RESTRAINT_HEADER,
    cog_rows,
    orientation_rows,
    restraint_rows,
)
from tdstool_app.services.container_fit_service import describe_fit

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
    ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
    ("BACKGROUND", (0, 1), (-1, -1), "#F5F5F5"),
    ("GRID", (0, 0), (-1, -1), 0.4, "#BBBBBB"),
    ("FONTSIZE", (0, 0), (-1, -1), 8),
    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
]


def _section_title(text: str, styles) -> Paragraph:
    return Paragraph(f"<b>{text}</b>", styles["Heading3"])


def _status_colours(rows: List[List[str]], column: int) -> list:
    """Green/red text for PASS/FAIL cells (row 0 is the header)."""
    commands = []
    for i, row in enumerate(rows[1:], start=1):
        value = row[column]
        if value in ("PASS", "OK"):
            commands.append(("TEXTCOLOR", (column, i), (column, i), colors.HexColor("#1B7F2A")))
        elif value == "FAIL":
            commands.append(("TEXTCOLOR", (column, i), (column, i), colors.HexColor("#C00000")))
    return commands


def export_tds_to_pdf(
    filepath: Path,
    cog: CenterOfGravityResult | None = None,
    restraint: List[RestraintEvaluation] | None = None,
    fit: ContainerFitResult | None = None,
    title: str = "",
) -> None:
    """
    Generate a one-document calculation sheet.

    Sections (each only when its result is given):
    - Centre of Gravity
    - Restraint (direct lashings) with per-direction messages and anchor notes
    - Container fit with every attempted orientation
    """
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2.0 * cm,
        leftMargin=2.0 * cm,
        topMargin=2.0 * cm,
        bottomMargin=2.0 * cm,
    )
    doc.title = "TDS Calculation Sheet"
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
        leading=20,
        spaceAfter=6,
    )
    small = ParagraphStyle("Small", parent=styles["Normal"], fontSize=8, leading=10)

    story = [Paragraph("TDS Tool - Calculation Sheet", title_style)]
    if title:
        story.append(Paragraph(escape(title), styles["Normal"]))
    story.append(Spacer(1, 0.4 * cm))

    if cog is not None:
        story.append(_section_title("Centre of Gravity", styles))
        rows = [["Parameter", "Value"], *cog_rows(cog)]
        table = Table(rows, colWidths=[8 * cm, 6 * cm])
        table.setStyle(TableStyle(_HEADER_STYLE))
        story.extend([table, Spacer(1, 0.4 * cm)])

    if restraint:
        story.append(_section_title("Restraint System (Direct lashings)", styles))
        rows = [RESTRAINT_HEADER, *restraint_rows(restraint)]
        table = Table(rows, repeatRows=1)
        table.setStyle(TableStyle(_HEADER_STYLE + _status_colours(rows, len(RESTRAINT_HEADER) - 1)))
        story.extend([table, Spacer(1, 0.2 * cm)])
        for ev in restraint:
            story.append(Paragraph(f"<b>{ev.direction.value}:</b> {escape(ev.message)}", small))
            if ev.anchor_warning:
                story.append(Paragraph(escape(ev.anchor_warning), small))
        story.append(Spacer(1, 0.4 * cm))

    if fit is not None:
        story.append(_section_title("Container Fit", styles))
        story.append(Paragraph(escape(describe_fit(fit)), small))
        story.append(Spacer(1, 0.2 * cm))
        rows = [ORIENTATION_HEADER, *orientation_rows(fit)]
        table = Table(rows, colWidths=[2.6 * cm, 3.6 * cm, 1.6 * cm, 1.8 * cm, 7.4 * cm], repeatRows=1)
        style = _HEADER_STYLE + _status_colours(rows, 2) + _status_colours(rows, 3)
        table.setStyle(TableStyle(style))
        story.append(table)

    doc.build(story)
