"""
Reporting utilities (text/PDF/Excel) for the TDS tool.
"""

from tdstool_app.reports.formatting import format_value
from tdstool_app.reports.simple_text_report import build_tds_summary_text
from tdstool_app.reports.pdf_report import export_tds_to_pdf
from tdstool_app.reports.excel_report import export_tds_to_excel

__all__ = [
    "format_value",
    "build_tds_summary_text",
    "export_tds_to_pdf",
    "export_tds_to_excel",
]
