"""
Task sheet parsers module.

Line-based extractors for task sheet PDFs, plus the PDF-to-lines adapter.
"""

from parsers.line_index import LineIndex
from parsers.task_sheet_parser import is_task_sheet, extract_header, HeaderFields
from parsers.task_sheet_locations import extract_locations, parse_address
from parsers.task_sheet_dates import parse_time_window
from parsers.task_sheet_cargo import (
    extract_cargos,
    extract_incoterms,
    extract_container_info,
)
from parsers.task_sheet_details import extract_details
from parsers.pdf_lines import extract_lines

__all__ = [
    "LineIndex",
    "is_task_sheet",
    "extract_header",
    "HeaderFields",
    "extract_locations",
    "parse_address",
    "parse_time_window",
    "extract_cargos",
    "extract_incoterms",
    "extract_container_info",
    "extract_details",
    "extract_lines",
]
