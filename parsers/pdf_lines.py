"""
PDF to line sequence conversion.

Uses pdfplumber text extraction (native PDFs only). Blank lines are kept:
task sheet values are positioned relative to their labels.
"""

from io import BytesIO
from typing import Optional

import pdfplumber
import structlog

from config.settings import settings
from exceptions import PDFParseError

logger = structlog.get_logger(__name__)


def extract_lines(pdf_bytes: bytes, min_text_length: Optional[int] = None) -> list[str]:
    """
    Extract text lines from a PDF, page by page.

    Args:
        pdf_bytes: PDF file content as bytes
        min_text_length: Minimum non-blank characters (default from settings)

    Returns:
        Lines in reading order, trailing whitespace removed

    Raises:
        PDFParseError: If the PDF cannot be read or has too little text
    """
    if min_text_length is None:
        min_text_length = settings.pdf_min_text_length

    lines: list[str] = []
    try:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            page_count = len(pdf.pages)
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    lines.extend(line.rstrip() for line in page_text.splitlines())
    except Exception as e:
        logger.error("pdf_extraction_failed", error=str(e))
        raise PDFParseError(
            message=f"Failed to extract text from PDF: {str(e)}",
            details={"original_error": str(e)}
        ) from e

    text_length = sum(len(line.strip()) for line in lines)
    if text_length < min_text_length:
        raise PDFParseError(
            message="No text could be extracted from PDF (may be a scanned image)",
            details={"pdf_size_bytes": len(pdf_bytes), "text_length": text_length}
        )

    logger.info(
        "pdf_lines_extracted",
        page_count=page_count,
        line_count=len(lines),
        text_length=text_length
    )
    return lines
