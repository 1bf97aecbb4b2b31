"""
Task sheet service: turns task sheet lines into an order record.

Runs every extractor against the same line index and merges the results.
Extraction is best effort; only a missing/invalid line sequence, an
unreadable PDF or parse_or_raise() on a foreign document raise.
"""

from collections.abc import Sequence
from datetime import date
from typing import Optional

import structlog

from exceptions import NotTaskSheetError
from integrations.country_codes import CountryResolver, resolve_country_code
from integrations.package_types import PackageTypeTranslator, translate_package_type
from models.task_sheet import Customer, OrderRecord
from parsers.line_index import LineIndex
from parsers.pdf_lines import extract_lines
from parsers.task_sheet_cargo import (
    extract_cargos,
    extract_container_info,
    extract_incoterms,
)
from parsers.task_sheet_details import extract_details
from parsers.task_sheet_locations import extract_locations
from parsers.task_sheet_parser import (
    TASK_SHEET_MIN_LABELS,
    count_task_sheet_labels,
    extract_header,
    is_task_sheet,
)

logger = structlog.get_logger(__name__)

# Section labels bounding the stop lists
LOADING_SECTION = "Loading sequence:"
UNLOADING_SECTION = "Unloading sequence:"
SECTION_END = "Best regards"


class TaskSheetService:
    """
    Extract transport orders from task sheet documents.

    Collaborators (country lookup, package type translation) are injectable;
    defaults are the built-in tables.
    """

    def __init__(
        self,
        country_resolver: Optional[CountryResolver] = None,
        package_type_translator: Optional[PackageTypeTranslator] = None,
    ):
        self.country_resolver = country_resolver or resolve_country_code
        self.package_type_translator = package_type_translator or translate_package_type

    # ===================
    # CLASSIFICATION
    # ===================

    def validate_format(self, lines: Sequence[str]) -> bool:
        """Check if lines belong to a task sheet (3 of 4 labels present)."""
        return is_task_sheet(lines)

    # ===================
    # EXTRACTION
    # ===================

    def process_lines(
        self,
        lines: Sequence[str],
        attachment_filename: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> OrderRecord:
        """
        Assemble an order record from task sheet lines.

        Callers are expected to have checked validate_format() first.

        Args:
            lines: Document lines in reading order
            attachment_filename: Source file name (stored lower-cased)
            reference_date: Year context for stop dates without a year

        Returns:
            OrderRecord

        Raises:
            InvalidLineSequenceError: If lines is None or not a list of strings
        """
        index = LineIndex(lines)

        header = extract_header(index)

        attachment_filenames = []
        if attachment_filename:
            attachment_filenames.append(attachment_filename.lower())

        loading_locations = extract_locations(
            index.between(LOADING_SECTION, UNLOADING_SECTION),
            reference_date=reference_date,
            country_resolver=self.country_resolver,
        )
        destination_locations = extract_locations(
            index.between(UNLOADING_SECTION, SECTION_END),
            reference_date=reference_date,
            country_resolver=self.country_resolver,
        )

        record = OrderRecord(
            customer=Customer(details=extract_details(index)),
            attachment_filenames=attachment_filenames,
            loading_locations=loading_locations,
            destination_locations=destination_locations,
            cargos=extract_cargos(index, self.package_type_translator),
            order_reference=header.order_reference,
            transport_numbers=header.transport_numbers,
            freight_price=header.freight_price,
            freight_currency=header.freight_currency,
            incoterms=extract_incoterms(index),
            container=extract_container_info(index),
        )

        logger.info(
            "order_assembled",
            order_reference=record.order_reference,
            loading_stops=len(record.loading_locations),
            destination_stops=len(record.destination_locations),
            incoterms=record.incoterms or None,
            has_container=record.container.has_data,
            attachment=attachment_filename
        )

        return record

    def parse_lines(
        self,
        lines: Sequence[str],
        attachment_filename: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> Optional[OrderRecord]:
        """
        Classify, then extract.

        Returns:
            OrderRecord, or None when the lines are not a task sheet
        """
        index = LineIndex(lines)
        labels_found = count_task_sheet_labels(index)

        if labels_found < TASK_SHEET_MIN_LABELS:
            logger.info(
                "task_sheet_rejected",
                labels_found=labels_found,
                attachment=attachment_filename
            )
            return None

        return self.process_lines(index.lines, attachment_filename, reference_date)

    def parse_or_raise(
        self,
        lines: Sequence[str],
        attachment_filename: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> OrderRecord:
        """
        Like parse_lines(), but a foreign document is an error.

        Raises:
            NotTaskSheetError: If fewer than 3 task sheet labels are present
        """
        record = self.parse_lines(lines, attachment_filename, reference_date)
        if record is None:
            raise NotTaskSheetError(
                labels_found=count_task_sheet_labels(lines),
                labels_required=TASK_SHEET_MIN_LABELS
            )
        return record

    def parse_pdf(
        self,
        pdf_bytes: bytes,
        attachment_filename: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> Optional[OrderRecord]:
        """
        Extract lines from a PDF and parse them as a task sheet.

        Raises:
            PDFParseError: If the PDF cannot be read
        """
        lines = extract_lines(pdf_bytes)
        return self.parse_lines(lines, attachment_filename, reference_date)


# Singleton instance
_task_sheet_service: Optional[TaskSheetService] = None


def get_task_sheet_service() -> TaskSheetService:
    """Get or create TaskSheetService instance."""
    global _task_sheet_service
    if _task_sheet_service is None:
        _task_sheet_service = TaskSheetService()
    return _task_sheet_service
