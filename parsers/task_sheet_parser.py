"""
Task sheet format detection and header extraction.

Header values follow a label / blank / value layout, so each value is read
two lines below its label:

    Tournumber:
    <blank>
    * 12345 *
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import structlog

from parsers.line_index import LineIndex
from utils.text_utils import clean_text, letter_residue, numeric_residue, parse_decimal

logger = structlog.get_logger(__name__)

# Labels that identify a task sheet
TASK_SHEET_LABELS = [
    'Tournumber:',
    'Load:',
    'Loading sequence:',
    'Unloading sequence:',
]
TASK_SHEET_MIN_LABELS = 3  # tolerates one label lost in text extraction

# label / blank / value
HEADER_VALUE_OFFSET = 2

TOUR_LABEL = "Tournumber:"
TRUCK_LABEL = "Truck, trailer:"
VEHICLE_TYPE_LABEL = "Vehicle type:"
FREIGHT_LABEL = "Freight rate in €:"

# Trailer plate between truck and vehicle type labels: "AB123 ..."
TRAILER_PLATE_PATTERN = re.compile(r'^[A-Z]{2}[0-9]{3}( |$)')


@dataclass(frozen=True)
class HeaderFields:
    """Order reference, vehicle numbers and freight rate from the header."""
    order_reference: Optional[str] = None
    truck_number: Optional[str] = None
    trailer_number: Optional[str] = None
    freight_price: Optional[Decimal] = None
    freight_currency: Optional[str] = None

    @property
    def transport_numbers(self) -> str:
        """Truck and trailer joined with " / ", skipping missing parts."""
        return ' / '.join(n for n in (self.truck_number, self.trailer_number) if n)


def count_task_sheet_labels(lines: Sequence[str]) -> int:
    """Number of task sheet labels present as exact lines."""
    index = lines if isinstance(lines, LineIndex) else LineIndex(lines)
    return sum(
        1 for label in TASK_SHEET_LABELS
        if index.find_first_equal(label) is not None
    )


def is_task_sheet(lines: Sequence[str]) -> bool:
    """
    Check if lines come from a task sheet.

    True when at least 3 of the 4 task sheet labels appear as exact lines,
    in any order.
    """
    return count_task_sheet_labels(lines) >= TASK_SHEET_MIN_LABELS


def _extract_trailer_number(
    index: LineIndex,
    truck_li: Optional[int],
) -> Optional[str]:
    """First plate-like line strictly between the truck and vehicle type labels."""
    vehicle_li = index.find_first_equal(VEHICLE_TYPE_LABEL)
    if truck_li is None or vehicle_li is None:
        return None

    trailer_li = index.find_first_matching(
        TRAILER_PLATE_PATTERN,
        window=lambda i: truck_li < i < vehicle_li
    )
    line = index.get(trailer_li)
    if line is None:
        return None

    return line.split(' ', 1)[0]


def extract_header(index: LineIndex) -> HeaderFields:
    """
    Extract tour number, truck/trailer and freight rate.

    A missing label leaves its field None; no other offset is tried.

    Args:
        index: Document lines

    Returns:
        HeaderFields
    """
    tour_li = index.find_first_equal(TOUR_LABEL)
    order_reference = clean_text(index.get_offset(tour_li, HEADER_VALUE_OFFSET), '* ')

    truck_li = index.find_first_equal(TRUCK_LABEL)
    truck_number = clean_text(index.get_offset(truck_li, HEADER_VALUE_OFFSET))

    trailer_number = _extract_trailer_number(index, truck_li)

    freight_price = None
    freight_currency = None
    raw_freight = index.get_offset(index.find_first_equal(FREIGHT_LABEL), HEADER_VALUE_OFFSET)
    if raw_freight is not None:
        freight_currency = letter_residue(raw_freight) or None
        freight_price = parse_decimal(numeric_residue(raw_freight))

    header = HeaderFields(
        order_reference=order_reference,
        truck_number=truck_number,
        trailer_number=trailer_number,
        freight_price=freight_price,
        freight_currency=freight_currency,
    )

    if order_reference is None:
        logger.debug("field_not_found", field="order_reference")

    return header
