"""
Cargo, incoterm and container extraction for task sheets.

Cargo values sit on the line right after their label ("Load:", "Amount:",
...). Container details can be mentioned anywhere, so every line is scanned
and later mentions overwrite earlier ones.
"""

import re
from typing import Optional

import structlog

from integrations.package_types import PackageTypeTranslator, map_package_type
from models.task_sheet import CargoItem, ContainerInfo
from parsers.line_index import LineIndex
from utils.text_utils import parse_decimal

logger = structlog.get_logger(__name__)

# Value is on the line after the label
CARGO_VALUE_OFFSET = 1

INCOTERMS = [
    'EXW', 'FCA', 'CPT', 'CIP', 'DAP', 'DPU', 'DDP',
    'FAS', 'FOB', 'CFR', 'CIF'
]

# Checked in order per line, first hit wins for that line
CONTAINER_TYPES = [
    '20DV', '40DV', '40HC', '45HC', '20HCPW', '40HCPW', '45HCPW',
    '40HR', '20HR', '40NOR', '20NOR', '22G1', '22P1', '22P3',
    '22R1', '22U1', '22T0', '22T5', '2CG1', '42G1', '42P1',
    '42P3', '42R1', '42U1', '45G1', '45R1', '4CG1', '4EG1'
]

CONTAINER_NUMBER_PATTERN = re.compile(r'[A-Z]{4}\d{7}')

BOOKING_REFERENCE_LABELS = [
    'Booking reference',
    'Shipment',
    'Pervežimo užsakymas Nr.',
    'Tournumber',
]

# Glued to the value ("*** F12345")
BOOKING_REFERENCE_PREFIXES = [
    '*** F',
]

SHIPPING_LINE_LABELS = [
    'Shipping line',
    'Vežėjas',
    'Dopravce',
    'Forwarder',
]

# Carriers whose name is printed in place of a "Shipping line" label.
# NOTE: a new carrier needs a new entry here.
KNOWN_CARRIERS = [
    'Access Logistic',
    'Delamode',
    'Skoda',
    'Chronopost',
    'Sappi',
    'SWISS KRONO',
]


def _alternation(phrases: list[str]) -> str:
    return '|'.join(re.escape(p) for p in phrases)


# Labels must end the word ("Shipments" is not "Shipment"), prefixes need not
BOOKING_REFERENCE_PATTERN = re.compile(
    r'((?:' + _alternation(BOOKING_REFERENCE_LABELS) + r')(?!\w)|'
    + _alternation(BOOKING_REFERENCE_PREFIXES) + r')\s*[:#* ]*([\w-]+)',
    re.IGNORECASE
)
SHIPPING_LINE_PATTERN = re.compile(
    r'(' + _alternation(SHIPPING_LINE_LABELS + KNOWN_CARRIERS) + r')\s*:\s*([\w\s.-]+)',
    re.IGNORECASE
)


# ===================
# CARGO
# ===================

def _value_after(index: LineIndex, label: str) -> Optional[str]:
    """Line following an exact label, None when label or line is missing."""
    return index.get_offset(index.find_first_equal(label), CARGO_VALUE_OFFSET)


def _decimal_after(index: LineIndex, label: str):
    value = _value_after(index, label)
    if value is None or value == '':
        return None
    return parse_decimal(value)


def _reference_value(index: LineIndex, prefix: str) -> Optional[str]:
    """Text after the first ": " on the first line starting with prefix."""
    line = index.get(index.find_first_startswith(prefix))
    if line is None:
        return None
    parts = line.split(': ', 1)
    return parts[1] if len(parts) > 1 else None


def extract_cargos(
    index: LineIndex,
    package_type_translator: Optional[PackageTypeTranslator] = None,
) -> list[CargoItem]:
    """
    Extract the cargo item of a task sheet.

    Task sheets describe a single load, so the list always has one item.

    Args:
        index: Document lines
        package_type_translator: Canonical tag → display name

    Returns:
        One-element list of CargoItem
    """
    package_count = _decimal_after(index, "Amount:")
    if package_count is None:
        package_count = 1

    unit = _value_after(index, "Unit:")
    package_type = None
    if unit is not None:
        package_type = _translate_package_type(unit, package_type_translator)

    references = [
        _reference_value(index, "Loading reference:"),
        _reference_value(index, "Unloading reference:"),
    ]
    number = '; '.join(ref for ref in references if ref)

    cargo = CargoItem(
        title=_value_after(index, "Load:"),
        number=number,
        package_count=package_count,
        package_type=package_type,
        ldm=_decimal_after(index, "Loadingmeter:"),
        weight=_decimal_after(index, "Weight:"),
    )

    logger.debug(
        "cargo_extracted",
        title=cargo.title,
        package_count=str(cargo.package_count),
        package_type=cargo.package_type
    )

    return [cargo]


def _translate_package_type(
    unit: str,
    translator: Optional[PackageTypeTranslator],
) -> Optional[str]:
    """Map the unit; a failing translator yields None."""
    try:
        return map_package_type(unit, translator)
    except Exception as e:
        logger.warning(
            "package_type_translation_failed",
            unit=unit,
            error=str(e),
            error_type=type(e).__name__
        )
        return None


# ===================
# INCOTERMS
# ===================

def extract_incoterms(index: LineIndex) -> str:
    """
    Find incoterm codes mentioned anywhere as whole words.

    Returns:
        Codes in vocabulary order joined with ",", or "" when none found
    """
    found = []
    for term in INCOTERMS:
        pattern = re.compile(r'\b' + re.escape(term) + r'\b', re.IGNORECASE)
        if index.find_first_matching(pattern) is not None:
            found.append(term.upper())

    # dict.fromkeys keeps first-seen order
    return ','.join(dict.fromkeys(found))


# ===================
# CONTAINER
# ===================

def extract_container_info(index: LineIndex) -> ContainerInfo:
    """
    Scan every line for container details.

    Each field keeps the value from the last line that mentions it.

    Returns:
        ContainerInfo (fields None when never mentioned)
    """
    container = {
        'container_number': None,
        'container_type': None,
        'booking_reference': None,
        'shipping_line': None,
    }

    for line in index:
        trimmed = line.strip()

        match = CONTAINER_NUMBER_PATTERN.search(trimmed)
        if match:
            container['container_number'] = match.group(0)

        lowered = trimmed.lower()
        for container_type in CONTAINER_TYPES:
            if container_type.lower() in lowered:
                container['container_type'] = container_type
                break

        match = BOOKING_REFERENCE_PATTERN.search(trimmed)
        if match:
            container['booking_reference'] = match.group(2).strip()

        match = SHIPPING_LINE_PATTERN.search(trimmed)
        if match:
            container['shipping_line'] = match.group(2).strip()

    return ContainerInfo(**container)
