"""
Loading/unloading stop extraction.

Stops in the "Loading sequence:" and "Unloading sequence:" sections are laid
out as fixed blocks of six lines:

    offset 0  stop number
    offset 1  stop type
    offset 2  date/time window   "01.06.2024 08:00-10:00"
    offset 3  contact line
    offset 4  address            "Acme GmbH , Hauptstr 1 , DE-12345 Berlin"
    offset 5  reference / note

A section that does not follow this layout misaligns silently.
"""

import re
from datetime import date
from typing import Optional

import structlog

from integrations.country_codes import CountryResolver, resolve_country_code
from models.task_sheet import AddressFields, LocationEntry
from parsers.task_sheet_dates import parse_time_window
from utils.text_utils import letter_residue

logger = structlog.get_logger(__name__)

LOCATION_BLOCK_SIZE = 6
LOCATION_MIN_LINES = 5  # last block may lose its trailing line
DATETIME_OFFSET = 2
ADDRESS_OFFSET = 4

# COMPANY , STREET , CC-POSTAL CITY
ADDRESS_PATTERN = re.compile(
    r'^(.+?)\s*, +(.+?)\s*, +([A-Z]{1,2}-?[0-9]{4,}) +(.+)$',
    re.IGNORECASE
)
NON_DIGIT = re.compile(r'[^0-9]')


def _resolve_country(letters: str, resolver: CountryResolver) -> Optional[str]:
    """Call the country resolver; a failing resolver yields None."""
    try:
        return resolver(letters)
    except Exception as e:
        logger.warning(
            "country_resolver_failed",
            letters=letters,
            error=str(e),
            error_type=type(e).__name__
        )
        return None


def parse_address(
    line: Optional[str],
    country_resolver: Optional[CountryResolver] = None,
) -> AddressFields:
    """
    Parse "COMPANY , STREET , CC-POSTAL CITY" into address fields.

    All-or-nothing: when the line does not match, every field is None.

    Args:
        line: Address line of a stop block
        country_resolver: Letters → ISO code (defaults to resolve_country_code)

    Returns:
        AddressFields
    """
    match = ADDRESS_PATTERN.match(line or "")
    if not match:
        logger.debug("address_not_matched", line=line)
        return AddressFields()

    company, street, postal, city = match.groups()

    return AddressFields(
        company=company,
        title=company,
        street_address=street,
        city=city,
        postal_code=NON_DIGIT.sub('', postal),
        country=_resolve_country(
            letter_residue(postal),
            country_resolver or resolve_country_code
        ),
    )


def extract_location(
    block: list[str],
    reference_date: Optional[date] = None,
    country_resolver: Optional[CountryResolver] = None,
) -> LocationEntry:
    """Build one stop from a six-line block."""
    datetime_line = block[DATETIME_OFFSET] if len(block) > DATETIME_OFFSET else ""
    address_line = block[ADDRESS_OFFSET] if len(block) > ADDRESS_OFFSET else ""

    return LocationEntry(
        company_address=parse_address(address_line, country_resolver),
        time=parse_time_window(datetime_line, reference_date),
    )


def extract_locations(
    lines: list[str],
    reference_date: Optional[date] = None,
    country_resolver: Optional[CountryResolver] = None,
) -> list[LocationEntry]:
    """
    Split a section into six-line blocks and parse each stop.

    Blocks with fewer than five lines are skipped. Output keeps document order.

    Args:
        lines: Lines strictly between the section label and the next section
        reference_date: Year context for dates without a year
        country_resolver: Letters → ISO code

    Returns:
        Stops in document order
    """
    locations = []

    for start in range(0, len(lines), LOCATION_BLOCK_SIZE):
        block = lines[start:start + LOCATION_BLOCK_SIZE]
        if len(block) < LOCATION_MIN_LINES:
            logger.debug("location_block_skipped", start=start, size=len(block))
            continue
        locations.append(extract_location(block, reference_date, country_resolver))

    return locations
