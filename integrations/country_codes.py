"""
Country code resolution for postal code prefixes.

Task sheet addresses carry the country as a letter prefix on the postal
code ("DE-12345", "D-12345", "LT 01234"). Both ISO 3166 alpha-2 codes and
international vehicle registration codes show up, so both resolve here.

Usage:
    from integrations.country_codes import resolve_country_code

    resolve_country_code("D")   # "DE"
    resolve_country_code("lt")  # "LT"
    resolve_country_code("XX")  # None
"""

from typing import Callable, Optional

import structlog

logger = structlog.get_logger(__name__)

# Signature every country resolver must follow
CountryResolver = Callable[[str], Optional[str]]

# ISO 3166-1 alpha-2 codes for Europe and main trading partners
ISO_COUNTRY_CODES = {
    "AD", "AL", "AM", "AT", "AZ", "BA", "BE", "BG", "BY", "CH", "CN", "CY",
    "CZ", "DE", "DK", "EE", "ES", "FI", "FR", "GB", "GE", "GR", "HR", "HU",
    "IE", "IS", "IT", "KZ", "LI", "LT", "LU", "LV", "MC", "MD", "ME", "MK",
    "MT", "NL", "NO", "PL", "PT", "RO", "RS", "RU", "SE", "SI", "SK", "SM",
    "TR", "UA", "US", "VA", "XK",
}

# International vehicle registration codes that differ from ISO alpha-2
VEHICLE_REGISTRATION_CODES = {
    "A": "AT",
    "B": "BE",
    "D": "DE",
    "E": "ES",
    "F": "FR",
    "H": "HU",
    "I": "IT",
    "L": "LU",
    "M": "MT",
    "N": "NO",
    "P": "PT",
    "S": "SE",
    "V": "VA",
    "FL": "LI",
    "GR": "GR",
    "IRL": "IE",
    "IS": "IS",
    "RO": "RO",
    "SLO": "SI",
    "UK": "GB",
    "CY": "CY",
    "MD": "MD",
}


def resolve_country_code(code: Optional[str]) -> Optional[str]:
    """
    Resolve a country letter code to ISO 3166 alpha-2.

    Args:
        code: Letters taken from a postal code prefix (any case)

    Returns:
        Alpha-2 code, or None if unknown
    """
    if not code:
        return None

    normalized = code.strip().upper()

    if normalized in VEHICLE_REGISTRATION_CODES:
        return VEHICLE_REGISTRATION_CODES[normalized]

    if normalized in ISO_COUNTRY_CODES:
        return normalized

    logger.debug("country_code_unresolved", code=code)
    return None
