"""
Text utilities for values read from task sheet lines.

Decimal parsing tolerates both European (1.234,56) and English (1,234.56)
number formatting.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

NON_NUMERIC = re.compile(r'[^0-9,.]')
NON_LETTER = re.compile(r'[^a-zA-Z]+')

# German thousands grouping: "12.500" is 12500
DOT_THOUSANDS_GROUP = re.compile(r'^0*[1-9][0-9]{0,2}\.[0-9]{3}$')


def _is_dot_thousands_group(cleaned: str) -> bool:
    return bool(DOT_THOUSANDS_GROUP.match(cleaned))


def numeric_residue(value: Optional[str]) -> str:
    """
    Keep only digits, commas and dots.

    "EUR 1.250,00" → "1.250,00"
    """
    if not value:
        return ""
    return NON_NUMERIC.sub('', value)


def letter_residue(value: Optional[str]) -> str:
    """
    Keep only ASCII letters.

    "1.250,00 EUR" → "EUR"
    """
    if not value:
        return ""
    return NON_LETTER.sub('', value)


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """
    Parse a locale-formatted number to Decimal.

    Separator rules:
    - Both "," and "." present: the right-most one is the decimal separator,
      the other is a thousands separator ("1.234,56" → 1234.56,
      "1,234.56" → 1234.56)
    - Only one kind, appearing once: it is the decimal separator
      ("1234,56" → 1234.56, "1,5" → 1.5), except a dot followed by exactly
      three digits after a non-zero group of one to three digits, which is a
      thousands separator ("12.500" → 12500, "0.500" → 0.5)
    - Only one kind, appearing more than once: thousands separators
      ("1.234.567" → 1234567)

    Args:
        value: Raw token (may contain units, currency, spaces)

    Returns:
        Decimal, or None if nothing numeric could be read
    """
    cleaned = numeric_residue(value)
    if not any(c.isdigit() for c in cleaned):
        return None

    last_comma = cleaned.rfind(',')
    last_dot = cleaned.rfind('.')

    if last_comma >= 0 and last_dot >= 0:
        decimal_sep = ',' if last_comma > last_dot else '.'
        thousands_sep = '.' if decimal_sep == ',' else ','
        cleaned = cleaned.replace(thousands_sep, '').replace(decimal_sep, '.')
    elif last_comma >= 0 or last_dot >= 0:
        sep = ',' if last_comma >= 0 else '.'
        if cleaned.count(sep) > 1 or _is_dot_thousands_group(cleaned):
            cleaned = cleaned.replace(sep, '')
        else:
            cleaned = cleaned.replace(sep, '.')

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None


def clean_text(value: Optional[str], chars: Optional[str] = None) -> Optional[str]:
    """
    Strip a value and collapse empty results to None.

    Args:
        value: Raw line value
        chars: Characters to strip (default: whitespace)

    Returns:
        Stripped string or None
    """
    if value is None:
        return None

    value = value.strip(chars) if chars else value.strip()

    return value or None
