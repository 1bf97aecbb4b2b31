"""
Package type vocabulary and display names with i18n support.

Task sheets name the unit in German ("EW-Paletten", "Ladung", "Stück").
Those map to a canonical tag which is then rendered in the configured
language.

Usage:
    from integrations.package_types import map_package_type

    map_package_type("EW-Paletten")  # "Other pallet"
"""

from typing import Callable, Optional

from config.settings import settings

# Signature every package type translator must follow
PackageTypeTranslator = Callable[[str], str]

DEFAULT_PACKAGE_TYPE = "PALLET_OTHER"

# Source vocabulary → canonical tag (exact match only)
PACKAGE_TYPE_MAP = {
    "EW-Paletten": "PALLET_OTHER",
    "Ladung": "CARTON",
    "Stück": "OTHER",
}

MESSAGES = {
    "en": {
        "PALLET_OTHER": "Other pallet",
        "CARTON": "Carton",
        "OTHER": "Other",
    },

    "de": {
        "PALLET_OTHER": "Sonstige Palette",
        "CARTON": "Karton",
        "OTHER": "Sonstiges",
    },

    "lt": {
        "PALLET_OTHER": "Kitas padėklas",
        "CARTON": "Dėžė",
        "OTHER": "Kita",
    },
}


def canonical_package_type(raw: Optional[str]) -> str:
    """Map source vocabulary to a canonical tag, PALLET_OTHER when unknown."""
    return PACKAGE_TYPE_MAP.get(raw or "", DEFAULT_PACKAGE_TYPE)


def translate_package_type(tag: str, lang: Optional[str] = None) -> str:
    """
    Get the display name for a canonical package type tag.

    Falls back to English, then to the tag itself.

    Args:
        tag: Canonical tag (e.g. "CARTON")
        lang: Language code (defaults to settings.package_type_language)

    Returns:
        Display name
    """
    lang = lang or settings.package_type_language
    lang_messages = MESSAGES.get(lang, MESSAGES["en"])
    return lang_messages.get(tag, MESSAGES["en"].get(tag, tag))


def map_package_type(
    raw: Optional[str],
    translator: Optional[PackageTypeTranslator] = None,
) -> str:
    """
    Map a raw unit value to its translated package type.

    Args:
        raw: Value from the line after "Unit:"
        translator: Tag → display name (defaults to translate_package_type)

    Returns:
        Display name of the canonical package type
    """
    translator = translator or translate_package_type
    return translator(canonical_package_type(raw))
