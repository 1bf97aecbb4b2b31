"""
Counterparty ("customer") details extraction.

Each field has an ordered chain of (label, pattern) rules. A rule applies to
the first line that contains its label and matches its pattern; the first
rule that applies wins. Labels come from Lithuanian, Czech, German and English
forwarding documents.
"""

import re
from dataclasses import dataclass
from typing import Optional, Pattern

import structlog

from models.task_sheet import CustomerDetails
from parsers.line_index import LineIndex

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DetailRule:
    """One labelled alternative for a customer detail field."""
    label: str  # "" matches any line
    pattern: Pattern[str]
    group: int = 1

    def find(self, index: LineIndex) -> Optional[int]:
        """First line containing the label that also matches the pattern."""
        return index.find_first(
            lambda line, _: self.label in line and self.pattern.search(line) is not None
        )

    def extract(self, index: LineIndex) -> Optional[str]:
        line = index.get(self.find(index))
        if line is None:
            return None
        match = self.pattern.search(line)
        return match.group(self.group).strip()


def _rule(label: str, pattern: str, group: int = 1, flags: int = re.IGNORECASE) -> DetailRule:
    return DetailRule(label=label, pattern=re.compile(pattern, flags), group=group)


# Evaluated in order; first rule that finds and matches wins
DETAIL_RULES: dict[str, list[DetailRule]] = {
    "company": [
        _rule('Vežėjas:', r'Vežėjas:\s*([\w\s.-]+)'),
        _rule('Dopravce / Spediteur / Forwarder:', r':\s*([\w\s.-]+)'),
        _rule('To:', r'To:\s*([\w\s.-]+)'),
    ],
    "company_code": [
        _rule('Į. k./Reg. no.', r'Į\. k\./Reg\. no\.\s*(\w+)'),
        _rule('NÁLOŽNÍ LIST / VERLADESCHEIN / LOADING LIST', r'\d+', group=0),
    ],
    "vat_code": [
        _rule('PVM k./VAT No.', r'PVM k\./VAT No\.\s*(\w+)'),
        _rule('DIČ:', r'DIČ:(\w+)'),
        _rule('USt.-ID:', r'USt\.-ID:\s*(\w+)'),
    ],
    "email": [
        _rule('Email:', r'Email:\s*([\w@.-]+)'),
        _rule('El. paštas:', r'El\. paštas:\s*([\w@.-]+)'),
    ],
    "contact_person": [
        _rule('Contactperson:', r'Contactperson:\s*([\w\s]+)'),
        _rule('Řidič / Fahrer / Driver:', r':\s*([\w\s]+)'),
        _rule('Kontaktas:', r'Kontaktas:\s*([\w\s]+)'),
    ],
    "street_address": [
        _rule('Pasikrovimo adresas:', r'Pasikrovimo adresas:\s*([\w\s.,#-]+)'),
        _rule('Pristatymo adresas:', r'Pristatymo adresas:\s*([\w\s.,#-]+)'),
    ],
    "title": [
        _rule('F.A.O.:', r'F\.A\.O\.:?\s*([\w\s]+)'),
        _rule('Za / für / on behalf of', r'Za / für / on behalf of\s*([\w\s.-]+)'),
    ],
    "city": [
        _rule('To:', r'To:\s*[\w\s,]*(\w{2,})\s*,'),
        _rule('Pristatymo adresas:', r'\w+\s*,\s*(\w{2,})\s*,'),
    ],
    "country": [
        # Any line with a standalone two-letter uppercase token
        _rule('', r'\b([A-Z]{2})\b', flags=0),
        _rule('Pristatymo adresas:', r',\s*([A-Z]{2})\s*$'),
    ],
    "postal_code": [
        _rule('Pristatymo adresas:', r'(\d{4,5}\s*[A-Z]*)\s*,', flags=0),
        _rule('To:', r',\s*(\d{4,5}\s*[A-Z]*),'),
    ],
    "comment": [
        _rule('Tournumber:', r'Tournumber:\s*([\w*]+)'),
        _rule('Prašome įkelti visus CMR/POD/Pristatymo dokumentus', r'Prašome.*$', group=0),
    ],
}


def extract_field(index: LineIndex, rules: list[DetailRule]) -> Optional[str]:
    """Value from the first rule in the chain that applies, else None."""
    for rule in rules:
        value = rule.extract(index)
        if value is not None:
            return value
    return None


def extract_details(index: LineIndex) -> CustomerDetails:
    """
    Extract counterparty details through the per-field rule chains.

    Args:
        index: Document lines

    Returns:
        CustomerDetails; fields with no applicable rule stay None
    """
    details = {}

    for field_name, rules in DETAIL_RULES.items():
        value = extract_field(index, rules)
        if value is None:
            logger.debug("field_not_found", field=field_name)
            continue
        details[field_name] = value

    logger.debug("customer_details_extracted", fields=sorted(details))

    return CustomerDetails(**details)
