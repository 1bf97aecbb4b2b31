"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from datetime import date

from services.task_sheet_service import TaskSheetService


# ===================
# SAMPLE DOCUMENTS
# ===================

LOADING_STOP = [
    "1",
    "Loading",
    "01.06.2024 08:00-10:00",
    "Contact: Jonas",
    "Acme GmbH , Hauptstr 1 , DE-12345 Berlin",
    "Ramp 3",
]

UNLOADING_STOPS = [
    "1",
    "Unloading",
    "03.06.2024 14:00-16:00",
    "Contact: Ona",
    "Baltic Paper UAB , Savanoriu pr. 12 , LT-01234 Vilnius",
    "Gate 2",
    "2",
    "Unloading",
    "04.06.2024",
    "Contact",
    "Broken address line",
    "",
]


@pytest.fixture
def task_sheet_lines() -> list[str]:
    """Complete task sheet as extracted from the PDF."""
    return [
        "Transport order",
        "Tournumber:",
        "",
        "* 4711-22 *",
        "Truck, trailer:",
        "",
        "LT-ABC123",
        "Trailer",
        "XY789 Schmitz Cargobull",
        "Vehicle type:",
        "",
        "Tautliner",
        "Freight rate in €:",
        "",
        "1.250,50 EUR",
        "Load:",
        "Paper rolls",
        "Amount:",
        "33",
        "Unit:",
        "EW-Paletten",
        "Weight:",
        "12.500,00",
        "Loadingmeter:",
        "13,6",
        "Loading reference: LR-100",
        "Unloading reference: UR-200",
        "Delivery terms FCA Kaunas",
        "Loading sequence:",
        *LOADING_STOP,
        "Unloading sequence:",
        *UNLOADING_STOPS,
        "Best regards",
        "Contactperson: Anna Schmidt",
        "Email: anna.schmidt@example.com",
        "USt.-ID: DE123456789",
    ]


@pytest.fixture
def loading_stop() -> list[str]:
    return list(LOADING_STOP)


@pytest.fixture
def unloading_stops() -> list[str]:
    return list(UNLOADING_STOPS)


@pytest.fixture
def reference_date() -> date:
    return date(2024, 1, 15)


@pytest.fixture
def service() -> TaskSheetService:
    """Service with English package types and the built-in country table."""
    from integrations.package_types import translate_package_type
    return TaskSheetService(
        package_type_translator=lambda tag: translate_package_type(tag, lang="en")
    )
