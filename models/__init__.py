"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema, decimal_to_number
from models.task_sheet import (
    AddressFields,
    TimeWindow,
    LocationEntry,
    CargoItem,
    ContainerInfo,
    CustomerDetails,
    Customer,
    OrderRecord,
)

__all__ = [
    # Base
    "BaseSchema",
    "decimal_to_number",

    # Task sheet
    "AddressFields",
    "TimeWindow",
    "LocationEntry",
    "CargoItem",
    "ContainerInfo",
    "CustomerDetails",
    "Customer",
    "OrderRecord",
]
