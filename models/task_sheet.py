"""
Task sheet order record schemas.

One OrderRecord is assembled per task sheet. Optional groups (incoterms,
container) and null customer detail fields are left out of to_dict().
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from models.base import BaseSchema, decimal_to_number


# ===================
# LOCATIONS
# ===================

class AddressFields(BaseSchema):
    """
    Company address parsed from one location line.

    Either all fields are set (pattern matched) or none are.
    """

    company: Optional[str] = None
    title: Optional[str] = Field(None, description="Same value as company")
    street_address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = Field(None, description="ISO 3166 alpha-2 code")


class TimeWindow(BaseSchema):
    """Loading/unloading time window as ISO-8601 UTC strings."""

    datetime_from: Optional[str] = None
    datetime_to: Optional[str] = None

    @property
    def is_single_instant(self) -> bool:
        """True when from and to are the same instant."""
        return bool(self.datetime_from) and self.datetime_from == self.datetime_to

    def to_dict(self) -> dict:
        output = {
            "datetime_from": self.datetime_from,
            "datetime_to": self.datetime_to,
        }
        if self.is_single_instant:
            del output["datetime_to"]
        return output


class LocationEntry(BaseSchema):
    """One stop in the loading or unloading sequence."""

    company_address: AddressFields = Field(default_factory=AddressFields)
    time: TimeWindow = Field(default_factory=TimeWindow)

    def to_dict(self) -> dict:
        return {
            "company_address": self.company_address.model_dump(),
            "time": self.time.to_dict(),
        }


# ===================
# CARGO
# ===================

class CargoItem(BaseSchema):
    """Single cargo line of a task sheet."""

    title: Optional[str] = None
    number: str = Field("", description="Loading and unloading references joined with '; '")
    package_count: Optional[Decimal] = Decimal("1")
    package_type: Optional[str] = Field(None, description="Translated package type")
    ldm: Optional[Decimal] = Field(None, description="Loading meters")
    weight: Optional[Decimal] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "number": self.number,
            "package_count": decimal_to_number(self.package_count),
            "package_type": self.package_type,
            "ldm": decimal_to_number(self.ldm),
            "weight": decimal_to_number(self.weight),
        }


class ContainerInfo(BaseSchema):
    """Sea container metadata mentioned anywhere in the document."""

    container_number: Optional[str] = Field(None, description="ISO 6346 number, e.g. MSCU1234567")
    container_type: Optional[str] = None
    booking_reference: Optional[str] = None
    shipping_line: Optional[str] = None

    @property
    def has_data(self) -> bool:
        """True if any field carries a non-empty value."""
        return any(value for value in self.model_dump().values())


# ===================
# CUSTOMER
# ===================

class CustomerDetails(BaseSchema):
    """Counterparty details found through labelled lines."""

    company: Optional[str] = None
    company_code: Optional[str] = None
    vat_code: Optional[str] = None
    email: Optional[str] = None
    contact_person: Optional[str] = None
    street_address: Optional[str] = None
    title: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    comment: Optional[str] = None

    def to_dict(self) -> dict:
        """Only fields that were found."""
        return self.model_dump(exclude_none=True)


class Customer(BaseSchema):
    side: str = "none"
    details: CustomerDetails = Field(default_factory=CustomerDetails)

    def to_dict(self) -> dict:
        return {"side": self.side, "details": self.details.to_dict()}


# ===================
# ORDER RECORD
# ===================

class OrderRecord(BaseSchema):
    """
    Assembled transport order from one task sheet.

    Nullable fields stay None when their label is missing. Use to_dict()
    for the output map handed to order creation.
    """

    customer: Customer = Field(default_factory=Customer)
    attachment_filenames: list[str] = Field(default_factory=list)
    loading_locations: list[LocationEntry] = Field(default_factory=list)
    destination_locations: list[LocationEntry] = Field(default_factory=list)
    cargos: list[CargoItem] = Field(default_factory=list)
    order_reference: Optional[str] = None
    transport_numbers: str = ""
    freight_price: Optional[Decimal] = None
    freight_currency: Optional[str] = None
    incoterms: str = Field("", description="Comma-joined incoterm codes")
    container: ContainerInfo = Field(default_factory=ContainerInfo)

    def to_dict(self) -> dict:
        """Convert to output map, omitting empty optional groups."""
        data = {
            "customer": self.customer.to_dict(),
            "attachment_filenames": list(self.attachment_filenames),
            "loading_locations": [loc.to_dict() for loc in self.loading_locations],
            "destination_locations": [loc.to_dict() for loc in self.destination_locations],
            "cargos": [cargo.to_dict() for cargo in self.cargos],
            "order_reference": self.order_reference,
            "transport_numbers": self.transport_numbers,
            "freight_price": decimal_to_number(self.freight_price),
            "freight_currency": self.freight_currency,
        }

        if self.incoterms:
            data["incoterms"] = self.incoterms

        if self.container.has_data:
            data["container"] = self.container.model_dump()

        return data
