"""
Base schema for all models.
"""

from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - Auto-trim whitespace from strings
        - Immutable after construction
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True
    )


def decimal_to_number(value: Optional[Decimal]) -> Optional[Union[int, float]]:
    """Render a Decimal as int when integral, float otherwise."""
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)
