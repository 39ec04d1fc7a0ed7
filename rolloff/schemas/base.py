"""
Base Schema Classes for Pydantic Models

RULE: Records that describe something already charged (snapshots, line items,
results) MUST inherit from FrozenSchema so they cannot be edited after the fact.
"""

from decimal import Decimal
from pydantic import BaseModel, ConfigDict


class InputSchema(BaseModel):
    """
    Base class for records handed to the core by a caller (pricing rules,
    service areas read from the database).

    Accepts ORM objects via from_attributes and ignores unknown columns.
    """
    model_config = ConfigDict(
        from_attributes=True,
        extra='ignore',
        frozen=True,
    )


class FrozenSchema(BaseModel):
    """
    Base class for computed, immutable output records.

    Decimal values serialize as strings in JSON so tonnages and rates
    round-trip without float drift.
    """
    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
        json_encoders={
            Decimal: str,
        },
        populate_by_name=True,
    )
