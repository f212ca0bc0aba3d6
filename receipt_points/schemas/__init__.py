"""
Receipt schemas: the JSON contract of the HTTP API and the scoring output.

All models are Pydantic v2. Wire names are camelCase; Python attributes are
snake_case and models accept either form on input.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from receipt_points.parsing import validate_purchase_date, validate_purchase_time


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """One purchased product."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    short_description: str = Field(..., alias="shortDescription")
    price: float


class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    id: Optional[str] = Field(default=None, description="Assigned by the store")
    retailer: str
    purchase_date: str = Field(..., alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(..., alias="purchaseTime", description="HH:MM, 24h")
    items: list[Item] = Field(default_factory=list)
    total: float

    @field_validator("purchase_date")
    @classmethod
    def _check_date(cls, v: str) -> str:
        return validate_purchase_date(v)

    @field_validator("purchase_time")
    @classmethod
    def _check_time(cls, v: str) -> str:
        return validate_purchase_time(v)


# ---------------------------------------------------------------------------
# Scoring output
# ---------------------------------------------------------------------------

class RuleScore(BaseModel):
    """Points contributed by a single scoring rule."""
    rule: str
    points: int = 0


class ScoreBreakdown(BaseModel):
    total: int = 0
    rules: list[RuleScore] = Field(default_factory=list)
    errors: list[str] = Field(
        default_factory=list,
        description="Diagnostics from rules that could not be evaluated",
    )
