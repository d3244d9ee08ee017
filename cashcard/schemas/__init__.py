"""Pydantic schemas used across the project."""
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Monetary values travel as JSON numbers, not strings.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CashCardCreate(BaseModel):
    """Request body for creating a cash card; a client supplied id is ignored."""

    model_config = ConfigDict(extra="ignore")

    amount: Amount


class CashCardResponse(BaseModel):
    id: Optional[int] = None
    amount: Amount

    model_config = ConfigDict(from_attributes=True)
