"""Pydantic models for the Finance Tracker.

This module defines the request and response bodies shared by the services and
the API: the transaction creation request, the serialized transaction and
category views, and the derived balance.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    OUTCOME = "outcome"


class TransactionCreate(BaseModel):
    """Pydantic model for a request to create one transaction.

    An empty ``category`` means the transaction is stored without a category.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    type: TransactionType
    value: Decimal = Field(ge=0, decimal_places=2)
    category: str = ""


class CategoryOut(BaseModel):
    """Pydantic model representing a persisted category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class TransactionOut(BaseModel):
    """Pydantic model representing a persisted transaction."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    type: TransactionType
    value: Money
    category: CategoryOut | None = None
    created_at: datetime | None = None


class Balance(BaseModel):
    """Income and outcome sums over all persisted transactions, and their difference."""

    income: Money = Decimal(0)
    outcome: Money = Decimal(0)
    total: Money = Decimal(0)


class TransactionList(BaseModel):
    """Pydantic model for the transaction listing with the current balance."""

    transactions: list[TransactionOut]
    balance: Balance
