"""Pydantic schemas for the Orders API

Request/response models for order endpoints.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.orders.status import OrderStatus, PaymentType


class PaymentRequest(BaseModel):
    """Payment details of an order request.

    ``card_number`` is required when ``payment_type`` is CREDIT_CARD; that
    conditional rule is enforced by the order validation pipeline, not here.
    """
    payment_type: PaymentType = Field(..., description="CREDIT_CARD, UPI or CASH")
    card_number: Optional[str] = Field(
        None,
        pattern=r"^\d{16}$",
        description="Card number must be 16 digits",
        examples=["1234567890123456"]
    )
    upi_id: Optional[str] = Field(None, max_length=100, examples=["user@upi"])


class OrderRequest(BaseModel):
    """Request schema for creating or replacing an order (POST, PUT /orders)"""
    user_id: int = Field(..., description="User placing the order")
    product_name: str = Field(..., min_length=1, max_length=255, examples=["iPhone 15 Pro"])
    amount: float = Field(..., gt=0, description="Must not exceed the user's credit limit")
    start_date: date
    end_date: date
    payment: PaymentRequest

    @field_validator("product_name")
    @classmethod
    def product_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value


class OrderResponse(BaseModel):
    """Response schema for an order"""
    id: int
    user_id: int
    product_name: str
    amount: float
    start_date: date
    end_date: date
    status: OrderStatus
    payment_type: PaymentType
    card_number: Optional[str] = None
    upi_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("card_number")
    @classmethod
    def mask_card_number(cls, value: Optional[str]) -> Optional[str]:
        """Only the last four digits leave the service."""
        if not value:
            return value
        return "*" * (len(value) - 4) + value[-4:]
