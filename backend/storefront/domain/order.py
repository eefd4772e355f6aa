"""
Order Domain Models

Represents order-related entities of the storefront.
These are the single source of truth for order data structure.

Author: Uday
Date: 2025-10-28
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal


class OrderStatus(str, Enum):
    """Lifecycle of an order; new orders start as pending"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def badge_variant(self) -> str:
        """UI badge style for the status"""
        if self is OrderStatus.PENDING:
            return "secondary"
        if self is OrderStatus.CANCELLED:
            return "destructive"
        return "default"


class ShippingAddress(BaseModel):
    """
    Shipping address captured at checkout

    Fields:
        address_line1: Street address (required)
        address_line2: Apartment, suite, etc. (optional)
        city, state, postal_code, country: required
    """

    address_line1: str = Field(..., description="Street address")
    address_line2: str = Field("", description="Apartment, suite, etc.")
    city: str = Field(..., description="City")
    state: str = Field(..., description="State")
    postal_code: str = Field(..., description="Postal code")
    country: str = Field(..., description="Country")

    @field_validator("address_line1", "city", "state", "postal_code", "country")
    @classmethod
    def required_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("address_line2")
    @classmethod
    def strip_optional(cls, value: Optional[str]) -> str:
        return (value or "").strip()

    def to_order_columns(self) -> dict:
        """Column names used by the orders table"""
        return {
            'shipping_address_line1': self.address_line1,
            'shipping_address_line2': self.address_line2,
            'shipping_city': self.city,
            'shipping_state': self.state,
            'shipping_postal_code': self.postal_code,
            'shipping_country': self.country,
        }

    def to_profile_columns(self) -> dict:
        """Column names used by the profiles table"""
        return {
            'address_line1': self.address_line1,
            'address_line2': self.address_line2,
            'city': self.city,
            'state': self.state,
            'postal_code': self.postal_code,
            'country': self.country,
        }


class OrderItem(BaseModel):
    """
    Order Item domain model - snapshot of a cart line at order time

    product_name and product_price are copied so later catalog edits
    do not rewrite order history.
    """

    id: Optional[str] = Field(None, description="Order item ID")
    order_id: Optional[str] = Field(None, description="Parent order ID")
    product_id: Optional[str] = Field(None, description="Product ID")
    product_name: str = Field(..., description="Product name at order time")
    product_price: Decimal = Field(..., description="Unit price at order time", ge=0)
    quantity: int = Field(..., description="Quantity ordered", ge=1)

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @property
    def line_total(self) -> Decimal:
        return self.product_price * self.quantity

    def to_dict(self) -> dict:
        data = self.model_dump()
        data['product_price'] = float(self.product_price)
        data['line_total'] = float(self.line_total)
        return data


class Order(BaseModel):
    """
    Order domain model - a snapshot of cart contents plus shipping address

    Fields:
        id: Order ID (uuid)
        user_id: Owner
        status: OrderStatus
        total_amount: Amount charged (subtotal + shipping)
        shipping_*: Address columns
        created_at: When the order was placed
        order_items: Line items (present when selected with the order)
    """

    id: str = Field(..., description="Order ID")
    user_id: Optional[str] = Field(None, description="Owner user ID")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    total_amount: Decimal = Field(..., description="Order total", ge=0)

    shipping_address_line1: Optional[str] = None
    shipping_address_line2: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_state: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    shipping_country: Optional[str] = None

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    order_items: List[OrderItem] = Field(default_factory=list, description="Line items")

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @property
    def short_id(self) -> str:
        """Order number shown to customers"""
        return self.id[:8]

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.order_items)

    def to_dict(self) -> dict:
        """Convert to dictionary with computed fields and Decimal to float"""
        data = self.model_dump(exclude={'order_items'})
        data['status'] = self.status.value
        data['status_label'] = self.status.label
        data['status_variant'] = self.status.badge_variant
        data['total_amount'] = float(self.total_amount)
        data['short_id'] = self.short_id
        data['item_count'] = self.item_count
        data['order_items'] = [item.to_dict() for item in self.order_items]
        return data
