"""
Cart Domain Models

Cart rows joined with their product, plus the order summary math
(subtotal, shipping threshold, total) shared by cart and checkout.

Author: Uday
Date: 2025-10-28
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal

from storefront.core.config import settings


class CartProduct(BaseModel):
    """Product columns embedded in a cart row"""

    id: str
    name: str
    slug: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    image_url: Optional[str] = None
    stock: int = 0

    model_config = ConfigDict(from_attributes=True, extra="ignore")


class CartItem(BaseModel):
    """A row associating a user, a product and a quantity"""

    id: str = Field(..., description="Cart item ID")
    quantity: int = Field(..., description="Units in cart", ge=1)
    product: CartProduct = Field(..., description="Joined product")

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity

    def to_dict(self) -> dict:
        data = self.model_dump()
        data['product']['price'] = float(self.product.price)
        data['line_total'] = float(self.line_total)
        return data


def shipping_for(subtotal: Decimal) -> Decimal:
    """Flat rate unless the subtotal is strictly above the free-shipping threshold"""
    if subtotal > settings.FREE_SHIPPING_THRESHOLD:
        return Decimal("0")
    return settings.SHIPPING_FLAT_RATE


class CartSummary(BaseModel):
    """Order summary shown next to the cart and on checkout"""

    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    item_count: int
    amount_to_free_shipping: Optional[Decimal] = None

    @classmethod
    def from_items(cls, items: List[CartItem]) -> "CartSummary":
        subtotal = sum((item.line_total for item in items), Decimal("0"))
        shipping = shipping_for(subtotal)

        amount_to_free_shipping = None
        if subtotal < settings.FREE_SHIPPING_THRESHOLD:
            amount_to_free_shipping = settings.FREE_SHIPPING_THRESHOLD - subtotal

        return cls(
            subtotal=subtotal,
            shipping=shipping,
            total=subtotal + shipping,
            item_count=sum(item.quantity for item in items),
            amount_to_free_shipping=amount_to_free_shipping,
        )

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0

    def to_dict(self) -> dict:
        return {
            'subtotal': float(self.subtotal),
            'shipping': float(self.shipping),
            'free_shipping': self.free_shipping,
            'total': float(self.total),
            'item_count': self.item_count,
            'amount_to_free_shipping': (
                float(self.amount_to_free_shipping)
                if self.amount_to_free_shipping is not None else None
            ),
        }
