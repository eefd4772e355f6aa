"""
Profile Domain Model

A shopper's profile row. The storefront only uses it to remember
the last shipping address.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional

from storefront.core.config import settings
from storefront.domain.order import ShippingAddress


class Profile(BaseModel):
    id: str
    full_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    def address_prefill(self) -> dict:
        """Checkout form values; blanks stay blank, country falls back to the default"""
        return {
            'address_line1': self.address_line1 or "",
            'address_line2': self.address_line2 or "",
            'city': self.city or "",
            'state': self.state or "",
            'postal_code': self.postal_code or "",
            'country': self.country or settings.DEFAULT_COUNTRY,
        }

    def shipping_address(self) -> Optional[ShippingAddress]:
        """Saved address as a ShippingAddress, or None when incomplete"""
        try:
            return ShippingAddress(**self.address_prefill())
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return self.model_dump()


def empty_address_prefill() -> dict:
    """Checkout form values for shoppers without a profile row"""
    return {
        'address_line1': "",
        'address_line2': "",
        'city': "",
        'state': "",
        'postal_code': "",
        'country': settings.DEFAULT_COUNTRY,
    }
