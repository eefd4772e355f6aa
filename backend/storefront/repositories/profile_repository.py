"""
Profile Repository - Data Access Layer for profiles
"""
from typing import Optional
from supabase import Client

from storefront.domain.order import ShippingAddress
from storefront.domain.profile import Profile
from storefront.core.database import get_supabase


class ProfileRepository:

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    def find_by_id(self, user_id: str) -> Optional[Profile]:
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Profile(**response.data[0])

    def update_address(self, user_id: str, address: ShippingAddress) -> None:
        """Remember the address for the next checkout"""
        (
            self.client.table("profiles")
            .update(address.to_profile_columns())
            .eq("id", user_id)
            .execute()
        )
