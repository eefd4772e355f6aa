"""
Profile API Endpoints
The shopper's profile and saved shipping address
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from supabase import Client

from storefront.core.auth import TokenUser, get_current_user
from storefront.core.database import get_supabase
from storefront.domain.order import ShippingAddress
from storefront.domain.profile import empty_address_prefill
from storefront.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def get_profile(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        profile = ProfileRepository(sb).find_by_id(user.id)

        return {
            "status": "success",
            "data": {
                "id": user.id,
                "email": user.email,
                "full_name": profile.full_name if profile else None,
                "address": profile.address_prefill() if profile else empty_address_prefill(),
            }
        }

    except Exception as e:
        logger.error(f"Error loading profile: {e}")
        raise HTTPException(status_code=500, detail="Failed to load profile")


@router.put("/address")
async def update_address(
    address: ShippingAddress,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        ProfileRepository(sb).update_address(user.id, address)

        return {
            "status": "success",
            "message": "Address saved",
            "data": address.model_dump()
        }

    except Exception as e:
        logger.error(f"Error saving address: {e}")
        raise HTTPException(status_code=500, detail="Failed to save address")
