"""
Authentication API endpoints for the Storefront
- Sign-up / sign-in / refresh / sign-out through Supabase Auth
- Current user
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, EmailStr, Field

from storefront.core.auth import TokenUser, get_current_user, security
from storefront.core.config import settings
from storefront.core.rate_limit import rate_limit
from storefront.services.auth_service import AuthenticationError, AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


# =============================================================================
# Pydantic Models
# =============================================================================

class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SignUp(Credentials):
    password: str = Field(..., min_length=6)
    full_name: Optional[str] = None


class RefreshRequest(BaseModel):
    refresh_token: str


def get_auth_service() -> AuthService:
    return AuthService()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def sign_up(
    body: SignUp,
    service: AuthService = Depends(get_auth_service),
    _: None = Depends(rate_limit(settings.AUTH_RATE_LIMIT)),
):
    """
    Create an account

    session is null when the project requires email confirmation.
    """
    try:
        data = service.sign_up(body.email, body.password, body.full_name)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Error signing up: {e}")
        raise HTTPException(status_code=500, detail="Failed to create account")

    message = "Account created!" if data['session'] else "Check your email to confirm your account"
    return {"status": "success", "message": message, "data": data}


@router.post("/login")
async def sign_in(
    body: Credentials,
    service: AuthService = Depends(get_auth_service),
    _: None = Depends(rate_limit(settings.AUTH_RATE_LIMIT)),
):
    try:
        data = service.sign_in(body.email, body.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"}
        )
    except Exception as e:
        logger.error(f"Error signing in: {e}")
        raise HTTPException(status_code=500, detail="Failed to sign in")

    return {"status": "success", "message": "Welcome back!", "data": data}


@router.post("/refresh")
async def refresh(
    body: RefreshRequest,
    service: AuthService = Depends(get_auth_service),
):
    try:
        data = service.refresh(body.refresh_token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"}
        )
    except Exception as e:
        logger.error(f"Error refreshing session: {e}")
        raise HTTPException(status_code=500, detail="Failed to refresh session")

    return {"status": "success", "data": data}


@router.post("/logout")
async def sign_out(
    user: TokenUser = Depends(get_current_user),
    credentials: HTTPAuthorizationCredentials = Depends(security),
    service: AuthService = Depends(get_auth_service),
):
    try:
        service.sign_out(credentials.credentials)
    except Exception as e:
        logger.error(f"Error signing out user {user.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to sign out")

    return {"status": "success", "message": "Signed out"}


@router.get("/me", response_model=TokenUser)
async def get_me(user: TokenUser = Depends(get_current_user)):
    """Current user from the access token"""
    return user
