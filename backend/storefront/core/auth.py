"""
Authentication for the Storefront API
Validates Supabase access tokens and provides user context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel

from storefront.core.config import settings


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """User data extracted from a Supabase JWT"""
    id: str
    email: Optional[str] = None
    role: str = "authenticated"


class AuthConfig:
    """Authentication configuration"""

    @staticmethod
    def get_jwt_secret() -> str:
        """Get the project JWT secret from settings"""
        secret = settings.SUPABASE_JWT_SECRET
        if not secret:
            raise ValueError("SUPABASE_JWT_SECRET is not set")
        return secret

    @staticmethod
    def get_jwt_algorithm() -> str:
        """JWT algorithm used by Supabase Auth for access tokens"""
        return "HS256"


def decode_supabase_token(token: str) -> dict:
    """
    Decode and validate a Supabase access token.

    Supabase access token structure:
    {
        "sub": "<user uuid>",
        "email": "user@example.com",
        "role": "authenticated",
        "aud": "authenticated",
        "iat": 1234567890,
        "exp": 1234567890,
        "session_id": "..."
    }
    """
    try:
        return jwt.decode(
            token,
            AuthConfig.get_jwt_secret(),
            algorithms=[AuthConfig.get_jwt_algorithm()],
            audience=settings.SUPABASE_JWT_AUDIENCE,
        )
    except JWTError as e:
        error_msg = str(e).lower()
        if "expired" in error_msg:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"}
            )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"}
        )


def user_from_token(token: str) -> TokenUser:
    """Build a TokenUser from a raw access token, raising 401 when unusable"""
    payload = decode_supabase_token(token)

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing user id",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return TokenUser(
        id=user_id,
        email=payload.get("email"),
        role=payload.get("role", "authenticated")
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenUser:
    """
    Dependency that extracts and validates the current user from JWT.

    Usage:
        @router.get("/cart")
        async def cart(user: TokenUser = Depends(get_current_user)):
            ...
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return user_from_token(credentials.credentials)


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[TokenUser]:
    """
    Optional authentication - returns None if no valid token provided.

    Usage:
        @router.post("/cart/items")
        async def add(user: Optional[TokenUser] = Depends(get_current_user_optional)):
            if not user:
                raise HTTPException(401, "Please sign in to add items to cart")
    """
    if not credentials:
        return None

    try:
        return user_from_token(credentials.credentials)
    except HTTPException:
        return None
