"""
Auth Service
Sign-up, sign-in, token refresh and sign-out, delegated to Supabase Auth
"""
import logging
from typing import Callable, Dict, Optional
from supabase import AuthError, Client

from storefront.core.database import get_auth_client, get_supabase
from storefront.domain.errors import StorefrontError

logger = logging.getLogger(__name__)


class AuthenticationError(StorefrontError):
    message = "Invalid email or password"


def session_payload(response) -> Dict:
    """Flatten a Supabase AuthResponse into the JSON the UI stores"""
    session = response.session
    user = response.user

    data = {
        'user': {
            'id': user.id,
            'email': user.email,
        } if user else None,
        'session': None,
    }
    if session:
        data['session'] = {
            'access_token': session.access_token,
            'refresh_token': session.refresh_token,
            'expires_in': session.expires_in,
            'token_type': session.token_type,
        }
    return data


class AuthService:
    """
    Thin wrapper over supabase.auth

    Each sign-in/sign-up runs on a fresh anon client so the shared
    service-role client never picks up a user session.
    """

    def __init__(
        self,
        client_factory: Callable[[], Client] = get_auth_client,
        admin_client: Optional[Client] = None,
    ):
        self.client_factory = client_factory
        self.admin_client = admin_client

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Dict:
        options = {"data": {"full_name": full_name}} if full_name else {}
        try:
            response = self.client_factory().auth.sign_up({
                "email": email,
                "password": password,
                "options": options,
            })
        except AuthError as e:
            logger.warning(f"Sign-up failed for {email}: {e}")
            raise AuthenticationError(str(e))

        logger.info("Signed up %s", email)
        return session_payload(response)

    def sign_in(self, email: str, password: str) -> Dict:
        try:
            response = self.client_factory().auth.sign_in_with_password({
                "email": email,
                "password": password,
            })
        except AuthError as e:
            logger.info(f"Sign-in failed for {email}: {e}")
            raise AuthenticationError()

        return session_payload(response)

    def refresh(self, refresh_token: str) -> Dict:
        try:
            response = self.client_factory().auth.refresh_session(refresh_token)
        except AuthError as e:
            logger.info(f"Token refresh failed: {e}")
            raise AuthenticationError("Session expired, please sign in again")

        return session_payload(response)

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token"""
        admin_client = self.admin_client or get_supabase()
        admin_client.auth.admin.sign_out(access_token)
