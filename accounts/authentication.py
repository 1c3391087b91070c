"""
Cookie-based authentication for admin dashboard requests.
"""
import logging

from django.conf import settings
from rest_framework import exceptions
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

from .tokens import verify_token

logger = logging.getLogger(__name__)


class CookieJWTAuthentication(JWTAuthentication):
    """
    Authenticate requests using the token stored in the admin cookie.

    A missing, expired or tampered cookie leaves the request anonymous, so
    public endpoints keep working; protected endpoints then answer 401.
    The `Authorization: Bearer` header is handled by the stock
    JWTAuthentication listed after this class.
    """

    def authenticate(self, request):
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not raw_token:
            return None

        payload = verify_token(raw_token)
        if payload is None:
            return None

        try:
            user = self.get_user(payload)
        except (InvalidToken, exceptions.AuthenticationFailed) as e:
            logger.warning(f"Admin cookie rejected: {e}")
            return None

        return (user, payload)
