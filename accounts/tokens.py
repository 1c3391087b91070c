"""
Signed admin tokens.

Every token check in the project (edge middleware, DRF authentication,
analytics admin exclusion) goes through verify_token, which checks both the
signature and the expiry.
"""
import logging

from django.contrib.auth import authenticate
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


def check_credentials(username, password):
    """
    Verify a username/password pair.

    Returns {"id", "username"} for an active user, None otherwise.
    """
    if not username or not password:
        return None
    user = authenticate(username=username, password=password)
    if user is None or not user.is_active:
        return None
    return {'id': user.pk, 'username': user.get_username()}


def generate_token(identity):
    """Issue a signed access token (ACCESS_TOKEN_LIFETIME, 7 days) for an identity dict."""
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = identity['id']
    token['username'] = identity['username']
    return str(token)


def verify_token(raw_token):
    """Return the token payload if the token is well signed and unexpired, else None."""
    if not raw_token:
        return None
    try:
        return AccessToken(raw_token).payload
    except TokenError as e:
        logger.debug(f"Rejected admin token: {e}")
        return None
