"""
Custom middleware for portfolio_backend.
"""
import logging

from django.conf import settings
from django.http import JsonResponse
from django.middleware.common import CommonMiddleware

logger = logging.getLogger(__name__)


class APICommonMiddleware(CommonMiddleware):
    """
    Custom CommonMiddleware that disables APPEND_SLASH for API routes.
    This prevents redirect issues with POST requests to API endpoints.
    """
    def should_redirect_with_slash(self, request):
        # Skip APPEND_SLASH for all /api/ routes
        if request.path.startswith('/api/'):
            return False
        return super().should_redirect_with_slash(request)


class AdminTokenMiddleware:
    """
    Rejects requests to admin-only path prefixes unless the admin cookie
    carries a token that passes signature and expiry verification.

    Runs before any view, so protected routes answer 401 even when they do
    not exist. Finer-grained checks (e.g. writes to content collections) are
    left to DRF permissions.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(tuple(settings.ADMIN_PROTECTED_PREFIXES)):
            from accounts.tokens import verify_token

            if verify_token(request.COOKIES.get(settings.AUTH_COOKIE_NAME)) is None:
                logger.info(f"Rejected unauthenticated request to {request.path}")
                return JsonResponse({'error': 'Authentication required'}, status=401)
        return self.get_response(request)
