"""
Authentication views for the admin dashboard.
Handles login, logout, and the current user.

The session is a signed token stored in an http-only cookie; the browser
sends it back automatically and no token is exposed to page scripts.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.settings import api_settings

from portfolio_backend.rate_limit import login_limiter
from portfolio_backend.utils import get_client_ip
from .serializers import LoginSerializer, UserSerializer
from .tokens import check_credentials, generate_token

logger = logging.getLogger(__name__)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """
    Admin login endpoint.

    POST /api/auth/login
    Body: { "username": "admin", "password": "..." }

    Returns: { "success": true, "user": {...} } and sets the admin cookie.
    Rate limited per client IP.
    """
    limiter = login_limiter()
    ip = get_client_ip(request)
    result = limiter.hit(ip)
    if not result.allowed:
        logger.warning(f"Login rate limit hit for {ip}")
        return limiter.rejection(result, 'Too many login attempts. Please try again later.')

    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    identity = check_credentials(
        serializer.validated_data['username'],
        serializer.validated_data['password'],
    )
    if identity is None:
        logger.info(f"Failed login for '{serializer.validated_data['username']}' from {ip}")
        response = Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)
        response['X-RateLimit-Remaining'] = str(result.remaining)
        return response

    response = Response({'success': True, 'user': identity}, status=status.HTTP_200_OK)
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        generate_token(identity),
        max_age=int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite='Lax',
        path='/',
    )
    response['X-RateLimit-Remaining'] = str(result.remaining)
    logger.info(f"Admin '{identity['username']}' logged in")
    return response


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def logout(request):
    """
    Admin logout endpoint.

    POST /api/auth/logout

    Clears the admin cookie. Always succeeds.
    """
    response = Response({'success': True, 'message': 'Logged out successfully'}, status=status.HTTP_200_OK)
    response.delete_cookie(settings.AUTH_COOKIE_NAME, path='/', samesite='Lax')
    return response


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    """
    Get current authenticated admin.

    GET /api/auth/me

    Returns: { "user": {...} }
    """
    return Response({
        'user': UserSerializer(request.user).data
    })
