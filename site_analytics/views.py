"""
Analytics ingestion, dashboard stats and settings.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.tokens import verify_token
from portfolio_backend.utils import get_client_ip, hash_ip
from portfolio_backend.views import SingletonSettingsView
from .models import AnalyticsEvent, AnalyticsSettings
from .serializers import AnalyticsSettingsSerializer, TrackEventSerializer
from .stats import build_stats, parse_period

logger = logging.getLogger(__name__)

COUNTRY_HEADERS = ('HTTP_CF_IPCOUNTRY', 'HTTP_X_VERCEL_IP_COUNTRY', 'HTTP_X_COUNTRY_CODE')


def _country_from_headers(request):
    for header in COUNTRY_HEADERS:
        value = request.META.get(header, '').strip()
        if value:
            return value[:64]
    return None


def _not_tracked(message):
    return Response({'success': False, 'message': message}, status=status.HTTP_200_OK)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def track_event(request):
    """
    Record one analytics event from the public site.

    POST /api/analytics/track
    Body: { "eventType": "page_view", "page": "/", "projectId": "...", ... }

    Best effort: always answers 200 with { "success": bool }, so a tracking
    problem never surfaces in the visitor's browser.
    """
    try:
        serializer = TrackEventSerializer(data=request.data)
        if not serializer.is_valid():
            return _not_tracked('Invalid event payload')
        data = serializer.validated_data

        analytics_settings = AnalyticsSettings.load()
        if not analytics_settings.tracks(data['event_type']):
            return _not_tracked('Event type not tracked')

        if analytics_settings.exclude_admin_views and verify_token(request.COOKIES.get(settings.AUTH_COOKIE_NAME)):
            return _not_tracked('Admin views are excluded')

        AnalyticsEvent.objects.create(
            event_type=data['event_type'],
            event_name=data.get('event_name') or None,
            page=data.get('page') or None,
            project_id=data.get('project_id') or None,
            session_id=data.get('session_id') or None,
            metadata=data.get('metadata'),
            referrer=data.get('referrer') or request.META.get('HTTP_REFERER') or None,
            user_agent=request.META.get('HTTP_USER_AGENT') or None,
            ip_address=hash_ip(get_client_ip(request)),
            country=_country_from_headers(request),
        )
        return Response({'success': True}, status=status.HTTP_200_OK)
    except Exception as e:
        logger.error(f"Failed to record analytics event: {str(e)}", exc_info=True)
        return _not_tracked('Failed to track event')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def analytics_stats(request):
    """
    Aggregated analytics for the admin dashboard.

    GET /api/analytics/stats?period=30
    period is a number of days (default 30).
    """
    period = parse_period(request.query_params.get('period'))
    return Response(build_stats(period))


class AnalyticsSettingsView(SingletonSettingsView):
    model = AnalyticsSettings
    serializer_class = AnalyticsSettingsSerializer
