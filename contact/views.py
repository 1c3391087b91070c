"""
Contact form endpoint and contact settings.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from portfolio_backend.rate_limit import contact_limiter
from portfolio_backend.utils import get_client_ip
from portfolio_backend.views import SingletonSettingsView
from .emails import EmailConfigurationError, send_auto_reply, send_contact_notification
from .models import ContactSettings
from .serializers import ContactSettingsSerializer, ContactSubmissionSerializer
from .validators import looks_like_spam

logger = logging.getLogger(__name__)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def submit_contact(request):
    """
    Public contact form.

    POST /api/contact
    Body: { "name", "email", "subject", "message" }

    Returns: { "success": true, "message": "...", "remaining": 4 }
    Rate limited per client IP; spam is rejected before any mail is sent.
    """
    limiter = contact_limiter()
    ip = get_client_ip(request)
    result = limiter.hit(ip)
    if not result.allowed:
        return limiter.rejection(result, 'Too many messages. Please try again later.')

    serializer = ContactSubmissionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    submission = serializer.validated_data

    if looks_like_spam(submission['name'], submission['subject'], submission['message']):
        logger.info(f"Rejected contact message from {ip} as spam")
        return Response(
            {'error': 'Your message was flagged as spam. Please remove links or promotional wording.'},
            status=status.HTTP_400_BAD_REQUEST,
        )

    contact_settings = ContactSettings.load()
    try:
        send_contact_notification(contact_settings, submission)
    except EmailConfigurationError as e:
        logger.error(f"Contact form cannot send mail: {str(e)}")
        return Response({'error': contact_settings.error_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception as e:
        logger.error(f"Failed to send contact message: {str(e)}", exc_info=True)
        return Response({'error': contact_settings.error_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    send_auto_reply(contact_settings, submission)

    return Response({
        'success': True,
        'message': contact_settings.success_message,
        'remaining': result.remaining,
    }, status=status.HTTP_200_OK)


class ContactSettingsView(SingletonSettingsView):
    model = ContactSettings
    serializer_class = ContactSettingsSerializer
