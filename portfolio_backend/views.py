"""
Project-level views (health check, singleton settings base view).
"""
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


@require_GET
def health_check(request):
    """
    Liveness check for load balancers and monitoring.
    GET /api/health - returns 200 if the app is running.
    No authentication required.
    """
    return JsonResponse({"status": "ok", "service": "portfolio-backend"})


class SingletonSettingsView(APIView):
    """
    GET returns the stored object (or defaults), PUT merges a partial update.

    Subclasses set `model` (a SingletonModel) and `serializer_class`.
    """
    model = None
    serializer_class = None
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        return Response(self.serializer_class(self.model.load()).data)

    def put(self, request):
        serializer = self.serializer_class(self.model.load(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = self.model.upsert(serializer.validated_data)
        logger.info(f"{self.model.__name__} updated by {request.user}")
        return Response(self.serializer_class(instance).data)
