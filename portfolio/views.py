"""
Views for portfolio content collections, page sections and uploads.
"""
import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import transaction
from django.db.models import Max
from django.utils.cache import add_never_cache_headers
from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, parser_classes
from rest_framework.exceptions import NotFound
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from portfolio_backend.views import SingletonSettingsView
from .models import (
    Experience,
    HeroContent, AboutContent, FooterContent, NavigationSettings, SeoSettings,
)
from .serializers import (
    ProjectSerializer, ExperienceSerializer, SkillSerializer, ToolSerializer, SoftSkillSerializer,
    ReorderSerializer,
    HeroContentSerializer, AboutContentSerializer, FooterContentSerializer,
    NavigationSettingsSerializer, SeoSettingsSerializer,
)

logger = logging.getLogger(__name__)

UUID_REGEX = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class ContentViewSet(viewsets.ModelViewSet):
    """
    Base ViewSet for ordered content collections.

    list:    GET    /api/<resource>          - public, never cached
    retrieve GET    /api/<resource>/{id}     - public
    create:  POST   /api/<resource>          - admin
    update:  PUT    /api/<resource>/{id}     - admin, partial merge
    destroy: DELETE /api/<resource>/{id}     - admin

    Subclasses set:
      collection_key / item_key - response envelope keys
      label                     - used in messages ("Project not found")
      order_scope               - field whose value groups siblings when
                                  computing the next `order`, or None
      filter_fields             - query params applied as exact filters
    """
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_REGEX
    collection_key = None
    item_key = None
    label = None
    order_scope = None
    filter_fields = ()

    def get_queryset(self):
        queryset = self.serializer_class.Meta.model.objects.all()
        for field in self.filter_fields:
            value = self.request.query_params.get(field)
            if value:
                queryset = queryset.filter(**{field: value})
        return queryset

    def get_object(self):
        try:
            return self.serializer_class.Meta.model.objects.get(pk=self.kwargs[self.lookup_field])
        except self.serializer_class.Meta.model.DoesNotExist:
            raise NotFound(f"{self.label} not found")

    def next_order(self, validated_data):
        """One past the highest `order` among siblings (same scope value)."""
        model = self.serializer_class.Meta.model
        siblings = model.objects.all()
        if self.order_scope:
            scope_value = validated_data.get(
                self.order_scope, model._meta.get_field(self.order_scope).get_default()
            )
            siblings = siblings.filter(**{self.order_scope: scope_value})
        highest = siblings.aggregate(highest=Max('order'))['highest']
        return (highest or 0) + 1

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        response = Response({self.collection_key: serializer.data})
        add_never_cache_headers(response)
        response['Pragma'] = 'no-cache'
        return response

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return Response({self.item_key: serializer.data})

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = serializer.validated_data.get('order') or self.next_order(serializer.validated_data)
        instance = serializer.save(order=order)
        logger.info(f"{self.label} {instance.pk} created")
        return Response({
            'success': True,
            'message': f"{self.label} created successfully",
            self.item_key: self.get_serializer(instance).data,
        }, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        logger.info(f"{self.label} {instance.pk} updated")
        return Response({
            'success': True,
            'message': f"{self.label} updated successfully",
            self.item_key: self.get_serializer(instance).data,
        })

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        instance.delete()
        logger.info(f"{self.label} {pk} deleted")
        return Response({'success': True, 'message': f"{self.label} deleted successfully"})


class ProjectViewSet(ContentViewSet):
    serializer_class = ProjectSerializer
    collection_key = 'projects'
    item_key = 'project'
    label = 'Project'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.query_params.get('featured') == 'true':
            queryset = queryset.filter(featured=True)
        return queryset


class ExperienceViewSet(ContentViewSet):
    serializer_class = ExperienceSerializer
    collection_key = 'experiences'
    item_key = 'experience'
    label = 'Experience'
    order_scope = 'type'
    filter_fields = ('type',)

    @action(detail=False, methods=['put'])
    def reorder(self, request):
        """
        Apply a batch of order changes atomically.

        PUT /api/experiences/reorder
        Body: { "experiences": [{ "id": "...", "order": 1 }, ...] }

        Any unknown id aborts the whole batch with 404.
        """
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        items = serializer.validated_data['experiences']

        with transaction.atomic():
            for item in items:
                updated = Experience.objects.filter(pk=item['id']).update(order=item['order'])
                if not updated:
                    raise NotFound('Experience not found')

        logger.info(f"Reordered {len(items)} experiences")
        return Response({'success': True, 'message': 'Experiences reordered successfully'})


class SkillViewSet(ContentViewSet):
    serializer_class = SkillSerializer
    collection_key = 'skills'
    item_key = 'skill'
    label = 'Skill'
    order_scope = 'type'
    filter_fields = ('type', 'category')


class ToolViewSet(ContentViewSet):
    serializer_class = ToolSerializer
    collection_key = 'tools'
    item_key = 'tool'
    label = 'Tool'
    order_scope = 'category'
    filter_fields = ('category',)


class SoftSkillViewSet(ContentViewSet):
    serializer_class = SoftSkillSerializer
    collection_key = 'softSkills'
    item_key = 'softSkill'
    label = 'Soft skill'
    order_scope = 'category'
    filter_fields = ('category',)


class HeroContentView(SingletonSettingsView):
    model = HeroContent
    serializer_class = HeroContentSerializer


class AboutContentView(SingletonSettingsView):
    model = AboutContent
    serializer_class = AboutContentSerializer


class FooterContentView(SingletonSettingsView):
    model = FooterContent
    serializer_class = FooterContentSerializer


class NavigationSettingsView(SingletonSettingsView):
    model = NavigationSettings
    serializer_class = NavigationSettingsSerializer


class SeoSettingsView(SingletonSettingsView):
    model = SeoSettings
    serializer_class = SeoSettingsSerializer


@api_view(['POST'])
@parser_classes([MultiPartParser, FormParser])
def upload(request):
    """
    Store an image for use in content (project screenshots, profile image).

    POST /api/upload  (multipart, field "file")
    Returns: { "success": true, "url": "/media/uploads/<uuid>.<ext>" }
    """
    upload_file = request.FILES.get('file')
    if upload_file is None:
        return Response({'error': 'No file provided'}, status=status.HTTP_400_BAD_REQUEST)

    extension = os.path.splitext(upload_file.name)[1].lower()
    if extension not in settings.UPLOAD_ALLOWED_EXTENSIONS:
        return Response({'error': 'Invalid file type'}, status=status.HTTP_400_BAD_REQUEST)

    if upload_file.size > settings.UPLOAD_MAX_BYTES:
        return Response({'error': 'File too large'}, status=status.HTTP_400_BAD_REQUEST)

    name = default_storage.save(f"uploads/{uuid.uuid4().hex}{extension}", upload_file)
    logger.info(f"Stored upload {name} ({upload_file.size} bytes)")
    return Response({'success': True, 'url': default_storage.url(name)})
