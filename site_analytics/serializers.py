"""
Serializers for analytics settings and tracked events.
"""
from rest_framework import serializers

from portfolio_backend.camel import CamelCaseSerializerMixin, SafeListField, validate_list_items
from .models import AnalyticsEvent, AnalyticsSettings


class CustomEventSerializer(CamelCaseSerializerMixin, serializers.Serializer):
    """A custom event definition, stored with its camelCase keys."""
    EVENT_TRIGGERS = ('click', 'submit', 'scroll', 'timer')

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    selector = serializers.CharField(max_length=500)
    event_type = serializers.ChoiceField(choices=EVENT_TRIGGERS, source='eventType')


class AnalyticsSettingsSerializer(CamelCaseSerializerMixin, serializers.ModelSerializer):
    custom_events = SafeListField(child=CustomEventSerializer(), required=False)

    class Meta:
        model = AnalyticsSettings
        exclude = ('id',)
        read_only_fields = ('updated_at',)

    def validate_custom_events(self, value):
        return validate_list_items(CustomEventSerializer, value)


class TrackEventSerializer(CamelCaseSerializerMixin, serializers.Serializer):
    event_type = serializers.ChoiceField(choices=AnalyticsEvent.EVENT_TYPE_CHOICES)
    event_name = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    page = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    project_id = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    session_id = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    referrer = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    metadata = serializers.DictField(required=False, allow_null=True)
