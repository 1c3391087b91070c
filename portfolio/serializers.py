"""
Serializers for portfolio content.
All serializers expose camelCase keys on the wire.
"""
import json
import re

from rest_framework import serializers

from portfolio_backend.camel import CamelCaseSerializerMixin, SafeListField, validate_list_items
from .models import (
    Project, Experience, Skill, Tool, SoftSkill,
    HeroContent, AboutContent, FooterContent, NavigationSettings, SeoSettings,
)

MONTH_PATTERN = r'^\d{4}-\d{2}$'
ANALYTICS_ID_PATTERN = re.compile(r'^(G|UA)-[A-Z0-9-]+$')


def blank_to_none(value):
    return value or None


class ContentSerializer(CamelCaseSerializerMixin, serializers.ModelSerializer):
    """Common read-only bookkeeping fields for collection items."""

    class Meta:
        read_only_fields = ('id', 'created_at', 'updated_at')


class ProjectSerializer(ContentSerializer):
    technologies = SafeListField(child=serializers.CharField(max_length=100), min_length=1)
    github_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    live_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)

    class Meta(ContentSerializer.Meta):
        model = Project
        fields = (
            'id', 'title', 'description', 'image', 'technologies',
            'github_url', 'live_url', 'featured', 'order', 'created_at', 'updated_at',
        )

    def validate_github_url(self, value):
        return blank_to_none(value)

    def validate_live_url(self, value):
        return blank_to_none(value)

    def validate_image(self, value):
        return blank_to_none(value)


class ExperienceSerializer(ContentSerializer):
    start_date = serializers.RegexField(MONTH_PATTERN, max_length=7, error_messages={'invalid': 'Use the YYYY-MM format.'})
    end_date = serializers.RegexField(
        MONTH_PATTERN, max_length=7, required=False, allow_null=True, allow_blank=True,
        error_messages={'invalid': 'Use the YYYY-MM format.'},
    )
    description = SafeListField(child=serializers.CharField(max_length=1000), min_length=1)
    technologies = SafeListField(child=serializers.CharField(max_length=100), required=False)

    class Meta(ContentSerializer.Meta):
        model = Experience
        fields = (
            'id', 'title', 'company', 'location', 'start_date', 'end_date', 'description',
            'technologies', 'type', 'featured', 'order', 'created_at', 'updated_at',
        )

    def validate_end_date(self, value):
        # An empty end date means the position is ongoing
        return blank_to_none(value)


class SkillSerializer(ContentSerializer):
    class Meta(ContentSerializer.Meta):
        model = Skill
        fields = (
            'id', 'name', 'category', 'level', 'icon', 'description', 'type',
            'order', 'created_at', 'updated_at',
        )


class ToolSerializer(ContentSerializer):
    class Meta(ContentSerializer.Meta):
        model = Tool
        fields = ('id', 'name', 'category', 'level', 'icon', 'description', 'order', 'created_at', 'updated_at')


class SoftSkillSerializer(ContentSerializer):
    class Meta(ContentSerializer.Meta):
        model = SoftSkill
        fields = ('id', 'name', 'category', 'level', 'icon', 'description', 'order', 'created_at', 'updated_at')


class ReorderItemSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    order = serializers.IntegerField(min_value=0)


class ReorderSerializer(serializers.Serializer):
    experiences = ReorderItemSerializer(many=True, allow_empty=False)


# Singleton page sections

class SettingsSerializer(CamelCaseSerializerMixin, serializers.ModelSerializer):
    class Meta:
        exclude = ('id',)
        read_only_fields = ('updated_at',)


class HeroContentSerializer(SettingsSerializer):
    class Meta(SettingsSerializer.Meta):
        model = HeroContent


class AboutContentSerializer(SettingsSerializer):
    class Meta(SettingsSerializer.Meta):
        model = AboutContent


class QuickLinkSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)
    href = serializers.CharField(max_length=500)


class FooterContentSerializer(SettingsSerializer):
    quick_links = SafeListField(child=QuickLinkSerializer(), required=False)
    github_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)
    linkedin_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)

    class Meta(SettingsSerializer.Meta):
        model = FooterContent

    def validate_quick_links(self, value):
        return validate_list_items(QuickLinkSerializer, value)

    def validate_github_url(self, value):
        return blank_to_none(value)

    def validate_linkedin_url(self, value):
        return blank_to_none(value)


class MenuItemSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)
    href = serializers.CharField(max_length=500)
    external = serializers.BooleanField(default=False)
    order = serializers.IntegerField(min_value=0, default=0)


class NavigationSettingsSerializer(SettingsSerializer):
    menu_items = SafeListField(child=MenuItemSerializer(), required=False)

    class Meta(SettingsSerializer.Meta):
        model = NavigationSettings

    def validate_menu_items(self, value):
        return validate_list_items(MenuItemSerializer, value)


class SeoSettingsSerializer(SettingsSerializer):
    keywords = SafeListField(child=serializers.CharField(max_length=100), required=False)
    canonical_url = serializers.URLField(max_length=500, required=False, allow_null=True, allow_blank=True)

    class Meta(SettingsSerializer.Meta):
        model = SeoSettings

    def validate_google_analytics_id(self, value):
        if value and not ANALYTICS_ID_PATTERN.match(value):
            raise serializers.ValidationError('Expected a Google Analytics id such as G-XXXXXXX or UA-XXXXXX-X.')
        return blank_to_none(value)

    def validate_structured_data(self, value):
        if value:
            try:
                json.loads(value)
            except ValueError:
                raise serializers.ValidationError('Structured data must be valid JSON.')
        return blank_to_none(value)

    def validate_canonical_url(self, value):
        return blank_to_none(value)
