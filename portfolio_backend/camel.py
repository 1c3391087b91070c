"""
camelCase <-> snake_case conversion for API payloads.

Models and serializers use snake_case; the public JSON API uses camelCase.
Only top-level keys are converted. Nested JSON values (menu items, custom
events, metadata) are stored exactly as the client sent them.
"""
import logging
import re

from rest_framework import serializers

from .utils import safe_json_list

logger = logging.getLogger(__name__)

_SNAKE_PART = re.compile(r'_([a-z0-9])')
_CAMEL_UPPER = re.compile(r'(?<=[a-z0-9])([A-Z])')
_CAMEL_DIGIT = re.compile(r'(?<=[a-zA-Z])(\d)')


def snake_to_camel(name):
    """cta_button_1 -> ctaButton1"""
    return _SNAKE_PART.sub(lambda m: m.group(1).upper(), name)


def camel_to_snake(name):
    """ctaButton1 -> cta_button_1"""
    name = _CAMEL_DIGIT.sub(r'_\1', name)
    return _CAMEL_UPPER.sub(r'_\1', name).lower()


def camelize_keys(data):
    return {snake_to_camel(key): value for key, value in data.items()}


class CamelCaseSerializerMixin:
    """
    Serializer mixin exposing snake_case fields under camelCase keys.
    """

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = {camel_to_snake(key): value for key, value in data.items()}
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError as exc:
            if isinstance(exc.detail, dict):
                raise serializers.ValidationError(camelize_keys(exc.detail))
            raise

    def to_representation(self, instance):
        return camelize_keys(super().to_representation(instance))


class SafeListField(serializers.ListField):
    """
    ListField that tolerates malformed stored values.

    Rows edited outside the API (e.g. a JSON string pasted into the admin
    dashboard) are coerced with safe_json_list instead of raising on read,
    and items the child cannot represent are dropped.
    """

    def to_representation(self, data):
        items = []
        for item in safe_json_list(data):
            try:
                items.append(self.child.to_representation(item))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning(f"Skipping malformed {self.field_name} item: {item!r}")
        return items


def validate_list_items(item_serializer_class, items):
    """
    Re-validate nested list items as a complete payload.

    A partial update relaxes required fields all the way down, but each item
    replaces the stored one wholesale, so it must be complete on its own.
    """
    serializer = item_serializer_class(data=list(items), many=True)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data
