"""
Serializers for the contact form and its settings.
"""
from rest_framework import serializers

from portfolio_backend.camel import CamelCaseSerializerMixin, SafeListField
from .models import ContactSettings
from .validators import validate_name_characters, validate_subject_characters


class ContactSubmissionSerializer(serializers.Serializer):
    name = serializers.CharField(
        min_length=2, max_length=100, validators=[validate_name_characters],
        error_messages={'min_length': 'Name must be at least 2 characters.'},
    )
    email = serializers.EmailField(max_length=254)
    subject = serializers.CharField(
        min_length=5, max_length=200, validators=[validate_subject_characters],
        error_messages={'min_length': 'Subject must be at least 5 characters.'},
    )
    message = serializers.CharField(
        min_length=20, max_length=2000,
        error_messages={'min_length': 'Message must be at least 20 characters.'},
    )


class ContactSettingsSerializer(CamelCaseSerializerMixin, serializers.ModelSerializer):
    cc_emails = SafeListField(child=serializers.EmailField(max_length=254), required=False)

    class Meta:
        model = ContactSettings
        exclude = ('id',)
        read_only_fields = ('updated_at',)
