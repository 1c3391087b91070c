"""
Serializers for admin authentication.
"""
from rest_framework import serializers

from portfolio_backend.camel import CamelCaseSerializerMixin
from .models import User


class UserSerializer(CamelCaseSerializerMixin, serializers.ModelSerializer):
    """Serializer for User model."""

    class Meta:
        model = User
        fields = ('id', 'username', 'is_staff', 'created_at')
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    """Serializer for login requests."""
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, style={'input_type': 'password'}, trim_whitespace=False)
