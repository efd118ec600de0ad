"""Serializers for transforming user domain models to API responses."""

from rest_framework import serializers


class UserSummarySerializer(serializers.Serializer):
    """Serializer for the UserSummary domain model."""

    uuid = serializers.UUIDField(source="uuid.value")
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.EmailField()


class UserSerializer(UserSummarySerializer):
    """Serializer for the User domain model."""

    is_admin = serializers.BooleanField()
    created_at = serializers.DateTimeField()
