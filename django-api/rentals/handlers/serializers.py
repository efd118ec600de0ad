"""Serializers for rental requests and responses."""

from rest_framework import serializers

from accounts.handlers.serializers import UserSummarySerializer


class ArtworkSummarySerializer(serializers.Serializer):
    uuid = serializers.UUIDField(source="uuid.value")
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)


class RentalSerializer(serializers.Serializer):
    """Serializer for Rental domain model."""

    uuid = serializers.UUIDField(source="uuid.value")
    status = serializers.CharField(source="status.value")
    address = serializers.CharField()
    phone_number = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    approved_at = serializers.DateTimeField(allow_null=True)
    finalized_at = serializers.DateTimeField(allow_null=True)
    artwork = ArtworkSummarySerializer(allow_null=True)
    user = UserSummarySerializer(allow_null=True)
    approved_by = UserSummarySerializer(source="approver", allow_null=True)
    finalized_by = UserSummarySerializer(source="finalizer", allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class RentalCreateSerializer(serializers.Serializer):
    artwork_uuid = serializers.CharField()
    address = serializers.CharField(max_length=500, allow_blank=True, trim_whitespace=False)
    phone_number = serializers.CharField(max_length=50, allow_blank=True, trim_whitespace=False)
