"""Serializers for artwork requests and responses."""

from rest_framework import serializers

from accounts.handlers.serializers import UserSummarySerializer


class MediumSerializer(serializers.Serializer):
    """Serializer for Medium domain model."""

    uuid = serializers.UUIDField(source="uuid.value")
    name = serializers.CharField()


class ArtworkImageSerializer(serializers.Serializer):
    """Serializer for ArtworkImage domain model."""

    uuid = serializers.UUIDField(source="uuid.value")
    filename = serializers.CharField()
    original_filename = serializers.CharField()
    mime_type = serializers.CharField()
    file_size = serializers.IntegerField()
    description = serializers.CharField(allow_null=True)
    sort_order = serializers.IntegerField()


class ArtworkSerializer(serializers.Serializer):
    """Serializer for Artwork domain model."""

    uuid = serializers.UUIDField(source="uuid.value")
    title = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    width = serializers.CharField(allow_null=True)
    height = serializers.CharField(allow_null=True)
    depth = serializers.CharField(allow_null=True)
    status = serializers.CharField(source="status.value")
    creator = UserSummarySerializer(allow_null=True)
    reviewer = UserSummarySerializer(allow_null=True)
    reviewed_at = serializers.DateTimeField(allow_null=True)
    review_notes = serializers.CharField(allow_null=True)
    artists = UserSummarySerializer(many=True)
    mediums = MediumSerializer(many=True)
    images = ArtworkImageSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ArtworkCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
    width = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    height = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    depth = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    artist_uuids = serializers.ListField(child=serializers.CharField(), allow_empty=True)
    medium_uuids = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class ArtworkUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
    width = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    height = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    depth = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)


class ArtworkReviewSerializer(serializers.Serializer):
    status = serializers.CharField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ArtworkImageUpdateSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    sort_order = serializers.IntegerField(required=False)


class MediumCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, allow_blank=True)
