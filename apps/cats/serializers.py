"""
apps.cats.serializers
~~~~~~~~~~~~~~~~~~~~~
I/O-only serializers for the cats API.
Presence validation is left to :mod:`apps.cats.services` so the API and the
HTML views report the same messages.
"""
from rest_framework import serializers

from .models import Cat


class CatSerializer(serializers.ModelSerializer):
    """Read serializer for a full Cat object."""

    class Meta:
        model = Cat
        fields = ["id", "name", "breed", "created_at", "updated_at"]
        read_only_fields = fields


class CatFieldsSerializer(serializers.Serializer):
    """
    The allow-listed fields; any other key in the payload is ignored.

    Length and presence are checked by the services so both controllers
    answer with the same 422 messages.
    """

    name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    breed = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class CatWriteSerializer(serializers.Serializer):
    """Validates POST / PATCH / PUT request bodies shaped ``{"cat": {...}}``."""

    cat = CatFieldsSerializer(required=False)


class ViolationResponseSerializer(serializers.Serializer):
    """Response shape for a 422 validation failure."""

    code = serializers.CharField()
    detail = serializers.CharField()
    errors = serializers.ListField(child=serializers.CharField())
