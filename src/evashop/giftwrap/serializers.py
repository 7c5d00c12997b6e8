"""Request serializers for the gift wrap API."""

from rest_framework import serializers


class ToggleSerializer(serializers.Serializer):
    """POST /gift-wrap/toggle body."""

    enabled = serializers.BooleanField(required=True)
