from __future__ import annotations

from rest_framework import serializers


class UserAccountSerializer(serializers.Serializer):
    """Linked login as shown on a customer."""

    id = serializers.IntegerField(read_only=True)
    username = serializers.CharField(read_only=True)
