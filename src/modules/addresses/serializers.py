from __future__ import annotations

from rest_framework import serializers


class AddressSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    street = serializers.CharField(read_only=True)
    postal_code = serializers.CharField(read_only=True)
    city = serializers.CharField(read_only=True)
    country = serializers.CharField(read_only=True)
