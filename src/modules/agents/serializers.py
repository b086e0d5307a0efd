"""Agent DRF serializers for API output and request schemas.

Serializers render ``AgentRecord`` instances; request bodies are parsed
into DTOs by the views and validated on the record by the Service Layer.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers


@extend_schema_field(OpenApiTypes.INT)
class AgentReferenceField(serializers.Field):
    """An agent relationship on the wire: the agent's integer id."""

    default_error_messages = {"invalid": "A valid agent id is required."}

    def to_representation(self, value):
        return value.id

    def to_internal_value(self, data):
        try:
            return int(data)
        except (TypeError, ValueError):
            self.fail("invalid")


class AgentSerializer(serializers.Serializer):
    """Read/write view of the Agent resource."""

    id = serializers.IntegerField(read_only=True)
    given_name = serializers.CharField(help_text="Given name of the agent")
    family_name = serializers.CharField(
        required=False, allow_null=True, help_text="Family name of the agent"
    )
    company = serializers.CharField(
        required=False, allow_null=True, help_text="Company of the agent"
    )
    deleted = serializers.BooleanField(source="is_deleted", read_only=True)
    reference_number = serializers.CharField(
        max_length=36, help_text="External agent number (unique)"
    )
    customers = serializers.SerializerMethodField()

    @extend_schema_field(serializers.ListField(child=serializers.UUIDField()))
    def get_customers(self, agent) -> list[str]:
        return sorted(str(customer.id) for customer in agent.customers)


class AssignCustomerSerializer(serializers.Serializer):
    customer = serializers.UUIDField(help_text="Id of the customer to assign")
