"""Customer DRF serializers for API input/output.

Two views of the same ``CustomerRecord``:

- ``CustomerReadSerializer``: what GET/POST/PUT responses contain.
- ``CustomerWriteSerializer``: what POST/PUT requests accept (no ``id``,
  adds company, gender and the agent relationship).

Business logic lives in the Service Layer, which receives Pydantic DTOs
from ``dtos.py``.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from modules.accounts.serializers import UserAccountSerializer
from modules.addresses.serializers import AddressSerializer
from modules.agents.serializers import AgentReferenceField
from modules.customers.models import Gender

DATE_FORMAT = "%Y-%m-%d"


class CustomerReadSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True, help_text="UUID of the customer")
    name = serializers.CharField(help_text="Family name of the customer")
    given_name = serializers.CharField(help_text="Given name of the customer")
    birth_date = serializers.DateField(
        format=DATE_FORMAT, allow_null=True, help_text="Date of birth (YYYY-MM-DD)"
    )
    email = serializers.CharField(allow_null=True, help_text="E-mail of the customer")
    agent_id = serializers.IntegerField(read_only=True)
    addresses = serializers.SerializerMethodField()
    user = UserAccountSerializer(read_only=True, allow_null=True)

    @extend_schema_field(AddressSerializer(many=True))
    def get_addresses(self, customer) -> list[dict]:
        ordered = sorted(customer.addresses, key=lambda address: str(address.id))
        return AddressSerializer(ordered, many=True).data


class CustomerWriteSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="Family name of the customer")
    given_name = serializers.CharField(help_text="Given name of the customer")
    company = serializers.CharField(
        required=False, allow_null=True, help_text="Company of the customer"
    )
    birth_date = serializers.DateField(
        format=DATE_FORMAT, help_text="Date of birth (YYYY-MM-DD)"
    )
    gender = serializers.ChoiceField(
        choices=Gender.choices, required=False, allow_null=True
    )
    email = serializers.EmailField(required=False, allow_null=True)
    agent = AgentReferenceField(help_text="Id of the assigned agent")
