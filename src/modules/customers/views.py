"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into DRF exceptions;
the view never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.accounts.exceptions import UserAccountNotFound
from modules.accounts.repositories.django_repository import UserAccountDjangoRepository
from modules.agents.exceptions import AgentNotFound
from modules.agents.repositories.django_repository import AgentDjangoRepository
from modules.core.errors import parse_dto
from modules.core.filters import filter_lookups
from modules.customers.dtos import CustomerUpdateDTO, CustomerWriteDTO, LinkUserDTO
from modules.customers.exceptions import CustomerNotFound, CustomerValidationError
from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CustomerReadSerializer,
    CustomerWriteSerializer,
)
from modules.customers.services import CustomerService
from shared.domain.validation import group_by_field

NOT_FOUND = "Customer not found."


class CustomerViewSet(GenericViewSet):
    """ViewSet for ``/kunden``: list, create, retrieve, update (PUT), destroy.

    Uses ``CustomerService`` with the Django repositories (DIP).
    Responses use the read view, request bodies the write view.
    The list goes through ``list_customers``; ``filter_backends`` only
    declare its query parameters for the schema.
    """

    filterset_class = CustomerFilter
    ordering_fields = ["created_at", "id", "name", "given_name"]
    ordering = ["-created_at", "-id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Customer.objects.all()
    serializer_class = CustomerReadSerializer
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = CustomerDjangoRepository()
        self._service = CustomerService(
            repository=self._repo,
            agent_repository=AgentDjangoRepository(),
            user_repository=UserAccountDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._repo.queryset()

    def list(self, request: Request) -> Response:
        """GET /api/v1/kunden"""
        customers = self._service.list_customers(
            filter_lookups(CustomerFilter, request.query_params),
            ordering=OrderingFilter().get_ordering(request, self.get_queryset(), self),
        )
        page = self.paginate_queryset(customers)
        records = page if page is not None else customers
        data = CustomerReadSerializer(records, many=True).data
        if page is not None:
            return self.get_paginated_response(data)
        return Response(data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/kunden/{pk}"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        return Response(CustomerReadSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=CustomerWriteSerializer, responses={201: CustomerReadSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/kunden"""
        dto = parse_dto(CustomerWriteDTO, request.data)
        try:
            customer = self._service.create_customer(dto)
        except AgentNotFound as exc:
            raise ValidationError({"agent": [str(exc)]}) from exc
        except CustomerValidationError as exc:
            raise ValidationError(group_by_field(exc.violations)) from exc

        out = CustomerReadSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CustomerWriteSerializer, responses=CustomerReadSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/kunden/{pk}"""
        dto = parse_dto(CustomerUpdateDTO, request.data)
        try:
            customer = self._service.update_customer(pk, dto)
        except CustomerNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        except AgentNotFound as exc:
            raise ValidationError({"agent": [str(exc)]}) from exc
        except CustomerValidationError as exc:
            raise ValidationError(group_by_field(exc.violations)) from exc

        return Response(CustomerReadSerializer(customer).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/kunden/{pk}"""
        try:
            self._service.delete_customer(pk)
        except CustomerNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=CustomerReadSerializer)
    @action(detail=True, methods=["put"], url_path="user")
    def user(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/kunden/{pk}/user, body ``{"user": <id> | null}``"""
        dto = parse_dto(LinkUserDTO, request.data)
        try:
            customer = self._service.link_user(pk, dto.user)
        except CustomerNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        except UserAccountNotFound as exc:
            raise ValidationError({"user": [str(exc)]}) from exc
        return Response(CustomerReadSerializer(customer).data)
