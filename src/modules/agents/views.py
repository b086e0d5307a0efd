"""Agent API views (``/vermittler``)."""

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

from modules.agents.dtos import AgentUpdateDTO, AgentWriteDTO, AssignCustomerDTO
from modules.agents.exceptions import (
    AgentAlreadyExists,
    AgentNotFound,
    AgentValidationError,
)
from modules.agents.filters import AgentFilter
from modules.agents.models import Agent
from modules.agents.repositories.django_repository import AgentDjangoRepository
from modules.agents.serializers import AgentSerializer, AssignCustomerSerializer
from modules.agents.services import AgentService
from modules.core.errors import Conflict, parse_dto
from modules.core.filters import filter_lookups
from modules.customers.exceptions import CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from shared.domain.validation import group_by_field

NOT_FOUND = "Agent not found."


class AgentViewSet(GenericViewSet):
    """Standard resource: list, create, retrieve, update, partial update, destroy."""

    filterset_class = AgentFilter
    ordering_fields = ["id", "given_name", "reference_number"]
    ordering = ["id"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Agent.objects.all()
    serializer_class = AgentSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = AgentDjangoRepository()
        self._service = AgentService(
            repository=self._repo,
            customer_repository=CustomerDjangoRepository(),
        )

    def get_queryset(self):
        return self._repo.queryset()

    def list(self, request: Request) -> Response:
        """GET /api/v1/vermittler"""
        agents = self._service.list_agents(
            filter_lookups(AgentFilter, request.query_params),
            ordering=OrderingFilter().get_ordering(request, self.get_queryset(), self),
        )
        page = self.paginate_queryset(agents)
        records = page if page is not None else agents
        data = AgentSerializer(records, many=True).data
        if page is not None:
            return self.get_paginated_response(data)
        return Response(data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/vermittler/{pk}"""
        try:
            agent = self._service.get_agent(pk)
        except AgentNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        return Response(AgentSerializer(agent).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/vermittler"""
        dto = parse_dto(AgentWriteDTO, request.data)
        try:
            agent = self._service.create_agent(dto)
        except AgentValidationError as exc:
            raise ValidationError(group_by_field(exc.violations)) from exc
        except AgentAlreadyExists as exc:
            raise Conflict(str(exc)) from exc
        return Response(AgentSerializer(agent).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/vermittler/{pk}"""
        dto = parse_dto(AgentUpdateDTO, request.data)
        try:
            agent = self._service.update_agent(pk, dto)
        except AgentNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        except AgentValidationError as exc:
            raise ValidationError(group_by_field(exc.violations)) from exc
        except AgentAlreadyExists as exc:
            raise Conflict(str(exc)) from exc
        return Response(AgentSerializer(agent).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/vermittler/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/vermittler/{pk}"""
        try:
            self._service.delete_agent(pk)
        except AgentNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=AssignCustomerSerializer, responses=AgentSerializer)
    @action(detail=True, methods=["post"], url_path="kunden")
    def assign_customer(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/vermittler/{pk}/kunden, body ``{"customer": <uuid>}``"""
        dto = parse_dto(AssignCustomerDTO, request.data)
        try:
            agent = self._service.assign_customer(pk, dto.customer)
        except AgentNotFound as exc:
            raise NotFound(NOT_FOUND) from exc
        except CustomerNotFound as exc:
            raise ValidationError({"customer": [str(exc)]}) from exc
        return Response(AgentSerializer(agent).data)
