import django_filters

from modules.agents.models import Agent


class AgentFilter(django_filters.FilterSet):
    given_name = django_filters.CharFilter(field_name="given_name", lookup_expr="icontains")
    company = django_filters.CharFilter(field_name="company", lookup_expr="icontains")
    reference_number = django_filters.CharFilter(field_name="reference_number")

    class Meta:
        model = Agent
        fields = ["given_name", "company", "reference_number"]
