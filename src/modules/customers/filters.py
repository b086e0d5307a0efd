import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    given_name = django_filters.CharFilter(field_name="given_name", lookup_expr="icontains")
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    agent = django_filters.NumberFilter(field_name="agent_id")

    class Meta:
        model = Customer
        fields = ["name", "given_name", "email", "agent"]
