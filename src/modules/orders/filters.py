import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    # Free text so an unknown status matches nothing instead of being dropped.
    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")

    class Meta:
        model = Order
        fields = ["status"]
