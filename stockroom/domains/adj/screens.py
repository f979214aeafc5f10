# stockroom/domains/adj/screens.py

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

ADJUSTMENT_SCREEN = ScreenDescriptor(
    key="adjustments",
    entity="adjustments",
    title="Stock Adjustments",
    default_sort=SortConfig(key="date", direction=SortDirection.DESC),
    page_size=10,
    searchable_fields=("product_name",),
    category_field="reason",
    date_field="date",
    sortable_fields=sort_fields(
        SortField(name="date", kind=SortKind.DATE),
        SortField(name="product_name"),
        SortField(name="reason"),
        SortField(name="adjusted_by"),
        SortField(name="quantity_change", kind=SortKind.NUMBER),
    ),
)
