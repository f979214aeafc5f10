# stockroom/domains/ven/screens.py

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

VENDOR_SCREEN = ScreenDescriptor(
    key="vendors",
    entity="vendors",
    title="Vendors",
    default_sort=SortConfig(key="name", direction=SortDirection.ASC),
    page_size=10,
    searchable_fields=("name", "category", "contact_person"),
    category_field="category",
    sortable_fields=sort_fields(
        SortField(name="name"),
        SortField(name="category"),
        SortField(name="contact_person"),
        SortField(name="last_modified_by"),
        SortField(name="last_updated", kind=SortKind.DATE),
    ),
)
