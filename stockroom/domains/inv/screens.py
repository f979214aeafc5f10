# stockroom/domains/inv/screens.py

"""
제품 목록 화면 설정입니다.
공급업체 열은 공급업체 ID 가 아닌 공급업체 이름 순으로 정렬합니다.
"""

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

PRODUCT_SCREEN = ScreenDescriptor(
    key="products",
    entity="products",
    title="Inventory",
    default_sort=SortConfig(key="last_updated", direction=SortDirection.DESC),
    page_size=10,
    searchable_fields=("name", "sku"),
    category_field="category",
    sortable_fields=sort_fields(
        SortField(name="name"),
        SortField(name="sku"),
        SortField(name="category"),
        SortField(name="quantity", kind=SortKind.NUMBER),
        SortField(name="price", kind=SortKind.NUMBER),
        SortField(name="location"),
        SortField(name="supplier_id", lookup="vendor_names"),
        SortField(name="last_updated", kind=SortKind.DATE),
        SortField(name="expiry_date", kind=SortKind.DATE),
    ),
)
