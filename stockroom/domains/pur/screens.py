# stockroom/domains/pur/screens.py

"""
발주 목록 화면 설정입니다.
공급업체 필터는 vendor_id 정확 일치이고, vendor_name 정렬은 vendor_id 를
공급업체 이름으로 바꾼 뒤 비교합니다.
"""

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

PURCHASE_ORDER_SCREEN = ScreenDescriptor(
    key="purchase-orders",
    entity="purchase-orders",
    title="Purchase Orders",
    default_sort=SortConfig(key="request_date", direction=SortDirection.DESC),
    page_size=10,
    searchable_fields=("product_name",),
    category_field="vendor_id",
    date_field="request_date",
    sortable_fields=sort_fields(
        SortField(name="vendor_name", source="vendor_id", lookup="vendor_names"),
        SortField(name="product_name"),
        SortField(name="status"),
        SortField(name="request_date", kind=SortKind.DATE),
        SortField(name="quantity", kind=SortKind.NUMBER),
    ),
)
