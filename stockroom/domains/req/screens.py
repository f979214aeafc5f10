# stockroom/domains/req/screens.py

"""
품목 요청 목록 화면 설정입니다.
상태(status)를 카테고리 필터로, 요청일(request_date)을 기간 필터로 사용합니다.
"""

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

from .schemas import PRIORITY_RANKS

REQUEST_SCREEN = ScreenDescriptor(
    key="requests",
    entity="requests",
    title="Item Requests",
    default_sort=SortConfig(key="request_date", direction=SortDirection.DESC),
    page_size=10,
    searchable_fields=("product_name", "requesting_division"),
    category_field="status",
    date_field="request_date",
    sortable_fields=sort_fields(
        SortField(name="request_date", kind=SortKind.DATE),
        SortField(name="priority", kind=SortKind.RANK, ranks=PRIORITY_RANKS),
        SortField(name="product_name"),
        SortField(name="requesting_division"),
        SortField(name="quantity", kind=SortKind.NUMBER),
        SortField(name="status"),
    ),
)
