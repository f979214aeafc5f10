# stockroom/domains/aud/screens.py

"""
감사 로그 화면 설정입니다.
작업(action) 부분 일치 검색, 사용자(user) 필터는 대소문자 구분 없는 정확 일치입니다.
"""

from stockroom.core.list_controller import ScreenDescriptor, SortField, SortKind, sort_fields
from stockroom.core.view_state import SortConfig, SortDirection

AUDIT_LOG_SCREEN = ScreenDescriptor(
    key="audit-log",
    entity="audit-log",
    title="Audit Log",
    default_sort=SortConfig(key="timestamp", direction=SortDirection.DESC),
    page_size=15,
    searchable_fields=("action",),
    category_field="user",
    category_case_sensitive=False,
    date_field="timestamp",
    sortable_fields=sort_fields(
        SortField(name="timestamp", kind=SortKind.DATE),
        SortField(name="user"),
        SortField(name="action"),
    ),
)
