# stockroom/domains/views/schemas.py

"""
'views' 도메인 (목록 뷰 API)의 요청/응답 스키마를 정의하는 모듈입니다.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from stockroom.core.pagination import Page
from stockroom.core.view_state import ALL, SortConfig, ViewState


class ScreenSummary(BaseModel):
    key: str
    entity: str
    title: str
    page_size: int
    default_sort: SortConfig
    searchable_fields: List[str]
    category_field: Optional[str] = None
    date_field: Optional[str] = None
    sortable_fields: List[str]


class ViewResponse(BaseModel):
    """목록 화면 응답: 현재 뷰 상태 + 계산된 페이지 + 카테고리 선택지"""
    screen: str
    state: ViewState
    page: Page
    categories: List[str]
    is_filtered: bool


class SearchUpdate(BaseModel):
    term: str = ""


class CategoryUpdate(BaseModel):
    value: str = ALL


class DateRangeUpdate(BaseModel):
    start_date: str = Field("", description="dd/mm/yyyy, 비우면 하한 없음")
    end_date: str = Field("", description="dd/mm/yyyy, 비우면 상한 없음")


class SortRequest(BaseModel):
    key: str


class PageUpdate(BaseModel):
    """절대 페이지(page) 또는 현재 페이지 기준 이동량(step) 중 하나만 지정합니다."""
    page: Optional[int] = None
    step: Optional[int] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "PageUpdate":
        if (self.page is None) == (self.step is None):
            raise ValueError("Specify exactly one of 'page' or 'step'")
        return self
