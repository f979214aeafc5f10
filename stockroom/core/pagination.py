# stockroom/core/pagination.py

"""
페이지 계산 유틸리티 모듈입니다.
정렬까지 끝난 목록을 받아 한 페이지 분량의 항목과 페이지 메타데이터를 만듭니다.
"""

from math import ceil
from typing import Any, Generic, List, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


def page_count(total_items: int, page_size: int) -> int:
    """전체 항목 수와 페이지 크기로 전체 페이지 수를 계산합니다. 항목이 없으면 0 입니다."""
    if page_size <= 0:
        raise ValueError("page_size must be a positive integer")
    return ceil(total_items / page_size) if total_items > 0 else 0


def clamp_page(page: int, total_pages: int) -> int:
    """페이지 번호를 [1, max(total_pages, 1)] 범위로 보정합니다."""
    return max(1, min(page, max(total_pages, 1)))


def slice_page(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """[(page-1)*page_size, page*page_size) 구간을 잘라 반환합니다."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


class Page(BaseModel, Generic[T]):
    """목록 뷰 한 페이지 (읽기 전용 파생 값)"""
    items: List[T]
    total_items: int
    total_pages: int
    current_page: int
    page_size: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, ordered: Sequence[Any], page: int, page_size: int) -> "Page":
        """정렬된 전체 목록에서 보정된 페이지를 잘라 Page 를 만듭니다."""
        total_pages = page_count(len(ordered), page_size)
        current = clamp_page(page, total_pages)
        return cls(
            items=slice_page(ordered, current, page_size),
            total_items=len(ordered),
            total_pages=total_pages,
            current_page=current,
            page_size=page_size,
            has_next=current < total_pages,
            has_prev=current > 1,
        )
