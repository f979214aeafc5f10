# stockroom/core/view_state.py

"""
목록 뷰 상태(ViewState) 모델과 저장 형식(JSON) 직렬화를 정의하는 모듈입니다.

저장 형식은 화면별 키 하나에 아래 JSON 객체를 저장합니다.
    {"searchTerm": str, "categoryFilter": str,
     "sortConfig": {"key": str, "direction": "asc"|"desc"},
     "currentPage": int, "startDate": str, "endDate": str}
누락되었거나 null 인 필드는 화면 기본값을 사용하고, 형식이 잘못된 데이터는
전체를 화면 기본값으로 대체합니다.
"""

import json
import logging
from enum import Enum
from typing import Any, Collection, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

logger = logging.getLogger(__name__)

ALL = "all"  # 카테고리 필터 미적용을 뜻하는 값


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortConfig(BaseModel):
    key: str
    direction: SortDirection = SortDirection.ASC


class ViewState(BaseModel):
    """한 화면의 검색/필터/정렬/페이지 선택 상태"""
    model_config = ConfigDict(populate_by_name=True)

    search_term: str = Field("", alias="searchTerm")
    category_filter: str = Field(ALL, alias="categoryFilter")
    sort_config: SortConfig = Field(..., alias="sortConfig")
    current_page: StrictInt = Field(1, ge=1, alias="currentPage")
    # 기간 필터는 사용자가 입력한 'dd/mm/yyyy' 원문 그대로 보존합니다.
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")

    @classmethod
    def defaults(cls, default_sort: SortConfig) -> "ViewState":
        return cls(sort_config=default_sort.model_copy())


def encode_view_state(state: ViewState) -> str:
    """ViewState 를 저장용 JSON 문자열로 직렬화합니다."""
    return json.dumps(state.model_dump(mode="json", by_alias=True), ensure_ascii=False)


def decode_view_state(
    raw: Optional[str],
    defaults: ViewState,
    sortable_keys: Optional[Collection[str]] = None,
) -> Tuple[ViewState, bool]:
    """
    저장된 JSON 을 ViewState 로 복원합니다.

    Returns:
        (상태, 복원 여부). 저장된 값이 없거나 잘못된 경우 (기본값 복사본, False).
        예외는 발생시키지 않습니다.
    """
    if raw is None or raw == "":
        return defaults.model_copy(deep=True), False

    try:
        data: Any = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning("Could not parse persisted view state: %s", e)
        return defaults.model_copy(deep=True), False

    if not isinstance(data, dict):
        logger.warning("Persisted view state is not a JSON object: %r", type(data).__name__)
        return defaults.model_copy(deep=True), False

    merged = defaults.model_dump(mode="json", by_alias=True)
    merged.update({k: v for k, v in data.items() if v is not None})

    try:
        state = ViewState.model_validate(merged)
    except ValidationError as e:
        logger.warning("Persisted view state has invalid fields: %s", e.errors(include_url=False))
        return defaults.model_copy(deep=True), False

    if sortable_keys is not None and state.sort_config.key not in sortable_keys:
        logger.warning("Persisted sort key %r is not sortable on this screen", state.sort_config.key)
        return defaults.model_copy(deep=True), False

    return state, True
