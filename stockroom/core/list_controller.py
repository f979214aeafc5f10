# stockroom/core/list_controller.py

"""
목록 뷰 컨트롤러 모듈입니다.

제품/공급업체/요청/발주/재고 조정/감사 로그 화면은 모두 같은 컨트롤러를
화면 설정(ScreenDescriptor)만 바꿔서 사용합니다.

    전체 레코드 -> 검색/카테고리/기간 필터 -> 안정 정렬 -> 페이지 잘라내기

컨트롤러는 화면 하나의 ViewState 를 소유하며, 상태가 바뀔 때마다 저장소에
직렬화해 두고 생성 시 다시 읽어 옵니다. 저장소 오류, 잘못 저장된 상태,
해석할 수 없는 날짜, 범위를 벗어난 페이지는 모두 내부에서 보정되며
호출자에게 예외로 전달되지 않습니다.
"""

import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from zoneinfo import ZoneInfo

from stockroom.core.dates import date_bounds, resolve_timezone, to_epoch_ms
from stockroom.core.pagination import Page, clamp_page, page_count
from stockroom.core.view_state import (
    ALL,
    SortConfig,
    SortDirection,
    ViewState,
    decode_view_state,
    encode_view_state,
)
from stockroom.core.view_store import ViewStateStore, ViewStateStoreError

logger = logging.getLogger(__name__)

Lookups = Mapping[str, Mapping[Any, Any]]
PageUpdate = Union[int, Callable[[int], int]]


class SortKind(str, Enum):
    TEXT = "text"      # 대소문자 구분 없는 사전순
    NUMBER = "number"  # 숫자 값
    DATE = "date"      # epoch 밀리초로 디코딩한 시각
    RANK = "rank"      # ranks 매핑으로 변환한 순위 (예: 우선순위 Low < Medium < High)


class SortField(BaseModel):
    """
    정렬 가능한 필드 정의.

    - source: 레코드에서 읽을 필드 이름 (정렬 키 이름과 다를 때만 지정).
    - lookup: get_page(lookups=...) 로 전달되는 조회 테이블 이름.
      원래 값(예: 공급업체 ID)을 표시 값(공급업체 이름)으로 바꾼 뒤 비교합니다.
    - ranks: RANK 정렬에서 값 -> 순위 매핑.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    kind: SortKind = SortKind.TEXT
    source: Optional[str] = None
    lookup: Optional[str] = None
    ranks: Optional[Dict[str, int]] = None

    @property
    def field(self) -> str:
        return self.source or self.name


class ScreenDescriptor(BaseModel):
    """목록 화면 하나의 설정 (검색 대상 필드, 카테고리 필드, 기간 필드, 정렬 필드)"""
    model_config = ConfigDict(frozen=True)

    key: str
    entity: str
    title: str = ""
    default_sort: SortConfig
    page_size: int = Field(10, ge=1)
    searchable_fields: Tuple[str, ...] = ()
    category_field: Optional[str] = None
    category_case_sensitive: bool = True
    date_field: Optional[str] = None
    sortable_fields: Dict[str, SortField]

    @model_validator(mode="after")
    def _check_default_sort(self) -> "ScreenDescriptor":
        if self.default_sort.key not in self.sortable_fields:
            raise ValueError(
                f"default sort key '{self.default_sort.key}' is not sortable on screen '{self.key}'"
            )
        for name, sort_field in self.sortable_fields.items():
            if name != sort_field.name:
                raise ValueError(f"sortable field registered as '{name}' is named '{sort_field.name}'")
        return self


def sort_fields(*fields: SortField) -> Dict[str, SortField]:
    """SortField 목록을 이름 -> 정의 매핑으로 변환합니다."""
    return {f.name: f for f in fields}


def read_field(record: Any, name: str) -> Any:
    """매핑(record[name])과 객체(record.name) 레코드 모두에서 필드 값을 읽습니다."""
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    if isinstance(value, Enum):
        return value.value
    return value


class ListViewController:
    """
    화면 하나의 목록 뷰 상태를 소유하고, 레코드 컬렉션에서 표시할 페이지를 계산합니다.

    한 인스턴스는 하나의 소유자(화면)만 사용하며, 모든 메서드는 동기적으로
    한 번에 끝납니다. get_page 는 호출될 때마다 주어진 컬렉션에서 전부 다시 계산합니다.
    """

    def __init__(
        self,
        *,
        descriptor: ScreenDescriptor,
        store: ViewStateStore,
        storage_key: Optional[str] = None,
        default_sort: Optional[SortConfig] = None,
        page_size: Optional[int] = None,
        restored_search: Optional[str] = None,
        tz: Optional[ZoneInfo] = None,
    ):
        self.descriptor = descriptor
        self.storage_key = storage_key or descriptor.key
        self.page_size = page_size or descriptor.page_size
        if self.page_size <= 0:
            raise ValueError("page_size must be a positive integer")
        self.tz = tz or resolve_timezone("UTC")
        self._store = store
        self._defaults = ViewState.defaults(default_sort or descriptor.default_sort)
        # 마지막 get_page 에서 계산된 전체 페이지 수 (아직 읽은 적 없으면 None)
        self._known_total_pages: Optional[int] = None
        # 전체 페이지 수를 모르는 상태에서 요청된 페이지는 다음 읽기에서 마지막 페이지로 보정
        self._page_requested = False

        self._state, restored = decode_view_state(
            self._read(), self._defaults, self.descriptor.sortable_fields.keys()
        )
        if restored:
            logger.debug("Restored view state for '%s'", self.storage_key)

        # 바코드 스캔 등 외부에서 강제한 검색어는 저장된 검색어보다 우선합니다 (1회).
        if restored_search:
            self._state.search_term = restored_search
            self._state.current_page = 1
            self._persist()

    @classmethod
    def initialize(
        cls,
        screen_key: str,
        default_sort: SortConfig,
        page_size: int,
        restored_search: Optional[str] = None,
        *,
        descriptor: ScreenDescriptor,
        store: ViewStateStore,
        tz: Optional[ZoneInfo] = None,
    ) -> "ListViewController":
        """screen_key 로 저장된 상태를 복원(없거나 잘못되었으면 기본값)한 컨트롤러를 생성합니다."""
        return cls(
            descriptor=descriptor,
            store=store,
            storage_key=screen_key,
            default_sort=default_sort,
            page_size=page_size,
            restored_search=restored_search,
            tz=tz,
        )

    # -------------------------------------------------------------------------
    # 상태 조회
    # -------------------------------------------------------------------------
    @property
    def view_state(self) -> ViewState:
        return self._state.model_copy(deep=True)

    @property
    def default_state(self) -> ViewState:
        return self._defaults.model_copy(deep=True)

    @property
    def is_filtered(self) -> bool:
        """검색어, 카테고리, 기간 중 하나라도 적용되어 있으면 True"""
        s = self._state
        return bool(s.search_term or s.category_filter != ALL or s.start_date or s.end_date)

    # -------------------------------------------------------------------------
    # 상태 변경 (변경 즉시 저장)
    # -------------------------------------------------------------------------
    def set_search_term(self, term: str) -> None:
        self._state.search_term = term or ""
        self._state.current_page = 1
        self._persist()

    def set_category_filter(self, value: str) -> None:
        self._state.category_filter = value or ALL
        self._state.current_page = 1
        self._persist()

    def set_date_range(self, start_date: Optional[str], end_date: Optional[str]) -> None:
        """기간 필터 원문('dd/mm/yyyy')을 저장합니다. 해석은 get_page 에서 합니다."""
        self._state.start_date = start_date or ""
        self._state.end_date = end_date or ""
        self._state.current_page = 1
        self._persist()

    def request_sort(self, key: str) -> None:
        """같은 키면 방향을 뒤집고, 다른 키면 오름차순으로 정렬합니다. 페이지는 유지합니다."""
        if key not in self.descriptor.sortable_fields:
            logger.warning("Ignoring sort on unknown field '%s' for screen '%s'", key, self.descriptor.key)
            return
        current = self._state.sort_config
        if current.key == key:
            self._state.sort_config = SortConfig(key=key, direction=current.direction.flipped())
        else:
            self._state.sort_config = SortConfig(key=key, direction=SortDirection.ASC)
        self._persist()

    def set_current_page(self, page: PageUpdate) -> None:
        """절대 페이지 번호 또는 이전 페이지 -> 새 페이지 함수를 받아 현재 페이지를 바꿉니다."""
        new_page = page(self._state.current_page) if callable(page) else page
        new_page = int(new_page)
        if self._known_total_pages is None:
            self._page_requested = True
            self._state.current_page = max(1, new_page)
        else:
            self._state.current_page = clamp_page(new_page, self._known_total_pages)
        self._persist()

    def reset_filters(self) -> None:
        """검색어, 카테고리, 기간, 정렬, 페이지를 모두 화면 기본값으로 되돌립니다."""
        self._state = self._defaults.model_copy(deep=True)
        self._page_requested = False
        self._persist()

    # -------------------------------------------------------------------------
    # 파생 값 계산
    # -------------------------------------------------------------------------
    def filter_records(self, records: Iterable[Any]) -> List[Any]:
        """검색어/카테고리/기간 조건에 맞는 레코드를 입력 순서대로 반환합니다 (입력은 변경하지 않음)."""
        d = self.descriptor
        s = self._state

        needle = s.search_term.lower() if s.search_term else ""
        category = s.category_filter if d.category_field and s.category_filter != ALL else None
        if category is not None and not d.category_case_sensitive:
            category = category.lower()
        lower, upper = date_bounds(s.start_date, s.end_date, self.tz) if d.date_field else (None, None)

        result = []
        for record in records:
            if needle and not self._matches_search(record, needle):
                continue
            if category is not None:
                value = read_field(record, d.category_field)
                if value is None:
                    continue
                if d.category_case_sensitive:
                    if value != category:
                        continue
                elif str(value).lower() != category:
                    continue
            if lower is not None or upper is not None:
                moment = to_epoch_ms(read_field(record, d.date_field), self.tz)
                # 날짜를 해석할 수 없는 레코드는 기간 조건으로 제외하지 않습니다.
                if moment is not None:
                    if lower is not None and moment < lower:
                        continue
                    if upper is not None and moment > upper:
                        continue
            result.append(record)
        return result

    def sort_records(self, records: Sequence[Any], lookups: Optional[Lookups] = None) -> List[Any]:
        """현재 정렬 설정으로 안정 정렬합니다. 같은 값은 입력 순서를 유지합니다."""
        config = self._state.sort_config
        sort_field = self.descriptor.sortable_fields.get(config.key)
        if sort_field is None:
            return list(records)
        table = (lookups or {}).get(sort_field.lookup) if sort_field.lookup else None
        if sort_field.lookup and table is None:
            logger.debug("Lookup table '%s' not supplied; sorting '%s' by empty values", sort_field.lookup, config.key)
            table = {}

        def key_of(record: Any) -> Tuple:
            value = read_field(record, sort_field.field)
            if table is not None:
                value = table.get(value)
            decoded = self._decode_sort_value(sort_field, value)
            # 값이 없는 레코드는 오름차순에서 앞에 옵니다.
            return (0,) if decoded is None else (1, decoded)

        return sorted(records, key=key_of, reverse=config.direction is SortDirection.DESC)

    def get_page(self, records: Iterable[Any], lookups: Optional[Lookups] = None) -> Page:
        """
        레코드 컬렉션에서 현재 상태에 해당하는 페이지를 계산합니다.

        결과 집합이 줄어들어 선택했던 페이지가 사라지면 1페이지로 돌아가고,
        전체 페이지 수를 모르는 상태에서 요청된 페이지는 마지막 페이지로 보정합니다.
        """
        ordered = self.sort_records(self.filter_records(records), lookups)
        total_pages = page_count(len(ordered), self.page_size)

        current = self._state.current_page
        if current > max(total_pages, 1):
            target = clamp_page(current, total_pages) if self._page_requested else 1
            logger.debug(
                "Page %s out of range (%s pages) on '%s'; moving to page %s",
                current, total_pages, self.storage_key, target,
            )
            self._state.current_page = target
            self._persist()
        self._page_requested = False
        self._known_total_pages = total_pages

        return Page.build(ordered, self._state.current_page, self.page_size)

    def category_options(self, records: Iterable[Any]) -> List[str]:
        """카테고리 선택지: 'all' 다음에 레코드에 나타난 값을 처음 나온 순서대로."""
        options = [ALL]
        if not self.descriptor.category_field:
            return options
        seen = set()
        for record in records:
            value = read_field(record, self.descriptor.category_field)
            if value in (None, "") or value in seen:
                continue
            seen.add(value)
            options.append(str(value))
        return options

    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------
    def _matches_search(self, record: Any, needle: str) -> bool:
        for name in self.descriptor.searchable_fields:
            value = read_field(record, name)
            if value is not None and needle in str(value).lower():
                return True
        return False

    def _decode_sort_value(self, sort_field: SortField, value: Any) -> Any:
        if value is None or value == "":
            return None
        if sort_field.kind is SortKind.DATE:
            return to_epoch_ms(value, self.tz)
        if sort_field.kind is SortKind.NUMBER:
            try:
                number = float(value)
            except (TypeError, ValueError):
                return None
            # NaN, inf 는 비교 순서를 깨뜨리므로 값이 없는 것으로 취급합니다.
            return number if math.isfinite(number) else None
        if sort_field.kind is SortKind.RANK:
            return (sort_field.ranks or {}).get(str(value))
        return str(value).lower()

    def _read(self) -> Optional[str]:
        try:
            return self._store.get(self.storage_key)
        except ViewStateStoreError as e:
            logger.warning("Could not read view state '%s': %s", self.storage_key, e)
            return None

    def _persist(self) -> None:
        # 저장 실패는 기록만 하고 무시합니다. 메모리의 상태가 현재 세션의 기준입니다.
        try:
            self._store.set(self.storage_key, encode_view_state(self._state))
        except ViewStateStoreError as e:
            logger.warning("Could not save view state '%s': %s", self.storage_key, e)
