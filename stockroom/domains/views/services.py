# stockroom/domains/views/services.py

"""
목록 뷰 서비스 모듈입니다.

요청마다 (소유자, 화면) 키로 저장된 상태를 복원한 컨트롤러를 새로 만들고,
데이터 허브의 최신 스냅샷으로 페이지를 계산합니다. 요청 간에 공유되는 상태는
뷰 상태 저장소뿐입니다.
"""

from typing import Optional

from stockroom.core.collection import DataHub
from stockroom.core.config import settings
from stockroom.core.dates import resolve_timezone
from stockroom.core.list_controller import ListViewController, ScreenDescriptor
from stockroom.core.view_store import ViewStateStore, scoped_key

from . import schemas
from .registry import build_lookups


def open_controller(
    descriptor: ScreenDescriptor,
    store: ViewStateStore,
    owner: str,
    restored_search: Optional[str] = None,
) -> ListViewController:
    """소유자의 화면 상태를 복원한 컨트롤러를 생성합니다."""
    return ListViewController.initialize(
        scoped_key(settings.VIEW_STATE_KEY_PREFIX, owner, descriptor.key),
        descriptor.default_sort,
        descriptor.page_size,
        restored_search,
        descriptor=descriptor,
        store=store,
        tz=resolve_timezone(settings.VIEW_TIMEZONE),
    )


def render_view(controller: ListViewController, hub: DataHub) -> schemas.ViewResponse:
    """컨트롤러 상태와 현재 레코드 스냅샷으로 목록 화면 응답을 만듭니다."""
    descriptor = controller.descriptor
    records = hub.collection(descriptor.entity).list()
    page = controller.get_page(records, lookups=build_lookups(descriptor, hub))
    return schemas.ViewResponse(
        screen=descriptor.key,
        state=controller.view_state,
        page=page,
        categories=controller.category_options(records),
        is_filtered=controller.is_filtered,
    )


def summarize(descriptor: ScreenDescriptor) -> schemas.ScreenSummary:
    return schemas.ScreenSummary(
        key=descriptor.key,
        entity=descriptor.entity,
        title=descriptor.title,
        page_size=descriptor.page_size,
        default_sort=descriptor.default_sort,
        searchable_fields=list(descriptor.searchable_fields),
        category_field=descriptor.category_field,
        date_field=descriptor.date_field,
        sortable_fields=list(descriptor.sortable_fields),
    )
