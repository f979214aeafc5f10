# stockroom/domains/views/routers.py

"""
'views' 도메인 (목록 뷰)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

모든 상태 변경 엔드포인트는 변경 후의 목록 화면 전체(상태 + 페이지)를 반환합니다.
뷰 상태 저장소(redis-py)는 동기 클라이언트이므로, 저장소를 사용하는 엔드포인트는
일반 def 로 선언해 FastAPI 스레드풀에서 실행합니다.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status

from stockroom.core import dependencies as deps
from stockroom.core.collection import DataHub
from stockroom.core.list_controller import ScreenDescriptor
from stockroom.core.view_store import ViewStateStore

from . import schemas as view_schemas
from . import services as view_services
from .registry import SCREENS, get_screen

router = APIRouter(
    tags=["List Views (목록 화면)"],
    responses={404: {"description": "Not found"}},
)


def get_screen_descriptor(screen: str) -> ScreenDescriptor:
    """경로의 화면 키를 화면 설정으로 변환합니다. 없는 화면이면 404."""
    descriptor = get_screen(screen)
    if descriptor is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown screen '{screen}'"
        )
    return descriptor


@router.get(
    "/screens",
    response_model=List[view_schemas.ScreenSummary],
    summary="목록 화면 설정 조회",
)
async def read_screens():
    """등록된 모든 목록 화면의 검색/카테고리/정렬 설정을 조회합니다."""
    return [view_services.summarize(d) for d in SCREENS.values()]


@router.get(
    "/{screen}",
    response_model=view_schemas.ViewResponse,
    summary="목록 화면 조회",
)
def read_view(
    search: Optional[str] = None,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """
    저장된 뷰 상태로 현재 페이지를 계산해 반환합니다.
    - **search**: 지정하면 저장된 검색어 대신 이 검색어를 적용합니다 (예: 바코드 스캔).
    """
    controller = view_services.open_controller(descriptor, store, owner, restored_search=search)
    return view_services.render_view(controller, hub)


@router.put(
    "/{screen}/search",
    response_model=view_schemas.ViewResponse,
    summary="검색어 변경",
)
def update_search(
    body: view_schemas.SearchUpdate,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """검색어를 바꾸고 1페이지로 이동합니다."""
    controller = view_services.open_controller(descriptor, store, owner)
    controller.set_search_term(body.term)
    return view_services.render_view(controller, hub)


@router.put(
    "/{screen}/category",
    response_model=view_schemas.ViewResponse,
    summary="카테고리 필터 변경",
)
def update_category(
    body: view_schemas.CategoryUpdate,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """카테고리 필터를 바꾸고 1페이지로 이동합니다. 'all' 은 필터 해제입니다."""
    controller = view_services.open_controller(descriptor, store, owner)
    controller.set_category_filter(body.value)
    return view_services.render_view(controller, hub)


@router.put(
    "/{screen}/date-range",
    response_model=view_schemas.ViewResponse,
    summary="기간 필터 변경",
)
def update_date_range(
    body: view_schemas.DateRangeUpdate,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """
    기간 필터('dd/mm/yyyy')를 바꾸고 1페이지로 이동합니다.
    해석할 수 없는 날짜는 해당 경계가 없는 것으로 취급합니다.
    """
    if descriptor.date_field is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Screen '{descriptor.key}' has no date filter",
        )
    controller = view_services.open_controller(descriptor, store, owner)
    controller.set_date_range(body.start_date, body.end_date)
    return view_services.render_view(controller, hub)


@router.post(
    "/{screen}/sort",
    response_model=view_schemas.ViewResponse,
    summary="정렬 요청",
)
def request_sort(
    body: view_schemas.SortRequest,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """같은 열이면 정렬 방향을 뒤집고, 다른 열이면 오름차순으로 정렬합니다."""
    if body.key not in descriptor.sortable_fields:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Field '{body.key}' is not sortable on screen '{descriptor.key}'",
        )
    controller = view_services.open_controller(descriptor, store, owner)
    controller.request_sort(body.key)
    return view_services.render_view(controller, hub)


@router.put(
    "/{screen}/page",
    response_model=view_schemas.ViewResponse,
    summary="페이지 이동",
)
def update_page(
    body: view_schemas.PageUpdate,
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """
    페이지를 이동합니다.
    - **page**: 절대 페이지 번호.
    - **step**: 현재 페이지 기준 이동량 (다음 +1, 이전 -1).
    결과는 항상 [1, 전체 페이지 수] 범위로 보정됩니다.
    """
    controller = view_services.open_controller(descriptor, store, owner)
    # 현재 데이터 기준 전체 페이지 수를 먼저 계산해 두어야 요청한 페이지를 바로 보정할 수 있습니다.
    view_services.render_view(controller, hub)
    if body.step is not None:
        step = body.step
        controller.set_current_page(lambda prev: prev + step)
    else:
        controller.set_current_page(body.page)
    return view_services.render_view(controller, hub)


@router.post(
    "/{screen}/reset",
    response_model=view_schemas.ViewResponse,
    summary="필터 초기화",
)
def reset_filters(
    descriptor: ScreenDescriptor = Depends(get_screen_descriptor),
    store: ViewStateStore = Depends(deps.get_view_store),
    hub: DataHub = Depends(deps.get_data_hub),
    owner: str = Depends(deps.get_view_owner),
):
    """검색어, 필터, 정렬, 페이지를 화면 기본값으로 되돌립니다."""
    controller = view_services.open_controller(descriptor, store, owner)
    controller.reset_filters()
    return view_services.render_view(controller, hub)
