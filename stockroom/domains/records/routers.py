# stockroom/domains/records/routers.py

"""
'records' 도메인 (레코드 데이터 접근)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

목록 화면이 읽는 엔티티 컬렉션을 조회/등록(수정)/삭제합니다.
등록과 삭제는 컬렉션의 변경 알림(on_change)으로 전달됩니다.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from stockroom.core import dependencies as deps
from stockroom.core.collection import DataHub, RecordCollection

router = APIRouter(
    tags=["Records (레코드 관리)"],
    responses={404: {"description": "Not found"}},
)


def _get_collection(entity: str, hub: DataHub) -> RecordCollection:
    if not hub.has(entity):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown entity '{entity}'"
        )
    return hub.collection(entity)


@router.get(
    "/{entity}",
    response_model=List[Dict[str, Any]],
    summary="엔티티 레코드 전체 조회",
)
async def read_records(entity: str, hub: DataHub = Depends(deps.get_data_hub)):
    """엔티티의 현재 레코드 스냅샷을 등록 순서대로 조회합니다."""
    collection = _get_collection(entity, hub)
    return [record.model_dump(mode="json") for record in collection.list()]


@router.put(
    "/{entity}/{record_id}",
    summary="레코드 등록 또는 수정",
)
async def upsert_record(
    entity: str,
    record_id: str,
    record_in: Dict[str, Any] = Body(...),
    hub: DataHub = Depends(deps.get_data_hub),
):
    """
    경로의 id 로 레코드를 등록하거나 교체합니다.
    본문은 엔티티 스키마로 검증되며, 실패하면 422 를 반환합니다.
    """
    collection = _get_collection(entity, hub)
    try:
        event = collection.upsert({**record_in, "id": record_id})
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
    return {"type": event.type, "record": event.new.model_dump(mode="json")}


@router.delete(
    "/{entity}/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="레코드 삭제",
)
async def delete_record(
    entity: str,
    record_id: str,
    hub: DataHub = Depends(deps.get_data_hub),
):
    collection = _get_collection(entity, hub)
    if collection.delete(record_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Record '{record_id}' not found in '{entity}'",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
