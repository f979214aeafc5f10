# stockroom/core/collection.py

"""
메모리 기반 데이터 접근 계층 모듈입니다.

엔티티별 RecordCollection 은 다음 계약을 제공합니다.
- list(): 현재 레코드의 스냅샷 (호출할 때마다 새 리스트, 삽입 순서 유지).
- on_change(callback): insert/update/delete 이벤트를 새/이전 레코드와 함께 전달.

목록 뷰 컨트롤러는 list() 결과만 입력으로 받으며, 변경 이벤트가 언제 도착해도
다음 get_page 호출이 최신 스냅샷으로 전부 다시 계산하면 됩니다.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)


class ChangeEvent(BaseModel):
    """레코드 변경 알림 (새 레코드와 이전 레코드를 모두 포함)"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: Literal["insert", "update", "delete"]
    entity: str
    new: Optional[Any] = None
    old: Optional[Any] = None


ChangeCallback = Callable[[ChangeEvent], None]


class RecordCollection(Generic[ModelType]):
    """
    한 엔티티 타입의 레코드 모음입니다. 레코드는 'id' 필드로 식별합니다.
    """

    def __init__(self, entity: str, model: Type[ModelType]):
        self.entity = entity
        self.model = model
        self._records: Dict[str, ModelType] = {}
        self._subscribers: List[ChangeCallback] = []
        self._lock = threading.RLock()

    def list(self) -> List[ModelType]:
        with self._lock:
            return list(self._records.values())

    def get(self, id: str) -> Optional[ModelType]:
        with self._lock:
            return self._records.get(id)

    def upsert(self, obj_in: Any) -> ChangeEvent:
        """
        레코드를 추가하거나 같은 id 의 레코드를 교체합니다.
        dict 가 전달되면 모델로 검증한 뒤 저장합니다.
        """
        record = obj_in if isinstance(obj_in, self.model) else self.model.model_validate(obj_in)
        with self._lock:
            old = self._records.get(record.id)
            self._records[record.id] = record
        event = ChangeEvent(
            type="insert" if old is None else "update", entity=self.entity, new=record, old=old
        )
        self._notify(event)
        return event

    def delete(self, id: str) -> Optional[ChangeEvent]:
        """레코드를 삭제합니다. 없는 id 이면 None 을 반환합니다."""
        with self._lock:
            old = self._records.pop(id, None)
        if old is None:
            return None
        event = ChangeEvent(type="delete", entity=self.entity, old=old)
        self._notify(event)
        return event

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """변경 알림을 구독합니다. 반환된 함수를 호출하면 구독이 해제됩니다."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def _notify(self, event: ChangeEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                # 구독자 오류가 쓰기 작업을 실패시키지 않도록 기록만 합니다.
                logger.exception("Change subscriber failed for %s %s", self.entity, event.type)


class DataHub:
    """엔티티 이름 -> RecordCollection 레지스트리"""

    def __init__(self, models: Optional[Dict[str, Type[SQLModel]]] = None):
        self._collections: Dict[str, RecordCollection] = {}
        for entity, model in (models or {}).items():
            self.register(entity, model)

    def register(self, entity: str, model: Type[SQLModel]) -> RecordCollection:
        collection = RecordCollection(entity, model)
        self._collections[entity] = collection
        return collection

    def has(self, entity: str) -> bool:
        return entity in self._collections

    def collection(self, entity: str) -> RecordCollection:
        try:
            return self._collections[entity]
        except KeyError:
            raise KeyError(f"Unknown entity '{entity}'") from None

    def entities(self) -> List[str]:
        return list(self._collections)

    def lookup_table(self, entity: str, label_field: str) -> Dict[Any, Any]:
        """id -> 표시 값 매핑 (예: 공급업체 ID -> 공급업체 이름)"""
        return {
            record.id: getattr(record, label_field, None)
            for record in self.collection(entity).list()
        }
