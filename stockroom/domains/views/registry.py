# stockroom/domains/views/registry.py

"""
목록 화면과 엔티티 레지스트리입니다.
새 목록 화면은 ScreenDescriptor 를 만들어 SCREENS 에 추가하기만 하면 됩니다.
"""

from typing import Any, Dict, Optional, Tuple, Type

from sqlmodel import SQLModel

from stockroom.core.collection import DataHub
from stockroom.core.list_controller import ScreenDescriptor
from stockroom.domains.adj.schemas import StockAdjustment
from stockroom.domains.adj.screens import ADJUSTMENT_SCREEN
from stockroom.domains.aud.schemas import AuditLogEntry
from stockroom.domains.aud.screens import AUDIT_LOG_SCREEN
from stockroom.domains.inv.schemas import Product
from stockroom.domains.inv.screens import PRODUCT_SCREEN
from stockroom.domains.pur.schemas import PurchaseOrder
from stockroom.domains.pur.screens import PURCHASE_ORDER_SCREEN
from stockroom.domains.req.schemas import ItemRequest
from stockroom.domains.req.screens import REQUEST_SCREEN
from stockroom.domains.ven.schemas import Vendor
from stockroom.domains.ven.screens import VENDOR_SCREEN

SCREENS: Dict[str, ScreenDescriptor] = {
    screen.key: screen
    for screen in (
        PRODUCT_SCREEN,
        VENDOR_SCREEN,
        REQUEST_SCREEN,
        PURCHASE_ORDER_SCREEN,
        ADJUSTMENT_SCREEN,
        AUDIT_LOG_SCREEN,
    )
}

ENTITY_MODELS: Dict[str, Type[SQLModel]] = {
    "products": Product,
    "vendors": Vendor,
    "requests": ItemRequest,
    "purchase-orders": PurchaseOrder,
    "adjustments": StockAdjustment,
    "audit-log": AuditLogEntry,
}

# 조회 테이블 이름 -> (엔티티, 표시 필드)
LOOKUP_SOURCES: Dict[str, Tuple[str, str]] = {
    "vendor_names": ("vendors", "name"),
}


def get_screen(key: str) -> Optional[ScreenDescriptor]:
    return SCREENS.get(key)


def build_data_hub() -> DataHub:
    return DataHub(ENTITY_MODELS)


def build_lookups(descriptor: ScreenDescriptor, hub: DataHub) -> Dict[str, Dict[Any, Any]]:
    """화면의 정렬 필드가 참조하는 조회 테이블을 현재 데이터로 만듭니다."""
    lookups: Dict[str, Dict[Any, Any]] = {}
    for sort_field in descriptor.sortable_fields.values():
        name = sort_field.lookup
        if not name or name in lookups:
            continue
        entity, label_field = LOOKUP_SOURCES[name]
        lookups[name] = hub.lookup_table(entity, label_field)
    return lookups
