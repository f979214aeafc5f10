# stockroom/domains/pur/schemas.py

"""
'pur' 도메인 (발주)의 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from enum import Enum
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import SQLModel, Field


class PurchaseOrderStatus(str, Enum):
    PENDING_APPROVAL = "Pending Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    RECEIVED = "Received"


class PurchaseOrderBase(SQLModel):
    vendor_id: str
    product_id: str
    product_name: str = Field(..., max_length=200)
    quantity: int = Field(..., gt=0)
    requested_by: str = Field(..., max_length=100)
    status: PurchaseOrderStatus = PurchaseOrderStatus.PENDING_APPROVAL
    notes: Optional[str] = None
    approved_by: Optional[str] = None
    action_date: Optional[datetime] = None
    received_by: Optional[str] = None
    received_date: Optional[datetime] = None


class PurchaseOrder(PurchaseOrderBase):
    id: str
    request_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
