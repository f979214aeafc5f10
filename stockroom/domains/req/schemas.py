# stockroom/domains/req/schemas.py

"""
'req' 도메인 (품목 요청)의 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from enum import Enum
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import SQLModel, Field


class RequestStatus(str, Enum):
    PENDING_APPROVAL = "Pending Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COLLECTED = "Collected"


class RequestPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# 우선순위 정렬 순서 (오름차순 기준 Low -> High)
PRIORITY_RANKS = {
    RequestPriority.LOW.value: 1,
    RequestPriority.MEDIUM.value: 2,
    RequestPriority.HIGH.value: 3,
}

DIVISIONS = ["Marketing", "IT", "Operations", "Human Resources", "Finance"]


class ItemRequestBase(SQLModel):
    requesting_division: str = Field(..., max_length=100)
    product_id: str
    product_name: str = Field(..., max_length=200)
    quantity: int = Field(..., gt=0)
    status: RequestStatus = RequestStatus.PENDING_APPROVAL
    priority: RequestPriority = RequestPriority.MEDIUM
    notes: Optional[str] = None
    approved_by: Optional[str] = None      # 승인/반려 처리자
    action_date: Optional[datetime] = None
    collected_by: Optional[str] = None     # 수령 처리자
    collection_date: Optional[datetime] = None


class ItemRequest(ItemRequestBase):
    id: str
    request_date: datetime = Field(default_factory=lambda: datetime.now(UTC))
