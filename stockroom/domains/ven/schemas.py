# stockroom/domains/ven/schemas.py

"""
'ven' 도메인 (공급업체 관리)의 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import SQLModel, Field
from pydantic import EmailStr


class VendorBase(SQLModel):
    name: str = Field(..., max_length=100)
    category: str = Field(..., max_length=100)
    contact_person: str = Field("", max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    last_modified_by: Optional[str] = None


class Vendor(VendorBase):
    id: str
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))
