# stockroom/domains/inv/schemas.py

"""
'inv' 도메인 (제품)의 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    name: str = Field(..., max_length=200)
    sku: str = Field(..., max_length=100)
    category: str = Field(..., max_length=100)
    quantity: int = Field(0, ge=0)
    price: float = Field(0, ge=0)
    location: str = Field("", max_length=100)
    supplier_id: Optional[str] = Field(None, description="공급업체(Vendor) ID")
    last_modified_by: Optional[str] = None
    image_url: Optional[str] = None
    expiry_date: Optional[datetime] = None


class Product(ProductBase):
    id: str
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))
