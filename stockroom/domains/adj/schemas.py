# stockroom/domains/adj/schemas.py

from enum import Enum
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import SQLModel, Field


class AdjustmentReason(str, Enum):
    STOCKTAKE = "Stocktake"
    DAMAGED_GOODS = "Damaged Goods"
    RETURN = "Return"
    FOUND = "Found"
    OTHER = "Other"


class StockAdjustmentBase(SQLModel):
    product_id: str
    product_name: str = Field(..., max_length=200)
    quantity_change: int = Field(..., description="증가(+) 또는 감소(-) 수량")
    reason: AdjustmentReason
    adjusted_by: str = Field(..., max_length=100)
    notes: Optional[str] = None


class StockAdjustment(StockAdjustmentBase):
    id: str
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
