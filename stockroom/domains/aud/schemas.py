# stockroom/domains/aud/schemas.py

from datetime import datetime, UTC
from sqlmodel import SQLModel, Field


class AuditLogEntryBase(SQLModel):
    user: str = Field(..., max_length=100)
    action: str = Field(..., max_length=200)   # 예: 'Created Product'
    details: str = ""


class AuditLogEntry(AuditLogEntryBase):
    id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
