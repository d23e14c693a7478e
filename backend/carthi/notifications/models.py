from typing import Optional
from sqlmodel import SQLModel, Field
import uuid
from datetime import datetime
from enum import Enum

from carthi.leads.models import utc_now

class NotificationType(str, Enum):
    LEAD = "lead"
    STATUS = "status"
    VALUATION = "valuation"
    SYSTEM = "system"
    TEAM = "team"

class LeadEvent(SQLModel):
    type: NotificationType
    title: str
    message: str
    lead_id: Optional[str] = None
    action_url: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)

class Notification(SQLModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    type: NotificationType
    title: str
    message: str
    timestamp: datetime = Field(default_factory=utc_now)
    read: bool = False
    action_url: Optional[str] = None
