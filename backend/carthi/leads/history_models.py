from typing import Optional
from sqlmodel import SQLModel, Field
import uuid
from datetime import datetime
from enum import Enum

from carthi.leads.models import utc_now

class LeadAction(str, Enum):
    CREATED = "created"
    STATUS_CHANGED = "status_changed"
    NOTE_ADDED = "note_added"
    FOLLOW_UP_ADDED = "follow_up_added"
    INSPECTION_SCHEDULED = "inspection_scheduled"
    VALUATION_UPDATED = "valuation_updated"
    INTERNAL_UPDATED = "internal_updated"

class LeadHistory(SQLModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    lead_id: str
    action: LeadAction
    description: str

    # Only the fields that changed
    old_value: Optional[dict] = None
    new_value: Optional[dict] = None

    created_at: datetime = Field(default_factory=utc_now)
