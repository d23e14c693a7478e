from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional
from enum import Enum

from carthi.leads.models import Lead, LeadStatus, LeadSource

class DateRange(str, Enum):
    TODAY = "today"
    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"
    ALL_TIME = "all-time"
    CUSTOM = "custom"

class DateWindow(BaseModel):
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

class LeadFilters(BaseModel):
    date_range: DateRange = DateRange.ALL_TIME
    # Only read for DateRange.CUSTOM, as YYYY-MM-DD
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    search: str = ""
    statuses: List[LeadStatus] = Field(default_factory=list)
    sources: List[LeadSource] = Field(default_factory=list)

class StatusBucket(str, Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    VALUATION = "Valuation"
    NEGOTIATION = "Negotiation"
    CLOSED = "Closed"
    REJECTED = "Rejected"

class DistributionEntry(BaseModel):
    bucket: StatusBucket
    count: int
    percentage: int

class Performer(BaseModel):
    name: str
    total: int
    closed: int
    revenue: float

class LeadSummary(BaseModel):
    total: int
    new: int
    in_progress: int
    closed: int

class DashboardStats(BaseModel):
    window: Optional[DateWindow] = None
    total_leads: int
    new_leads: int
    closed_leads: int
    rejected_leads: int
    total_revenue: float
    conversion_rate: float
    average_deal_value: float
    distribution: List[DistributionEntry]
    recent_leads: List[Lead]
    top_performers: List[Performer]
