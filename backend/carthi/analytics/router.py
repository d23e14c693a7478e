from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from carthi.analytics.schemas import DashboardStats, DateRange, LeadFilters, Performer
from carthi.analytics import service
from carthi.config import settings
from carthi.database import LeadStore, get_store
from carthi.leads.models import LeadStatus, LeadSource

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

def get_filters(
    date_range: DateRange = DateRange.ALL_TIME,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    search: str = "",
    status: Optional[List[LeadStatus]] = Query(None),
    source: Optional[List[LeadSource]] = Query(None),
) -> LeadFilters:
    return LeadFilters(
        date_range=date_range,
        start_date=start_date,
        end_date=end_date,
        search=search,
        statuses=status or [],
        sources=source or [],
    )

@router.get("/", response_model=DashboardStats)
def read_dashboard(
    filters: LeadFilters = Depends(get_filters),
    store: LeadStore = Depends(get_store)
):
    return service.build_dashboard(
        store.all(),
        filters,
        recent_limit=settings.RECENT_LEADS_LIMIT,
        leaderboard_size=settings.LEADERBOARD_SIZE,
    )

@router.get("/leaderboard", response_model=List[Performer])
def read_leaderboard(
    filters: LeadFilters = Depends(get_filters),
    limit: Optional[int] = Query(None, ge=1),
    store: LeadStore = Depends(get_store)
):
    return service.get_leaderboard(store.all(), filters, limit=limit or settings.LEADERBOARD_SIZE)
