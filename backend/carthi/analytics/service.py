import logging
from datetime import datetime
from typing import List, Optional, Sequence

from carthi.analytics.daterange import resolve_date_range
from carthi.analytics.filters import filter_leads
from carthi.analytics.leaderboard import build_leaderboard
from carthi.analytics.schemas import DashboardStats, LeadFilters, Performer
from carthi.analytics import stats
from carthi.config import local_now
from carthi.leads.models import Lead, LeadStatus

logger = logging.getLogger(__name__)


def build_dashboard(
    leads: Sequence[Lead],
    filters: Optional[LeadFilters] = None,
    *,
    now: Optional[datetime] = None,
    recent_limit: int = 5,
    leaderboard_size: int = 3,
) -> DashboardStats:
    filters = filters or LeadFilters()
    # One instant for both the reported window and the filter
    now = now or local_now()
    window = resolve_date_range(filters.date_range, filters.start_date, filters.end_date, now=now)
    selected = filter_leads(leads, filters, now=now)

    dashboard = DashboardStats(
        window=window,
        total_leads=len(selected),
        new_leads=stats.count_by_status(selected, LeadStatus.NEW),
        closed_leads=stats.count_by_status(selected, LeadStatus.CLOSED),
        rejected_leads=stats.count_by_status(selected, LeadStatus.REJECTED),
        total_revenue=stats.total_revenue(selected),
        conversion_rate=stats.conversion_rate(selected),
        average_deal_value=stats.average_deal_value(selected),
        distribution=stats.status_distribution(selected),
        recent_leads=stats.recent_leads(selected, recent_limit),
        top_performers=build_leaderboard(selected, leaderboard_size),
    )
    logger.debug(
        "Dashboard over %d leads: closed=%d revenue=%.2f",
        dashboard.total_leads,
        dashboard.closed_leads,
        dashboard.total_revenue,
    )
    return dashboard


def get_leaderboard(
    leads: Sequence[Lead],
    filters: Optional[LeadFilters] = None,
    *,
    now: Optional[datetime] = None,
    limit: Optional[int] = 3,
) -> List[Performer]:
    return build_leaderboard(filter_leads(leads, filters, now=now), limit)
