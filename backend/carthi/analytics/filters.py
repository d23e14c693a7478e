import logging
from datetime import datetime
from typing import Iterable, List, Optional

from carthi.analytics.daterange import resolve_date_range
from carthi.analytics.schemas import LeadFilters
from carthi.leads.models import Lead

logger = logging.getLogger(__name__)


def matches_search(lead: Lead, query: str) -> bool:
    if not query:
        return True
    query = query.lower()
    haystack = (
        lead.customer.name,
        lead.customer.phone,
        lead.vehicle.model,
        lead.vehicle.brand,
        lead.id,
    )
    return any(query in field.lower() for field in haystack)


def filter_leads(
    leads: Iterable[Lead],
    filters: Optional[LeadFilters] = None,
    now: Optional[datetime] = None,
) -> List[Lead]:
    """Leads matching every active filter, in their original order."""
    filters = filters or LeadFilters()
    window = resolve_date_range(
        filters.date_range, filters.start_date, filters.end_date, now=now
    )
    statuses = set(filters.statuses)
    sources = set(filters.sources)

    result = []
    total = 0
    for lead in leads:
        total += 1
        if window is not None and not window.contains(lead.created_at):
            continue
        if not matches_search(lead, filters.search):
            continue
        if statuses and lead.status not in statuses:
            continue
        if sources and lead.customer.source not in sources:
            continue
        result.append(lead)

    logger.debug("Filtered %d of %d leads (%s)", len(result), total, filters)
    return result
