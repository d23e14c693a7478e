import logging
from typing import Dict, List, Optional, Sequence

from carthi.analytics.schemas import Performer
from carthi.analytics.stats import deal_revenue
from carthi.leads.models import Lead, LeadStatus

logger = logging.getLogger(__name__)


def salesperson_stats(leads: Sequence[Lead]) -> List[Performer]:
    """Per-salesperson totals in first-encountered order."""
    groups: Dict[str, dict] = {}
    for lead in leads:
        name = lead.customer.assigned_sales_executive
        group = groups.setdefault(name, {"total": 0, "closed": 0, "revenue": 0.0})
        group["total"] += 1
        if lead.status == LeadStatus.CLOSED:
            group["closed"] += 1
            group["revenue"] += deal_revenue(lead)

    logger.debug("Grouped %d leads under %d salespeople", len(leads), len(groups))
    return [Performer(name=name, **group) for name, group in groups.items()]


def build_leaderboard(leads: Sequence[Lead], limit: Optional[int] = 3) -> List[Performer]:
    """Salespeople ranked by closed deals, best first. ``limit=None`` keeps everyone."""
    # reverse=True keeps sorted() stable, ties stay in first-encountered order
    ranked = sorted(salesperson_stats(leads), key=lambda p: p.closed, reverse=True)
    if limit is None:
        return ranked
    return ranked[:limit]
