"""
Summary metrics over a lead collection.

Every function here is pure: it reads the leads it is given and never
modifies them. Empty collections produce zeros, never ZeroDivisionError.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence

from carthi.analytics.schemas import DistributionEntry, LeadSummary, StatusBucket
from carthi.leads.models import Lead, LeadStatus

logger = logging.getLogger(__name__)

STATUS_BUCKETS: Dict[LeadStatus, StatusBucket] = {
    LeadStatus.NEW: StatusBucket.NEW,
    LeadStatus.CONTACTED: StatusBucket.CONTACTED,
    LeadStatus.VALUATION_SCHEDULED: StatusBucket.VALUATION,
    LeadStatus.VALUATION_COMPLETED: StatusBucket.VALUATION,
    LeadStatus.NEGOTIATION: StatusBucket.NEGOTIATION,
    LeadStatus.CLOSED: StatusBucket.CLOSED,
    LeadStatus.REJECTED: StatusBucket.REJECTED,
}

# Statuses shown as "In Progress" on the leads page
IN_PROGRESS_STATUSES = frozenset({
    LeadStatus.CONTACTED,
    LeadStatus.VALUATION_SCHEDULED,
    LeadStatus.NEGOTIATION,
})


def round_half_up(value: float, places: int = 0) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def deal_revenue(lead: Lead) -> float:
    """Final offer of a closed deal; anything else contributes nothing."""
    if lead.status != LeadStatus.CLOSED:
        return 0.0
    return lead.valuation.final_offer_price or 0.0


def count_by_status(leads: Sequence[Lead], status: LeadStatus) -> int:
    return sum(1 for lead in leads if lead.status == status)


def count_by_bucket(leads: Sequence[Lead], bucket: StatusBucket) -> int:
    return sum(1 for lead in leads if STATUS_BUCKETS.get(lead.status) == bucket)


def total_revenue(leads: Sequence[Lead]) -> float:
    return sum((deal_revenue(lead) for lead in leads), 0.0)


def conversion_rate(leads: Sequence[Lead]) -> float:
    """Closed leads as a percentage of all leads, one decimal place."""
    if not leads:
        return 0.0
    closed = count_by_status(leads, LeadStatus.CLOSED)
    rate = round_half_up(closed / len(leads) * 100, 1)
    logger.debug("Conversion %d of %d leads = %s%%", closed, len(leads), rate)
    return rate


def average_deal_value(leads: Sequence[Lead]) -> float:
    closed = count_by_status(leads, LeadStatus.CLOSED)
    if closed == 0:
        return 0.0
    return total_revenue(leads) / closed


def status_distribution(leads: Sequence[Lead]) -> List[DistributionEntry]:
    total = len(leads)
    entries = []
    for bucket in StatusBucket:
        count = count_by_bucket(leads, bucket)
        percentage = int(round_half_up(count / total * 100)) if total else 0
        entries.append(DistributionEntry(bucket=bucket, count=count, percentage=percentage))
    logger.debug("Status distribution over %d leads: %s", total, {e.bucket.value: e.count for e in entries})
    return entries


def recent_leads(leads: Sequence[Lead], limit: int = 5) -> List[Lead]:
    # sorted() is stable, so leads created at the same instant keep their order
    ordered = sorted(leads, key=lambda lead: lead.created_at, reverse=True)
    return ordered[:limit]


def pipeline_summary(leads: Sequence[Lead]) -> LeadSummary:
    return LeadSummary(
        total=len(leads),
        new=count_by_status(leads, LeadStatus.NEW),
        in_progress=sum(1 for lead in leads if lead.status in IN_PROGRESS_STATUSES),
        closed=count_by_status(leads, LeadStatus.CLOSED),
    )
