import logging
from typing import List, Optional, Sequence

from carthi.analytics.leaderboard import salesperson_stats
from carthi.analytics.stats import round_half_up
from carthi.leads.models import Lead
from carthi.team.models import Department, TeamMember
from carthi.team.schemas import TeamMemberRead, TeamSummary

logger = logging.getLogger(__name__)

def get_members(
    roster: Sequence[TeamMember],
    leads: Sequence[Lead],
    search: str = "",
    department: Optional[Department] = None,
) -> List[TeamMemberRead]:
    """Roster entries matching ``search`` (name or email) and ``department``, with lead stats."""
    stats = {performer.name: performer for performer in salesperson_stats(leads)}
    query = search.lower()

    members = []
    for member in roster:
        if query and query not in member.name.lower() and query not in member.email.lower():
            continue
        if department is not None and member.department != department:
            continue
        performer = stats.get(member.name)
        members.append(TeamMemberRead(
            **member.model_dump(),
            avatar=member.initials,
            leads_assigned=performer.total if performer else 0,
            leads_converted=performer.closed if performer else 0,
            revenue=performer.revenue if performer else 0.0,
        ))
    logger.debug("Team query search=%r department=%s matched %d", search, department, len(members))
    return members

def get_summary(roster: Sequence[TeamMember], leads: Sequence[Lead]) -> TeamSummary:
    members = get_members(roster, leads)
    total_leads = sum(m.leads_assigned for m in members)
    total_converted = sum(m.leads_converted for m in members)
    average = round_half_up(total_converted / total_leads * 100, 1) if total_leads else 0.0
    return TeamSummary(
        members=len(members),
        total_revenue=sum((m.revenue for m in members), 0.0),
        total_leads=total_leads,
        average_conversion=average,
    )
