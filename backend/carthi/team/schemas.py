from pydantic import BaseModel

from carthi.team.models import TeamMember

class TeamMemberRead(TeamMember):
    avatar: str
    leads_assigned: int = 0
    leads_converted: int = 0
    revenue: float = 0.0

class TeamSummary(BaseModel):
    members: int
    total_revenue: float
    total_leads: int
    average_conversion: float
