from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List

from carthi.database import LeadStore, get_store
from carthi.team.models import Department, TeamMember
from carthi.team.schemas import TeamMemberRead, TeamSummary
from carthi.team import service

router = APIRouter(prefix="/team", tags=["team"])

def get_roster(request: Request) -> List[TeamMember]:
    return request.app.state.team

@router.get("/", response_model=List[TeamMemberRead])
def read_team(
    search: str = "",
    department: str = "All",
    roster: List[TeamMember] = Depends(get_roster),
    store: LeadStore = Depends(get_store)
):
    selected = None
    if department != "All":
        try:
            selected = Department(department)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Unknown department '{department}'")
    return service.get_members(roster, store.all(), search=search, department=selected)

@router.get("/summary", response_model=TeamSummary)
def read_team_summary(
    roster: List[TeamMember] = Depends(get_roster),
    store: LeadStore = Depends(get_store)
):
    return service.get_summary(roster, store.all())
