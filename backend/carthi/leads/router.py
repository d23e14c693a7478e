from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from carthi.analytics.schemas import DateRange, LeadFilters
from carthi.analytics.stats import pipeline_summary
from carthi.database import LeadStore, get_store
from carthi.leads.history_models import LeadHistory
from carthi.leads.models import Lead, LeadStatus, LeadSource
from carthi.leads.schemas import (
    LeadCreate,
    LeadList,
    StatusUpdate,
    NoteCreate,
    FollowUpCreate,
    InspectionSchedule,
    ValuationUpdate,
    InternalUpdate,
)
from carthi.leads import service
from carthi.notifications.bus import EventBus, get_event_bus

router = APIRouter(prefix="/leads", tags=["leads"])

def get_existing_lead(lead_id: str, store: LeadStore = Depends(get_store)) -> Lead:
    lead = service.get_lead(store, lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead

@router.post("/", response_model=Lead)
def create_lead(
    lead_create: LeadCreate,
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.create_lead(store, bus, lead_create)

@router.get("/", response_model=LeadList)
def read_leads(
    date_range: DateRange = DateRange.ALL_TIME,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    search: str = "",
    status: Optional[List[LeadStatus]] = Query(None),
    source: Optional[List[LeadSource]] = Query(None),
    store: LeadStore = Depends(get_store)
):
    filters = LeadFilters(
        date_range=date_range,
        start_date=start_date,
        end_date=end_date,
        search=search,
        statuses=status or [],
        sources=source or [],
    )
    leads = service.get_leads(store, filters)
    return LeadList(leads=leads, summary=pipeline_summary(leads))

@router.get("/{lead_id}", response_model=Lead)
def read_lead(lead: Lead = Depends(get_existing_lead)):
    return lead

@router.patch("/{lead_id}/status", response_model=Lead)
def update_lead_status(
    status_update: StatusUpdate,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.update_status(store, bus, lead, status_update.status)

@router.post("/{lead_id}/notes", response_model=Lead)
def add_lead_note(
    note_create: NoteCreate,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.add_note(store, bus, lead, note_create.note)

@router.post("/{lead_id}/follow-ups", response_model=Lead)
def add_lead_follow_up(
    follow_up: FollowUpCreate,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.add_follow_up(store, bus, lead, follow_up.follow_up_date)

@router.post("/{lead_id}/inspection", response_model=Lead)
def schedule_lead_inspection(
    inspection: InspectionSchedule,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.schedule_inspection(store, bus, lead, inspection.inspection_date, inspection.valuer)

@router.patch("/{lead_id}/valuation", response_model=Lead)
def update_lead_valuation(
    valuation_update: ValuationUpdate,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.update_valuation(store, bus, lead, valuation_update)

@router.patch("/{lead_id}/internal", response_model=Lead)
def update_lead_internal(
    internal_update: InternalUpdate,
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus)
):
    return service.update_internal(store, bus, lead, internal_update)

@router.get("/{lead_id}/history", response_model=List[LeadHistory])
def get_lead_history(
    lead: Lead = Depends(get_existing_lead),
    store: LeadStore = Depends(get_store)
):
    """Activity timeline of the lead, newest first."""
    return service.get_lead_history(store, lead.id)
