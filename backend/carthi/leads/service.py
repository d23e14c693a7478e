import logging
from datetime import date, datetime
from enum import Enum
from typing import Optional, List

from carthi.analytics.filters import filter_leads
from carthi.analytics.schemas import LeadFilters
from carthi.database import LeadStore
from carthi.leads.history_models import LeadHistory, LeadAction
from carthi.leads.models import (
    Lead,
    LeadStatus,
    CustomerDetails,
    VehicleDetails,
    ValuationDetails,
    ValuationStatus,
    InternalProcess,
    utc_now,
)
from carthi.leads.schemas import LeadCreate, ValuationUpdate, InternalUpdate
from carthi.notifications.bus import EventBus
from carthi.notifications.models import LeadEvent, NotificationType

logger = logging.getLogger(__name__)

def _plain(value):
    """JSON-friendly copy of a field value for history entries."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value

def _publish(bus: EventBus, lead: Lead, kind: NotificationType, title: str, message: str) -> None:
    bus.publish(LeadEvent(
        type=kind,
        title=title,
        message=message,
        lead_id=lead.id,
        action_url=f"/leads/{lead.id}",
    ))

def create_lead(store: LeadStore, bus: EventBus, lead_create: LeadCreate) -> Lead:
    data = lead_create.model_dump()
    now = utc_now()
    with store.transaction():
        lead = Lead(
            id=store.next_id(),
            customer=CustomerDetails(
                name=data["customer_name"],
                phone=data["phone"],
                alternate_phone=data["alternate_phone"],
                email=data["email"] or None,
                city=data["city"],
                source=data["source"],
                assigned_sales_executive=data["assigned_sales_executive"],
            ),
            vehicle=VehicleDetails(
                brand=data["brand"],
                model=data["model"],
                variant=data["variant"],
                registration_number=data["registration_number"],
                registration_year=data["registration_year"],
                fuel_type=data["fuel_type"],
                transmission=data["transmission"],
                kms_driven=data["kms_driven"],
                ownership=data["ownership"],
                insurance_valid_till=data["insurance_valid_till"],
                expected_price=data["expected_price"],
            ),
            valuation=ValuationDetails(),
            internal=InternalProcess(),
            status=LeadStatus.NEW,
            created_at=now,
            updated_at=now,
        )
        store.add(lead)

    create_lead_history(
        store,
        lead_id=lead.id,
        action=LeadAction.CREATED,
        description=f"Lead '{lead.customer.name}' was created",
        new_value={"status": lead.status.value, "source": lead.customer.source.value},
    )
    logger.info("Created lead %s for %s", lead.id, lead.customer.name)
    _publish(bus, lead, NotificationType.LEAD, "New Lead Created",
             f"Lead {lead.id} created successfully!")
    return lead

def get_leads(store: LeadStore, filters: Optional[LeadFilters] = None, now: Optional[datetime] = None) -> List[Lead]:
    return filter_leads(store.all(), filters, now=now)

def get_lead(store: LeadStore, lead_id: str) -> Optional[Lead]:
    return store.get(lead_id)

def update_status(store: LeadStore, bus: EventBus, lead: Lead, status: LeadStatus) -> Lead:
    old_status = lead.status
    with store.transaction():
        lead.status = status
        lead.touch()

    if old_status != status:
        create_lead_history(
            store,
            lead_id=lead.id,
            action=LeadAction.STATUS_CHANGED,
            description=f"Status: {old_status.value} → {status.value}",
            old_value={"status": old_status.value},
            new_value={"status": status.value},
        )
    logger.info("Lead %s status %s -> %s", lead.id, old_status.value, status.value)
    _publish(bus, lead, NotificationType.STATUS, "Lead Status Updated",
             f"Lead status updated to {status.value}")
    return lead

def add_note(store: LeadStore, bus: EventBus, lead: Lead, note: str) -> Lead:
    with store.transaction():
        lead.internal.call_notes.append(note)
        lead.touch()

    create_lead_history(
        store,
        lead_id=lead.id,
        action=LeadAction.NOTE_ADDED,
        description="Call note added",
        new_value={"note": note},
    )
    logger.info("Note added to lead %s", lead.id)
    _publish(bus, lead, NotificationType.LEAD, "Note Added", "Note added successfully")
    return lead

def add_follow_up(store: LeadStore, bus: EventBus, lead: Lead, follow_up_date: date) -> Lead:
    with store.transaction():
        lead.internal.follow_up_dates.append(follow_up_date)
        lead.touch()

    create_lead_history(
        store,
        lead_id=lead.id,
        action=LeadAction.FOLLOW_UP_ADDED,
        description=f"Follow-up planned for {follow_up_date.isoformat()}",
        new_value={"follow_up_date": follow_up_date.isoformat()},
    )
    logger.info("Follow-up %s added to lead %s", follow_up_date, lead.id)
    _publish(bus, lead, NotificationType.LEAD, "Follow-up Reminder",
             f"Follow up with Lead {lead.id} - {lead.customer.name} on {follow_up_date.isoformat()}")
    return lead

def schedule_inspection(store: LeadStore, bus: EventBus, lead: Lead, inspection_date: date, valuer: str) -> Lead:
    valuation = lead.valuation
    old_value = {
        "inspection_date": _plain(valuation.inspection_date),
        "assigned_valuer": valuation.assigned_valuer,
        "status": valuation.status.value,
    }
    with store.transaction():
        valuation.inspection_date = inspection_date
        valuation.assigned_valuer = valuer
        valuation.status = ValuationStatus.SCHEDULED
        lead.touch()

    create_lead_history(
        store,
        lead_id=lead.id,
        action=LeadAction.INSPECTION_SCHEDULED,
        description=f"Inspection scheduled for {inspection_date.isoformat()} with {valuer}",
        old_value=old_value,
        new_value={
            "inspection_date": inspection_date.isoformat(),
            "assigned_valuer": valuer,
            "status": ValuationStatus.SCHEDULED.value,
        },
    )
    logger.info("Inspection for lead %s scheduled on %s (%s)", lead.id, inspection_date, valuer)
    _publish(bus, lead, NotificationType.VALUATION, "Inspection Scheduled",
             f"Inspection scheduled for {inspection_date.isoformat()}")
    return lead

def _apply_changes(target, update_data: dict):
    changes = []
    changed_old = {}  # Only store changed fields
    changed_new = {}
    for key, value in update_data.items():
        old_value = getattr(target, key)
        if old_value != value:
            setattr(target, key, value)
            changes.append(f"{key}: {_plain(old_value)} → {_plain(value)}")
            changed_old[key] = _plain(old_value)
            changed_new[key] = _plain(value)
    return changes, changed_old, changed_new

def update_valuation(store: LeadStore, bus: EventBus, lead: Lead, valuation_update: ValuationUpdate) -> Lead:
    update_data = valuation_update.model_dump(exclude_unset=True)
    with store.transaction():
        changes, changed_old, changed_new = _apply_changes(lead.valuation, update_data)
        lead.touch()

    if changes:
        create_lead_history(
            store,
            lead_id=lead.id,
            action=LeadAction.VALUATION_UPDATED,
            description=f"Valuation updated: {', '.join(changes)}",
            old_value=changed_old,
            new_value=changed_new,
        )
        logger.info("Valuation of lead %s updated: %s", lead.id, ", ".join(changes))

    if lead.valuation.status == ValuationStatus.COMPLETED and "status" in changed_new:
        message = f"Valuation for Lead {lead.id} - {lead.customer.name} has been completed."
        if lead.valuation.final_offer_price is not None:
            message += f" Final offer: {lead.valuation.final_offer_price:,.0f}"
        _publish(bus, lead, NotificationType.VALUATION, "Valuation Completed", message)
    return lead

def update_internal(store: LeadStore, bus: EventBus, lead: Lead, internal_update: InternalUpdate) -> Lead:
    update_data = internal_update.model_dump(exclude_unset=True)
    with store.transaction():
        changes, changed_old, changed_new = _apply_changes(lead.internal, update_data)
        lead.touch()

    if changes:
        create_lead_history(
            store,
            lead_id=lead.id,
            action=LeadAction.INTERNAL_UPDATED,
            description=f"Internal process updated: {', '.join(changes)}",
            old_value=changed_old,
            new_value=changed_new,
        )
        logger.info("Internal process of lead %s updated: %s", lead.id, ", ".join(changes))
    return lead

def create_lead_history(
    store: LeadStore,
    lead_id: str,
    action: LeadAction,
    description: str,
    old_value: Optional[dict] = None,
    new_value: Optional[dict] = None
) -> LeadHistory:
    """Helper function to record a lead history entry."""
    history = LeadHistory(
        lead_id=lead_id,
        action=action,
        description=description,
        old_value=old_value,
        new_value=new_value
    )
    return store.add_history(history)

def get_lead_history(store: LeadStore, lead_id: str) -> List[LeadHistory]:
    """History for a lead, newest first. Unknown leads have none."""
    if not store.get(lead_id):
        return []
    return store.history(lead_id)
