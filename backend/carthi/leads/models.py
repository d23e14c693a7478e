from typing import Optional, List
from sqlmodel import SQLModel, Field
from datetime import date, datetime, timezone
from enum import Enum

class LeadStatus(str, Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    VALUATION_SCHEDULED = "Valuation Scheduled"
    VALUATION_COMPLETED = "Valuation Completed"
    NEGOTIATION = "Negotiation"
    CLOSED = "Closed"
    REJECTED = "Rejected"

class LeadSource(str, Enum):
    WEBSITE = "Website"
    CALL = "Call"
    WALK_IN = "Walk-in"
    PARTNER = "Partner"

class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    CNG = "CNG"
    ELECTRIC = "Electric"

class TransmissionType(str, Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"

class ValuationStatus(str, Enum):
    PENDING = "Pending"
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"

class DocumentStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"

class ApprovalStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CustomerDetails(SQLModel):
    name: str
    phone: str
    alternate_phone: Optional[str] = None
    email: Optional[str] = None
    city: str
    source: LeadSource
    assigned_sales_executive: str

class VehicleDetails(SQLModel):
    brand: str
    model: str
    variant: str
    registration_number: str
    registration_year: int
    fuel_type: FuelType
    transmission: TransmissionType
    kms_driven: int
    ownership: int
    insurance_valid_till: Optional[date] = None
    expected_price: Optional[float] = None

class ValuationDetails(SQLModel):
    status: ValuationStatus = Field(default=ValuationStatus.PENDING)
    assigned_valuer: Optional[str] = None
    inspection_date: Optional[date] = None
    estimated_price: Optional[float] = None
    final_offer_price: Optional[float] = None
    notes: Optional[str] = None

class InternalProcess(SQLModel):
    relationship_manager: Optional[str] = None
    # Both lists are append-only
    follow_up_dates: List[date] = Field(default_factory=list)
    call_notes: List[str] = Field(default_factory=list)
    document_status: DocumentStatus = Field(default=DocumentStatus.PENDING)
    approval_status: ApprovalStatus = Field(default=ApprovalStatus.PENDING)

class Lead(SQLModel):
    id: str
    customer: CustomerDetails
    vehicle: VehicleDetails
    valuation: ValuationDetails = Field(default_factory=ValuationDetails)
    internal: InternalProcess = Field(default_factory=InternalProcess)
    status: LeadStatus = Field(default=LeadStatus.NEW)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def touch(self) -> None:
        self.updated_at = utc_now()
