from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import date
from typing import List, Literal, Optional, Union
from carthi.leads.models import (
    Lead,
    LeadStatus,
    LeadSource,
    FuelType,
    TransmissionType,
    ValuationStatus,
    DocumentStatus,
    ApprovalStatus,
)
from carthi.analytics.schemas import LeadSummary

class LeadCreate(BaseModel):
    # Customer details
    customer_name: str = Field(min_length=2)
    phone: str = Field(min_length=10)
    alternate_phone: Optional[str] = None
    email: Optional[Union[EmailStr, Literal[""]]] = None
    city: str = Field(min_length=2)
    source: LeadSource
    assigned_sales_executive: str = Field(min_length=2)

    # Vehicle details
    brand: str = Field(min_length=2)
    model: str = Field(min_length=2)
    variant: str = Field(min_length=2)
    registration_number: str = Field(min_length=5)
    registration_year: int = Field(ge=1990)
    fuel_type: FuelType
    transmission: TransmissionType
    kms_driven: int = Field(ge=0)
    ownership: int = Field(ge=1, le=5)
    insurance_valid_till: Optional[date] = None
    expected_price: Optional[float] = Field(default=None, ge=0)

    @field_validator("registration_year")
    @classmethod
    def not_in_future(cls, value: int) -> int:
        if value > date.today().year:
            raise ValueError("Registration year cannot be in the future")
        return value


class StatusUpdate(BaseModel):
    status: LeadStatus

class NoteCreate(BaseModel):
    note: str = Field(min_length=1)

    @field_validator("note")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Note cannot be blank")
        return value

class FollowUpCreate(BaseModel):
    follow_up_date: date

class InspectionSchedule(BaseModel):
    inspection_date: date
    valuer: str = Field(min_length=2)

class ValuationUpdate(BaseModel):
    status: Optional[ValuationStatus] = None
    estimated_price: Optional[float] = Field(default=None, ge=0)
    final_offer_price: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value: Optional[ValuationStatus]) -> ValuationStatus:
        if value is None:
            raise ValueError("Valuation status cannot be null")
        return value

class InternalUpdate(BaseModel):
    relationship_manager: Optional[str] = None
    document_status: Optional[DocumentStatus] = None
    approval_status: Optional[ApprovalStatus] = None

    # Omit a field to leave it unchanged; the process statuses are never empty
    @field_validator("document_status", "approval_status")
    @classmethod
    def status_not_null(cls, value):
        if value is None:
            raise ValueError("Status cannot be null")
        return value

class LeadList(BaseModel):
    leads: List[Lead]
    summary: LeadSummary
