from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from carthi.leads.models import (
    Lead,
    LeadStatus,
    LeadSource,
    FuelType,
    TransmissionType,
    CustomerDetails,
    VehicleDetails,
    ValuationDetails,
)

# Fixed clock for engine tests: Thursday 15 January 2026, 14:30 UTC
NOW = datetime(2026, 1, 15, 14, 30, tzinfo=timezone.utc)


def build_lead(
    lead_id: str,
    status: LeadStatus = LeadStatus.NEW,
    source: LeadSource = LeadSource.WEBSITE,
    created_at: Optional[datetime] = None,
    final_offer_price: Optional[float] = None,
    name: str = "Rajesh Kumar",
    phone: str = "9810011223",
    brand: str = "Maruti Suzuki",
    model: str = "Swift",
    executive: str = "Amit Sharma",
) -> Lead:
    created_at = created_at or NOW - timedelta(hours=1)
    return Lead(
        id=lead_id,
        customer=CustomerDetails(
            name=name,
            phone=phone,
            city="Delhi",
            source=source,
            assigned_sales_executive=executive,
        ),
        vehicle=VehicleDetails(
            brand=brand,
            model=model,
            variant="VXI",
            registration_number="DL3CAB1234",
            registration_year=2018,
            fuel_type=FuelType.PETROL,
            transmission=TransmissionType.MANUAL,
            kms_driven=42000,
            ownership=1,
        ),
        valuation=ValuationDetails(final_offer_price=final_offer_price),
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture(name="make_lead")
def make_lead_fixture():
    return build_lead


@pytest.fixture(name="now")
def now_fixture():
    return NOW
