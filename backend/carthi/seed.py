"""Demo data loaded into the in-memory store at startup."""

from datetime import date, datetime, timedelta
from typing import List, Optional

from carthi.leads.models import (
    Lead,
    LeadStatus,
    LeadSource,
    FuelType,
    TransmissionType,
    ValuationStatus,
    DocumentStatus,
    ApprovalStatus,
    CustomerDetails,
    VehicleDetails,
    ValuationDetails,
    InternalProcess,
    utc_now,
)
from carthi.team.models import TeamMember, MemberStatus, Department


def _vehicle(brand, model, variant, reg, year, fuel, transmission, kms, owners, expected):
    return VehicleDetails(
        brand=brand,
        model=model,
        variant=variant,
        registration_number=reg,
        registration_year=year,
        fuel_type=fuel,
        transmission=transmission,
        kms_driven=kms,
        ownership=owners,
        expected_price=expected,
    )


def _customer(name, phone, city, source, executive, email=None):
    return CustomerDetails(
        name=name,
        phone=phone,
        email=email,
        city=city,
        source=source,
        assigned_sales_executive=executive,
    )


def demo_leads(now: Optional[datetime] = None) -> List[Lead]:
    """Ten leads spread over the last ~two months, newest first."""
    now = now or utc_now()

    def at(days_ago: float) -> datetime:
        return now - timedelta(days=days_ago)

    leads = [
        Lead(
            id="L001",
            customer=_customer("Rajesh Kumar", "+91 98100 11223", "Delhi",
                               LeadSource.WEBSITE, "Amit Sharma", "rajesh.kumar@example.com"),
            vehicle=_vehicle("Maruti Suzuki", "Swift", "VXI", "DL3CAB1234", 2018,
                             FuelType.PETROL, TransmissionType.MANUAL, 42000, 1, 450000),
            status=LeadStatus.NEW,
            created_at=at(0.1),
            updated_at=at(0.1),
        ),
        Lead(
            id="L002",
            customer=_customer("Priya Sharma", "+91 98200 22334", "Mumbai",
                               LeadSource.CALL, "Vikram Singh"),
            vehicle=_vehicle("Hyundai", "Creta", "SX", "MH02DE5678", 2020,
                             FuelType.DIESEL, TransmissionType.AUTOMATIC, 35000, 1, 1150000),
            valuation=ValuationDetails(
                status=ValuationStatus.SCHEDULED,
                assigned_valuer="Prakash Joshi",
                inspection_date=(now + timedelta(days=2)).date(),
            ),
            internal=InternalProcess(
                relationship_manager="Sneha Patel",
                follow_up_dates=[(now + timedelta(days=1)).date()],
                call_notes=["Customer wants inspection at home on a weekday"],
            ),
            status=LeadStatus.VALUATION_SCHEDULED,
            created_at=at(2),
            updated_at=at(1),
        ),
        Lead(
            id="L003",
            customer=_customer("Amit Patel", "+91 98250 33445", "Ahmedabad",
                               LeadSource.WALK_IN, "Amit Sharma"),
            vehicle=_vehicle("Honda", "City", "ZX", "GJ01FG9012", 2019,
                             FuelType.PETROL, TransmissionType.AUTOMATIC, 38000, 1, 800000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Rahul Mehta",
                inspection_date=at(4).date(),
                estimated_price=760000,
                final_offer_price=775000,
                notes="Minor scratches on rear bumper",
            ),
            internal=InternalProcess(
                call_notes=["Agreed on final offer", "Documents collected"],
                document_status=DocumentStatus.COMPLETED,
                approval_status=ApprovalStatus.APPROVED,
            ),
            status=LeadStatus.CLOSED,
            created_at=at(6),
            updated_at=at(3),
        ),
        Lead(
            id="L004",
            customer=_customer("Sneha Gupta", "+91 98300 44556", "Kolkata",
                               LeadSource.PARTNER, "Rohan Kumar"),
            vehicle=_vehicle("Tata", "Nexon", "XZ+", "WB06HJ3456", 2021,
                             FuelType.ELECTRIC, TransmissionType.AUTOMATIC, 18000, 1, 1250000),
            internal=InternalProcess(call_notes=["Asked to call back after salary day"]),
            status=LeadStatus.CONTACTED,
            created_at=at(9),
            updated_at=at(8),
        ),
        Lead(
            id="L005",
            customer=_customer("Arjun Reddy", "+91 98400 55667", "Hyderabad",
                               LeadSource.WEBSITE, "Vikram Singh"),
            vehicle=_vehicle("Toyota", "Innova Crysta", "GX", "TS09KL7890", 2017,
                             FuelType.DIESEL, TransmissionType.MANUAL, 96000, 2, 1400000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Prakash Joshi",
                inspection_date=at(12).date(),
                estimated_price=1320000,
                final_offer_price=1350000,
            ),
            internal=InternalProcess(
                document_status=DocumentStatus.COMPLETED,
                approval_status=ApprovalStatus.APPROVED,
            ),
            status=LeadStatus.CLOSED,
            created_at=at(15),
            updated_at=at(11),
        ),
        Lead(
            id="L006",
            customer=_customer("Kavya Nair", "+91 98450 66778", "Bengaluru",
                               LeadSource.CALL, "Rohan Kumar"),
            vehicle=_vehicle("Kia", "Seltos", "HTX", "KA05MN2345", 2020,
                             FuelType.PETROL, TransmissionType.MANUAL, 41000, 1, 1100000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Rahul Mehta",
                inspection_date=at(18).date(),
                estimated_price=980000,
            ),
            status=LeadStatus.NEGOTIATION,
            created_at=at(21),
            updated_at=at(17),
        ),
        Lead(
            id="L007",
            customer=_customer("Manoj Verma", "+91 98500 77889", "Jaipur",
                               LeadSource.WALK_IN, "Amit Sharma"),
            vehicle=_vehicle("Mahindra", "XUV500", "W8", "RJ14PQ6789", 2016,
                             FuelType.DIESEL, TransmissionType.MANUAL, 120000, 3, 700000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Prakash Joshi",
                estimated_price=520000,
                notes="Engine overhaul due",
            ),
            internal=InternalProcess(approval_status=ApprovalStatus.REJECTED),
            status=LeadStatus.REJECTED,
            created_at=at(27),
            updated_at=at(24),
        ),
        Lead(
            id="L008",
            customer=_customer("Divya Iyer", "+91 98600 88990", "Chennai",
                               LeadSource.PARTNER, "Vikram Singh"),
            vehicle=_vehicle("Maruti Suzuki", "Baleno", "Alpha", "TN07RS1122", 2019,
                             FuelType.CNG, TransmissionType.MANUAL, 56000, 1, 600000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Rahul Mehta",
                estimated_price=560000,
            ),
            status=LeadStatus.VALUATION_COMPLETED,
            created_at=at(34),
            updated_at=at(30),
        ),
        Lead(
            id="L009",
            customer=_customer("Suresh Menon", "+91 98700 99001", "Kochi",
                               LeadSource.WEBSITE, "Rohan Kumar"),
            vehicle=_vehicle("Volkswagen", "Polo", "Highline", "KL07TU3344", 2015,
                             FuelType.PETROL, TransmissionType.MANUAL, 88000, 2, 380000),
            valuation=ValuationDetails(
                status=ValuationStatus.COMPLETED,
                assigned_valuer="Prakash Joshi",
                estimated_price=350000,
                final_offer_price=365000,
            ),
            internal=InternalProcess(
                document_status=DocumentStatus.COMPLETED,
                approval_status=ApprovalStatus.APPROVED,
            ),
            status=LeadStatus.CLOSED,
            created_at=at(45),
            updated_at=at(40),
        ),
        Lead(
            id="L010",
            customer=_customer("Neha Joshi", "+91 98800 10112", "Pune",
                               LeadSource.CALL, "Amit Sharma"),
            vehicle=_vehicle("Skoda", "Rapid", "Style", "MH12VW5566", 2018,
                             FuelType.DIESEL, TransmissionType.AUTOMATIC, 67000, 1, 650000),
            status=LeadStatus.NEW,
            created_at=at(58),
            updated_at=at(58),
        ),
    ]
    return sorted(leads, key=lambda lead: lead.created_at, reverse=True)


def demo_team() -> List[TeamMember]:
    return [
        TeamMember(id="1", name="Amit Sharma", role="Senior Sales Executive",
                   email="amit.sharma@carthi.com", phone="+91 98765 43210",
                   status=MemberStatus.ACTIVE, department=Department.SALES,
                   joined_date=date(2023, 1, 15)),
        TeamMember(id="2", name="Vikram Singh", role="Sales Executive",
                   email="vikram.singh@carthi.com", phone="+91 98765 43211",
                   status=MemberStatus.ACTIVE, department=Department.SALES,
                   joined_date=date(2023, 3, 20)),
        TeamMember(id="3", name="Prakash Joshi", role="Lead Valuation Expert",
                   email="prakash.joshi@carthi.com", phone="+91 98765 43212",
                   status=MemberStatus.BUSY, department=Department.VALUATION,
                   joined_date=date(2022, 11, 10)),
        TeamMember(id="4", name="Rahul Mehta", role="Valuation Specialist",
                   email="rahul.mehta@carthi.com", phone="+91 98765 43213",
                   status=MemberStatus.ACTIVE, department=Department.VALUATION,
                   joined_date=date(2023, 5, 1)),
        TeamMember(id="5", name="Sneha Patel", role="HR Manager",
                   email="sneha.patel@carthi.com", phone="+91 98765 43214",
                   status=MemberStatus.ACTIVE, department=Department.HR,
                   joined_date=date(2022, 8, 15)),
        TeamMember(id="6", name="Rohan Kumar", role="Sales Executive",
                   email="rohan.kumar@carthi.com", phone="+91 98765 43215",
                   status=MemberStatus.AWAY, department=Department.SALES,
                   joined_date=date(2023, 6, 10)),
    ]
