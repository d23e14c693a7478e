from sqlmodel import SQLModel
from datetime import date
from enum import Enum

class MemberStatus(str, Enum):
    ACTIVE = "Active"
    AWAY = "Away"
    BUSY = "Busy"

class Department(str, Enum):
    SALES = "Sales"
    VALUATION = "Valuation"
    HR = "HR"

class TeamMember(SQLModel):
    id: str
    name: str
    role: str
    email: str
    phone: str
    status: MemberStatus = MemberStatus.ACTIVE
    department: Department
    joined_date: date

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.name.split() if part).upper()
