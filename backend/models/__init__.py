"""
Models package for the staff salary service

Pydantic models for roster records and API responses, plus the
read-only Roster snapshot the salary engine works on.
"""

# Enums
from .enums import StaffTypeEnum, SubordinateReach

from .staff import StaffMember
from .roster import Roster, RosterError
from .salary import SalaryResponse, TotalSalaryResponse

__all__ = [
    # Enums
    "StaffTypeEnum",
    "SubordinateReach",
    # Roster
    "StaffMember",
    "Roster",
    "RosterError",
    # API responses
    "SalaryResponse",
    "TotalSalaryResponse",
]
