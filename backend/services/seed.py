"""
Built-in staff data.
Used to populate the roster when no ROSTER_FILE is configured.
"""
from datetime import date
from decimal import Decimal
from typing import List

from backend.models import StaffMember, StaffTypeEnum


DEFAULT_STAFF = [
    {
        "id": 1,
        "name": "Jack Adams",
        "type": StaffTypeEnum.MANAGER,
        "joined_date": date(2020, 1, 1),
        "base_salary": Decimal("1000"),
        "supervisor_id": None,
    },
    {
        "id": 2,
        "name": "Barbara Cook",
        "type": StaffTypeEnum.SALES,
        "joined_date": date(2021, 6, 1),
        "base_salary": Decimal("1000"),
        "supervisor_id": 1,
    },
    {
        "id": 3,
        "name": "Eva Fox",
        "type": StaffTypeEnum.EMPLOYEE,
        "joined_date": date(2022, 1, 15),
        "base_salary": Decimal("1000"),
        "supervisor_id": 2,
    },
]


def build_default_staff() -> List[StaffMember]:
    """Fresh StaffMember records for the built-in roster."""
    return [StaffMember(**record) for record in DEFAULT_STAFF]
