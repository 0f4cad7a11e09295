"""
Shared fixtures for the staff salary test suite.

The scenario roster is the four-person hierarchy used throughout:
    1 Sales (top)
    └── 2 Manager
        ├── 3 Employee
        └── 4 Sales
all with base salary 1000, joined 2020-01-01.
"""
from datetime import date
from decimal import Decimal

import pytest

from backend.models import Roster, StaffMember


def make_member(staff_id, staff_type, supervisor_id=None, joined=date(2020, 1, 1), base="1000", name=""):
    return StaffMember(
        id=staff_id,
        name=name or f"staff-{staff_id}",
        type=staff_type,
        joined_date=joined,
        base_salary=Decimal(base),
        supervisor_id=supervisor_id,
    )


SCENARIO_DATE = date(2025, 1, 1)


@pytest.fixture
def scenario_staff():
    return [
        make_member(1, "Sales", name="SalesTop"),
        make_member(2, "Manager", 1, name="ManagerMid"),
        make_member(3, "Employee", 2, name="EmployeeLeaf"),
        make_member(4, "Sales", 2, name="SalesLeaf"),
    ]


@pytest.fixture
def scenario_roster(scenario_staff):
    return Roster(scenario_staff)
