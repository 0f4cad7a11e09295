"""
Staff enum definitions
"""
import enum


class StaffTypeEnum(str, enum.Enum):
    EMPLOYEE = "Employee"
    MANAGER = "Manager"
    SALES = "Sales"


class SubordinateReach(str, enum.Enum):
    """Which subordinates contribute to an override bonus."""
    NONE = "NONE"
    DIRECT = "DIRECT"
    ALL = "ALL"
