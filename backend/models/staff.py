"""
Staff member model (one record of the roster)
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from backend.models.enums import StaffTypeEnum


class StaffMember(BaseModel):
    """One person in the organization. Immutable once loaded."""
    id: int = Field(..., gt=0)
    name: str = ""
    type: StaffTypeEnum
    joined_date: date
    base_salary: Decimal = Field(..., ge=0)
    supervisor_id: Optional[int] = Field(None, description="Supervisor's staff id; None for top-level staff")

    class Config:
        frozen = True

    @field_validator('type', mode='before')
    @classmethod
    def normalize_type(cls, v):
        """Accept staff type in any letter case"""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            for type_enum in StaffTypeEnum:
                if type_enum.value.lower() == v_lower:
                    return type_enum
            raise ValueError(f"Invalid staff type '{v}'. Must be one of: {', '.join([t.value for t in StaffTypeEnum])}")
        return v
