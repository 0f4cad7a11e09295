"""
Salary API response models
"""
import datetime
from pydantic import BaseModel


class SalaryResponse(BaseModel):
    """Salary of one staff member as of a date"""
    id: int
    salary: float
    date: datetime.date


class TotalSalaryResponse(BaseModel):
    """Sum of all staff salaries as of a date"""
    total: float
    date: datetime.date
