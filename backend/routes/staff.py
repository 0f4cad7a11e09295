"""
Staff salary routes: salary of one staff member, and of the whole staff,
as of a given date (default: today).
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import Optional

from backend.db import get_salary_engine
from backend.models import SalaryResponse, TotalSalaryResponse
from backend.services.salary import SalaryEngine
from backend.utils.action_log import log_query
from backend.utils.date_utils import parse_query_date
from backend.utils.id_utils import to_int_id

router = APIRouter(prefix="/staff", tags=["Staff"])


def _query_date(date_param: Optional[str]):
    try:
        return parse_query_date(date_param)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date")


@router.get("/total-salary", response_model=TotalSalaryResponse)
async def get_total_salary(
    request: Request,
    date_param: Optional[str] = Query(None, alias="date", description="Date (YYYY-MM-DD). Default: today."),
    engine: SalaryEngine = Depends(get_salary_engine),
):
    """
    Sum of the salaries of all staff members at the given date.
    """
    as_of = _query_date(date_param)
    total = engine.compute_total_salary(as_of)
    log_query("TOTAL_SALARY", request, date=as_of.isoformat(), total=str(total))
    return TotalSalaryResponse(total=float(total), date=as_of)


@router.get("/{staff_id}/salary", response_model=SalaryResponse)
async def get_salary(
    staff_id: str,
    request: Request,
    date_param: Optional[str] = Query(None, alias="date", description="Date (YYYY-MM-DD). Default: today."),
    engine: SalaryEngine = Depends(get_salary_engine),
):
    """
    Salary of one staff member at the given date.
    Unknown staff ids and dates before joining both give 0.
    """
    int_id = to_int_id(staff_id)
    if int_id is None:
        raise HTTPException(status_code=400, detail="Invalid id")
    as_of = _query_date(date_param)
    salary = engine.compute_salary(int_id, as_of)
    log_query("SALARY", request, staff_id=int_id, date=as_of.isoformat(), salary=str(salary))
    return SalaryResponse(id=int_id, salary=float(salary), date=as_of)
