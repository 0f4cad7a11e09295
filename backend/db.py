"""
Roster store configuration and access
Builds the read-only roster snapshot once at startup and hands it (and the
salary engine over it) to route handlers as FastAPI dependencies.
"""
import os
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from pydantic import TypeAdapter

from backend.models import Roster, StaffMember
from backend.services.salary import SalaryEngine, DEFAULT_MAX_DEPTH
from backend.services.seed import build_default_staff

load_dotenv()

logger = logging.getLogger(__name__)

_staff_list_adapter = TypeAdapter(List[StaffMember])


def load_roster(path: Union[str, Path, None] = None) -> Roster:
    """
    Build a Roster from a JSON file (array of staff records).
    With no path, ROSTER_FILE is used; if that is unset too, the built-in seed data.
    """
    path = path or os.getenv("ROSTER_FILE")
    if not path:
        staff = build_default_staff()
        logger.info("Roster loaded from built-in seed data (%d staff)", len(staff))
        return Roster(staff)

    path = Path(path)
    with path.open(encoding="utf-8") as f:
        records = json.load(f)
    staff = _staff_list_adapter.validate_python(records)
    roster = Roster(staff)
    logger.info("Roster loaded from %s (%d staff)", path, len(roster))
    return roster


def max_depth_from_env() -> int:
    raw = os.getenv("SALARY_MAX_DEPTH")
    if not raw:
        return DEFAULT_MAX_DEPTH
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid SALARY_MAX_DEPTH=%r; using %d", raw, DEFAULT_MAX_DEPTH)
        return DEFAULT_MAX_DEPTH
    return max(value, 1)


def init_roster(app: FastAPI, path: Optional[Union[str, Path]] = None) -> Roster:
    """
    Initialize the roster snapshot and salary engine on app.state.
    This is called on application startup.
    """
    roster = load_roster(path)
    app.state.roster = roster
    app.state.salary_engine = SalaryEngine(roster, max_depth=max_depth_from_env())
    return roster


def close_roster(app: FastAPI) -> None:
    """Release the snapshot on shutdown"""
    app.state.roster = None
    app.state.salary_engine = None
    logger.info("Roster released")


# FastAPI dependency
def get_salary_engine(request: Request) -> SalaryEngine:
    """
    Salary engine over the current roster (FastAPI dependency).

    Example:
        @router.get("/staff/total-salary")
        async def total(engine: SalaryEngine = Depends(get_salary_engine)):
            return engine.compute_total_salary(date.today())
    """
    return request.app.state.salary_engine
