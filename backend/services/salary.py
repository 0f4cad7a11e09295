"""
Salary engine: computes a staff member's salary as of a date from the
roster snapshot.

salary = base + seniority bonus + override bonus, where the override bonus
is a percentage of each contributing subordinate's own full salary
(recursively computed at the same date). Managers take direct reports
only; Sales take their whole subtree. The final figure of every call is
rounded half-up to cents.
"""
import logging
from collections import deque
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterator, Mapping, Optional, Set

from backend.models import Roster, StaffTypeEnum, SubordinateReach
from backend.services.bonus_rules import BONUS_RULES, BonusRule
from backend.services.tenure import completed_years_of_service

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
DEFAULT_MAX_DEPTH = 256


class SalaryEngineError(RuntimeError):
    """Roster is internally inconsistent; the computation cannot finish."""


class HierarchyCycleError(SalaryEngineError):
    def __init__(self, staff_id: int):
        super().__init__(f"Supervisor cycle detected at staff id {staff_id}")
        self.staff_id = staff_id


class HierarchyTooDeepError(SalaryEngineError):
    def __init__(self, staff_id: int, max_depth: int):
        super().__init__(f"Staff id {staff_id} sits deeper than max depth {max_depth}")
        self.staff_id = staff_id
        self.max_depth = max_depth


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class SalaryEngine:
    """
    Pure computation over a read-only Roster. Safe to share between
    concurrent requests: all working state lives in the call.
    """

    def __init__(
        self,
        roster: Roster,
        rules: Optional[Mapping[StaffTypeEnum, BonusRule]] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.roster = roster
        self.rules = rules if rules is not None else BONUS_RULES
        self.max_depth = max_depth

    def compute_salary(self, staff_id: int, as_of: date) -> Decimal:
        """
        Salary of staff_id as of the given date.
        Returns 0 for unknown ids and for dates before the join date.
        """
        salary = self._salary(staff_id, as_of, cache={}, in_progress=set())
        logger.debug("Salary staff_id=%s as_of=%s -> %s", staff_id, as_of, salary)
        return salary

    def compute_total_salary(self, as_of: date) -> Decimal:
        """Sum of every member's salary, each computed independently."""
        total = sum((self.compute_salary(member.id, as_of) for member in self.roster), ZERO)
        return round_money(total)

    def all_subordinates(self, staff_id: int) -> Iterator[int]:
        """
        Every id below staff_id at any depth, breadth-first, each once.
        Raises HierarchyCycleError if an id is reached twice.
        """
        seen = {staff_id}
        queue = deque([staff_id])
        while queue:
            current = queue.popleft()
            for child_id in self.roster.direct_subordinates(current):
                if child_id in seen:
                    raise HierarchyCycleError(child_id)
                seen.add(child_id)
                queue.append(child_id)
                yield child_id

    def _subordinates(self, staff_id: int, reach: SubordinateReach) -> Iterator[int]:
        if reach == SubordinateReach.DIRECT:
            return iter(self.roster.direct_subordinates(staff_id))
        if reach == SubordinateReach.ALL:
            return self.all_subordinates(staff_id)
        return iter(())

    def _salary(self, staff_id: int, as_of: date, cache: Dict[int, Decimal], in_progress: Set[int]) -> Decimal:
        if staff_id in cache:
            return cache[staff_id]

        member = self.roster.get(staff_id)
        if member is None or as_of < member.joined_date:
            return ZERO

        if staff_id in in_progress:
            raise HierarchyCycleError(staff_id)

        rule = self.rules[member.type]
        years = completed_years_of_service(member.joined_date, as_of)
        total = member.base_salary + member.base_salary * rule.seniority_percentage(years)

        if rule.reach != SubordinateReach.NONE:
            in_progress.add(staff_id)
            try:
                for sub_id in self._subordinates(staff_id, rule.reach):
                    # in_progress holds the callers above sub_id; its size is sub_id's recursion depth
                    if len(in_progress) > self.max_depth:
                        raise HierarchyTooDeepError(sub_id, self.max_depth)
                    total += self._salary(sub_id, as_of, cache, in_progress) * rule.override_rate
            finally:
                in_progress.discard(staff_id)

        salary = round_money(total)
        cache[staff_id] = salary
        return salary
