"""
Role-dependent bonus rules.

Each staff type maps to one rule: a seniority percentage of base salary
(per completed year, capped) and an override percentage of subordinates'
full salaries, taken over direct reports or the whole subtree.
"""
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping
from pydantic import BaseModel

from backend.models.enums import StaffTypeEnum, SubordinateReach


class BonusRule(BaseModel):
    seniority_rate: Decimal
    seniority_cap: Decimal
    override_rate: Decimal = Decimal("0")
    reach: SubordinateReach = SubordinateReach.NONE

    class Config:
        frozen = True

    def seniority_percentage(self, years: int) -> Decimal:
        """Fraction of base salary earned for `years` completed years, capped."""
        return min(self.seniority_rate * years, self.seniority_cap)


BONUS_RULES: Mapping[StaffTypeEnum, BonusRule] = MappingProxyType({
    StaffTypeEnum.EMPLOYEE: BonusRule(
        seniority_rate=Decimal("0.03"),
        seniority_cap=Decimal("0.30"),
    ),
    StaffTypeEnum.MANAGER: BonusRule(
        seniority_rate=Decimal("0.05"),
        seniority_cap=Decimal("0.40"),
        override_rate=Decimal("0.005"),
        reach=SubordinateReach.DIRECT,
    ),
    StaffTypeEnum.SALES: BonusRule(
        seniority_rate=Decimal("0.01"),
        seniority_cap=Decimal("0.35"),
        override_rate=Decimal("0.003"),
        reach=SubordinateReach.ALL,
    ),
})
