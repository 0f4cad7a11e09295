"""
Read-only roster snapshot: staff records keyed by id plus the
supervisor -> direct subordinates adjacency, built once.
"""
import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from backend.models.staff import StaffMember

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Roster data cannot form a valid snapshot (e.g. duplicate ids)."""


class Roster:
    def __init__(self, staff: Iterable[StaffMember]):
        by_id: Dict[int, StaffMember] = {}
        for member in staff:
            if member.id in by_id:
                raise RosterError(f"Duplicate staff id {member.id}")
            by_id[member.id] = member

        children: Dict[int, List[int]] = {}
        for member in by_id.values():
            if member.supervisor_id is None:
                continue
            if member.supervisor_id not in by_id:
                logger.warning(
                    "Staff id=%s references unknown supervisor_id=%s; treated as top-level",
                    member.id,
                    member.supervisor_id,
                )
            children.setdefault(member.supervisor_id, []).append(member.id)

        self._by_id = MappingProxyType(by_id)
        self._children: MappingProxyType = MappingProxyType({k: tuple(v) for k, v in children.items()})

    def get(self, staff_id: int) -> Optional[StaffMember]:
        return self._by_id.get(staff_id)

    def direct_subordinates(self, staff_id: int) -> Tuple[int, ...]:
        """Ids whose supervisor_id equals staff_id, in roster order."""
        return self._children.get(staff_id, ())

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(self._by_id)

    def __iter__(self) -> Iterator[StaffMember]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, staff_id: object) -> bool:
        return staff_id in self._by_id

    def __repr__(self) -> str:
        return f"Roster(size={len(self)})"
