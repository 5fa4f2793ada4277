"""
In-memory incident source for SafeRoute.

Used when incidents are supplied by the caller rather than read
from a file.
"""

from typing import Iterable, List
from saferoute.core.models import Incident

class InMemoryIncidentSource:
    """메모리 기반 사건 데이터 소스"""

    def __init__(self, incidents: Iterable[Incident] = ()):
        self._incidents: List[Incident] = list(incidents)

    @property
    def loaded(self) -> bool:
        return True

    def refresh(self) -> int:
        return len(self._incidents)

    def snapshot(self) -> List[Incident]:
        return list(self._incidents)
