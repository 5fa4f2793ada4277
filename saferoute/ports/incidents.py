"""
Incident source port interface.

This module defines the protocol for loading incident snapshots.
"""

from typing import List, Protocol
from saferoute.core.models import Incident

class IncidentSourcePort(Protocol):
    """사건 데이터 소스 포트 인터페이스"""

    def snapshot(self) -> List[Incident]:
        """
        현재 사건 목록의 스냅샷을 반환합니다.

        Returns:
            호출자가 소유하는 사건 목록 복사본
        """
        ...

    def refresh(self) -> int:
        """
        원본에서 사건 목록을 다시 읽습니다.

        Returns:
            로드된 사건 수
        """
        ...
