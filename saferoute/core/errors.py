"""
Domain errors for SafeRoute.

All errors derive from SafeRouteError so adapters can map them
to a single HTTP status, and from ValueError where the failure is
caused by bad input.
"""


class SafeRouteError(Exception):
    """SafeRoute 기본 예외"""


class MalformedRouteError(SafeRouteError, ValueError):
    """세그먼트를 만들 수 없는 경로 (좌표 2개 미만)"""

    def __init__(self, route_id, point_count: int):
        self.route_id = route_id
        self.point_count = point_count
        super().__init__(
            f"route {route_id!r} has {point_count} coordinate(s); at least 2 are required"
        )


class PolylineDecodeError(SafeRouteError, ValueError):
    """인코딩된 폴리라인 디코딩 실패"""


class DirectionsPayloadError(SafeRouteError, ValueError):
    """경로 제공자 응답이 처리 불가능한 상태"""
