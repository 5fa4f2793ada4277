"""
Encoded polyline codec for SafeRoute.

Thin wrapper over the ``polyline`` package that maps directions-provider
geometry to and from Coordinate models and turns malformed input into
PolylineDecodeError.
"""

from typing import Iterable, List
import polyline
from saferoute.core.errors import PolylineDecodeError
from saferoute.core.models import Coordinate

# 폴리라인 문자 범위 ('?' ~ '~')
MIN_CHAR = 63
MAX_CHAR = 126

def _check_characters(encoded: str) -> None:
    for position, char in enumerate(encoded):
        if not MIN_CHAR <= ord(char) <= MAX_CHAR:
            raise PolylineDecodeError(
                f"invalid polyline character {char!r} at position {position}"
            )

def decode_polyline(encoded: str, precision: int = 5) -> List[Coordinate]:
    """
    인코딩된 폴리라인을 좌표 목록으로 디코딩합니다.

    Args:
        encoded: 인코딩된 폴리라인 문자열
        precision: 소수 자릿수 (기본 5 → 1e5 배율)

    Returns:
        좌표 목록

    Raises:
        PolylineDecodeError: 문자열이 잘렸거나 잘못된 문자가 있을 때
    """
    _check_characters(encoded)
    try:
        points = polyline.decode(encoded, precision)
    except (IndexError, ValueError) as e:
        raise PolylineDecodeError(f"truncated or corrupt polyline: {e}") from e

    return [Coordinate(lat=lat, lng=lng) for lat, lng in points]

def encode_polyline(coordinates: Iterable[Coordinate], precision: int = 5) -> str:
    """좌표 목록을 폴리라인 문자열로 인코딩합니다."""
    return polyline.encode([point.as_tuple() for point in coordinates], precision)
