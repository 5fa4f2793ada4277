"""
Geographic utilities for SafeRoute.

This module provides the geometry primitives used by the scorer:
great-circle distance, point-to-segment distance and
point-to-polyline distance. Points are any objects exposing
``lat`` and ``lng`` attributes in degrees.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from saferoute.core.models import Coordinate

# 지구 반지름 (킬로미터)
EARTH_RADIUS_KM = 6371.0

def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    두 지점 간의 Haversine 거리를 계산합니다 (킬로미터).

    Args:
        lat1: 첫 번째 지점의 위도
        lon1: 첫 번째 지점의 경도
        lat2: 두 번째 지점의 위도
        lon2: 두 번째 지점의 경도

    Returns:
        두 지점 간의 거리 (킬로미터)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)

    # 위도와 경도의 차이
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # Haversine 공식
    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2)
    # 대척점 부근 반올림 오차로 1을 넘지 않도록
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c

def haversine_distance(p1: Coordinate, p2: Coordinate) -> float:
    """두 좌표 간의 Haversine 거리 (킬로미터)"""
    return haversine_km(p1.lat, p1.lng, p2.lat, p2.lng)

def distance_to_segment(point: Coordinate, seg_start: Coordinate, seg_end: Coordinate) -> float:
    """
    점에서 선분까지의 최소 거리를 계산합니다 (킬로미터).

    투영은 (위도, 경도) 평면에서 내적으로 계산하고, 최종 거리만
    Haversine으로 구합니다. 도시 규모에서 쓰는 근사이며 점수 재현성을
    위해 그대로 유지해야 합니다.

    Args:
        point: 기준 점
        seg_start: 선분 시작점
        seg_end: 선분 끝점

    Returns:
        선분 위 가장 가까운 점까지의 거리 (킬로미터)
    """
    a = point.lat - seg_start.lat
    b = point.lng - seg_start.lng
    c = seg_end.lat - seg_start.lat
    d = seg_end.lng - seg_start.lng

    dot = a * c + b * d
    len_sq = c * c + d * d

    # 길이 0인 선분은 시작점으로 처리
    param = dot / len_sq if len_sq != 0 else -1.0

    if param < 0:
        near_lat, near_lng = seg_start.lat, seg_start.lng
    elif param > 1:
        near_lat, near_lng = seg_end.lat, seg_end.lng
    else:
        near_lat = seg_start.lat + param * c
        near_lng = seg_start.lng + param * d

    return haversine_km(point.lat, point.lng, near_lat, near_lng)

def min_distance_to_route(point: Coordinate, coordinates: Sequence[Coordinate]) -> float:
    """
    점에서 경로(폴리라인)까지의 최소 거리를 계산합니다.

    좌표가 2개 미만이면 세그먼트가 없으므로 무한대를 반환합니다.
    """
    min_distance = math.inf

    for i in range(len(coordinates) - 1):
        distance = distance_to_segment(point, coordinates[i], coordinates[i + 1])
        if distance < min_distance:
            min_distance = distance

    return min_distance

def closest_segment_index(point: Coordinate, coordinates: Sequence[Coordinate]) -> Optional[int]:
    """가장 가까운 세그먼트 인덱스 (동률이면 앞쪽), 세그먼트가 없으면 None"""
    best_index: Optional[int] = None
    best_distance = math.inf

    for i in range(len(coordinates) - 1):
        distance = distance_to_segment(point, coordinates[i], coordinates[i + 1])
        if distance < best_distance:
            best_distance = distance
            best_index = i

    return best_index

def validate_coordinates(lat: float, lng: float) -> bool:
    """
    좌표가 유효한지 확인합니다.

    Args:
        lat: 위도
        lng: 경도

    Returns:
        좌표가 유효하면 True
    """
    return -90 <= lat <= 90 and -180 <= lng <= 180
