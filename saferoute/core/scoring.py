"""
Route safety scoring for SafeRoute.

This module contains the pure scoring engine: it measures how close
each incident lies to a route, weights it by severity and time of day,
and aggregates the result into a 0-100 safety score with a risk tier
and the list of high-risk segments.
"""

import math
from typing import Dict, Iterable, List, Sequence, Union
from .errors import MalformedRouteError
from .models import (
    Coordinate, HighRiskSegment, Incident, RiskLevel, Route, SafetyAnalysis, TimeOfDay
)
from saferoute.common.geo import closest_segment_index, min_distance_to_route
from saferoute.observability.logging_setup import get_logger

log = get_logger("saferoute.scoring")

DEFAULT_PROXIMITY_THRESHOLD_KM = 0.5

# 시간대 가중치 (야간 사건이 더 위험)
TIME_FACTORS = {
    "Day": 1.0,
    "Night": 1.5
}

# 집계 상수
MAX_RISK_PENALTY = 80.0
RISK_PENALTY_SCALE = 0.5
HIGH_RISK_SEGMENT_MIN_INCIDENTS = 3
HIGH_RISK_SEGMENT_PENALTY = 5.0

# 위험 등급 경계 (점수 이상이면 해당 등급)
LOW_RISK_MIN_SCORE = 75
MEDIUM_RISK_MIN_SCORE = 50

def risk_contribution(distance_km: float,
                      threshold_km: float,
                      severity: int,
                      time_of_day: TimeOfDay) -> float:
    """
    근접 사건 하나의 위험 기여도를 계산합니다.

    Args:
        distance_km: 경로까지의 거리 (킬로미터)
        threshold_km: 근접 임계값 (킬로미터)
        severity: 심각도 (1~10)
        time_of_day: 시간대

    Returns:
        위험 기여도 (임계값 이내, 최고 심각도, 야간이면 최대 15)
    """
    distance_factor = 1 - distance_km / threshold_km
    severity_factor = severity / 10
    time_factor = TIME_FACTORS.get(time_of_day, 1.0)
    return distance_factor * severity_factor * time_factor * 10

def risk_level_for_score(score: float) -> RiskLevel:
    """안전 점수를 위험 등급으로 변환합니다."""
    if score >= LOW_RISK_MIN_SCORE:
        return "Low"
    if score >= MEDIUM_RISK_MIN_SCORE:
        return "Medium"
    return "High"

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def score_route(route: Union[Route, Sequence[Coordinate]],
                incidents: Iterable[Incident],
                proximity_threshold_km: float = DEFAULT_PROXIMITY_THRESHOLD_KM,
                *,
                strict: bool = False) -> SafetyAnalysis:
    """
    경로의 안전도를 분석합니다.

    Args:
        route: 경로 모델 또는 디코딩된 좌표 시퀀스
        incidents: 사건 목록 (호출 동안만 참조)
        proximity_threshold_km: 근접 판정 거리 (킬로미터)
        strict: True면 좌표 2개 미만 경로에 MalformedRouteError 발생

    Returns:
        안전도 분석 결과

    Raises:
        ValueError: proximity_threshold_km이 0 이하일 때
        MalformedRouteError: strict 모드에서 좌표가 2개 미만일 때
    """
    if proximity_threshold_km <= 0:
        raise ValueError("proximity_threshold_km must be > 0")

    if isinstance(route, Route):
        route_id = route.id
        coordinates = route.coordinates
    else:
        route_id = None
        coordinates = route

    if strict and len(coordinates) < 2:
        raise MalformedRouteError(route_id, len(coordinates))

    total_risk = 0.0
    near_count = 0
    # 세그먼트 인덱스 -> 사건 수 (처음 집계된 순서 유지)
    segment_counts: Dict[int, int] = {}

    for incident in incidents:
        distance = min_distance_to_route(incident.position, coordinates)
        if distance > proximity_threshold_km:
            continue

        near_count += 1
        total_risk += risk_contribution(
            distance, proximity_threshold_km, incident.severity, incident.time_of_day
        )

        index = closest_segment_index(incident.position, coordinates)
        if index is not None:
            segment_counts[index] = segment_counts.get(index, 0) + 1

    high_risk_segments: List[HighRiskSegment] = [
        HighRiskSegment(
            lat=coordinates[index].lat,
            lng=coordinates[index].lng,
            incident_count=count
        )
        for index, count in segment_counts.items()
        if count >= HIGH_RISK_SEGMENT_MIN_INCIDENTS
    ]

    # 점수 집계 (100점에서 감점)
    avg_risk = total_risk / near_count if near_count > 0 else 0.0
    risk_penalty = min(avg_risk * near_count * RISK_PENALTY_SCALE, MAX_RISK_PENALTY)
    score = max(0.0, 100.0 - risk_penalty)
    score = max(0.0, score - HIGH_RISK_SEGMENT_PENALTY * len(high_risk_segments))

    analysis = SafetyAnalysis(
        safety_score=_round_half_up(score),
        risk_level=risk_level_for_score(score),
        incidents_near_route=near_count,
        high_risk_segments=high_risk_segments
    )

    log.debug(f"경로 점수 계산 완료 route:{route_id} points:{len(coordinates)} "
              f"near:{near_count} high_risk:{len(high_risk_segments)} "
              f"score:{analysis.safety_score} level:{analysis.risk_level}")

    return analysis
