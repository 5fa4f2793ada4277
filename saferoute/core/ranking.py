"""
Route ranking for SafeRoute.

Routes are ordered safety first; when two scores are within the
near-tie window the faster route wins instead.
"""

from functools import cmp_to_key
from typing import Iterable, List
from .models import ScoredRoute

# 점수 차이가 이 값 이하면 소요 시간으로 비교
NEAR_TIE_WINDOW = 10

def compare_routes(a: ScoredRoute, b: ScoredRoute) -> float:
    """정렬 비교 함수 (음수면 a가 앞)"""
    score_diff = b.safety_score - a.safety_score
    if abs(score_diff) > NEAR_TIE_WINDOW:
        return score_diff
    return a.duration_s - b.duration_s

def rank_routes(routes: Iterable[ScoredRoute]) -> List[ScoredRoute]:
    """
    경로 목록을 안전 우선으로 정렬한 새 리스트를 반환합니다 (안정 정렬).

    Args:
        routes: 점수가 매겨진 경로 목록

    Returns:
        정렬된 경로 목록
    """
    return sorted(routes, key=cmp_to_key(compare_routes))
