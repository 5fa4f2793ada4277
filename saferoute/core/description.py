"""
Route safety descriptions for SafeRoute.

This module turns a SafetyAnalysis into the human-readable
rationale shown next to each route.
"""

from .models import SafetyAnalysis

# 설명 문구 구간 (점수 이상)
VERY_SAFE_MIN_SCORE = 85
RELATIVELY_SAFE_MIN_SCORE = 70
CAUTION_MIN_SCORE = 50

def generate_route_description(analysis: SafetyAnalysis) -> str:
    """
    분석 결과를 점수 구간별 설명 문구로 변환합니다.

    Args:
        analysis: 경로 안전도 분석 결과

    Returns:
        설명 문구
    """
    score = analysis.safety_score
    near = analysis.incidents_near_route
    segments = len(analysis.high_risk_segments)

    if score >= VERY_SAFE_MIN_SCORE:
        return (f"This route is very safe with minimal crime activity. "
                f"Only {near} crime(s) reported nearby. Recommended for all times.")

    if score >= RELATIVELY_SAFE_MIN_SCORE:
        advice = (f"Be cautious in {segments} area(s)." if segments > 0
                  else "Generally safe for travel.")
        return f"This route is relatively safe with {near} crime(s) nearby. {advice}"

    if score >= CAUTION_MIN_SCORE:
        detail = f"{segments} high-risk segment(s) identified." if segments > 0 else ""
        return (f"This route passes through {near} crime-prone area(s). {detail} "
                f"Consider alternative routes if possible.")

    return (f"This route has significant safety concerns with {near} crimes nearby "
            f"and {segments} high-risk area(s). Not recommended, especially at night.")
