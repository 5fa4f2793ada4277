"""
Core domain models for SafeRoute.

This module defines the core domain models using Pydantic v2
for type safety and validation.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

# 시간대 / 위험 등급 타입 정의
TimeOfDay = Literal["Day", "Night"]
RiskLevel = Literal["Low", "Medium", "High"]

class Coordinate(BaseModel):
    """WGS84 좌표 (위도, 경도, 도 단위)"""
    model_config = ConfigDict(frozen=True)

    # NaN/inf는 수집 경계에서 거부
    lat: float = Field(allow_inf_nan=False)
    lng: float = Field(allow_inf_nan=False)

    def as_tuple(self) -> tuple:
        return (self.lat, self.lng)

class Incident(BaseModel):
    """신고된 사건 모델"""
    model_config = ConfigDict(frozen=True)

    id: int
    position: Coordinate
    category: str
    time_of_day: TimeOfDay = "Day"
    severity: int
    location_name: str = ""
    date: str = ""

class Route(BaseModel):
    """후보 경로 모델 (디코딩된 좌표 + 통과 메타데이터)"""
    id: int
    name: str
    coordinates: List[Coordinate] = Field(min_length=1)
    distance_text: Optional[str] = None
    distance_m: float = 0.0
    duration_text: Optional[str] = None
    duration_s: float = 0.0

class HighRiskSegment(BaseModel):
    """사건이 집중된 세그먼트 (시작 좌표 + 사건 수)"""
    lat: float
    lng: float
    incident_count: int

class SafetyAnalysis(BaseModel):
    """경로 안전도 분석 결과"""
    safety_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    incidents_near_route: int = 0
    high_risk_segments: List[HighRiskSegment] = Field(default_factory=list)

class ScoredRoute(BaseModel):
    """분석 결과와 설명이 붙은 경로"""
    route: Route
    analysis: SafetyAnalysis
    description: str

    @property
    def safety_score(self) -> int:
        return self.analysis.safety_score

    @property
    def duration_s(self) -> float:
        return self.route.duration_s

    @property
    def risk_level(self) -> RiskLevel:
        return self.analysis.risk_level
