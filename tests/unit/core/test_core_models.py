"""
Core 모델 단위 테스트

Pydantic 모델의 검증 규칙을 테스트합니다.
"""

import math
import pytest
from pydantic import ValidationError
from saferoute.core.models import Coordinate, Incident, Route, SafetyAnalysis, ScoredRoute
from tests.factories import coords, make_incident


class TestCoordinate:
    """좌표 모델 테스트"""

    def test_coordinate_fields(self):
        p = Coordinate(lat=23.7461, lng=90.3742)
        assert p.as_tuple() == (23.7461, 90.3742)

    @pytest.mark.parametrize("lat,lng", [
        (math.nan, 90.0),
        (23.7, math.inf),
        (-math.inf, 0.0),
    ])
    def test_non_finite_rejected(self, lat, lng):
        """NaN/inf 좌표는 거부"""
        with pytest.raises(ValidationError):
            Coordinate(lat=lat, lng=lng)

    def test_coordinate_is_frozen(self):
        p = Coordinate(lat=0.0, lng=0.0)
        with pytest.raises(ValidationError):
            p.lat = 1.0

    def test_coordinate_is_hashable(self):
        assert len({Coordinate(lat=1.0, lng=2.0), Coordinate(lat=1.0, lng=2.0)}) == 1


class TestIncident:
    """사건 모델 테스트"""

    def test_incident_defaults(self):
        incident = Incident(id=1, position=Coordinate(lat=0.0, lng=0.0), category="Theft", severity=5)
        assert incident.time_of_day == "Day"
        assert incident.location_name == ""

    def test_invalid_time_of_day(self):
        with pytest.raises(ValidationError):
            make_incident(0.0, 0.0, time_of_day="Evening")

    def test_severity_not_range_checked(self):
        """심각도 1~10은 관례일 뿐 강제하지 않음"""
        assert make_incident(0.0, 0.0, severity=12).severity == 12


class TestRoute:
    """경로 모델 테스트"""

    def test_empty_coordinates_rejected(self):
        with pytest.raises(ValidationError):
            Route(id=1, name="Empty", coordinates=[])

    def test_route_from_json(self):
        route = Route.model_validate({
            "id": 2,
            "name": "Via Farmgate",
            "coordinates": [{"lat": 23.7461, "lng": 90.3742}, {"lat": 23.75, "lng": 90.378}],
            "duration_s": 1320
        })
        assert len(route.coordinates) == 2
        assert route.distance_m == 0.0


class TestSafetyAnalysis:
    """분석 결과 모델 테스트"""

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_out_of_range(self, score):
        with pytest.raises(ValidationError):
            SafetyAnalysis(safety_score=score, risk_level="Low")

    def test_invalid_risk_level(self):
        with pytest.raises(ValidationError):
            SafetyAnalysis(safety_score=50, risk_level="Critical")

    def test_scored_route_accessors(self):
        route = Route(id=1, name="R", coordinates=coords([(0.0, 0.0), (0.0, 0.01)]), duration_s=900)
        analysis = SafetyAnalysis(safety_score=72, risk_level="Medium")
        scored = ScoredRoute(route=route, analysis=analysis, description="desc")

        assert scored.safety_score == 72
        assert scored.duration_s == 900
        assert scored.risk_level == "Medium"
