"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
from saferoute.settings import Settings
from saferoute.core.models import Route
from saferoute.core.normalize import to_incident
from saferoute.adapters.incidents import InMemoryIncidentSource
from tests.factories import coords


# 다카 사건 샘플 (Motijheel / Dhanmondi / Mirpur / Gulshan)
DHAKA_INCIDENTS = [
    {"id": 4, "lat": 23.7808, "lng": 90.4142, "crime_type": "Theft", "time_of_day": "Day", "severity_score": 5, "location_name": "Gulshan 1", "date": "2025-11-08"},
    {"id": 5, "lat": 23.7925, "lng": 90.4077, "crime_type": "Pickpocketing", "time_of_day": "Day", "severity_score": 4, "location_name": "Gulshan 2", "date": "2025-11-07"},
    {"id": 7, "lat": 23.7461, "lng": 90.3742, "crime_type": "Snatching", "time_of_day": "Day", "severity_score": 6, "location_name": "Dhanmondi 27", "date": "2025-11-09"},
    {"id": 9, "lat": 23.7430, "lng": 90.3810, "crime_type": "Mugging", "time_of_day": "Night", "severity_score": 7, "location_name": "Dhanmondi 32", "date": "2025-11-11"},
    {"id": 10, "lat": 23.7330, "lng": 90.4170, "crime_type": "Pickpocketing", "time_of_day": "Day", "severity_score": 8, "location_name": "Motijheel", "date": "2025-11-10"},
    {"id": 11, "lat": 23.7345, "lng": 90.4185, "crime_type": "Snatching", "time_of_day": "Day", "severity_score": 7, "location_name": "Dilkusha", "date": "2025-11-09"},
    {"id": 12, "lat": 23.7310, "lng": 90.4155, "crime_type": "Theft", "time_of_day": "Night", "severity_score": 6, "location_name": "Motijheel Circle", "date": "2025-11-08"},
    {"id": 13, "lat": 23.8223, "lng": 90.3654, "crime_type": "Robbery", "time_of_day": "Night", "severity_score": 9, "location_name": "Mirpur 10", "date": "2025-11-11"},
    {"id": 14, "lat": 23.8103, "lng": 90.3688, "crime_type": "Mugging", "time_of_day": "Night", "severity_score": 8, "location_name": "Mirpur 11", "date": "2025-11-10"},
    {"id": 15, "lat": 23.8050, "lng": 90.3710, "crime_type": "Theft", "time_of_day": "Day", "severity_score": 5, "location_name": "Mirpur 12", "date": "2025-11-09"},
    {"id": 25, "lat": 23.7575, "lng": 90.3890, "crime_type": "Pickpocketing", "time_of_day": "Day", "severity_score": 7, "location_name": "Farmgate", "date": "2025-11-10"},
    {"id": 27, "lat": 23.7385, "lng": 90.3955, "crime_type": "Theft", "time_of_day": "Night", "severity_score": 5, "location_name": "Shahbagh", "date": "2025-11-09"},
]

# Dhanmondi 27 → Motijheel (Shahbagh 경유)
DHANMONDI_MOTIJHEEL_DIRECT = [
    (23.7461, 90.3742), (23.7450, 90.3800), (23.7420, 90.3850), (23.7390, 90.3900),
    (23.7370, 90.3950), (23.7350, 90.4000), (23.7340, 90.4050), (23.7335, 90.4100),
    (23.7330, 90.4170),
]

# Dhanmondi 27 → Motijheel (Farmgate 경유)
DHANMONDI_MOTIJHEEL_FARMGATE = [
    (23.7461, 90.3742), (23.7500, 90.3780), (23.7550, 90.3830), (23.7600, 90.3900),
    (23.7580, 90.3950), (23.7540, 90.4000), (23.7480, 90.4050), (23.7420, 90.4100),
    (23.7360, 90.4140), (23.7330, 90.4170),
]


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    settings.observability.http_port = 8080
    return settings


@pytest.fixture
def straight_route():
    """(0,0) → (0,1) 직선 경로"""
    return Route(
        id=1,
        name="Equator",
        coordinates=coords([(0.0, 0.0), (0.0, 1.0)]),
        duration_s=600
    )


@pytest.fixture
def dhaka_incidents():
    """다카 사건 샘플"""
    return [to_incident(raw) for raw in DHAKA_INCIDENTS]


@pytest.fixture
def dhaka_routes():
    """Dhanmondi 27 → Motijheel 대안 경로 2개"""
    return [
        Route(id=1, name="Via Shahbagh", coordinates=coords(DHANMONDI_MOTIJHEEL_DIRECT),
              distance_text="5.2 km", distance_m=5200, duration_text="18 mins", duration_s=1080),
        Route(id=2, name="Via Farmgate", coordinates=coords(DHANMONDI_MOTIJHEEL_FARMGATE),
              distance_text="6.1 km", distance_m=6100, duration_text="22 mins", duration_s=1320),
    ]


@pytest.fixture
def incident_source(dhaka_incidents):
    """메모리 사건 소스"""
    return InMemoryIncidentSource(dhaka_incidents)


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 통합 테스트 마커 추가
        if "integration" in item.name or "scenario" in item.nodeid:
            item.add_marker(pytest.mark.integration)
