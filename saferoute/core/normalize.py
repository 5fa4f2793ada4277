"""
Normalization functions for SafeRoute.

This module contains pure functions for converting raw provider payloads
(incident records and directions responses) into internal domain models.
Non-finite or missing coordinates are rejected here, at the boundary,
so the scorer only ever sees well-formed numbers.
"""

from typing import Any, Dict, List
from .errors import DirectionsPayloadError
from .models import Coordinate, Incident, Route, TimeOfDay
from saferoute.codec.polyline import decode_polyline
from saferoute.common.geo import validate_coordinates
from saferoute.observability.logging_setup import get_logger

log = get_logger("saferoute.normalize")

def _first(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return default

def _to_time_of_day(value: Any) -> TimeOfDay:
    # Night 외에는 모두 Day로 취급
    if isinstance(value, str) and value.strip().lower() == "night":
        return "Night"
    return "Day"

def to_coordinate(raw: Dict[str, Any]) -> Coordinate:
    """lat/lng (또는 latitude/longitude) 딕셔너리를 좌표로 변환합니다."""
    lat = _first(raw, "lat", "latitude", "Latitude")
    lng = _first(raw, "lng", "lon", "longitude", "Longitude")
    if lat is None or lng is None:
        raise ValueError(f"coordinate is missing lat/lng: {raw!r}")
    coordinate = Coordinate(lat=float(lat), lng=float(lng))
    if not validate_coordinates(coordinate.lat, coordinate.lng):
        raise ValueError(f"coordinate out of range: lat={coordinate.lat} lng={coordinate.lng}")
    return coordinate

def to_incident(raw: Dict[str, Any]) -> Incident:
    """
    원시 사건 레코드를 Incident 모델로 변환합니다.

    Args:
        raw: 사건 딕셔너리 (crime_type/severity_score 형식 또는 모델 필드명)

    Returns:
        Incident 모델

    Raises:
        ValueError: 필수 필드 누락 또는 좌표가 유한하지 않을 때
    """
    position = raw.get("position")
    coordinate = to_coordinate(position if isinstance(position, dict) else raw)

    raw_id = _first(raw, "id", "incident_id")
    if raw_id is None:
        raise ValueError(f"incident is missing id: {raw!r}")

    raw_severity = _first(raw, "severity_score", "severity")
    if raw_severity is None:
        raise ValueError(f"incident {raw_id} is missing severity")

    return Incident(
        id=int(raw_id),
        position=coordinate,
        category=str(_first(raw, "crime_type", "category", "type", default="Unknown")),
        time_of_day=_to_time_of_day(raw.get("time_of_day")),
        severity=int(float(raw_severity)),
        location_name=str(_first(raw, "location_name", "location", default="")),
        date=str(_first(raw, "date", default=""))
    )

def to_routes(payload: Dict[str, Any]) -> List[Route]:
    """
    경로 제공자(Directions) 응답을 Route 목록으로 변환합니다.

    Args:
        payload: status/routes를 포함한 응답 딕셔너리

    Returns:
        응답 순서대로의 Route 목록 (id는 1부터)

    Raises:
        DirectionsPayloadError: status가 OK가 아니거나 구조가 잘못되었을 때
    """
    status = payload.get("status")
    if status != "OK":
        raise DirectionsPayloadError(f"directions provider returned status {status!r}")

    raw_routes = payload.get("routes")
    if not isinstance(raw_routes, list):
        raise DirectionsPayloadError("directions payload has no routes list")

    routes: List[Route] = []
    for i, raw_route in enumerate(raw_routes, start=1):
        try:
            encoded = raw_route["overview_polyline"]["points"]
        except (KeyError, TypeError) as e:
            raise DirectionsPayloadError(f"route {i} has no overview polyline") from e

        coordinates = decode_polyline(encoded)
        if not coordinates:
            raise DirectionsPayloadError(f"route {i} has an empty polyline")

        # 단일 출발지-목적지이므로 첫 번째 leg 사용
        legs = raw_route.get("legs") or [{}]
        leg = legs[0]
        distance = leg.get("distance") or {}
        duration = leg.get("duration") or {}

        routes.append(Route(
            id=i,
            name=raw_route.get("summary") or f"Route {i}",
            coordinates=coordinates,
            distance_text=distance.get("text"),
            distance_m=float(distance.get("value", 0)),
            duration_text=duration.get("text"),
            duration_s=float(duration.get("value", 0))
        ))

    log.info(f"경로 응답 정규화 완료 routes:{len(routes)}")
    return routes
