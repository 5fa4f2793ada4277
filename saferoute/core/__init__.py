"""
Core domain models and pure functions for SafeRoute.

This module contains the domain models and pure scoring logic
that are independent of external I/O and infrastructure concerns.
"""

from .models import (
    Coordinate, Incident, Route, HighRiskSegment, SafetyAnalysis, ScoredRoute,
    TimeOfDay, RiskLevel
)
from .errors import SafeRouteError, MalformedRouteError, PolylineDecodeError, DirectionsPayloadError
from .scoring import score_route, risk_contribution, risk_level_for_score
from .description import generate_route_description
from .ranking import rank_routes

__all__ = [
    "Coordinate", "Incident", "Route", "HighRiskSegment", "SafetyAnalysis", "ScoredRoute",
    "TimeOfDay", "RiskLevel",
    "SafeRouteError", "MalformedRouteError", "PolylineDecodeError", "DirectionsPayloadError",
    "score_route", "risk_contribution", "risk_level_for_score",
    "generate_route_description", "rank_routes",
]
