"""
Metrics definitions for SafeRoute.

This module defines Prometheus metrics for monitoring
the route analysis pipeline.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
routes_scored = Counter(
    "routes_scored_total",
    "Number of routes scored",
    ["risk_level"]
)

routes_rejected = Counter(
    "routes_rejected_total",
    "Number of routes rejected as malformed",
)

analysis_requests = Counter(
    "analysis_requests_total",
    "Number of route analysis requests",
    ["source"]
)

# 히스토그램 메트릭
score_seconds = Histogram(
    "route_score_duration_seconds",
    "Time spent scoring a single route",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0]
)

batch_seconds = Histogram(
    "route_batch_duration_seconds",
    "Time spent analyzing and ranking a batch of routes",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0]
)

incidents_near_route = Histogram(
    "incidents_near_route",
    "Incidents counted as near a scored route",
    buckets=[0, 1, 2, 5, 10, 20, 50, 100]
)

# 게이지 메트릭
incident_snapshot_size = Gauge(
    "incident_snapshot_size",
    "Number of incidents in the most recent snapshot"
)

uptime_seconds = Gauge(
    "uptime_seconds",
    "Service uptime in seconds"
)
