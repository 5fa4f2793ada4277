"""
HTTP endpoints for SafeRoute.

This module implements health, readiness, metrics and info endpoints
for operational visibility, plus the route analysis endpoint that
scores and ranks candidate routes.
"""

import time
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response, JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from pydantic import BaseModel, ValidationError
from saferoute.settings import Settings
from saferoute.adapters.incidents import FileIncidentSource, InMemoryIncidentSource
from saferoute.core.errors import SafeRouteError
from saferoute.core.models import Incident, Route
from saferoute.core.normalize import to_routes
from saferoute.services.analyzer import RouteAnalyzer
from saferoute.observability import metrics
from saferoute.observability.logging_setup import get_logger

log = get_logger("saferoute.http")

class AnalyzeRequest(BaseModel):
    """경로 분석 요청 본문 (routes 또는 directions 중 하나)"""
    routes: Optional[List[Route]] = None
    directions: Optional[Dict[str, Any]] = None
    incidents: Optional[List[Incident]] = None

def build_analyzer(settings: Settings) -> RouteAnalyzer:
    """설정에서 RouteAnalyzer를 생성합니다."""
    if settings.incidents.file_path:
        source = FileIncidentSource(settings.incidents.file_path)
    else:
        log.warning("사건 파일 경로 미설정, 빈 메모리 소스 사용")
        source = InMemoryIncidentSource()

    return RouteAnalyzer(
        source,
        proximity_threshold_km=settings.scoring.proximity_threshold_km,
        strict_routes=settings.scoring.strict_routes,
        max_workers=settings.concurrency.max_workers
    )

def create_app(settings: Settings, analyzer: Optional[RouteAnalyzer] = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="SafeRoute Route Safety Scoring Service"
    )

    if analyzer is None:
        analyzer = build_analyzer(settings)
    app.state.analyzer = analyzer

    start_time = time.time()

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트 (사건 스냅샷 로드 여부)"""
        loaded = getattr(analyzer.incident_source, "loaded", True)
        body = {
            "status": "ready" if loaded else "loading",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        }
        return JSONResponse(body, status_code=200 if loaded else 503)

    @app.get("/metrics")
    async def metrics_endpoint():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")

        metrics.uptime_seconds.set(time.time() - start_time)
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level,
            "proximity_threshold_km": analyzer.proximity_threshold_km,
            "strict_routes": analyzer.strict_routes
        })

    @app.post("/routes/analyze")
    async def analyze_routes(request: AnalyzeRequest):
        """후보 경로를 분석하고 안전 우선으로 정렬합니다."""
        if request.routes is None and request.directions is None:
            raise HTTPException(status_code=422, detail="routes or directions is required")

        try:
            if request.routes is not None:
                routes = request.routes
                metrics.analysis_requests.labels(source="routes").inc()
            else:
                routes = to_routes(request.directions)
                metrics.analysis_requests.labels(source="directions").inc()

            ranked = await analyzer.analyze_all_async(routes, request.incidents)
        except (SafeRouteError, ValidationError) as e:
            log.warning(f"경로 분석 요청 거부됨 error:{e}")
            raise HTTPException(status_code=422, detail=str(e))

        return {
            "count": len(ranked),
            "routes": [
                {"rank": rank, **scored.model_dump()}
                for rank, scored in enumerate(ranked, start=1)
            ]
        }

    @app.post("/incidents/refresh")
    async def refresh_incidents():
        """사건 데이터를 다시 로드합니다."""
        try:
            count = analyzer.incident_source.refresh()
        except (OSError, ValueError) as e:
            log.error(f"사건 데이터 갱신 실패 error:{e}")
            raise HTTPException(status_code=500, detail=f"Refresh failed: {e}")
        metrics.incident_snapshot_size.set(count)
        return {"ok": True, "count": count}

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info",
                "analyze": "/routes/analyze",
                "refresh": "/incidents/refresh"
            }
        })

    return app
