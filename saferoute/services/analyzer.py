"""
Route analysis service for SafeRoute.

This module scores a batch of candidate routes against one incident
snapshot, attaches descriptions and ranks the result. Routes are
independent of each other, so the async path scores each one on its
own worker thread and only joins to rank the complete set.
"""

import asyncio
import time
from typing import Iterable, List, Optional, Sequence
from saferoute.core.description import generate_route_description
from saferoute.core.errors import MalformedRouteError
from saferoute.core.models import Incident, Route, ScoredRoute
from saferoute.core.ranking import rank_routes
from saferoute.core.scoring import DEFAULT_PROXIMITY_THRESHOLD_KM, score_route
from saferoute.ports.incidents import IncidentSourcePort
from saferoute.observability import metrics
from saferoute.observability.logging_setup import get_logger, with_context

log = get_logger("saferoute.analyzer")

class RouteAnalyzer:
    """경로 분석 서비스 (점수 → 설명 → 정렬)"""

    def __init__(self,
                 incident_source: IncidentSourcePort,
                 *,
                 proximity_threshold_km: float = DEFAULT_PROXIMITY_THRESHOLD_KM,
                 strict_routes: bool = False,
                 max_workers: int = 4):
        """
        초기화합니다.

        Args:
            incident_source: 사건 데이터 소스 포트
            proximity_threshold_km: 근접 판정 거리 (킬로미터)
            strict_routes: 좌표 2개 미만 경로를 거부할지 여부
            max_workers: 동시에 점수를 계산할 최대 경로 수
        """
        if proximity_threshold_km <= 0:
            raise ValueError("proximity_threshold_km must be > 0")
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")

        self.incident_source = incident_source
        self.proximity_threshold_km = proximity_threshold_km
        self.strict_routes = strict_routes
        self.max_workers = max_workers

        log.info(f"RouteAnalyzer 초기화됨 threshold:{proximity_threshold_km}km "
                 f"strict:{strict_routes} workers:{max_workers}")

    def _snapshot(self) -> List[Incident]:
        incidents = self.incident_source.snapshot()
        metrics.incident_snapshot_size.set(len(incidents))
        return incidents

    def analyze(self, route: Route, incidents: Sequence[Incident]) -> ScoredRoute:
        """
        경로 하나를 분석합니다.

        Args:
            route: 분석할 경로
            incidents: 사건 스냅샷

        Returns:
            분석 결과와 설명이 붙은 경로

        Raises:
            MalformedRouteError: strict 모드에서 좌표가 2개 미만일 때
        """
        start = time.perf_counter()
        try:
            with with_context(route_id=route.id):
                analysis = score_route(
                    route, incidents, self.proximity_threshold_km, strict=self.strict_routes
                )
        except MalformedRouteError:
            metrics.routes_rejected.inc()
            log.warning(f"잘못된 경로 거부됨 route:{route.id} points:{len(route.coordinates)}")
            raise
        finally:
            metrics.score_seconds.observe(time.perf_counter() - start)

        if len(route.coordinates) < 2:
            log.warning(f"세그먼트 없는 경로 route:{route.id} - 근접 사건 없음으로 처리")

        metrics.routes_scored.labels(risk_level=analysis.risk_level).inc()
        metrics.incidents_near_route.observe(analysis.incidents_near_route)

        return ScoredRoute(
            route=route,
            analysis=analysis,
            description=generate_route_description(analysis)
        )

    def analyze_all(self,
                    routes: Iterable[Route],
                    incidents: Optional[Sequence[Incident]] = None) -> List[ScoredRoute]:
        """
        여러 경로를 분석하고 안전 우선으로 정렬합니다.

        Args:
            routes: 후보 경로 목록
            incidents: 사건 스냅샷 (None이면 소스에서 가져옴)

        Returns:
            정렬된 분석 결과 목록
        """
        start = time.perf_counter()
        if incidents is None:
            incidents = self._snapshot()

        scored = [self.analyze(route, incidents) for route in routes]
        ranked = rank_routes(scored)

        metrics.batch_seconds.observe(time.perf_counter() - start)
        log.info(f"경로 분석 완료 routes:{len(ranked)} incidents:{len(incidents)}")
        return ranked

    async def analyze_all_async(self,
                                routes: Iterable[Route],
                                incidents: Optional[Sequence[Incident]] = None) -> List[ScoredRoute]:
        """
        경로별 워커 스레드에서 점수를 계산한 뒤 정렬합니다.

        결과는 analyze_all과 동일합니다.
        """
        start = time.perf_counter()
        if incidents is None:
            incidents = await asyncio.to_thread(self._snapshot)

        semaphore = asyncio.Semaphore(self.max_workers)

        async def _score(route: Route) -> ScoredRoute:
            async with semaphore:
                return await asyncio.to_thread(self.analyze, route, incidents)

        scored = await asyncio.gather(*(_score(route) for route in routes))
        ranked = rank_routes(scored)

        metrics.batch_seconds.observe(time.perf_counter() - start)
        log.info(f"경로 비동기 분석 완료 routes:{len(ranked)} incidents:{len(incidents)}")
        return ranked
