# saferoute/main.py
import os, asyncio, signal
import uvicorn
from saferoute.settings import Settings
from saferoute.observability.health import create_app, build_analyzer
from saferoute.observability.logging_setup import setup_logging, get_logger

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 점수 계산
    s.scoring.proximity_threshold_km = float(os.getenv("PROXIMITY_THRESHOLD_KM", s.scoring.proximity_threshold_km))
    s.scoring.strict_routes = _b("STRICT_ROUTES", s.scoring.strict_routes)

    # 사건 데이터
    s.incidents.file_path = os.getenv("INCIDENTS_PATH", s.incidents.file_path)
    s.incidents.preload = _b("INCIDENTS_PRELOAD", s.incidents.preload)

    # 동시성
    s.concurrency.max_workers = int(os.getenv("MAX_WORKERS", s.concurrency.max_workers))

    # 관측성
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.http_host = os.getenv("HTTP_HOST", s.observability.http_host)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.log_json = _b("LOG_JSON", s.observability.log_json)

    return s

async def main():
    s = build_settings()
    setup_logging(s.observability.log_level, s.observability.log_json)
    log = get_logger()
    log.info("설정 로드 완료")

    analyzer = build_analyzer(s)
    if s.incidents.preload and s.incidents.file_path:
        count = await asyncio.to_thread(analyzer.incident_source.refresh)
        log.info(f"사건 데이터 사전 로드 완료 count:{count}")

    app = create_app(s, analyzer)
    server = uvicorn.Server(uvicorn.Config(
        app,
        host=s.observability.http_host,
        port=s.observability.http_port,
        log_level=s.observability.log_level.lower()
    ))
    http_task = asyncio.create_task(server.serve())
    log.info(f"HTTP 서버 시작됨 port:{s.observability.http_port}")

    stop = asyncio.Future()
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try: loop.add_signal_handler(sig, lambda: (not stop.done()) and stop.set_result(True))
            except NotImplementedError: pass
    except RuntimeError: pass

    await asyncio.wait([stop, http_task], return_when=asyncio.FIRST_COMPLETED)
    server.should_exit = True
    await http_task
    log.info("서비스 종료")

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
