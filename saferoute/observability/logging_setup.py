from __future__ import annotations
import logging
import sys
from loguru import logger

# 서비스에서 loguru로 흡수할 stdlib 로거
SERVICE_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "fastapi", "asyncio")

# ---- stdlib logging → loguru 인터셉트 ----
class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).bind(name=record.name).log(
            level, record.getMessage()
        )

def _hook_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in SERVICE_LOGGERS:
        l = logging.getLogger(name)
        l.handlers = [InterceptHandler()]
        l.propagate = False

# ---- 콘솔 포맷: 경로 분석 중이면 route_id 표시 ----
DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<7}</level> | "
    "<cyan>{extra[name]}</cyan>{extra[route_tag]} | "
    "<cyan>{file}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>\n{exception}"
)

def _dev_format(record) -> str:
    route_id = record["extra"].get("route_id")
    record["extra"]["route_tag"] = f" [route:{route_id}]" if route_id is not None else ""
    return DEV_FORMAT

def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    loguru 초기화.
    - json_logs=False: 개발 콘솔 컬러 출력
    - json_logs=True: stderr에 한 줄 JSON (컨테이너 수집용)
    - stdlib logging 흡수
    """
    logger.remove()  # 기본 sink 제거
    logger.configure(extra={"name": "saferoute"})
    if json_logs:
        logger.add(
            sink=sys.stderr,
            serialize=True,
            backtrace=False,
            diagnose=False,
            level=log_level.upper(),
            enqueue=False,
        )
    else:
        logger.add(
            sink=lambda m: print(m, end=""),
            format=_dev_format,
            colorize=True,
            backtrace=True,
            diagnose=False,
            level=log_level.upper(),
            enqueue=False,
        )
    _hook_stdlib_logging()

def setup_logging_dev(log_level: str = "INFO") -> None:
    """개발 콘솔 전용 초기화."""
    setup_logging(log_level, json_logs=False)

def get_logger(name: str = "saferoute", **ctx):
    """선택적으로 컨텍스트를 바인딩한 logger 반환."""
    return logger.bind(name=name, **ctx)

def with_context(**ctx):
    """컨텍스트 매니저로 일시 컨텍스트 부여 (예: route_id)."""
    return logger.contextualize(**ctx)
