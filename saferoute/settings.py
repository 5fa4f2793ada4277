# saferoute/settings.py
from __future__ import annotations
from pydantic import BaseModel, Field

class Scoring(BaseModel):
    proximity_threshold_km: float = 0.5
    strict_routes: bool = False              # 좌표 2개 미만 경로 거부 여부

class Incidents(BaseModel):
    file_path: str | None = None             # .csv | .json | .xlsx
    preload: bool = True

class Concurrency(BaseModel):
    max_workers: int = 4

class Observability(BaseModel):
    http_host: str = "0.0.0.0"
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "SafeRoute"
    build_version: str = "0.1.0"
    build_date: str = "2026-01-01"
    log_level: str = "INFO"
    log_json: bool = False                   # True면 stderr JSON 로그

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    scoring: Scoring = Field(default_factory=Scoring)
    incidents: Incidents = Field(default_factory=Incidents)
    concurrency: Concurrency = Field(default_factory=Concurrency)
    observability: Observability = Field(default_factory=Observability)
