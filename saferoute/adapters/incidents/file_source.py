"""
File-backed incident source for SafeRoute.

This module loads incident records from CSV, JSON or Excel files
and serves them as snapshots to the route analyzer.
"""

import os
import csv
import json
import threading
from typing import Any, Dict, Iterable, List, Optional
import openpyxl
from pydantic import ValidationError
from saferoute.core.models import Incident
from saferoute.core.normalize import to_incident
from saferoute.observability.logging_setup import get_logger

log = get_logger("saferoute.incidents")

def _read_csv(path: str) -> List[Dict[str, Any]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))

def _read_json(path: str) -> List[Dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("incidents", [])
    if not isinstance(data, list):
        raise ValueError(f"JSON 사건 파일 형식이 잘못됨: {path}")
    return data

def _read_xlsx(path: str) -> List[Dict[str, Any]]:
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        rows = ws.iter_rows(values_only=True)
        headers = next(rows, None)
        if headers is None:
            return []
        headers = [str(h).strip() if h is not None else "" for h in headers]
        log.info(f"엑셀 헤더 확인: {headers}")

        records = []
        for row in rows:
            # 빈 행 건너뛰기
            if row is None or all(v is None or v == "" for v in row):
                continue
            records.append(dict(zip(headers, row)))
        return records
    finally:
        wb.close()

def _normalize_rows(path: str, raw_rows: Iterable[Dict[str, Any]]) -> List[Incident]:
    incidents: List[Incident] = []
    for row_num, raw in enumerate(raw_rows, start=1):
        try:
            incidents.append(to_incident(raw))
        except (ValidationError, ValueError, TypeError) as e:
            log.warning(f"행 {row_num} 사건 변환 오류 건너뜀 path:{path} error:{e}")
    return incidents

def load_incidents(path: str) -> List[Incident]:
    """
    사건 데이터를 파일에서 로드합니다.

    Args:
        path: .csv, .json, .xlsx 파일 경로

    Returns:
        변환에 성공한 사건 목록

    Raises:
        ValueError: 지원하지 않는 파일 형식
    """
    ext = os.path.splitext(path)[1].lower()

    if ext == ".csv":
        raw_rows = _read_csv(path)
    elif ext == ".json":
        raw_rows = _read_json(path)
    elif ext in (".xlsx", ".xlsm"):
        raw_rows = _read_xlsx(path)
    else:
        raise ValueError(f"지원하지 않는 파일 형식: {ext or path}")

    incidents = _normalize_rows(path, raw_rows)
    log.info(f"사건 데이터 로드됨 path:{path} rows:{len(raw_rows)} count:{len(incidents)}")
    return incidents

class FileIncidentSource:
    """파일 기반 사건 데이터 소스"""

    def __init__(self, path: str):
        """
        초기화합니다.

        Args:
            path: 사건 데이터 파일 경로
        """
        self.path = path
        self._incidents: Optional[List[Incident]] = None
        self._lock = threading.Lock()

        log.info(f"FileIncidentSource 초기화됨 path:{path}")

    @property
    def loaded(self) -> bool:
        return self._incidents is not None

    def refresh(self) -> int:
        """파일에서 사건 데이터를 다시 읽습니다."""
        incidents = load_incidents(self.path)
        with self._lock:
            self._incidents = incidents
        return len(incidents)

    def snapshot(self) -> List[Incident]:
        """현재 사건 목록의 복사본을 반환합니다 (최초 호출 시 로드)."""
        if self._incidents is None:
            self.refresh()
        with self._lock:
            return list(self._incidents)
