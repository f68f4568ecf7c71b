from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from pokelogs.config import API_PREFIX, LOG_FILE_PATH, MAX_PERIOD
from pokelogs.errors import ReportError, SourceUnavailable, UnknownModule
from pokelogs.models.data_models import ReportRow
from pokelogs.services.aggregator import Aggregator
from pokelogs.services.parser import LogParser
from pokelogs.services.reports import ReportService
from pokelogs.services.storage import LogStore
from pokelogs.utils.helpers import format_day

# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────


def current_date() -> date:
    return date.today()


def build_aggregator() -> Aggregator:
    return Aggregator(LogStore(LOG_FILE_PATH), LogParser())


def build_service() -> ReportService:
    """One service per request, anchored to the date the request arrived"""
    return ReportService(build_aggregator(), today=current_date())


def report_error(exc: ReportError) -> HTTPException:
    if isinstance(exc, SourceUnavailable):
        return HTTPException(status_code=503, detail=exc.message)
    if isinstance(exc, UnknownModule):
        return HTTPException(status_code=404, detail=exc.message)
    return HTTPException(status_code=400, detail=exc.message)


def rows_payload(rows: List[ReportRow], key: str) -> List[Dict[str, Any]]:
    return [{"date": format_day(r.date), key: r.value} for r in rows]


# ──────────────────────────────────────────────────────────────────────────────
# App
# ──────────────────────────────────────────────────────────────────────────────

app = FastAPI(title="Poke modules (Logs → Availability & Latency reports)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev OK; lock down in prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ──────────────────────────────────────────────────────────────────────────────
# Health
# ──────────────────────────────────────────────────────────────────────────────


@app.get(f"{API_PREFIX}/health")
def health() -> Dict[str, Any]:
    aggregator = build_aggregator()
    status = aggregator.store.stat()
    latest = aggregator.latest_date() if status.log_file_exists else None
    status.latest_date = format_day(latest) if latest else None
    return {
        "status": status.status,
        "log_file": {
            "exists": status.log_file_exists,
            "path": status.path,
            "size_bytes": status.size_bytes,
            "total_lines": status.total_lines,
        },
        "latest_date": status.latest_date,
    }


# ──────────────────────────────────────────────────────────────────────────────
# Reports
# ──────────────────────────────────────────────────────────────────────────────


@app.get(f"{API_PREFIX}/latency/{{module}}")
def latency(
    module: str,
    start: Optional[str] = Query(None, description="DD/MM/YYYY"),
    end: Optional[str] = Query(None, description="DD/MM/YYYY"),
) -> Dict[str, Any]:
    try:
        rows = build_service().latency_report(module, start, end)
    except ReportError as exc:
        raise report_error(exc) from exc
    return {"module": module, "rows": rows_payload(rows, "average_latency")}


@app.get(f"{API_PREFIX}/availability/{{module}}")
def availability(
    module: str,
    days: Optional[int] = Query(None, ge=1, le=MAX_PERIOD),
    last_3_days: bool = Query(False),
    last_30_days: bool = Query(False),
) -> Dict[str, Any]:
    try:
        rows = build_service().availability_report(module, days, last_3_days, last_30_days)
    except ReportError as exc:
        raise report_error(exc) from exc
    return {"module": module, "rows": rows_payload(rows, "availability")}


@app.get(f"{API_PREFIX}/chart/{{module}}")
def chart(
    module: str,
    days: Optional[int] = Query(None, ge=1, le=MAX_PERIOD),
    last_3_days: bool = Query(False),
    last_30_days: bool = Query(False),
    latency: bool = Query(False),
) -> Dict[str, Any]:
    try:
        report = build_service().chart_report(
            module, days, last_3_days, last_30_days, latency=latency
        )
    except ReportError as exc:
        raise report_error(exc) from exc
    return {
        "module": report.module.value,
        "metric": report.metric,
        "start": format_day(report.start),
        "values": report.values,
        "chart": report.chart,
        "axis": report.axis,
    }
