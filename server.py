"""FastAPI backend for the Mullai land claim demo."""

from __future__ import annotations

import io
import math
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import JSONResponse, StreamingResponse

from backend.geocoding.resolver import GeocodeResolver
from backend.models.claim import Coordinate
from backend.reporting.report_renderer import ReportRenderer
from backend.services import get_config, get_renderer, get_resolver
from backend.utils.errors import (
    LandClaimError,
    NoLocationSelectedError,
    NotFoundError,
    ResolverError,
)
from backend.utils.logging import clear_context, get_logger, set_context
from backend.workflow import ClaimWorkflow


APP_TITLE = "Mullai - Land Claims"

logger = get_logger(__name__)


@dataclass
class SessionRecord:
    """Workflow and bookkeeping for one API session."""

    session_id: str
    workflow: ClaimWorkflow
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)


app = FastAPI(title=APP_TITLE)

sessions: Dict[str, SessionRecord] = {}
sessions_lock = threading.Lock()

# Status code used for each user-facing error kind
ERROR_STATUS = {
    NoLocationSelectedError: 400,
    NotFoundError: 404,
    ResolverError: 502,
}


@app.middleware("http")
async def reset_log_context(request: Request, call_next):
    """Drop the per-request log context once the response is produced."""
    try:
        return await call_next(request)
    finally:
        clear_context()


def _now() -> datetime:
    return datetime.utcnow()


def _register_session(record: SessionRecord) -> SessionRecord:
    with sessions_lock:
        sessions[record.session_id] = record
    return record


def _get_session(session_id: str) -> SessionRecord:
    with sessions_lock:
        record = sessions.get(session_id)
    if not record:
        raise HTTPException(status_code=404, detail="Session not found.")
    set_context(session_id=session_id)
    return record


def _touch(record: SessionRecord) -> None:
    record.updated_at = _now()


def _notice(exc: LandClaimError) -> HTTPException:
    status = ERROR_STATUS.get(type(exc), 400)
    return HTTPException(
        status_code=status,
        detail={"message": exc.user_message, "error_type": exc.error_type.value},
    )


def _session_payload(record: SessionRecord) -> Dict[str, Any]:
    return {
        "session_id": record.session_id,
        "state": record.workflow.state.to_dict(),
        "created_at": record.created_at.isoformat(),
        "updated_at": record.updated_at.isoformat(),
    }


@app.post("/api/sessions", status_code=201)
async def create_session(
    resolver: GeocodeResolver = Depends(get_resolver),
) -> JSONResponse:
    record = SessionRecord(
        session_id=str(uuid.uuid4()),
        workflow=ClaimWorkflow(resolver=resolver),
    )
    _register_session(record)
    logger.info(f"Session {record.session_id} created")
    return JSONResponse(_session_payload(record), status_code=201)


@app.get("/api/sessions/{session_id}")
async def session_state(session_id: str) -> JSONResponse:
    record = _get_session(session_id)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/location")
async def select_location(
    session_id: str,
    latitude: float = Form(...),
    longitude: float = Form(...),
) -> JSONResponse:
    record = _get_session(session_id)
    coordinate = Coordinate(latitude=latitude, longitude=longitude)
    if not (math.isfinite(latitude) and math.isfinite(longitude) and coordinate.in_range()):
        raise HTTPException(
            status_code=422,
            detail="Latitude must be within [-90, 90] and longitude within [-180, 180].",
        )
    record.workflow.select_location(coordinate)
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/purpose")
async def set_purpose(session_id: str, purpose: str = Form(...)) -> JSONResponse:
    record = _get_session(session_id)
    try:
        record.workflow.set_purpose(purpose)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/search")
async def search(session_id: str, query: str = Form(...)) -> JSONResponse:
    record = _get_session(session_id)
    try:
        await record.workflow.resolve_search_async(query)
    except LandClaimError as exc:
        raise _notice(exc)
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/claim")
async def submit_claim(session_id: str) -> JSONResponse:
    record = _get_session(session_id)
    try:
        record.workflow.submit_claim()
    except LandClaimError as exc:
        raise _notice(exc)
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/appeal")
async def appeal(session_id: str) -> JSONResponse:
    record = _get_session(session_id)
    record.workflow.appeal()
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/view")
async def switch_view(session_id: str, view: str = Form(...)) -> JSONResponse:
    record = _get_session(session_id)
    try:
        record.workflow.switch_view(view)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.post("/api/sessions/{session_id}/reset")
async def reset(session_id: str) -> JSONResponse:
    record = _get_session(session_id)
    record.workflow.reset()
    _touch(record)
    return JSONResponse(_session_payload(record))


@app.get("/api/sessions/{session_id}/report")
async def download_report(
    session_id: str,
    renderer: ReportRenderer = Depends(get_renderer),
) -> StreamingResponse:
    record = _get_session(session_id)
    pdf_bytes = renderer.render(record.workflow.state.decision)
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{renderer.filename}"'},
    )


@app.get("/api/about")
async def about() -> Dict[str, str]:
    config = get_config()
    return {"title": config.app.title, "text": config.app.about_text}


@app.get("/healthz")
async def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
