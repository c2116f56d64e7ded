# =============================================================================
# app/routers/logs.py - Log Ingestion and Retrieval Endpoints
# =============================================================================
# POST /log     - store one event (no authentication)
# GET  /giveme  - newest events first; requires ?key=<shared secret>
#
# Handlers only wire components together. Errors are raised as
# LogboxException subclasses and rendered by the handlers in main.py.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from app.auth import require_retrieval_key
from app.dependencies import LogReaderDep, LogWriterDep, SettingsDep
from app.responses import entries_response, ok_response
from core.models.log_entry import RetrievalCommand
from core.services.request_validator import RequestValidator

router = APIRouter()


@router.post("/log")
async def create_log(
    writer: LogWriterDep,
    body: Annotated[Any, Body(examples=[{"name": "checkout", "data": {"cart": 3}}])] = None,
):
    """
    Store a log event.

    Body must be {"name": <non-empty string>, "data": <object>}.
    Unknown fields are ignored. Responds {"status": 200, "message": "OK"}.
    """
    log = RequestValidator.parse_log(body)
    await writer.write(log.name, log.data)
    return ok_response()


@router.get("/giveme")
async def get_logs(
    reader: LogReaderDep,
    settings: SettingsDep,
    command: RetrievalCommand = Depends(require_retrieval_key),
):
    """
    Return stored events, newest first.

    Without ?all=true at most LIMIT entries are returned.
    """
    entries = await reader.read(unbounded=command.unbounded, limit=settings.LIMIT)
    return entries_response(entries)
