# app/health/routes.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.storage import TicketStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/healthz", response_class=PlainTextResponse)
def healthz():
    return "ok"


@router.get("/api/health")
def api_health(store: TicketStore = Depends(get_store)):
    try:
        store.count()
        return {
            "status": "OK",
            "database": "connected",
            "timestamp": utc_timestamp(),
        }
    except Exception as e:
        logger.exception("Health check failed")
        return JSONResponse(status_code=500, content={"status": "ERROR", "error": str(e)})
