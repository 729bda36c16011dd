from __future__ import annotations

import json
import os
import time
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# .env from the working directory, then backend/.env; both must load before
# licence_ocr.config reads the environment.
load_dotenv()
_backend_env = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
if os.path.exists(_backend_env):
    load_dotenv(_backend_env)

from licence_ocr import __version__
from licence_ocr.api.extract import router as extract_router
from licence_ocr.config import DEFAULT_API

app = FastAPI(title="Licence OCR Extraction", version=__version__)


def _origins(raw: str) -> list[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins(DEFAULT_API.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _emit(level: str, msg: str, request: Request, started: float, request_id: str, correlation_id: Optional[str], **extra: Any) -> None:
    # One JSON line per request; bodies (licence transcripts) are never logged.
    record = {
        "level": level,
        "msg": msg,
        "method": request.method,
        "path": request.url.path,
        "duration_ms": int((time.time() - started) * 1000),
        "request_id": request_id,
        "correlation_id": correlation_id,
        **extra,
    }
    print(json.dumps(record, ensure_ascii=False))


@app.middleware("http")
async def access_log(request: Request, call_next):
    started = time.time()
    request_id = request.headers.get("X-Request-ID") or f"{time.time_ns():x}"[-12:]
    correlation_id = request.headers.get("X-Correlation-ID") or request.query_params.get("correlation_id")
    try:
        response = await call_next(request)
    except Exception as e:
        _emit("error", "request_error", request, started, request_id, correlation_id, error=str(e))
        raise
    _emit(
        "info",
        "request",
        request,
        started,
        request_id,
        correlation_id,
        status=response.status_code,
        client=request.client.host if request.client else None,
    )
    response.headers["X-Request-ID"] = request_id
    if correlation_id:
        response.headers["X-Correlation-ID"] = correlation_id
    return response


app.include_router(extract_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "version": app.version}
