"""FastAPI application exposing the Adamik MCP tools over HTTP."""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from adamik_mcp import mcp
from adamik_mcp.adamik_api import default_client
from adamik_mcp.config import default_config, validate_config
from adamik_mcp.logging_config import configure_logging
from adamik_mcp.metrics import default_metrics

logger = logging.getLogger(__name__)
configure_logging(default_config)

registry = mcp.build_registry(default_client, default_config)
HEALTH_STATUS = {"status": "ok"}
APP_VERSION = mcp.SERVER_VERSION


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup: refuse to serve without a usable configuration.
    validate_config(default_config)
    yield
    # Shutdown
    await default_client.aclose()


app = FastAPI(
    title="Adamik MCP Server",
    description="Adamik blockchain API tool surface for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """Minimal JSON-RPC gateway for MCP-style integrations."""
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    def _respond(payload: Dict[str, Any], status_code: int = 200, *, method_label: Optional[str] = None) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        error_code = payload.get("error", {}).get("code") if isinstance(payload.get("error"), dict) else None
        logger.debug(
            "mcp outcome=%s method=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            "error" if error_code else "success",
            method_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    try:
        body = await request.json()
    except ValueError:
        return _respond(mcp.jsonrpc_error_payload(None, mcp.PARSE_ERROR, "Parse error"), status_code=400)

    if not isinstance(body, dict):
        return _respond(mcp.jsonrpc_error_payload(None, mcp.INVALID_REQUEST, "Invalid request"), status_code=400)

    payload = await mcp.handle_rpc(registry, body, request_id=request_id)
    if payload is None:
        # Notifications do not get a JSON-RPC response body.
        return Response(status_code=204)
    return _respond(payload, method_label=body.get("method"))


# Run with: uvicorn adamik_mcp.server:app, or adamik-mcp --http
