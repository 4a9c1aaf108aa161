from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from matchfeed.config.settings import settings

from .errors import ProxyError, error_payload
from .routers.forward import router as forward_router
from .routers.health import router as health_router
from .upstream import UpstreamForwarder


def _configure_logging() -> logging.Logger:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("matchfeed.proxy")


logger = _configure_logging()


def create_app(forwarder: UpstreamForwarder | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
        yield
        await app.state.forwarder.aclose()

    app = FastAPI(title=settings.PROXY_APP_NAME, version="1.0.0", lifespan=lifespan)
    app.state.forwarder = forwarder or UpstreamForwarder()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):  # type: ignore[no-untyped-def]
        request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id
        started_at = time.perf_counter()

        response = await call_next(request)

        response.headers["X-Request-Id"] = request_id
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        log = logger.error if response.status_code >= 500 else logger.info
        log(
            "request method=%s path=%s status=%s request_id=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            request_id,
            elapsed_ms,
        )
        return response

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:  # type: ignore[no-untyped-def]
        logger.warning(
            "proxy_error status=%s path=%s request_id=%s details=%s",
            exc.status,
            request.url.path,
            getattr(request.state, "request_id", "-"),
            exc.details,
        )
        return JSONResponse(status_code=exc.status, content=error_payload(exc.message))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:  # type: ignore[no-untyped-def]
        logger.exception(
            "unhandled_error path=%s request_id=%s",
            request.url.path,
            getattr(request.state, "request_id", "-"),
        )
        return JSONResponse(status_code=500, content=error_payload("Internal server error."))

    app.include_router(health_router)
    app.include_router(forward_router)
    return app


app = create_app()
