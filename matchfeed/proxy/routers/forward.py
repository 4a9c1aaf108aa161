from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from matchfeed.cache.policy import build_cache_control, classify_request, refine_with_body
from matchfeed.config.settings import normalize_provider_name

from ..errors import ProxyError

router = APIRouter(prefix="/proxy", tags=["proxy"])

logger = logging.getLogger("matchfeed.proxy")


@router.get("/{provider}/{path:path}")
async def forward(provider: str, path: str, request: Request) -> JSONResponse:
    try:
        canonical = normalize_provider_name(provider)
    except RuntimeError as exc:
        raise ProxyError(f"Unknown provider '{provider}'", status=404) from exc

    query_string = request.url.query
    decision = classify_request(path, query_string)
    body = await request.app.state.forwarder.forward(canonical, path, request.query_params.multi_items())
    seconds = refine_with_body(decision, body, provider=canonical)
    logger.info(
        "cache_policy provider=%s path=%s kind=%s seconds=%d",
        canonical,
        path,
        decision.kind.value,
        seconds,
    )
    return JSONResponse(content=body, headers={"Cache-Control": build_cache_control(seconds)})
