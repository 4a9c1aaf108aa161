from __future__ import annotations

from fastapi import APIRouter

from matchfeed.providers.registry import PROVIDER_LABELS

router = APIRouter(tags=["health"])


@router.get("/health")
def healthcheck() -> dict[str, object]:
    return {"status": "ok", "providers": sorted(PROVIDER_LABELS)}
