from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ProxyError(Exception):
    message: str
    status: int = 500
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


def error_payload(message: str) -> dict[str, Any]:
    return {"error": message}
