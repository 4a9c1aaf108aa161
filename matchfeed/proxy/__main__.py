from __future__ import annotations

import uvicorn

from matchfeed.config.settings import settings


def main() -> None:
    uvicorn.run("matchfeed.proxy.main:app", host=settings.PROXY_HOST, port=settings.PROXY_PORT)


if __name__ == "__main__":
    main()
