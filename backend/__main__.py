from __future__ import annotations

import uvicorn

from .app import app
from .config import DEFAULT_SERVICE_CONFIG


def main() -> None:
    uvicorn.run(
        app,
        host=DEFAULT_SERVICE_CONFIG.host,
        port=DEFAULT_SERVICE_CONFIG.port,
        log_level=DEFAULT_SERVICE_CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    main()
