"""Process entry point: `python -m hello_service` or the `hello-service` script.

A bind failure (port in use, missing privilege) makes uvicorn exit with a
non-zero status (3, STARTUP_FAILURE) before any request is served.
"""

import uvicorn

from hello_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hello_service.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
