"""Service Info — compiled-in identity of the service and its fixed payloads.

Invariants:
    - Every builder returns a fresh dict on each call (no shared instances)
    - Key order of each payload is the wire order
    - SERVICE_PORT is part of the literal info document, not the listen port

Design Decisions:
    - Plain dicts over models here: core/ stays free of pydantic, routes wrap
      the payloads in their response schemas
"""

SERVICE_NAME = "rust-project"
SERVICE_VERSION = "0.1.0"
SERVICE_DESCRIPTION = "Rust web service running in Docker"
SERVICE_AUTHOR = "Abdulwahed"
SERVICE_PORT = 8001

WELCOME_MESSAGE = "Hello from Rust Docker container!"
WELCOME_STATUS = "success"
HEALTH_MESSAGE = "Service is healthy"
HEALTH_STATUS = "ok"


def welcome_payload() -> dict:
    """Body of GET /."""
    return {"message": WELCOME_MESSAGE, "status": WELCOME_STATUS}


def health_payload() -> dict:
    """Body of GET /health."""
    return {"message": HEALTH_MESSAGE, "status": HEALTH_STATUS}


def info_payload() -> dict:
    """Body of GET /api/info."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "author": SERVICE_AUTHOR,
        "port": SERVICE_PORT,
    }
