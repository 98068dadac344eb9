"""CORS — cross-origin access for browser clients.

Invariants:
    - With "*" configured, every response carries Access-Control-Allow-Origin: *,
      including requests that sent no Origin header
    - Preflight (OPTIONS + Access-Control-Request-Method) answered by CORSMiddleware

Design Decisions:
    - CORSMiddleware alone only decorates requests that carry an Origin header,
      so an outer middleware fills the header in for the rest
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"


def register_cors(app: FastAPI, origins: list[str]) -> None:
    """Install CORS handling for the configured origins."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if "*" in origins:
        _register_allow_any_origin(app)


def _register_allow_any_origin(app: FastAPI) -> None:
    # Added after CORSMiddleware, so it wraps it and sees its headers
    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault(ALLOW_ORIGIN_HEADER, "*")
        return response
