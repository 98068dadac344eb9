"""Startup Banner — the lines printed to stdout when the server starts.

Invariants:
    - Endpoint lines list exactly the registered routes, in registration order
    - Address line reflects the configured host and port
"""

ENDPOINTS: tuple[tuple[str, str, str], ...] = (
    ("GET", "/", "Welcome message"),
    ("GET", "/health", "Health check"),
    ("GET", "/api/info", "Service information"),
)

_PATH_WIDTH = 8


def format_endpoint(method: str, path: str, description: str) -> str:
    """One indented endpoint line; paths longer than the column are not cut."""
    return f"   {method} {path:<{_PATH_WIDTH}} - {description}"


def startup_banner(host: str, port: int) -> list[str]:
    """Build the banner for a server listening on host:port."""
    return [
        f"🚀 Server starting on http://{host}:{port}",
        "📍 Endpoints:",
        *(format_endpoint(*endpoint) for endpoint in ENDPOINTS),
    ]
