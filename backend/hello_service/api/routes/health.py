"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - No dependency is checked: the service has none
"""

from fastapi import APIRouter, status

from hello_service.core.service_info import health_payload
from hello_service.schemas.responses import StatusMessage

router = APIRouter(tags=["health"])


@router.get("/health", response_model=StatusMessage, status_code=status.HTTP_200_OK)
async def health_check() -> StatusMessage:
    """Basic liveness probe. Returns 200 if the process is up."""
    return StatusMessage(**health_payload())
