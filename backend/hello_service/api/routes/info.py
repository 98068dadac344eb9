"""Service Info Route — GET /api/info describes the running service."""

from fastapi import APIRouter, status

from hello_service.core.service_info import info_payload
from hello_service.schemas.responses import ServiceInfo

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info", response_model=ServiceInfo, status_code=status.HTTP_200_OK)
async def service_info() -> ServiceInfo:
    """Static identity document. `port` is the published port, not the bound one."""
    return ServiceInfo(**info_payload())
