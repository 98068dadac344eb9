"""Welcome Route — GET / greets the caller with a fixed message."""

from fastapi import APIRouter, status

from hello_service.core.service_info import welcome_payload
from hello_service.schemas.responses import StatusMessage

router = APIRouter(tags=["welcome"])


@router.get("/", response_model=StatusMessage, status_code=status.HTTP_200_OK)
async def welcome() -> StatusMessage:
    return StatusMessage(**welcome_payload())
