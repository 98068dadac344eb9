"""Response Schemas — the two JSON shapes returned by the endpoints.

Invariants:
    - Instances are frozen (constructed, serialized, discarded)
    - Field declaration order is the serialization order

Design Decisions:
    - Used as response_model so FastAPI serializes them in field order
"""

from pydantic import BaseModel, ConfigDict, Field


class StatusMessage(BaseModel):
    """Two-field message/status body of the welcome and health routes."""
    model_config = ConfigDict(frozen=True)

    message: str
    status: str


class ServiceInfo(BaseModel):
    """Static metadata describing the service."""
    model_config = ConfigDict(frozen=True)

    service: str
    version: str
    description: str
    author: str
    port: int = Field(ge=1, le=65535)
