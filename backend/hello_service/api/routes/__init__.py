"""Route Modules — one file per endpoint.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never build payloads themselves (delegate to core.service_info)
"""
