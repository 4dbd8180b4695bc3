"""Request and response schemas for the HTTP API."""

from beacquired_backend.api.models.session import (
    CellSnapshot,
    CompanySnapshot,
    CreateSessionRequest,
    PlacementRequest,
    PlacementResponse,
    PlayerSnapshot,
    SessionSnapshotResponse,
)

__all__ = [
    "CellSnapshot",
    "CompanySnapshot",
    "CreateSessionRequest",
    "PlacementRequest",
    "PlacementResponse",
    "PlayerSnapshot",
    "SessionSnapshotResponse",
]
