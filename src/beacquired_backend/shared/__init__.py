"""Shared utilities, shared models and cross-cutting helpers for the backend."""

from beacquired_backend.shared.events import PlacementEvent, ScoreAward
from beacquired_backend.shared.value_objects import (
    CellCoordinate,
    CompanyColor,
    PlacementKind,
    RejectionReason,
)

__all__ = [
    "CellCoordinate",
    "CompanyColor",
    "PlacementEvent",
    "PlacementKind",
    "RejectionReason",
    "ScoreAward",
]
