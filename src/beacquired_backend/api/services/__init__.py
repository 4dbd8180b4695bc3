"""Service layer for API-specific business logic."""

from beacquired_backend.api.services.game_session import (
    GameSessionService,
    ManagedSession,
    SessionNotFoundError,
)

__all__ = ["GameSessionService", "ManagedSession", "SessionNotFoundError"]
