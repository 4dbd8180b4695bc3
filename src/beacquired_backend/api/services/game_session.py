"""Game session service exposed to the API layer."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import uuid4

from beacquired_backend.api.models.session import SessionSnapshotResponse
from beacquired_backend.game_logic import GameSession, build_session_configuration
from beacquired_backend.settings import get_settings

if TYPE_CHECKING:
    from beacquired_backend.game_logic import PlacementOutcome, SessionOverrides

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a request names a session the service does not hold."""


@dataclass(slots=True)
class ManagedSession:
    """A session paired with the lock that serializes its mutations."""

    session: GameSession
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameSessionService:
    """Keep in-memory sessions and apply card plays one at a time per session."""

    def __init__(self, *, default_seed: int | None = None) -> None:
        self._default_seed = default_seed
        self._sessions: dict[str, ManagedSession] = {}
        self._registry_lock = threading.Lock()

    @classmethod
    def create_default(cls) -> GameSessionService:
        """Return a service seeded from the backend settings."""
        return cls(default_seed=get_settings().default_rng_seed)

    def create_session(
        self,
        player_count: int,
        *,
        seed: int | None = None,
        overrides: SessionOverrides | None = None,
    ) -> SessionSnapshotResponse:
        """Start a new game and return its opening snapshot."""
        session = GameSession.create(
            player_count,
            configuration=build_session_configuration(overrides),
            seed=seed if seed is not None else self._default_seed,
        )
        session_id = uuid4().hex
        with self._registry_lock:
            self._sessions[session_id] = ManagedSession(session=session)
        logger.info("Created session %s for %s players", session_id, player_count)
        return SessionSnapshotResponse.from_session(session_id, session)

    def get_session(self, session_id: str) -> GameSession:
        """Return the live session object for *session_id*."""
        return self._require(session_id).session

    def snapshot(self, session_id: str) -> SessionSnapshotResponse:
        managed = self._require(session_id)
        with managed.lock:
            return SessionSnapshotResponse.from_session(session_id, managed.session)

    def play_card(
        self, session_id: str, player_id: int, card: str
    ) -> tuple[PlacementOutcome, SessionSnapshotResponse]:
        """Resolve a card play under the session lock."""
        managed = self._require(session_id)
        with managed.lock:
            outcome = managed.session.play_card(player_id, card)
            snapshot = SessionSnapshotResponse.from_session(
                session_id, managed.session
            )
        return outcome, snapshot

    def _require(self, session_id: str) -> ManagedSession:
        with self._registry_lock:
            managed = self._sessions.get(session_id)
        if managed is None:
            msg = f"Session '{session_id}' does not exist."
            raise SessionNotFoundError(msg)
        return managed


__all__ = ["GameSessionService", "ManagedSession", "SessionNotFoundError"]
