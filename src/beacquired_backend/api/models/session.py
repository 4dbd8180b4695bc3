"""Pydantic models for the game session HTTP contract."""

# ruff: noqa: TC001

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from beacquired_backend.game_logic.configuration import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    SessionOverrides,
)
from beacquired_backend.game_logic.engine import PlacementOutcome
from beacquired_backend.game_logic.session import GameSession
from beacquired_backend.shared.value_objects import CompanyColor


class CreateSessionRequest(BaseModel):
    """Client request to open a new game."""

    player_count: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS)
    seed: int | None = None
    overrides: SessionOverrides | None = None


class PlacementRequest(BaseModel):
    """Client request to play a card from the active player's hand."""

    player_id: int = Field(ge=1)
    card: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=2, max_length=3)
    ] = Field(examples=["C7"])


class CellSnapshot(BaseModel):
    """Ownership and affiliation of one board cell."""

    label: str
    row: int
    column: int
    owner: int | None = None
    company: str | None = None


class CompanySnapshot(BaseModel):
    """Public view of a company identity."""

    name: str
    color: CompanyColor
    active: bool
    size: int


class PlayerSnapshot(BaseModel):
    """Public view of a player's score and hand."""

    player_id: int
    score: int
    hand: list[str]


class SessionSnapshotResponse(BaseModel):
    """Full read-only view of a session, sufficient to render the board."""

    session_id: str
    current_player: int
    turn_count: int
    deck_remaining: int
    rows: int
    columns: int
    active_companies: int
    cells: list[CellSnapshot]
    companies: list[CompanySnapshot]
    players: list[PlayerSnapshot]

    @classmethod
    def from_session(
        cls, session_id: str, session: GameSession
    ) -> SessionSnapshotResponse:
        """Build the snapshot from the session's read-only queries."""
        state = session.state
        cells = []
        for cell in state.grid.cells():
            company = state.company_of(cell)
            cells.append(
                CellSnapshot(
                    label=cell.label,
                    row=cell.row,
                    column=cell.column,
                    owner=state.owner_of(cell),
                    company=company.name if company is not None else None,
                )
            )
        return cls(
            session_id=session_id,
            current_player=session.current_player,
            turn_count=session.turn_count,
            deck_remaining=session.deck_remaining(),
            rows=state.grid.rows,
            columns=state.grid.columns,
            active_companies=state.registry.active_count(),
            cells=cells,
            companies=[
                CompanySnapshot(
                    name=company.name,
                    color=company.color,
                    active=company.active,
                    size=state.registry.size(company),
                )
                for company in state.registry.companies()
            ],
            players=[
                PlayerSnapshot(
                    player_id=player_id,
                    score=state.score_of(player_id),
                    hand=list(session.hand_of(player_id)),
                )
                for player_id in session.turn_order
            ],
        )


class PlacementResponse(BaseModel):
    """Outcome of a card play together with the resulting board."""

    outcome: PlacementOutcome
    snapshot: SessionSnapshotResponse


__all__ = [
    "CellSnapshot",
    "CompanySnapshot",
    "CreateSessionRequest",
    "PlacementRequest",
    "PlacementResponse",
    "PlayerSnapshot",
    "SessionSnapshotResponse",
]
