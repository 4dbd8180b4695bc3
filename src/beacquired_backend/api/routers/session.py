"""HTTP endpoints for creating sessions and playing cards."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from beacquired_backend.api.dependencies import get_game_session_service
from beacquired_backend.api.models import (
    CreateSessionRequest,
    PlacementRequest,
    PlacementResponse,
    SessionSnapshotResponse,
)
from beacquired_backend.api.services import (
    GameSessionService,
    SessionNotFoundError,
)
from beacquired_backend.game_logic.errors import (
    CardNotInHandError,
    CellAlreadyOccupiedError,
    CellOutOfBoundsError,
    NotYourTurnError,
    UnknownPlayerError,
)

router = APIRouter(prefix="/sessions", tags=["session"])


@router.post(
    "",
    response_model=SessionSnapshotResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_session(
    payload: CreateSessionRequest,
    service: GameSessionService = Depends(get_game_session_service),
) -> SessionSnapshotResponse:
    """Open a new game and deal the opening hands.

    Overrides that exceed the company pool are answered with 422.
    """

    try:
        return service.create_session(
            payload.player_count, seed=payload.seed, overrides=payload.overrides
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/{session_id}", response_model=SessionSnapshotResponse)
def read_session(
    session_id: str,
    service: GameSessionService = Depends(get_game_session_service),
) -> SessionSnapshotResponse:
    """Return the current board, companies and scores."""

    try:
        return service.snapshot(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        ) from exc


@router.post("/{session_id}/placements", response_model=PlacementResponse)
def play_card(
    session_id: str,
    payload: PlacementRequest,
    service: GameSessionService = Depends(get_game_session_service),
) -> PlacementResponse:
    """Play a card for the active player.

    A founding refused by the company cap is not an HTTP error: it comes back
    with ``outcome.kind == "rejected"`` and an unchanged board.
    """

    try:
        outcome, snapshot = service.play_card(
            session_id, payload.player_id, payload.card
        )
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        ) from exc
    except UnknownPlayerError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except CellOutOfBoundsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except (
        NotYourTurnError,
        CardNotInHandError,
        CellAlreadyOccupiedError,
    ) as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc

    return PlacementResponse(outcome=outcome, snapshot=snapshot)
