"""Integration tests for the game session HTTP API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from beacquired_backend.api import create_api
from beacquired_backend.api import dependencies as dependency_module
from beacquired_backend.api.dependencies import get_game_session_service
from beacquired_backend.api.services import GameSessionService

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def service() -> GameSessionService:
    return GameSessionService(default_seed=7)


@pytest.fixture
def client(service: GameSessionService) -> Iterator[TestClient]:
    """Return a FastAPI test client with isolated game session state."""

    dependency_module.get_game_session_service.cache_clear()
    app = create_api()
    app.dependency_overrides[get_game_session_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    dependency_module.get_game_session_service.cache_clear()


def _create(client: TestClient, **body: object) -> dict:
    response = client.post("/sessions", json={"player_count": 2, **body})
    assert response.status_code == 201
    return response.json()


def test_create_session_returns_an_empty_board(client: TestClient) -> None:
    snapshot = _create(client)

    assert snapshot["current_player"] == 1
    assert snapshot["rows"] == 9
    assert snapshot["columns"] == 12
    assert len(snapshot["cells"]) == 108
    assert all(cell["owner"] is None for cell in snapshot["cells"])
    assert [company["name"] for company in snapshot["companies"]] == [
        "Red",
        "Yellow",
        "Green",
        "Blue",
        "Orange",
        "Purple",
        "Cyan",
    ]
    assert snapshot["active_companies"] == 0
    assert [len(player["hand"]) for player in snapshot["players"]] == [6, 6]
    assert snapshot["deck_remaining"] == 96


def test_create_session_validates_player_count(client: TestClient) -> None:
    response = client.post("/sessions", json={"player_count": 1})

    assert response.status_code == 422


def test_read_unknown_session_returns_404(client: TestClient) -> None:
    response = client.get("/sessions/does-not-exist")

    assert response.status_code == 404


def test_first_play_is_a_starter_and_passes_the_turn(client: TestClient) -> None:
    snapshot = _create(client)
    session_id = snapshot["session_id"]
    card = snapshot["players"][0]["hand"][0]

    response = client.post(
        f"/sessions/{session_id}/placements", json={"player_id": 1, "card": card}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["outcome"]["kind"] == "starter"
    assert body["outcome"]["cell"] == {
        "row": ord(card[0]) - ord("A"),
        "column": int(card[1:]) - 1,
    }
    assert body["snapshot"]["current_player"] == 2
    placed = next(cell for cell in body["snapshot"]["cells"] if cell["label"] == card)
    assert placed["owner"] == 1
    assert card not in body["snapshot"]["players"][0]["hand"]

    again = client.get(f"/sessions/{session_id}")
    assert again.json()["turn_count"] == 1


def test_invalid_plays_map_to_http_errors(client: TestClient) -> None:
    snapshot = _create(client)
    session_id = snapshot["session_id"]
    url = f"/sessions/{session_id}/placements"
    player_one_card = snapshot["players"][0]["hand"][0]

    out_of_turn = client.post(url, json={"player_id": 2, "card": "A1"})
    not_held = client.post(
        url,
        json={"player_id": 1, "card": snapshot["players"][1]["hand"][0]},
    )
    off_board = client.post(url, json={"player_id": 1, "card": "Z9"})
    unknown_player = client.post(url, json={"player_id": 9, "card": player_one_card})
    unknown_session = client.post(
        "/sessions/missing/placements", json={"player_id": 1, "card": "A1"}
    )

    assert out_of_turn.status_code == 409
    assert not_held.status_code == 409
    assert off_board.status_code == 400
    assert unknown_player.status_code == 404
    assert unknown_session.status_code == 404


def test_founding_and_cap_rejection_round_trip(
    client: TestClient, service: GameSessionService
) -> None:
    snapshot = _create(client, overrides={"max_active_companies": 1})
    session_id = snapshot["session_id"]
    state = service.get_session(session_id).state
    state.players[1].hand = ["A1", "C1"]
    state.players[2].hand = ["A2", "C2"]
    url = f"/sessions/{session_id}/placements"

    client.post(url, json={"player_id": 1, "card": "A1"})
    founded = client.post(url, json={"player_id": 2, "card": "A2"}).json()
    client.post(url, json={"player_id": 1, "card": "C1"})
    rejected = client.post(url, json={"player_id": 2, "card": "C2"})

    assert founded["outcome"]["kind"] == "founded"
    assert founded["outcome"]["company"] == "Red"
    assert founded["snapshot"]["active_companies"] == 1
    assert rejected.status_code == 200
    body = rejected.json()
    assert body["outcome"]["kind"] == "rejected"
    assert body["outcome"]["reason"] == "company_limit_reached"
    assert body["snapshot"]["current_player"] == 2
    assert "C2" in body["snapshot"]["players"][1]["hand"]
    c2 = next(cell for cell in body["snapshot"]["cells"] if cell["label"] == "C2")
    assert c2["owner"] is None


def test_overrides_beyond_the_company_pool_return_422(client: TestClient) -> None:
    response = client.post(
        "/sessions",
        json={"player_count": 2, "overrides": {"max_active_companies": 8}},
    )

    assert response.status_code == 422
    assert "company pool" in response.json()["detail"]


def test_card_labels_are_trimmed_before_validation(client: TestClient) -> None:
    snapshot = _create(client)
    card = snapshot["players"][0]["hand"][0]

    response = client.post(
        f"/sessions/{snapshot['session_id']}/placements",
        json={"player_id": 1, "card": f" {card.lower()} "},
    )

    assert response.status_code == 200
    assert response.json()["outcome"]["kind"] == "starter"
