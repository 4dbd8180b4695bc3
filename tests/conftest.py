"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from beacquired_backend.game_logic.configuration import (
    get_default_board_configuration,
)
from beacquired_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings and board defaults are re-read for every test."""
    monkeypatch.delenv("BEACQUIRED_BOARD_MAX_ACTIVE_COMPANIES", raising=False)
    monkeypatch.delenv("BEACQUIRED_BOARD_HAND_SIZE", raising=False)
    get_settings.cache_clear()
    get_default_board_configuration.cache_clear()
    yield
    get_settings.cache_clear()
    get_default_board_configuration.cache_clear()
