"""Tests for board configuration defaults and overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from beacquired_backend.game_logic.configuration import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    HAND_SIZE,
    MAX_ACTIVE_COMPANIES,
    BoardConfiguration,
    SessionOverrides,
    build_session_configuration,
    get_default_board_configuration,
)


def test_defaults_match_the_named_constants() -> None:
    config = get_default_board_configuration()

    assert config.rows == BOARD_ROWS == 9
    assert config.columns == BOARD_COLUMNS == 12
    assert config.max_active_companies == MAX_ACTIVE_COMPANIES == 7
    assert config.hand_size == HAND_SIZE == 6
    assert len(config.company_pool) == 7
    assert config.cell_count == 108


def test_defaults_can_be_lowered_from_the_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("BEACQUIRED_BOARD_MAX_ACTIVE_COMPANIES", "3")
    get_default_board_configuration.cache_clear()

    assert get_default_board_configuration().max_active_companies == 3


def test_session_overrides_apply_on_top_of_defaults() -> None:
    config = build_session_configuration(
        SessionOverrides(max_active_companies=2, hand_size=4)
    )

    assert config.max_active_companies == 2
    assert config.hand_size == 4
    assert config.rows == BOARD_ROWS


def test_empty_overrides_return_the_defaults() -> None:
    assert build_session_configuration(SessionOverrides()) == (
        get_default_board_configuration()
    )


def test_cap_cannot_exceed_the_company_pool() -> None:
    with pytest.raises(ValidationError, match="company pool"):
        BoardConfiguration(max_active_companies=8)

    with pytest.raises(ValidationError):
        build_session_configuration(SessionOverrides(max_active_companies=8))
