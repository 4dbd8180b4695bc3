"""Core rules and mechanics that drive BeAcquired gameplay."""

from beacquired_backend.game_logic.companies import Company, CompanyRegistry
from beacquired_backend.game_logic.configuration import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    DEFAULT_COMPANY_POOL,
    HAND_SIZE,
    MAX_ACTIVE_COMPANIES,
    BoardConfiguration,
    BoardDefaults,
    CompanySpec,
    SessionOverrides,
    build_session_configuration,
    get_default_board_configuration,
)
from beacquired_backend.game_logic.deck import TileDeck
from beacquired_backend.game_logic.engine import (
    PlacementOutcome,
    rank_merging_companies,
    resolve_placement,
    score_defunct_company,
)
from beacquired_backend.game_logic.errors import (
    BoardInvariantError,
    CardNotInHandError,
    CellAlreadyOccupiedError,
    CellOutOfBoundsError,
    GameRuleError,
    NotYourTurnError,
    UnknownPlayerError,
)
from beacquired_backend.game_logic.grid import Cell, Grid
from beacquired_backend.game_logic.players import PlayerLedger
from beacquired_backend.game_logic.session import GameSession
from beacquired_backend.game_logic.state import GameState

__all__ = [
    "BOARD_COLUMNS",
    "BOARD_ROWS",
    "DEFAULT_COMPANY_POOL",
    "HAND_SIZE",
    "MAX_ACTIVE_COMPANIES",
    "BoardConfiguration",
    "BoardDefaults",
    "BoardInvariantError",
    "CardNotInHandError",
    "Cell",
    "CellAlreadyOccupiedError",
    "CellOutOfBoundsError",
    "Company",
    "CompanyRegistry",
    "CompanySpec",
    "GameRuleError",
    "GameSession",
    "GameState",
    "Grid",
    "NotYourTurnError",
    "PlacementOutcome",
    "PlayerLedger",
    "SessionOverrides",
    "TileDeck",
    "UnknownPlayerError",
    "build_session_configuration",
    "get_default_board_configuration",
    "rank_merging_companies",
    "resolve_placement",
    "score_defunct_company",
]
