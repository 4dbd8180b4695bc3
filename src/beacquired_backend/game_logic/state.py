"""Explicit game state value passed to the acquisition engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from beacquired_backend.game_logic.companies import Company, CompanyRegistry
from beacquired_backend.game_logic.configuration import (
    BoardConfiguration,
    get_default_board_configuration,
)
from beacquired_backend.game_logic.errors import (
    BoardInvariantError,
    UnknownPlayerError,
)
from beacquired_backend.game_logic.grid import Cell, Grid
from beacquired_backend.game_logic.players import PlayerLedger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class GameState:
    """Board, company pool and player ledgers of one game.

    The state holds no references outside itself, so independent games (and
    tests) never share anything.
    """

    def __init__(
        self,
        player_ids: Iterable[int],
        configuration: BoardConfiguration | None = None,
    ) -> None:
        self.configuration = configuration or get_default_board_configuration()
        self.grid = Grid(self.configuration.rows, self.configuration.columns)
        self.registry = CompanyRegistry(self.grid, self.configuration.company_pool)
        self.players: dict[int, PlayerLedger] = {}
        for player_id in player_ids:
            if player_id in self.players:
                msg = f"Duplicate player id {player_id}."
                raise ValueError(msg)
            self.players[player_id] = PlayerLedger(player_id=player_id)

    @classmethod
    def for_player_count(
        cls, count: int, configuration: BoardConfiguration | None = None
    ) -> GameState:
        """Create a state for players numbered ``1..count``."""
        return cls(range(1, count + 1), configuration)

    def player(self, player_id: int) -> PlayerLedger:
        try:
            return self.players[player_id]
        except KeyError as exc:
            msg = f"Unknown player id {player_id}."
            raise UnknownPlayerError(msg) from exc

    def owner_of(self, cell: Cell) -> int | None:
        return cell.owner

    def company_of(self, cell: Cell) -> Company | None:
        if cell.company is None:
            return None
        return self.registry.company(cell.company)

    def share_count(self, player_id: int, company: Company) -> int:
        """Return how many of *company*'s cells *player_id* owns."""
        return sum(
            1 for cell in self.registry.member_cells(company) if cell.owner == player_id
        )

    def shareholdings(self, company: Company) -> Mapping[int, int]:
        """Return share counts per owning player id, skipping unowned cells."""
        holdings: dict[int, int] = {}
        for cell in self.registry.member_cells(company):
            if cell.owner is None:
                continue
            holdings[cell.owner] = holdings.get(cell.owner, 0) + 1
        return holdings

    def score_of(self, player_id: int) -> int:
        return self.player(player_id).score

    def validate_consistency(self) -> None:
        """Raise :class:`BoardInvariantError` if cells and companies disagree."""
        for cell in self.grid.cells():
            if cell.company is None:
                continue
            company = self.registry.company(cell.company)
            if not company.active or cell.index not in company.members:
                msg = (
                    f"Cell {cell.label} points at {company.name}, which does not "
                    "hold it as an active member."
                )
                raise BoardInvariantError(msg)
        seen: set[int] = set()
        for company in self.registry.companies():
            if company.active != bool(company.members):
                msg = f"Company {company.name} active flag disagrees with its members."
                raise BoardInvariantError(msg)
            for index in company.members:
                if index in seen:
                    msg = f"Cell {self.grid.cell(index).label} is in two companies."
                    raise BoardInvariantError(msg)
                seen.add(index)
                if self.grid.cell(index).company != company.index:
                    msg = (
                        f"Company {company.name} holds cell "
                        f"{self.grid.cell(index).label} without a back-reference."
                    )
                    raise BoardInvariantError(msg)
        if self.registry.active_count() > self.configuration.max_active_companies:
            msg = "More companies are active than the configuration allows."
            raise BoardInvariantError(msg)


__all__ = ["GameState"]
