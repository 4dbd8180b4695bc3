"""Company formation and acquisition rules for a single tile placement.

A placement is classified by the owned cells around it:

* no owned neighbors: the tile stands alone as a starter;
* owned neighbors but no companies among them: a new company is founded,
  unless every company identity is already on the board;
* exactly one neighboring company: the tile (and any loose neighbors) join it;
* two or more neighboring companies: they merge into the largest one and the
  absorbed companies pay out to their shareholders.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from beacquired_backend.game_logic.errors import CellAlreadyOccupiedError
from beacquired_backend.shared.events import ScoreAward
from beacquired_backend.shared.value_objects import (
    CellCoordinate,
    PlacementKind,
    RejectionReason,
)

if TYPE_CHECKING:
    from beacquired_backend.game_logic.companies import Company
    from beacquired_backend.game_logic.grid import Cell
    from beacquired_backend.game_logic.state import GameState

logger = logging.getLogger(__name__)


class PlacementOutcome(BaseModel):
    """Result of resolving one placement."""

    model_config = ConfigDict(frozen=True)

    kind: PlacementKind
    cell: CellCoordinate
    player_id: int = Field(..., ge=1)
    company: str | None = None
    absorbed: tuple[str, ...] = Field(default_factory=tuple)
    awards: tuple[ScoreAward, ...] = Field(default_factory=tuple)
    reason: RejectionReason | None = None

    @model_validator(mode="after")
    def _validate_shape(self) -> PlacementOutcome:
        """Ensure the populated fields match the outcome kind."""
        if (self.kind is PlacementKind.REJECTED) != (self.reason is not None):
            msg = "Only rejected placements carry a rejection reason."
            raise ValueError(msg)
        if self.kind in {PlacementKind.STARTER, PlacementKind.REJECTED}:
            if self.company is not None:
                msg = f"A {self.kind} placement does not touch a company."
                raise ValueError(msg)
        elif self.company is None:
            msg = f"A {self.kind} placement must name its company."
            raise ValueError(msg)
        if self.absorbed and self.kind is not PlacementKind.MERGED:
            msg = "Only merges absorb companies."
            raise ValueError(msg)
        return self

    @property
    def success(self) -> bool:
        return self.kind is not PlacementKind.REJECTED


def resolve_placement(state: GameState, cell: Cell, player_id: int) -> PlacementOutcome:
    """Place *cell* for *player_id* and apply the resulting company transition.

    Raises :class:`CellAlreadyOccupiedError` if the cell already has an owner
    and :class:`UnknownPlayerError` if the player is not part of *state*. The
    only refusal that leaves the board untouched without raising is founding
    a company while the active-company cap is reached.
    """
    state.player(player_id)
    if cell.is_owned():
        msg = f"Cell {cell.label} is already owned by player {cell.owner}."
        raise CellAlreadyOccupiedError(msg)

    cell.owner = player_id
    adjacent_owned = [
        neighbor for neighbor in state.grid.neighbors_of(cell) if neighbor.is_owned()
    ]
    if not adjacent_owned:
        logger.info("Player %s placed starter tile %s", player_id, cell.label)
        return PlacementOutcome(
            kind=PlacementKind.STARTER, cell=cell.coordinate, player_id=player_id
        )

    adjacent_companies = _distinct_companies(state, adjacent_owned)
    if not adjacent_companies:
        return _found_company(state, cell, adjacent_owned, player_id)

    if len(adjacent_companies) == 1:
        company = adjacent_companies[0]
        _absorb_placement(state, company, cell, adjacent_owned)
        logger.info(
            "Player %s extended %s to %s cells with %s",
            player_id,
            company.name,
            company.size,
            cell.label,
        )
        return PlacementOutcome(
            kind=PlacementKind.JOINED,
            cell=cell.coordinate,
            player_id=player_id,
            company=company.name,
        )

    return _merge_companies(state, adjacent_companies, cell, adjacent_owned, player_id)


def rank_merging_companies(
    state: GameState, companies: list[Company], player_id: int
) -> list[Company]:
    """Order *companies* so the acquirer comes first.

    Larger companies rank higher; among equally large ones the company in
    which *player_id* holds the fewest shares ranks higher. Full ties keep
    creation order.
    """
    in_creation_order = sorted(companies, key=lambda company: company.index)
    return sorted(
        in_creation_order,
        key=lambda company: (-company.size, state.share_count(player_id, company)),
    )


def score_defunct_company(state: GameState, company: Company) -> tuple[ScoreAward, ...]:
    """Pay every shareholder of *company* ``shares * (size - 1)`` points.

    Must run while *company* still holds its pre-merge cells.
    """
    size = company.size
    awards: list[ScoreAward] = []
    for owner, shares in sorted(state.shareholdings(company).items()):
        points = shares * (size - 1)
        state.player(owner).add_score(points)
        awards.append(
            ScoreAward(
                player_id=owner, company=company.name, shares=shares, points=points
            )
        )
        logger.info(
            "Player %s earned %s points for %s shares of %s",
            owner,
            points,
            shares,
            company.name,
        )
    return tuple(awards)


def _distinct_companies(state: GameState, cells: list[Cell]) -> list[Company]:
    companies: list[Company] = []
    for neighbor in cells:
        company = state.company_of(neighbor)
        if company is not None and company not in companies:
            companies.append(company)
    return companies


def _absorb_placement(
    state: GameState, company: Company, cell: Cell, adjacent_owned: list[Cell]
) -> None:
    """Add the placed cell and its loose owned neighbors to *company*."""
    state.registry.add_cell(company, cell)
    for neighbor in adjacent_owned:
        if not neighbor.is_part_of_company():
            state.registry.add_cell(company, neighbor)


def _found_company(
    state: GameState, cell: Cell, adjacent_owned: list[Cell], player_id: int
) -> PlacementOutcome:
    registry = state.registry
    company = registry.first_inactive_company()
    if (
        company is None
        or registry.active_count() >= state.configuration.max_active_companies
    ):
        cell.owner = None
        logger.warning(
            "Rejected %s for player %s: %s companies are already active",
            cell.label,
            player_id,
            registry.active_count(),
        )
        return PlacementOutcome(
            kind=PlacementKind.REJECTED,
            cell=cell.coordinate,
            player_id=player_id,
            reason=RejectionReason.COMPANY_LIMIT_REACHED,
        )

    registry.add_cell(company, cell)
    for neighbor in adjacent_owned:
        registry.add_cell(company, neighbor)
    logger.info(
        "Player %s founded %s at %s with %s cells",
        player_id,
        company.name,
        cell.label,
        company.size,
    )
    return PlacementOutcome(
        kind=PlacementKind.FOUNDED,
        cell=cell.coordinate,
        player_id=player_id,
        company=company.name,
    )


def _merge_companies(
    state: GameState,
    merging: list[Company],
    cell: Cell,
    adjacent_owned: list[Cell],
    player_id: int,
) -> PlacementOutcome:
    acquirer, *defunct = rank_merging_companies(state, merging, player_id)

    # Every defunct company is scored before any cell changes hands.
    awards: list[ScoreAward] = []
    for company in defunct:
        awards.extend(score_defunct_company(state, company))

    _absorb_placement(state, acquirer, cell, adjacent_owned)
    for company in defunct:
        for member in state.registry.member_cells(company):
            state.registry.add_cell(acquirer, member)
        state.registry.reset_company(company)

    logger.info(
        "%s acquired %s; now %s cells",
        acquirer.name,
        ", ".join(company.name for company in defunct),
        acquirer.size,
    )
    return PlacementOutcome(
        kind=PlacementKind.MERGED,
        cell=cell.coordinate,
        player_id=player_id,
        company=acquirer.name,
        absorbed=tuple(company.name for company in defunct),
        awards=tuple(awards),
    )


__all__ = [
    "PlacementOutcome",
    "rank_merging_companies",
    "resolve_placement",
    "score_defunct_company",
]
