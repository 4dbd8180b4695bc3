"""Fixed pool of companies and the cell sets they occupy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from beacquired_backend.game_logic.configuration import DEFAULT_COMPANY_POOL
from beacquired_backend.shared.value_objects import CompanyColor  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from beacquired_backend.game_logic.configuration import CompanySpec
    from beacquired_backend.game_logic.grid import Cell, Grid

logger = logging.getLogger(__name__)


class Company(BaseModel):
    """A named, colored company identity and the cells it currently holds.

    Members are stored as grid cell indices. The identity survives
    absorption: a reset company returns to the inactive pool and can be
    founded again later.
    """

    index: int = Field(..., ge=0)
    name: str = Field(..., min_length=1)
    color: CompanyColor
    active: bool = False
    members: set[int] = Field(default_factory=set)

    @property
    def size(self) -> int:
        return len(self.members)


class CompanyRegistry:
    """Company pool kept in creation order, with membership bookkeeping."""

    def __init__(
        self, grid: Grid, pool: Iterable[CompanySpec] = DEFAULT_COMPANY_POOL
    ) -> None:
        self._grid = grid
        self._companies: list[Company] = [
            Company(index=index, name=spec.name, color=spec.color)
            for index, spec in enumerate(pool)
        ]

    def __len__(self) -> int:
        return len(self._companies)

    def companies(self) -> Iterator[Company]:
        """Iterate over every company in creation order."""
        yield from self._companies

    def company(self, index: int) -> Company:
        return self._companies[index]

    def company_named(self, name: str) -> Company | None:
        for company in self._companies:
            if company.name == name:
                return company
        return None

    def active_companies(self) -> list[Company]:
        return [company for company in self._companies if company.active]

    def active_count(self) -> int:
        """Return how many companies are currently on the board."""
        return sum(1 for company in self._companies if company.active)

    def first_inactive_company(self) -> Company | None:
        """Return the earliest-created inactive company, or ``None``."""
        for company in self._companies:
            if not company.active:
                return company
        return None

    def size(self, company: Company) -> int:
        return company.size

    def member_cells(self, company: Company) -> list[Cell]:
        """Return the member cells of *company* in grid order."""
        return [self._grid.cell(index) for index in sorted(company.members)]

    def add_cell(self, company: Company, cell: Cell) -> None:
        """Affiliate *cell* with *company*, activating the company on its first cell.

        A cell that already belongs to *company* is left untouched. A cell
        belonging to another company is detached from it first.
        """
        if cell.index in company.members:
            return
        if cell.company is not None and cell.company != company.index:
            self._companies[cell.company].members.discard(cell.index)
        company.members.add(cell.index)
        cell.company = company.index
        if not company.active:
            company.active = True
            logger.debug(
                "Company %s became active with cell %s", company.name, cell.label
            )

    def reset_company(self, company: Company) -> None:
        """Clear *company* back to the inactive pool, releasing its member cells."""
        for index in company.members:
            cell = self._grid.cell(index)
            if cell.company == company.index:
                cell.company = None
        company.members.clear()
        company.active = False
        logger.debug("Company %s returned to the available pool", company.name)


__all__ = ["Company", "CompanyRegistry"]
