"""Immutable value objects shared across the domain layer."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

_FIRST_ROW_LETTER = "A"


class CompanyColor(StrEnum):
    """Display colors available to companies on the board."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    ORANGE = "orange"
    PURPLE = "purple"
    CYAN = "cyan"


class PlacementKind(StrEnum):
    """Classification of a resolved tile placement."""

    STARTER = "starter"
    FOUNDED = "founded"
    JOINED = "joined"
    MERGED = "merged"
    REJECTED = "rejected"


class RejectionReason(StrEnum):
    """Reasons a placement can be refused without raising."""

    COMPANY_LIMIT_REACHED = "company_limit_reached"


class CellCoordinate(BaseModel):
    """Zero-based (row, column) address of a board cell."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)

    @property
    def label(self) -> str:
        """Return the card label for the coordinate, e.g. ``A1`` or ``I12``."""
        return f"{chr(ord(_FIRST_ROW_LETTER) + self.row)}{self.column + 1}"

    @classmethod
    def from_label(cls, label: str) -> CellCoordinate:
        """Parse a card label such as ``C7`` into a coordinate."""
        text = label.strip().upper()
        if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
            msg = f"Malformed cell label '{label}'."
            raise ValueError(msg)
        column = int(text[1:]) - 1
        if column < 0:
            msg = f"Column in cell label '{label}' must start at 1."
            raise ValueError(msg)
        return cls(row=ord(text[0]) - ord(_FIRST_ROW_LETTER), column=column)


__all__ = [
    "CellCoordinate",
    "CompanyColor",
    "PlacementKind",
    "RejectionReason",
]
