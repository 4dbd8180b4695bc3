"""Per-player score and hand bookkeeping."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PlayerLedger(BaseModel):
    """Accumulated score and held cards of a single player.

    Shares are not stored here: a player's stake in a company is the number
    of that company's cells the player owns, computed from the board.
    """

    player_id: int = Field(..., ge=1)
    score: int = Field(default=0, ge=0)
    hand: list[str] = Field(default_factory=list)

    def add_score(self, points: int) -> None:
        """Credit *points*; scores never decrease."""
        if points < 0:
            msg = f"Score delta must be non-negative, got {points}."
            raise ValueError(msg)
        self.score += points

    def holds(self, card: str) -> bool:
        return card in self.hand

    def add_card(self, card: str) -> None:
        self.hand.append(card)

    def remove_card(self, card: str) -> None:
        self.hand.remove(card)


__all__ = ["PlayerLedger"]
