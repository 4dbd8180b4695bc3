"""Seeded deck of cell cards dealt to players."""

from __future__ import annotations

from collections import deque
from random import Random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class TileDeck:
    """Shuffled draw pile of card labels, reproducible from its seed."""

    def __init__(self, labels: Iterable[str], seed: int | None = None) -> None:
        self._seed = seed
        cards = list(labels)
        Random(seed).shuffle(cards)  # noqa: S311
        self._cards: deque[str] = deque(cards)

    @property
    def seed(self) -> int | None:
        """Return the seed the deck was shuffled with."""
        return self._seed

    def __len__(self) -> int:
        return len(self._cards)

    def draw(self) -> str | None:
        """Take the top card, or return ``None`` once the deck is exhausted."""
        if not self._cards:
            return None
        return self._cards.popleft()

    def draw_many(self, count: int) -> list[str]:
        """Take up to *count* cards from the top of the deck."""
        if count < 0:
            msg = "Cannot draw a negative number of cards."
            raise ValueError(msg)
        drawn: list[str] = []
        while len(drawn) < count:
            card = self.draw()
            if card is None:
                break
            drawn.append(card)
        return drawn


__all__ = ["TileDeck"]
