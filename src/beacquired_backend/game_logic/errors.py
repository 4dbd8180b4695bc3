"""Exceptions raised when a request breaks the game rules."""

from __future__ import annotations


class GameRuleError(ValueError):
    """Base class for invalid placement and turn requests."""


class CellOutOfBoundsError(GameRuleError):
    """Raised when a coordinate or card label lies outside the board."""


class CellAlreadyOccupiedError(GameRuleError):
    """Raised when a placement targets a cell that already has an owner."""


class UnknownPlayerError(GameRuleError):
    """Raised when a placement names a player the game does not track."""


class NotYourTurnError(GameRuleError):
    """Raised when a player acts outside their turn."""


class CardNotInHandError(GameRuleError):
    """Raised when a player plays a card they do not hold."""


class BoardInvariantError(RuntimeError):
    """Raised when cell and company cross references disagree."""


__all__ = [
    "BoardInvariantError",
    "CardNotInHandError",
    "CellAlreadyOccupiedError",
    "CellOutOfBoundsError",
    "GameRuleError",
    "NotYourTurnError",
    "UnknownPlayerError",
]
