"""Turn order, hands and card plays layered over the acquisition engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from beacquired_backend.game_logic.configuration import MAX_PLAYERS, MIN_PLAYERS
from beacquired_backend.game_logic.deck import TileDeck
from beacquired_backend.game_logic.engine import PlacementOutcome, resolve_placement
from beacquired_backend.game_logic.errors import (
    CardNotInHandError,
    CellOutOfBoundsError,
    NotYourTurnError,
)
from beacquired_backend.game_logic.state import GameState
from beacquired_backend.shared.events import PlacementEvent

if TYPE_CHECKING:
    from beacquired_backend.game_logic.configuration import BoardConfiguration

logger = logging.getLogger(__name__)


class GameSession:
    """One game in progress: state, deck, hands, turn index and journal.

    Players take turns playing a card from their hand; the card names the
    cell to place. A successful play discards the card, draws a replacement
    and passes the turn. A rejected play (founding beyond the company cap)
    keeps the card and the turn with the same player.
    """

    def __init__(self, state: GameState, deck: TileDeck) -> None:
        if not state.players:
            msg = "A session needs at least one player."
            raise ValueError(msg)
        self.state = state
        self.deck = deck
        self._turn_order: tuple[int, ...] = tuple(sorted(state.players))
        self._current_index = 0
        self._turn_count = 0
        self._journal: list[PlacementEvent] = []

    @classmethod
    def create(
        cls,
        player_count: int,
        *,
        configuration: BoardConfiguration | None = None,
        seed: int | None = None,
    ) -> GameSession:
        """Set up a fresh game for *player_count* players and deal opening hands."""
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            msg = (
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, "
                f"got {player_count}."
            )
            raise ValueError(msg)
        state = GameState.for_player_count(player_count, configuration)
        session = cls(state, TileDeck(state.grid.labels(), seed=seed))
        session.deal()
        return session

    def deal(self) -> None:
        """Fill every hand up to the configured hand size."""
        hand_size = self.state.configuration.hand_size
        for player_id in self._turn_order:
            ledger = self.state.players[player_id]
            for card in self.deck.draw_many(hand_size - len(ledger.hand)):
                ledger.add_card(card)

    @property
    def current_player(self) -> int:
        return self._turn_order[self._current_index]

    @property
    def turn_count(self) -> int:
        """Return the number of successful plays so far."""
        return self._turn_count

    @property
    def turn_order(self) -> tuple[int, ...]:
        return self._turn_order

    @property
    def journal(self) -> tuple[PlacementEvent, ...]:
        return tuple(self._journal)

    def hand_of(self, player_id: int) -> tuple[str, ...]:
        return tuple(self.state.player(player_id).hand)

    def deck_remaining(self) -> int:
        return len(self.deck)

    def play_card(self, player_id: int, card: str) -> PlacementOutcome:
        """Play *card* from *player_id*'s hand and resolve the named placement."""
        ledger = self.state.player(player_id)
        if player_id != self.current_player:
            msg = (
                f"It is player {self.current_player}'s turn, "
                f"not player {player_id}'s."
            )
            raise NotYourTurnError(msg)
        label = card.strip().upper()
        cell = self.state.grid.cell_for_label(label)
        if cell is None:
            msg = f"Card '{card}' does not name a cell on the board."
            raise CellOutOfBoundsError(msg)
        if not ledger.holds(label):
            msg = f"Player {player_id} does not hold card {label}."
            raise CardNotInHandError(msg)

        outcome = resolve_placement(self.state, cell, player_id)
        self._journal.append(
            PlacementEvent(
                sequence=len(self._journal),
                turn_index=self._turn_count,
                player_id=player_id,
                cell=outcome.cell,
                kind=outcome.kind,
                company=outcome.company,
                absorbed=outcome.absorbed,
                awards=outcome.awards,
            )
        )
        if not outcome.success:
            return outcome

        ledger.remove_card(label)
        replacement = self.deck.draw()
        if replacement is not None:
            ledger.add_card(replacement)
        self._advance_turn()
        return outcome

    def _advance_turn(self) -> None:
        self._turn_count += 1
        self._current_index = (self._current_index + 1) % len(self._turn_order)
        logger.debug(
            "Turn %s: player %s to move", self._turn_count, self.current_player
        )


__all__ = ["GameSession"]
