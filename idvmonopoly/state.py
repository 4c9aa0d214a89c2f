"""Shared game state: the three players, whose turn it is and the round count."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Optional

from idvmonopoly.cards import CardName
from idvmonopoly.identity import Identity
from idvmonopoly.player import Player

PLAYER_COUNT = 3


class Turn(IntEnum):
    """Whose turn it is; the value is the player's index."""

    A = 0
    B = 1
    C = 2

    def next(self) -> "Turn":
        """The turn that follows this one."""
        return Turn((self.value + 1) % len(Turn))


class GameState:
    """Everything the game tracks between moves."""

    def __init__(self, identities: Sequence[Identity]) -> None:
        if len(identities) != PLAYER_COUNT:
            raise ValueError(
                f"a game needs exactly {PLAYER_COUNT} players, got {len(identities)}"
            )
        self.players: list[Player] = [Player(identity) for identity in identities]
        self.turn: Turn = Turn.A
        self.round: int = 0
        self.current_skill_user: Optional[int] = None
        self.current_skill_type: Optional[CardName] = None

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.turn]