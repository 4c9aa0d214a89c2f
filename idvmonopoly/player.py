"""Per-player state: score, position, phase and ability cards."""

from __future__ import annotations

from dataclasses import dataclass, field

from idvmonopoly.cards import CardName
from idvmonopoly.identity import Identity

CARD_SLOTS = 4


def _empty_slots() -> list[CardName]:
    return [CardName.NONE] * CARD_SLOTS


@dataclass
class Player:
    """One player.

    ``point`` indexes the outer ring, ``point2`` the final track; ``is_final``
    tells which of them is in use.
    """

    identity: Identity
    score: int = 0
    point: int = 0
    point2: int = 0
    is_final: bool = False
    blocked: bool = False
    cards: list[CardName] = field(default_factory=_empty_slots)

    def add_card(self, card: CardName) -> int:
        """Put ``card`` in the first empty slot, or over the last slot if all are full.

        Returns the slot used.
        """
        card = CardName(card)
        slot = next(
            (i for i, held in enumerate(self.cards) if held is CardName.NONE),
            CARD_SLOTS - 1,
        )
        self.cards[slot] = card
        return slot

    def discard(self, slot: int) -> CardName:
        """Empty ``slot`` and return the card that was in it."""
        if not 0 <= slot < CARD_SLOTS:
            raise IndexError(f"no card slot {slot}")
        card = self.cards[slot]
        self.cards[slot] = CardName.NONE
        return card

    def usable_slots(self) -> list[int]:
        """Indexes of the slots that hold a card."""
        return [i for i, card in enumerate(self.cards) if card is not CardName.NONE]

    def lower_score(self, amount: int) -> int:
        """Reduce the score by ``amount``, never below zero; return the new score."""
        self.score = self.score - amount if self.score >= amount else 0
        return self.score