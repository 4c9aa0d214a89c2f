"""Ability cards that players collect and play during a game."""

from __future__ import annotations

from enum import IntEnum

_ICON_DIR = ":/role/resourse/image/"


class CardName(IntEnum):
    """The kinds of ability card. ``NONE`` marks an empty card slot."""

    NONE = 0
    DONT_MOVE = 1
    DECLINE = 2
    STILL_ME = 3
    POS_EXCHANGE = 4
    FLASH = 5

    def needs_target(self) -> bool:
        """Whether playing this card requires choosing another player."""
        return self in _TARGETED

    def label(self) -> str:
        """Short skill name shown when asking for a target; empty if untargeted."""
        return _LABELS.get(self, "")


_TARGETED = frozenset({CardName.DONT_MOVE, CardName.DECLINE, CardName.POS_EXCHANGE})

_LABELS = {
    CardName.DONT_MOVE: "封禁",
    CardName.DECLINE: "失常",
    CardName.POS_EXCHANGE: "换位",
}

_ICON_FILES = {
    CardName.NONE: "None.png",
    CardName.DONT_MOVE: "DontMove.png",
    CardName.DECLINE: "Decline.png",
    CardName.STILL_ME: "StillMe.png",
    CardName.POS_EXCHANGE: "PosExchange.png",
    CardName.FLASH: "Flash.png",
}


def card_icon_path(card: CardName) -> str:
    """Resource path of the icon drawn for ``card`` in a card slot."""
    return _ICON_DIR + _ICON_FILES[CardName(card)]