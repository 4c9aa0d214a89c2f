"""The board: an outer ring of cells and the final track leading to the door."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellProperty(Enum):
    """What landing on a cell does."""

    NORMAL = "normal"
    START = "start"
    FINAL = "final"
    CARD = "card"


@dataclass(frozen=True)
class GameCell:
    """One board cell: its number, screen position, picture, kind and score value."""

    id: int
    position: tuple[int, int]
    image_path: str
    property: CellProperty
    num: int = 0


_STONE = ":/resourse/image/kuangshi.png"
_CARD = ":/resourse/image/CardCell.png"
_START = ":/resourse/image/startpoint.png"
_FINAL = ":/role/resourse/image/finalCell.png"
_DOOR = ":/role/resourse/image/door.png"

_MAIN_LAYOUT = (
    ((340, 123), _STONE, CellProperty.NORMAL, 6),
    ((196, 157), _STONE, CellProperty.NORMAL, 10),
    ((98, 251), _STONE, CellProperty.NORMAL, 8),
    ((45, 353), _CARD, CellProperty.CARD, 0),
    ((105, 459), _STONE, CellProperty.NORMAL, 4),
    ((150, 562), _START, CellProperty.START, 0),
    ((253, 617), _STONE, CellProperty.NORMAL, 10),
    ((336, 586), _STONE, CellProperty.NORMAL, 4),
    ((410, 621), _CARD, CellProperty.CARD, 0),
    ((509, 565), _STONE, CellProperty.NORMAL, 6),
    ((626, 615), _STONE, CellProperty.NORMAL, 8),
    ((737, 601), _STONE, CellProperty.NORMAL, 12),
    ((833, 623), _START, CellProperty.START, 0),
    ((930, 560), _STONE, CellProperty.NORMAL, 6),
    ((890, 475), _STONE, CellProperty.NORMAL, 8),
    ((880, 370), _CARD, CellProperty.CARD, 0),
    ((944, 265), _STONE, CellProperty.NORMAL, 10),
    ((850, 200), _STONE, CellProperty.NORMAL, 4),
    ((732, 158), _STONE, CellProperty.NORMAL, 12),
    ((617, 123), _START, CellProperty.START, 0),
    ((478, 145), _STONE, CellProperty.NORMAL, 12),
)

_FINAL_LAYOUT = (
    ((190, 310), _FINAL),
    ((230, 400), _FINAL),
    ((317, 472), _FINAL),
    ((381, 404), _FINAL),
    ((456, 321), _FINAL),
    ((545, 258), _FINAL),
    ((628, 322), _FINAL),
    ((703, 390), _FINAL),
    ((765, 476), _FINAL),
    ((663, 534), _DOOR),
)


def build_main_track() -> list[GameCell]:
    """The 21 cells of the outer ring, in walking order."""
    return [
        GameCell(number, position, image, prop, num)
        for number, (position, image, prop, num) in enumerate(_MAIN_LAYOUT, start=1)
    ]


def build_final_track() -> list[GameCell]:
    """The 10 cells of the final track; the last one is the door."""
    return [
        GameCell(number, position, image, CellProperty.FINAL, 0)
        for number, (position, image) in enumerate(_FINAL_LAYOUT, start=1)
    ]


class Board:
    """Both tracks of the board, addressed by zero-based index."""

    def __init__(self) -> None:
        self.cells: list[GameCell] = build_main_track()
        self.final_cells: list[GameCell] = build_final_track()

    def cell(self, index: int) -> GameCell:
        """The outer-ring cell at ``index``."""
        if not 0 <= index < len(self.cells):
            raise IndexError(f"main track has no cell {index}")
        return self.cells[index]

    def final_cell(self, index: int) -> GameCell:
        """The final-track cell at ``index``."""
        if not 0 <= index < len(self.final_cells):
            raise IndexError(f"final track has no cell {index}")
        return self.final_cells[index]

    def next_index(self, index: int) -> int:
        """The outer-ring index one step after ``index``, wrapping around."""
        return (index + 1) % len(self.cells)