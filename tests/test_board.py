import pytest

from idvmonopoly.board import (
    Board,
    CellProperty,
    GameCell,
    build_final_track,
    build_main_track,
)


def test_main_track_size_and_ids():
    cells = build_main_track()
    assert len(cells) == 21
    assert [c.id for c in cells] == list(range(1, 22))


def test_main_track_first_cell():
    first = build_main_track()[0]
    assert first == GameCell(1, (340, 123), ":/resourse/image/kuangshi.png",
                             CellProperty.NORMAL, 6)


def test_start_cells_positions():
    starts = [i for i, c in enumerate(build_main_track()) if c.property is CellProperty.START]
    assert starts == [5, 12, 19]


def test_card_cells_positions():
    cards = [i for i, c in enumerate(build_main_track()) if c.property is CellProperty.CARD]
    assert cards == [3, 8, 15]


def test_non_normal_cells_score_nothing():
    for cell in build_main_track():
        if cell.property is not CellProperty.NORMAL:
            assert cell.num == 0
        else:
            assert cell.num > 0


def test_final_track():
    finals = build_final_track()
    assert len(finals) == 10
    assert all(c.property is CellProperty.FINAL for c in finals)
    assert finals[-1].image_path == ":/role/resourse/image/door.png"
    assert finals[0].position == (190, 310)


def test_board_cell_lookup():
    board = Board()
    assert board.cell(11).num == 12
    assert board.cell(20).position == (478, 145)
    assert board.final_cell(9).position == (663, 534)


@pytest.mark.parametrize("index", [-1, 21])
def test_board_cell_out_of_range(index):
    with pytest.raises(IndexError):
        Board().cell(index)


@pytest.mark.parametrize("index", [-1, 10])
def test_board_final_cell_out_of_range(index):
    with pytest.raises(IndexError):
        Board().final_cell(index)


def test_next_index_wraps():
    board = Board()
    assert board.next_index(0) == 1
    assert board.next_index(20) == 0


def test_next_index_visits_every_cell_once():
    board = Board()
    seen = []
    index = 0
    for _ in range(len(board.cells)):
        seen.append(index)
        index = board.next_index(index)
    assert sorted(seen) == list(range(len(board.cells)))
    assert index == 0


def test_cells_are_immutable():
    board = Board()
    cell = board.cell(0)
    with pytest.raises(AttributeError):
        cell.num = 99
    assert board.cell(0).num == 6