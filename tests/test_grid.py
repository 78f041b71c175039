import pytest
from tetris_colors import cell_color
from tetris_grid import Grid
from conftest import fill_row


def snapshot(grid):
    return [row[:] for row in grid.cells]


def test_new_grid_is_empty():
    g = Grid()
    assert len(g.cells) == 20
    assert all(len(row) == 10 for row in g.cells)
    assert all(v == 0 for row in g.cells for v in row)


@pytest.mark.parametrize("row,col,outside", [
    (0, 0, False), (19, 9, False), (-1, 0, True), (20, 0, True), (0, -1, True), (0, 10, True),
])
def test_is_cell_outside(row, col, outside):
    assert Grid().is_cell_outside(row, col) is outside


def test_is_cell_empty():
    g = Grid()
    g.set_cell(5, 5, 3)
    assert not g.is_cell_empty(5, 5)
    assert g.is_cell_empty(5, 6)


def test_set_cell_asserts_bounds_and_value():
    g = Grid()
    with pytest.raises(AssertionError):
        g.set_cell(20, 0, 1)
    with pytest.raises(AssertionError):
        g.set_cell(0, 0, 8)


def test_clear_on_empty_grid_changes_nothing():
    g = Grid()
    before = snapshot(g)
    assert g.clear_full_rows() == 0
    assert snapshot(g) == before


def test_clear_bottom_row_drops_row_above():
    g = Grid()
    fill_row(g, 19)
    g.set_cell(18, 2, 5)
    assert g.clear_full_rows() == 1
    assert g.cells[19] == [0, 0, 5, 0, 0, 0, 0, 0, 0, 0]
    assert g.cells[18] == [0] * 10


def test_cascading_clear_compacts_in_one_pass():
    g = Grid()
    fill_row(g, 19)
    fill_row(g, 18)
    g.set_cell(17, 0, 2)
    g.set_cell(16, 9, 4)
    assert g.clear_full_rows() == 2
    assert g.cells[19][0] == 2
    assert g.cells[18][9] == 4
    assert g.cells[17] == [0] * 10
    assert g.cells[16] == [0] * 10


def test_clear_with_gap_between_full_rows():
    g = Grid()
    fill_row(g, 19)
    g.set_cell(18, 1, 6)
    fill_row(g, 17)
    g.set_cell(16, 3, 7)
    assert g.clear_full_rows() == 2
    assert g.cells[19][1] == 6
    assert g.cells[18][3] == 7
    assert all(v == 0 for row in g.cells[:18] for v in row)


def test_partial_row_is_not_cleared():
    g = Grid()
    fill_row(g, 19, skip=(9,))
    assert g.clear_full_rows() == 0
    assert g.cells[19][8] == 1


def test_reset_zeroes_everything():
    g = Grid()
    fill_row(g, 0)
    fill_row(g, 19, value=7)
    g.reset()
    assert all(v == 0 for row in g.cells for v in row)


def test_str_dumps_rows():
    g = Grid()
    g.set_cell(0, 0, 3)
    lines = str(g).splitlines()
    assert len(lines) == 20
    assert lines[0] == "3 0 0 0 0 0 0 0 0 0"


def test_draw_every_cell_at_board_offset(renderer):
    g = Grid()
    g.set_cell(19, 9, 4)
    g.draw(renderer)
    assert len(renderer.rects) == 200
    assert renderer.rects[0] == (11, 11, 29, 29, cell_color(0))
    assert renderer.rects[-1] == (9*30 + 11, 19*30 + 11, 29, 29, cell_color(4))
