import pytest

from architects.board import Cell, Color, Edge


def _cell():
    return Cell(
        top=Edge(0, 0), left=Edge(1, 0), right=Edge(1, 1), bottom=Edge(2, 0), x=0, y=0
    )


def test_new_edge_is_white_and_unselected():
    edge = Edge(3, 4)
    assert edge.color == Color.WHITE
    assert edge.turns_after_selected == 0
    assert edge.selected is False


@pytest.mark.parametrize("player", [Color.BLUE, Color.ORANGE])
def test_closed_cell_takes_the_closing_players_colour(player):
    cell = _cell()
    for side in cell.sides:
        side.color = Color.BLACK
    assert cell.check(player) is True
    assert cell.color is player


def test_check_fails_while_a_side_is_free():
    cell = _cell()
    cell.top.color = Color.BLUE
    cell.left.color = Color.BLUE
    cell.right.color = Color.ORANGE
    assert cell.check(Color.BLUE) is False
    assert cell.color == Color.WHITE


def test_check_claims_closed_cell():
    cell = _cell()
    for side in cell.sides:
        side.color = Color.ORANGE
    assert cell.check(Color.BLUE) is True
    assert cell.color == Color.BLUE


def test_unselected_edge_on_fresh_cell():
    result = _cell().unselected_edge()
    assert result.count == 4
    assert result.edge is None


@pytest.mark.parametrize("free_side", ["top", "left", "right", "bottom"])
def test_unselected_edge_names_last_free_side(free_side):
    cell = _cell()
    for name in ("top", "left", "right", "bottom"):
        if name != free_side:
            getattr(cell, name).color = Color.BLUE
    result = cell.unselected_edge()
    assert result.count == 1
    assert result.edge is getattr(cell, free_side)


def test_unselected_edge_with_two_free_sides():
    cell = _cell()
    cell.top.color = Color.BLUE
    cell.bottom.color = Color.ORANGE
    result = cell.unselected_edge()
    assert result.count == 2
    assert result.edge is None


def test_unselected_edge_on_closed_cell():
    cell = _cell()
    for side in cell.sides:
        side.color = Color.BLACK
    result = cell.unselected_edge()
    assert result.count == 0
    assert result.edge is None