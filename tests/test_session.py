import random

import pytest

from architects.board import Color, Difficulty, Edge, InitialState
from architects.game import Game
from architects.session import GameSession, Situation, cell_size, edge_appearance

SIZE = 10
# pixel points on each edge of a 2 x 2 dot board drawn with SIZE-pixel edges
PIXELS = {(0, 0): (30, 5), (1, 0): (5, 30), (1, 1): (55, 30), (2, 0): (30, 55)}


def make_game(mode, difficulty=Difficulty.MEDIUM, width=2, height=2, seed=1):
    return Game(width, height, mode, difficulty, random.Random(seed))


def free_pixel(game):
    for key, point in PIXELS.items():
        if not game.edge(*key).selected:
            return point
    raise AssertionError("no free edge")


def test_edge_appearance():
    assert edge_appearance(Edge(0, 0)) == Color.WHITE
    assert edge_appearance(Edge(0, 0, Color.BLUE, 1)) == Color.BLUE
    assert edge_appearance(Edge(0, 0, Color.ORANGE, 1)) == Color.ORANGE
    assert edge_appearance(Edge(0, 0, Color.BLUE, 2)) == Color.BLACK
    assert edge_appearance(Edge(0, 0, Color.ORANGE, 3)) == Color.BLACK


@pytest.mark.parametrize("width,height,n", [(400, 300, 7), (720, 360, 5), (1000, 1000, 20)])
def test_cell_size_fits(width, height, n):
    size = cell_size(width, height, n, n)
    assert size * (5 * n + 1) <= width
    assert size * (5 * n + 1) <= height
    assert (size + 1) * (5 * n + 1) > min(width, height)


def test_cell_size_symmetric():
    assert cell_size(360, 720, 7, 7) == cell_size(720, 360, 7, 7)


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        GameSession(make_game(InitialState.TWO_PLAYERS), 0)


def test_edge_at_finds_edges():
    session = GameSession(make_game(InitialState.TWO_PLAYERS, width=3, height=3), SIZE)
    assert session.edge_at(30, 5) == (0, 0)
    assert session.edge_at(5, 30) == (1, 0)
    assert session.edge_at(55, 30) == (1, 1)
    assert session.edge_at(30, 55) == (2, 0)


def test_edge_at_misses():
    session = GameSession(make_game(InitialState.TWO_PLAYERS), SIZE)
    assert session.edge_at(25, 25) is None
    assert session.edge_at(-60, 5) is None
    assert session.edge_at(30, 500) is None


def test_edge_at_ignores_drawn_edge():
    game = make_game(InitialState.TWO_PLAYERS)
    session = GameSession(game, SIZE)
    game.select_edge(0, 0, Color.BLUE)
    assert session.edge_at(30, 5) is None


def test_play_edge_rejects_drawn_edge():
    game = make_game(InitialState.TWO_PLAYERS)
    session = GameSession(game, SIZE)
    session.play_edge(0, 0)
    with pytest.raises(ValueError):
        session.play_edge(0, 0)


def test_click_outside_plays_nothing():
    game = make_game(InitialState.TWO_PLAYERS)
    session = GameSession(game, SIZE)
    assert session.click(25, 25) is False
    assert all(not edge.selected for edge in game.edges())


def test_two_players_alternate_and_finish():
    game = make_game(InitialState.TWO_PLAYERS)
    session = GameSession(game, SIZE)
    assert session.click(*PIXELS[(0, 0)]) is True
    assert game.edge(0, 0).color == Color.BLUE
    assert game.player == Color.ORANGE
    session.click(*PIXELS[(1, 0)])
    assert game.edge(1, 0).color == Color.ORANGE
    assert game.player == Color.BLUE
    session.click(*PIXELS[(1, 1)])
    assert session.situation == Situation.PLAYING
    session.click(*PIXELS[(2, 0)])
    assert game.cell(0, 0).color == Color.ORANGE
    assert session.situation == Situation.FINISHED
    assert "橙方获胜" in session.message


def test_human_mode_computer_replies_and_wins():
    game = make_game(InitialState.HUMAN)
    moves = []
    session = GameSession(game, SIZE, on_ai_move=moves.append)
    session.click(*PIXELS[(0, 0)])
    assert len(moves) == 1
    assert moves[0].color == Color.ORANGE
    assert session.situation == Situation.PLAYING
    session.click(*free_pixel(game))
    assert len(moves) == 2
    assert game.cell(0, 0).color == Color.ORANGE
    assert session.situation == Situation.LOSE


def test_computer_mode_human_closes_box():
    game = make_game(InitialState.COMPUTER)
    assert sum(edge.selected for edge in game.edges()) == 1
    moves = []
    session = GameSession(game, SIZE, on_ai_move=moves.append)
    session.click(*free_pixel(game))
    assert len(moves) == 1
    assert moves[0].color == Color.BLUE
    session.click(*free_pixel(game))
    assert game.cell(0, 0).color == Color.ORANGE
    assert session.situation == Situation.WIN


def test_settle_human_win():
    game = make_game(InitialState.HUMAN)
    for x, y in PIXELS:
        game.select_edge(x, y, Color.BLUE)
    session = GameSession(game, SIZE)
    assert session.settle() == Situation.WIN
    assert "蓝方获胜" in session.message


def test_ai_step_draws_edge_in_color():
    game = make_game(InitialState.HUMAN, width=3, height=3)
    session = GameSession(game, SIZE)
    edge = session.ai_step(Color.ORANGE)
    assert game.edge(edge.x, edge.y).color == Color.ORANGE
    assert sum(e.selected for e in game.edges()) == 1