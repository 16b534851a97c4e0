"""Turn handling for one game: clicks, computer replies and the final result."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

from .board import Color, Edge, InitialState
from .game import Game, Outcome

AI_THINKING_TIME = 0.5  # seconds a front end may pause before a computer move

_RECORD_HINT = "\n\n您可以在账户信息里\n查看自己的对局记录。"


class Situation(IntEnum):
    """State of the session from the human player's point of view."""

    PLAYING = 0
    DRAW = 1
    WIN = 2
    LOSE = 3
    FINISHED = 4  # a two-player game has ended


_BLUE_TEXT = "蓝方获胜！"
_ORANGE_TEXT = "橙方获胜！"


def edge_appearance(edge: Edge) -> Color:
    """Colour to draw an edge in: the latest move keeps its colour, older ones are black."""
    if edge.color == Color.WHITE:
        return Color.WHITE
    if edge.color == Color.BLUE and edge.turns_after_selected == 1:
        return Color.BLUE
    if edge.color == Color.ORANGE and edge.turns_after_selected == 1:
        return Color.ORANGE
    return Color.BLACK


def cell_size(width: int, height: int, columns: int, rows: int) -> int:
    """Edge thickness in pixels for a board of columns x rows dots in a widget."""
    return min(width // (5 * columns + 1), height // (5 * rows + 1))


class GameSession:
    """Drives a Game from pixel clicks, replying with computer moves."""

    def __init__(
        self,
        game: Game,
        size: int,
        on_ai_move: Callable[[Edge], None] | None = None,
    ) -> None:
        if size <= 0:
            raise ValueError("edge size must be positive")
        self.game = game
        self.size = size
        self.on_ai_move = on_ai_move
        self.situation = Situation.PLAYING
        self.message: str | None = None

    def edge_at(self, px: float, py: float) -> tuple[int, int] | None:
        """The free edge under pixel (px, py), or None."""
        s = self.size
        step = 5 * s
        col = math.trunc(px / step)
        row = math.trunc(py / step)
        if col < 0 or row < 0 or col >= self.game.width or row >= self.game.height:
            return None

        horizontal = abs(3 * s + 5 * col * s - px)
        top = horizontal + abs(0.5 * s + 5 * row * s - py)
        bottom = horizontal + abs(5.5 * s + 5 * row * s - py)
        vertical = abs(3 * s + 5 * row * s - py)
        left = vertical + abs(0.5 * s + 5 * col * s - px)
        # the right-hand probe is offset by 5 * col pixels only
        right = vertical + abs(0.5 * s + 5 * col * s + 5 * col - px)

        if top <= s:
            target = (2 * row, col)
        elif left <= s:
            target = (2 * row + 1, col)
        elif right <= s:
            target = (2 * row + 1, col + 1)
        elif bottom <= s:
            target = (2 * row + 2, col)
        else:
            return None

        try:
            edge = self.game.edge(*target)
        except IndexError:
            return None
        if edge.selected:
            return None
        return target

    def click(self, px: float, py: float) -> bool:
        """Play the edge under the pointer; False if nothing was played."""
        target = self.edge_at(px, py)
        if target is None:
            return False
        self.play_edge(*target)
        if self.game.is_over():
            self.settle()
        else:
            self.next_step()
        return True

    def play_edge(self, x: int, y: int) -> None:
        """Draw edge (x, y) for the human player whose turn it is."""
        edge = self.game.edge(x, y)
        if edge.selected:
            raise ValueError(f"edge ({x}, {y}) is already drawn")
        mode = self.game.initial_state
        if mode is InitialState.COMPUTER:
            color = Color.ORANGE
        elif mode is InitialState.HUMAN:
            color = Color.BLUE
        else:
            color = self.game.player
        self.game.select_edge(x, y, color)

    def next_step(self) -> None:
        """Hand the turn over unless the last move earned an extra one."""
        game = self.game
        if game.extra_turn:
            return
        mode = game.initial_state
        if mode is InitialState.TWO_PLAYERS:
            game.player = Color.ORANGE if game.player == Color.BLUE else Color.BLUE
            return
        computer = Color.BLUE if mode is InitialState.COMPUTER else Color.ORANGE
        while True:
            self.ai_step(computer)
            if not (game.extra_turn and not game.is_over()):
                break
        if game.is_over():
            self.settle()

    def ai_step(self, color: Color) -> Edge:
        """Let the computer draw one edge in ``color``."""
        move = self.game.ai_move(self.game.difficulty)
        if move is None:
            raise RuntimeError("no free edge left for the computer")
        self.game.select_edge(move.x, move.y, color)
        if self.on_ai_move is not None:
            self.on_ai_move(move)
        return move

    def settle(self) -> Situation:
        """Record the result of the finished game and the text announcing it."""
        outcome = self.game.outcome()
        mode = self.game.initial_state
        if mode is InitialState.TWO_PLAYERS:
            self.situation = Situation.FINISHED
            texts = {
                Outcome.BLUE_WINS: _BLUE_TEXT,
                Outcome.ORANGE_WINS: _ORANGE_TEXT,
                Outcome.DRAW: "平局。",
            }
            self.message = texts[outcome]
            return self.situation

        human_wins = Outcome.ORANGE_WINS if mode is InitialState.COMPUTER else Outcome.BLUE_WINS
        if outcome is Outcome.DRAW:
            self.situation = Situation.DRAW
            draw_text = "平局" if mode is InitialState.COMPUTER else "平局。"
            self.message = draw_text + _RECORD_HINT
        else:
            self.situation = Situation.WIN if outcome is human_wins else Situation.LOSE
            text = _BLUE_TEXT if outcome is Outcome.BLUE_WINS else _ORANGE_TEXT
            self.message = text + _RECORD_HINT
        return self.situation