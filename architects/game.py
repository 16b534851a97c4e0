"""Rules of the game and the computer opponent."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Iterator

from .board import Cell, Color, Difficulty, Edge, InitialState

_RANDOM_TRIES = 10


class Outcome(IntEnum):
    """Result of a finished (or counted) game."""

    DRAW = 1
    BLUE_WINS = 2
    ORANGE_WINS = 3


class Game:
    """A dots-and-boxes board of ``width`` x ``height`` dots.

    Edges live in ``2 * height - 1`` rows: even rows hold ``width - 1``
    horizontal edges, odd rows hold ``width`` vertical edges.
    """

    def __init__(
        self,
        width: int,
        height: int,
        initial_state: InitialState,
        difficulty: Difficulty,
        rng: random.Random | None = None,
    ) -> None:
        if width < 2 or height < 2:
            raise ValueError("a board needs at least 2 x 2 dots")
        self.width = width
        self.height = height
        self.initial_state = initial_state
        self.difficulty = difficulty
        self.player = Color.BLUE
        self.extra_turn = False
        self._rng = rng if rng is not None else random.Random()

        self._edges: list[list[Edge]] = [
            [Edge(x, y) for y in range(width - 1 if x % 2 == 0 else width)]
            for x in range(2 * height - 1)
        ]
        self._cells: list[list[Cell]] = [
            [
                Cell(
                    top=self._edges[2 * x][y],
                    left=self._edges[2 * x + 1][y],
                    right=self._edges[2 * x + 1][y + 1],
                    bottom=self._edges[2 * x + 2][y],
                    x=x,
                    y=y,
                )
                for y in range(width - 1)
            ]
            for x in range(height - 1)
        ]

        if initial_state is InitialState.COMPUTER:
            move = self.ai_move(difficulty)
            self.select_edge(move.x, move.y, self.player)

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < len(self._cells) and 0 <= y < len(self._cells[x])):
            raise IndexError(f"no cell at ({x}, {y})")
        return self._cells[x][y]

    def edge(self, x: int, y: int) -> Edge:
        if not (0 <= x < len(self._edges) and 0 <= y < len(self._edges[x])):
            raise IndexError(f"no edge at ({x}, {y})")
        return self._edges[x][y]

    def edges(self) -> Iterator[Edge]:
        """All edges, row by row."""
        for row in self._edges:
            yield from row

    def cells(self) -> Iterator[Cell]:
        """All cells, row by row."""
        for row in self._cells:
            yield from row

    def select_edge(self, x: int, y: int, player: Color) -> None:
        """Draw an edge for ``player`` and claim any cell it closes."""
        edge = self.edge(x, y)
        edge.color = player
        for drawn in self.edges():
            if drawn.selected:
                drawn.turns_after_selected += 1
        self.check_cell(x, y, player)

    def _adjacent_cells(self, x: int, y: int) -> list[tuple[int, int]]:
        if x % 2 == 0:
            row = x // 2
            if x == 0:
                return [(row, y)]
            if row - 1 == self.height - 2:
                return [(row - 1, y)]
            return [(row, y), (row - 1, y)]
        row = (x - 1) // 2
        if y == 0:
            return [(row, y)]
        if y == self.width - 1:
            return [(row, y - 1)]
        return [(row, y), (row, y - 1)]

    def check_cell(self, x: int, y: int, player: Color) -> None:
        """Check the cells next to edge (x, y); closing one grants an extra turn."""
        self.extra_turn = False
        for cx, cy in self._adjacent_cells(x, y):
            self.check_and_change(cx, cy, player)

    def check_and_change(self, x: int, y: int, player: Color) -> None:
        if self.cell(x, y).check(player):
            self.extra_turn = True

    def is_over(self) -> bool:
        return all(cell.color != Color.WHITE for cell in self.cells())

    def count_player_cells(self, player: Color) -> int:
        return sum(1 for cell in self.cells() if cell.color == player)

    def outcome(self) -> Outcome:
        blue = self.count_player_cells(Color.BLUE)
        orange = self.count_player_cells(Color.ORANGE)
        if blue > orange:
            return Outcome.BLUE_WINS
        if blue < orange:
            return Outcome.ORANGE_WINS
        return Outcome.DRAW

    def optional_grid(self, x: int, y: int) -> bool:
        """True unless cell (x, y) has exactly two free sides."""
        return self.cell(x, y).unselected_edge().count != 2

    def _random_edge(self) -> Edge:
        if self._rng.randrange(2) == 0:
            x = self._rng.randrange(self.height) * 2
            y = self._rng.randrange(self.width - 1)
        else:
            x = self._rng.randrange(self.height - 1) * 2 + 1
            y = self._rng.randrange(self.width)
        return self._edges[x][y]

    def _closing_edge(self) -> Edge | None:
        for cell in self.cells():
            last = cell.unselected_edge().edge
            if last is not None:
                return last
        return None

    def _is_safe(self, edge: Edge) -> bool:
        return not edge.selected and all(
            self.optional_grid(cx, cy) for cx, cy in self._adjacent_cells(edge.x, edge.y)
        )

    def simple_ai_move(self) -> Edge | None:
        """A random free edge, or the first free one; None when all are drawn."""
        for _ in range(_RANDOM_TRIES):
            edge = self._random_edge()
            if not edge.selected:
                return edge
        return next((edge for edge in self.edges() if not edge.selected), None)

    def medium_ai_move(self) -> Edge | None:
        """Close a cell when one has a single free side, else play simply."""
        closing = self._closing_edge()
        if closing is not None:
            return closing
        return self.simple_ai_move()

    def hard_ai_move(self) -> Edge | None:
        """Close a cell if possible, else avoid handing the opponent a cell."""
        closing = self._closing_edge()
        if closing is not None:
            return closing
        for _ in range(_RANDOM_TRIES):
            edge = self._random_edge()
            if self._is_safe(edge):
                return edge
        for edge in self.edges():
            if self._is_safe(edge):
                return edge
        return self.medium_ai_move()

    def ai_move(self, difficulty: Difficulty) -> Edge | None:
        if difficulty is Difficulty.MEDIUM:
            return self.medium_ai_move()
        if difficulty is Difficulty.HARD:
            return self.hard_ai_move()
        return self.simple_ai_move()