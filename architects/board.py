"""Pieces of the board: colours, game modes, edges and cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Color(IntEnum):
    """Colour of an edge or a cell; white means not taken yet."""

    WHITE = 0
    BLUE = 1
    ORANGE = 2
    BLACK = 3


class InitialState(Enum):
    """Who plays the game and who opens it."""

    COMPUTER = "computer"  # the computer opens and plays blue
    HUMAN = "human"  # the human opens and plays blue
    TWO_PLAYERS = "two_players"  # two humans take turns


class Difficulty(Enum):
    """Strength of the computer opponent."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(eq=False)
class Edge:
    """One line of the grid, addressed by its row ``x`` and column ``y``."""

    x: int
    y: int
    color: Color = Color.WHITE
    turns_after_selected: int = 0

    @property
    def selected(self) -> bool:
        return self.color != Color.WHITE


@dataclass(frozen=True)
class UnselectedEdge:
    """How many sides of a cell are free, and the free one if only one is left."""

    edge: Edge | None
    count: int


@dataclass(eq=False)
class Cell:
    """A square of the grid bounded by four edges."""

    top: Edge
    left: Edge
    right: Edge
    bottom: Edge
    x: int
    y: int
    color: Color = Color.WHITE

    @property
    def sides(self) -> tuple[Edge, Edge, Edge, Edge]:
        return (self.top, self.left, self.right, self.bottom)

    def check(self, player: Color) -> bool:
        """Give the cell to ``player`` if all four sides are drawn."""
        if all(side.selected for side in self.sides):
            self.color = player
            return True
        return False

    def unselected_edge(self) -> UnselectedEdge:
        """Count the free sides; name the free side when exactly one is left."""
        free = [side for side in self.sides if not side.selected]
        return UnselectedEdge(free[0] if len(free) == 1 else None, len(free))