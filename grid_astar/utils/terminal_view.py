"""ASCII terminal renderer used as a search visualization sink."""

from __future__ import annotations

import asyncio
import sys
from typing import Dict, List, TextIO, Tuple

from ..core.grid import Cell
from ..core.problem import GridSearchProblem
from ..search.astar import CONSIDERING, EXPANDING, PATH


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# glyph and colour per cell state
_STYLES: Dict[str, Tuple[str, str]] = {
    "open": (".", "white"),
    "wall": ("#", "black"),
    "start": ("S", "green"),
    "goal": ("G", "red"),
    EXPANDING: ("*", "green"),
    CONSIDERING: ("+", "cyan"),
    PATH: ("o", "yellow"),
}


class TerminalView:
    """Draws a :class:`GridSearchProblem` and the marks left by a search.

    Start and goal keep their own glyphs whatever the search reports for
    them.
    """

    def __init__(
        self,
        problem: GridSearchProblem,
        expansion_delay: float = 0.0,
        path_delay: float = 0.0,
        colour: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.problem = problem
        self.expansion_delay = expansion_delay
        self.path_delay = path_delay
        self.colour = colour
        self.stream = stream if stream is not None else sys.stdout
        self.enabled: bool = True
        self.marks: Dict[Tuple[int, int], str] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def mark(self, cell: Cell, phase: str) -> None:
        if cell == self.problem.start or cell == self.problem.goal:
            return
        self.marks[(cell.x, cell.y)] = phase

    def render_text(self) -> str:
        """Return the grid as text without colour codes."""

        return "\n".join(
            "".join(glyph for glyph, _ in row) for row in self._styled_rows()
        )

    def render(self) -> None:
        """Clear the terminal and draw the grid."""

        if not self.enabled:
            return
        if self.colour:
            lines = [
                "".join(f"{_COLOURS[colour]}{glyph}" for glyph, colour in row)
                + _COLOURS["reset"]
                for row in self._styled_rows()
            ]
            self.stream.write("\x1b[H\x1b[2J")  # clear screen
        else:
            lines = self.render_text().splitlines()
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

    async def visualize_step(self, cell: Cell, phase: str) -> None:
        """Search callback: record ``phase`` for ``cell`` and redraw."""

        self.mark(cell, phase)
        self.render()
        delay = self.path_delay if phase == PATH else self.expansion_delay
        if delay > 0:
            await asyncio.sleep(delay)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _styled_rows(self) -> List[List[Tuple[str, str]]]:
        grid = self.problem.grid
        rows: List[List[Tuple[str, str]]] = []
        for y in range(grid.height):
            row: List[Tuple[str, str]] = []
            for x in range(grid.width):
                row.append(_STYLES[self._state_at(x, y)])
            rows.append(row)
        return rows

    def _state_at(self, x: int, y: int) -> str:
        cell = self.problem.grid.get_cell(x, y)
        if cell == self.problem.start:
            return "start"
        if cell == self.problem.goal:
            return "goal"
        if not cell.walkable:
            return "wall"
        return self.marks.get((x, y), "open")


__all__ = ["TerminalView"]
