"""Walkable grid made of cells with a traversal cost."""

from __future__ import annotations

from typing import Iterator, List, Sequence


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y


class Cell:
    """Single grid position.

    Two cells are equal when their coordinates match; ``walk_cost`` and
    ``walkable`` do not take part in equality or hashing.
    """

    def __init__(self, x: int, y: int, walk_cost: float = 1, walkable: bool = True) -> None:
        self.x = x
        self.y = y
        self.walk_cost: float = 1
        self.walkable: bool = walkable
        self.set_walk_cost(walk_cost)

    def set_walk_cost(self, cost: float) -> None:
        # rejects NaN too
        if not cost > 0:
            raise ValueError(f"walk cost must be positive, got {cost!r}")
        self.walk_cost = cost

    def set_walkable(self, walkable: bool) -> None:
        self.walkable = bool(walkable)

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Glyphs understood by :meth:`Grid.from_rows`
WALL_GLYPHS = "#x"
OPEN_GLYPHS = ".o"


class Grid:
    """Fixed ``width`` x ``height`` container of :class:`Cell` objects.

    Cells are stored row-major, ``cells[y][x]``; ``(0, 0)`` is the first cell
    of the first row.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from text rows; row index is ``y``.

        ``#``/``x`` mark walls, ``.``/``o`` open cells and a digit ``1``-``9``
        an open cell with that walk cost.
        """

        if not rows:
            raise ValueError("map must contain at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("map rows must all have the same length")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, glyph in enumerate(row):
                if glyph in WALL_GLYPHS:
                    grid.set_walkable(x, y, False)
                elif glyph.isdigit() and glyph != "0":
                    grid.set_walk_cost(x, y, int(glyph))
                elif glyph not in OPEN_GLYPHS:
                    raise ValueError(f"unknown map glyph {glyph!r} at ({x}, {y})")
        return grid

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def check_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)`` or raise :class:`OutOfBoundsError`."""

        if not self.check_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        """``False`` for walls and for anything outside the grid."""

        return self.check_bounds(x, y) and self._cells[y][x].walkable

    def neighbors(self, x: int, y: int) -> List[Cell]:
        """Walkable 4-neighbours of ``(x, y)`` in ``+x, -x, +y, -y`` order."""

        result: List[Cell] = []
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if self.is_walkable(nx, ny):
                result.append(self._cells[ny][nx])
        return result

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    # ------------------------------------------------------------------
    # Mutation (only between searches)
    # ------------------------------------------------------------------
    def set_walk_cost(self, x: int, y: int, cost: float) -> None:
        self.get_cell(x, y).set_walk_cost(cost)

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        self.get_cell(x, y).set_walkable(walkable)

    def to_text(self) -> str:
        """Plain ``#``/``.`` rendering, one line per row."""

        return "\n".join(
            "".join("." if cell.walkable else "#" for cell in row) for row in self._cells
        )


__all__ = ["Cell", "Grid", "OutOfBoundsError"]
