"""
Grid of cells for maze generation.

The grid owns every cell of a ``width x height`` rectangle and the passage
relation between them. Cells live in a dense arena indexed by a linear id
(``x * height + y``) and each cell's connection set stores linear ids only,
so a connection never extends a cell's lifetime and cell identity is the
arena slot.

Two cells are connected when a passage exists between them. The relation is
kept symmetric by every mutating operation: ``a`` is in ``b``'s connection
set iff ``b`` is in ``a``'s.

Coordinates follow the screen convention used by the generators:
``x`` grows to the east, ``y`` grows to the south, so the north neighbour of
``(x, y)`` is ``(x, y - 1)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from algokit.utils.exceptions import GridIndexError

if TYPE_CHECKING:
    from numpy.typing import NDArray


class Point(NamedTuple):
    """Integer coordinate inside a grid."""

    x: int = 0
    y: int = 0


@dataclass
class CellInfo:
    """
    Auxiliary payload attached to every cell.

    Attributes:
        visited: Temporary flag for generation algorithms
    """

    visited: bool = False


@dataclass
class DistanceCellInfo(CellInfo):
    """Payload for tree-growing generators: number of passages back to the start cell."""

    root_distance: int = 0


@dataclass
class BucketCellInfo(CellInfo):
    """Payload for Kruskal's generator: id of the disjoint set holding the cell."""

    bucket_id: int = 0


@dataclass(eq=False)
class Cell:
    """
    A single grid position.

    Cells compare by identity: two cells are the same only if they are the
    same arena slot of the same grid.

    Attributes:
        x: Column index in grid
        y: Row index in grid
        index: Linear id of the cell inside its grid
        connections: Linear ids of cells reachable through a carved passage
        info: Generator-specific payload
    """

    x: int
    y: int
    index: int
    connections: set[int] = field(default_factory=set, repr=False)
    info: CellInfo = field(default_factory=CellInfo)

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Candidate or carved passage between two cells.

    Edges are ordered lexicographically on
    ``(min x, min y, max x, max y)`` of their endpoints, so the order is a
    strict total order and does not depend on which endpoint is ``first``.
    """

    first: Cell
    second: Cell

    @property
    def key(self) -> tuple[int, int, int, int]:
        a, b = self.first, self.second
        return (min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key < other.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class Grid:
    """Rectangular grid of cells and the passages between them."""

    def __init__(
        self,
        width: int,
        height: int,
        pre_connected: bool = False,
        info_factory: Callable[[], CellInfo] = CellInfo,
    ):
        """
        Initialize grid.

        Args:
            width: Number of columns (0 gives an empty grid)
            height: Number of rows (0 gives an empty grid)
            pre_connected: Connect every cell to its west and north neighbour
            info_factory: Builds the payload attached to each cell
        """
        if width < 0 or height < 0:
            raise GridIndexError(
                "Grid dimensions must be non-negative",
                diagnostic_data={"width": width, "height": height},
            )

        # Either dimension at zero means no cells at all
        if width == 0 or height == 0:
            width = height = 0

        self._width = width
        self._height = height
        self._cells: list[Cell] = []
        self._columns: list[tuple[Cell, ...]] = []
        self._initialize_cells(pre_connected, info_factory)

    def _initialize_cells(self, pre_connected: bool, info_factory: Callable[[], CellInfo]) -> None:
        """Allocate every cell, optionally linking it west and north."""
        for x in range(self._width):
            for y in range(self._height):
                cell = Cell(x, y, self._linear_index(x, y), info=info_factory())
                self._cells.append(cell)
                if pre_connected and x > 0:
                    self.connect(cell, self._cells[self._linear_index(x - 1, y)])
                if pre_connected and y > 0:
                    self.connect(cell, self._cells[self._linear_index(x, y - 1)])
            self._columns.append(tuple(self._cells[x * self._height : (x + 1) * self._height]))

    def _linear_index(self, x: int, y: int) -> int:
        return x * self._height + y

    # Dimensions

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def num_cells(self) -> int:
        """Total number of cells (``width * height``)."""
        return len(self._cells)

    # Access

    def __getitem__(self, x: int) -> tuple[Cell, ...]:
        """Column ``x`` of cells, so that ``grid[x][y]`` is the cell at ``(x, y)``."""
        if not 0 <= x < self._width:
            raise GridIndexError(f"Column {x} outside grid", diagnostic_data={"width": self._width})
        return self._columns[x]

    def __len__(self) -> int:
        return self._width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Args:
            x: Column index
            y: Row index

        Returns:
            Cell at ``(x, y)``

        Raises:
            GridIndexError: If the position lies outside the grid
        """
        if not self.in_bounds(x, y):
            raise GridIndexError(
                f"Position ({x}, {y}) outside grid",
                diagnostic_data={"width": self._width, "height": self._height},
            )
        return self._cells[self._linear_index(x, y)]

    def cell_at(self, index: int) -> Cell:
        """Get cell by linear id."""
        if not 0 <= index < len(self._cells):
            raise GridIndexError(f"Cell index {index} outside grid", diagnostic_data={"num_cells": len(self._cells)})
        return self._cells[index]

    def cells(self) -> Iterator[Cell]:
        """Iterate all cells, column by column."""
        return iter(self._cells)

    def neighbours(self, cell: Cell) -> list[Cell]:
        """
        Get all in-bounds cardinal neighbours.

        Args:
            cell: Cell to get neighbours for

        Returns:
            Neighbours in west, north, east, south order
        """
        self._check_owned(cell)
        result = []
        for dx, dy in ((-1, 0), (0, -1), (1, 0), (0, 1)):
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                result.append(self._cells[self._linear_index(nx, ny)])
        return result

    def connected_cells(self, cell: Cell) -> list[Cell]:
        """Cells sharing a passage with ``cell``, sorted by linear id."""
        self._check_owned(cell)
        return [self._cells[i] for i in sorted(cell.connections)]

    def is_connected(self, a: Cell, b: Cell) -> bool:
        self._check_owned(a)
        self._check_owned(b)
        return b.index in a.connections

    def _check_owned(self, cell: Cell) -> None:
        if not (0 <= cell.index < len(self._cells) and self._cells[cell.index] is cell):
            raise GridIndexError(
                f"Cell ({cell.x}, {cell.y}) does not belong to this grid",
                diagnostic_data={"width": self._width, "height": self._height},
            )

    # Mutation

    def connect(self, cell: Cell, other: Cell | Iterable[Cell]) -> None:
        """
        Create passages from ``cell`` to one cell or to each cell of a collection.

        Connecting an already connected pair leaves the grid unchanged, and
        an empty collection is a no-op.
        """
        self._check_owned(cell)
        targets = [other] if isinstance(other, Cell) else list(other)
        for target in targets:
            self._check_owned(target)
        for target in targets:
            cell.connections.add(target.index)
            target.connections.add(cell.index)

    def disconnect(self, a: Cell, b: Cell) -> None:
        """Remove the passage between two cells, if any."""
        self._check_owned(a)
        self._check_owned(b)
        a.connections.discard(b.index)
        b.connections.discard(a.index)

    def disconnect_row(self, origin: Point | tuple[int, int], row_index: int, width: int, path_index: int) -> None:
        """
        Build a horizontal wall inside a rectangular region, leaving one gap.

        Every cell of row ``origin.y + row_index`` in the region is cut off
        from the cell just south of it, except the cell at column offset
        ``path_index``.

        Args:
            origin: Top-left corner of the region
            row_index: Row offset of the wall, the wall lies below this row
            width: Width of the region
            path_index: Column offset of the gap, in ``[0, width)``

        Raises:
            GridIndexError: If the wall or gap falls outside the region or grid
        """
        ox, oy = origin
        if not (
            0 <= path_index < width
            and row_index >= 0
            and self.in_bounds(ox, oy + row_index + 1)
            and self.in_bounds(ox + width - 1, oy + row_index + 1)
        ):
            raise GridIndexError(
                "Horizontal wall outside grid",
                diagnostic_data={"origin": (ox, oy), "row_index": row_index, "width": width, "path_index": path_index},
            )

        y = oy + row_index
        for dx in range(width):
            if dx == path_index:
                continue
            self.disconnect(self.cell(ox + dx, y), self.cell(ox + dx, y + 1))

    def disconnect_col(self, origin: Point | tuple[int, int], col_index: int, height: int, path_index: int) -> None:
        """
        Build a vertical wall inside a rectangular region, leaving one gap.

        Args:
            origin: Top-left corner of the region
            col_index: Column offset of the wall, the wall lies east of this column
            height: Height of the region
            path_index: Row offset of the gap, in ``[0, height)``

        Raises:
            GridIndexError: If the wall or gap falls outside the region or grid
        """
        ox, oy = origin
        if not (
            0 <= path_index < height
            and col_index >= 0
            and self.in_bounds(ox + col_index + 1, oy)
            and self.in_bounds(ox + col_index + 1, oy + height - 1)
        ):
            raise GridIndexError(
                "Vertical wall outside grid",
                diagnostic_data={"origin": (ox, oy), "col_index": col_index, "height": height, "path_index": path_index},
            )

        x = ox + col_index
        for dy in range(height):
            if dy == path_index:
                continue
            self.disconnect(self.cell(x, oy + dy), self.cell(x + 1, oy + dy))

    # Queries

    def edge_count(self) -> int:
        """Number of undirected passages."""
        return sum(len(cell.connections) for cell in self._cells) // 2

    def edges(self) -> list[Edge]:
        """All carved passages, in edge order."""
        return sorted(
            Edge(cell, self._cells[i]) for cell in self._cells for i in cell.connections if i > cell.index
        )

    def reset_visited(self) -> None:
        """Reset visited flags for all cells."""
        for cell in self._cells:
            cell.info.visited = False

    def adjacency_matrix(self) -> NDArray[np.int8]:
        """
        Passage relation as a dense matrix.

        Returns:
            Symmetric ``(n, n)`` array indexed by linear id, 1 where a passage exists
        """
        n = len(self._cells)
        matrix = np.zeros((n, n), dtype=np.int8)
        for cell in self._cells:
            if cell.connections:
                matrix[cell.index, list(cell.connections)] = 1
        return matrix

    def info_array(self, name: str, dtype=np.int64) -> NDArray:
        """
        Collect one payload field of every cell.

        Args:
            name: Attribute of the cell payload, e.g. ``"visited"`` or ``"root_distance"``
            dtype: Element type of the result

        Returns:
            Array of shape ``(width, height)``; entry ``[x, y]`` belongs to cell ``(x, y)``
        """
        values = np.array([getattr(cell.info, name) for cell in self._cells], dtype=dtype)
        return values.reshape(self._width, self._height)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, passages={self.edge_count()})"
