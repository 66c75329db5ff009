"""
Perfect Maze Generation

Implements classic maze generation algorithms on top of :class:`Grid`.
Every generator is a callable object: it takes the maze dimensions (plus a
start point for tree-growing strategies) and a seed, and returns a freshly
built grid owned by the caller, or ``None`` when the input is rejected.

All algorithms produce perfect mazes with two properties:
1. Fully Connected: Path exists between any two cells
2. No Loops: Exactly one unique path between any pair of cells

Implemented Algorithms:
- Depth First Search: Stack-based carving, every discovered neighbour is linked
- Kruskal's: Random edge selection over a disjoint-set forest
- Prim's: Random expansion of a frontier around the growing tree
- Recursive Division: Wall builder, splits a fully open room with gated walls
- Binary Tree: Memoryless, each cell links west or north
- Sidewinder: Row runs closed by a single passage north

Determinism:
Each call draws from its own ``random.Random(seed)`` stream, so identical
``(width, height, start_point, seed)`` inputs always give the same maze and
concurrent calls share no state.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from enum import Enum
from typing import ClassVar

from algokit.mazes.grid import (
    BucketCellInfo,
    Cell,
    CellInfo,
    DistanceCellInfo,
    Edge,
    Grid,
    Point,
)
from algokit.utils.exceptions import ConfigurationError
from algokit.utils.logging import get_logger
from algokit.utils.union_find import UnionFind

logger = get_logger(__name__)


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    DFS = "dfs"
    KRUSKALS = "kruskals"
    PRIMS = "prims"
    RECURSIVE_DIVISION = "recursive_division"
    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"


class MazeGenerator(ABC):
    """
    Base class for maze generators.

    Subclasses implement :meth:`_carve`, which receives a fresh grid and the
    call's random stream and turns the grid into a maze.
    """

    algorithm: ClassVar[MazeAlgorithm]
    info_factory: ClassVar[Callable[[], CellInfo]] = CellInfo
    pre_connected: ClassVar[bool] = False
    takes_start_point: ClassVar[bool] = False

    def __call__(self, width: int, height: int, seed: int = 0) -> Grid | None:
        """
        Generate a maze.

        Args:
            width: Number of columns, at least 1
            height: Number of rows, at least 1
            seed: Random seed for reproducibility

        Returns:
            Generated maze grid, None if the dimensions are invalid
        """
        if width < 1 or height < 1:
            logger.debug(f"{self.algorithm.value}: rejected dimensions {width}x{height}")
            return None
        return self._build(width, height, seed, None)

    def _build(self, width: int, height: int, seed: int, start: Point | None) -> Grid:
        maze = Grid(width, height, pre_connected=self.pre_connected, info_factory=self.info_factory)
        rng = random.Random(seed)
        self._carve(maze, rng, start)
        logger.debug(
            f"{self.algorithm.value}: generated {width}x{height} maze "
            f"(seed={seed}, passages={maze.edge_count()})"
        )
        return maze

    @abstractmethod
    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        """Turn a freshly allocated grid into a maze."""


class RootedMazeGenerator(MazeGenerator):
    """Generator growing a tree outward from a start point."""

    info_factory = DistanceCellInfo
    takes_start_point = True

    def __call__(
        self,
        width: int,
        height: int,
        start_point: Point | tuple[int, int] = Point(0, 0),
        seed: int = 0,
    ) -> Grid | None:
        """
        Generate a maze rooted at ``start_point``.

        Args:
            width: Number of columns, at least 1
            height: Number of rows, at least 1
            start_point: Cell the tree grows from, ``(0, 0)`` by default
            seed: Random seed for reproducibility

        Returns:
            Generated maze grid, None if the dimensions or start point are invalid
        """
        start = Point(*start_point)
        if width < 1 or height < 1 or not (0 <= start.x < width and 0 <= start.y < height):
            logger.debug(f"{self.algorithm.value}: rejected {width}x{height} with start {tuple(start)}")
            return None
        return self._build(width, height, seed, start)


class DFSGenerator(RootedMazeGenerator):
    """
    Depth First Search generator.

    Iterative randomized depth-first traversal driven by an explicit stack.
    When a cell is popped, all of its unvisited neighbours are discovered at
    once: they are marked visited, linked to the cell and pushed, the
    randomly chosen continuation last so the walk carries on through it.
    The others become backtrack points.
    """

    algorithm = MazeAlgorithm.DFS

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        root = maze.cell(*start)
        root.info.root_distance = 0
        root.info.visited = True
        stack = [root]

        while stack:
            cell = stack.pop()
            neighbours = [n for n in maze.neighbours(cell) if not n.info.visited]
            if not neighbours:
                continue

            chosen = rng.randrange(len(neighbours))
            for i, neighbour in enumerate(neighbours):
                neighbour.info.visited = True
                neighbour.info.root_distance = cell.info.root_distance + 1
                if i != chosen:
                    stack.append(neighbour)
            stack.append(neighbours[chosen])

            maze.connect(cell, neighbours)


class KruskalsGenerator(MazeGenerator):
    """
    Kruskal's generator.

    Randomized Kruskal's algorithm: rather than growing from one point, it
    carves passage segments all over the grid. Edges are drawn uniformly at
    random from the pool of every adjacent pair; an edge is carved only if
    its endpoints are still in different sets, which rules out loops.

    On return every cell's ``bucket_id`` holds the representative of its
    set, so all cells of the finished maze share one id.
    """

    algorithm = MazeAlgorithm.KRUSKALS
    info_factory = BucketCellInfo

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        sets = UnionFind(maze.num_cells)
        pool: list[Edge] = []
        for cell in maze.cells():
            cell.info.bucket_id = cell.index
            if cell.x + 1 < maze.width:
                pool.append(Edge(cell, maze.cell(cell.x + 1, cell.y)))
            if cell.y + 1 < maze.height:
                pool.append(Edge(cell, maze.cell(cell.x, cell.y + 1)))
        pool.sort()

        while pool:
            idx = rng.randrange(len(pool))
            edge = pool[idx]
            pool[idx] = pool[-1]
            pool.pop()

            if sets.union(edge.first.index, edge.second.index):
                maze.connect(edge.first, edge.second)

        for cell in maze.cells():
            cell.info.bucket_id = sets.find(cell.index)


class PrimsGenerator(RootedMazeGenerator):
    """
    Prim's generator.

    Modified randomized Prim's algorithm keeping a frontier of cells rather
    than edges. A random frontier cell joins the maze through a random
    already visited neighbour, then its unvisited neighbours enter the
    frontier.
    """

    algorithm = MazeAlgorithm.PRIMS

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        root = maze.cell(*start)
        root.info.root_distance = 0
        frontier = [root]
        in_frontier = {root.index}

        while frontier:
            idx = rng.randrange(len(frontier))
            cell = frontier[idx]
            cell.info.visited = True

            neighbours = maze.neighbours(cell)
            visited = [n for n in neighbours if n.info.visited]
            if visited:
                parent = visited[rng.randrange(len(visited))]
                cell.info.root_distance = parent.info.root_distance + 1
                maze.connect(cell, parent)

            for neighbour in neighbours:
                if not neighbour.info.visited and neighbour.index not in in_frontier:
                    frontier.append(neighbour)
                    in_frontier.add(neighbour.index)

            frontier[idx] = frontier[-1]
            frontier.pop()
            in_frontier.discard(cell.index)


class RecursiveDivisionGenerator(MazeGenerator):
    """
    Recursive Division generator.

    A wall builder: starts from a fully open grid and splits each room in
    two with a wall holding a single gate, then handles both halves the same
    way until rooms are one cell thick. Rooms are processed from an explicit
    stack in the same order a recursive implementation visits them.
    """

    algorithm = MazeAlgorithm.RECURSIVE_DIVISION
    pre_connected = True

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        rooms = [(Point(0, 0), maze.width, maze.height)]

        while rooms:
            origin, width, height = rooms.pop()
            if width < 2 or height < 2:
                continue

            horizontal = rng.randrange(2) == 0
            if horizontal:
                wall = rng.randrange(height - 1)
                gate = rng.randrange(width)
                maze.disconnect_row(origin, wall, width, gate)
                first = (origin, width, wall + 1)
                second = (Point(origin.x, origin.y + wall + 1), width, height - wall - 1)
            else:
                wall = rng.randrange(width - 1)
                gate = rng.randrange(height)
                maze.disconnect_col(origin, wall, height, gate)
                first = (origin, wall + 1, height)
                second = (Point(origin.x + wall + 1, origin.y), width - wall - 1, height)

            # Push second first so the top/left room is divided first
            rooms.append(second)
            rooms.append(first)


class BinaryTreeGenerator(MazeGenerator):
    """
    Binary Tree generator.

    Memoryless: each cell, looked at independently in raster order, is
    linked to its west or north neighbour at random. Produces a strong
    diagonal bias with open top row and left column.
    """

    algorithm = MazeAlgorithm.BINARY_TREE

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        for y in range(maze.height):
            for x in range(maze.width):
                cell = maze.cell(x, y)
                candidates = []
                if x > 0:
                    candidates.append(maze.cell(x - 1, y))
                if y > 0:
                    candidates.append(maze.cell(x, y - 1))
                if not candidates:
                    continue
                maze.connect(cell, candidates[rng.randrange(len(candidates))])


class SidewinderGenerator(MazeGenerator):
    """
    Sidewinder generator.

    Scans rows top to bottom keeping a run of cells joined east-west. Each
    step either extends the run east (coin flip) or closes it by carving
    north from one random member. The first row is a single passage.
    """

    algorithm = MazeAlgorithm.SIDEWINDER

    def _carve(self, maze: Grid, rng: random.Random, start: Point | None) -> None:
        for y in range(maze.height):
            run: list[Cell] = []
            for x in range(maze.width):
                cell = maze.cell(x, y)
                if y > 0:
                    run.append(cell)

                if x + 1 < maze.width and (rng.randrange(2) == 0 or y == 0):
                    maze.connect(cell, maze.cell(x + 1, y))
                elif y > 0:
                    member = run[rng.randrange(len(run))]
                    maze.connect(member, maze.cell(member.x, member.y - 1))
                    run = []


_GENERATORS: dict[MazeAlgorithm, type[MazeGenerator]] = {
    MazeAlgorithm.DFS: DFSGenerator,
    MazeAlgorithm.KRUSKALS: KruskalsGenerator,
    MazeAlgorithm.PRIMS: PrimsGenerator,
    MazeAlgorithm.RECURSIVE_DIVISION: RecursiveDivisionGenerator,
    MazeAlgorithm.BINARY_TREE: BinaryTreeGenerator,
    MazeAlgorithm.SIDEWINDER: SidewinderGenerator,
}


def get_generator(algorithm: MazeAlgorithm | str) -> MazeGenerator:
    """
    Look up the generator for an algorithm.

    Args:
        algorithm: Enum member or its string value (case-insensitive)

    Returns:
        Generator instance

    Raises:
        ConfigurationError: If the algorithm name is unknown
    """
    if not isinstance(algorithm, MazeAlgorithm):
        try:
            algorithm = MazeAlgorithm(str(algorithm).lower())
        except ValueError:
            raise ConfigurationError(
                "algorithm",
                algorithm,
                valid_values=[a.value for a in MazeAlgorithm],
                component="get_generator",
            ) from None
    return _GENERATORS[algorithm]()


def generate_maze(
    width: int,
    height: int,
    algorithm: MazeAlgorithm | str = MazeAlgorithm.DFS,
    start_point: Point | tuple[int, int] | None = None,
    seed: int = 0,
) -> Grid | None:
    """
    High-level function to generate a perfect maze.

    Args:
        width: Number of columns
        height: Number of rows
        algorithm: Algorithm to use
        start_point: Start cell for DFS and Prim's, ``(0, 0)`` if omitted;
            ignored by the other algorithms
        seed: Random seed for reproducibility

    Returns:
        Generated maze grid, None if the input is rejected

    Example:
        >>> maze = generate_maze(20, 10, algorithm="kruskals", seed=42)
        >>> maze.edge_count()
        199
    """
    generator = get_generator(algorithm)
    if generator.takes_start_point:
        return generator(width, height, start_point if start_point is not None else Point(0, 0), seed=seed)
    return generator(width, height, seed=seed)


def verify_perfect_maze(grid: Grid) -> dict:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from any cell
    2. Acyclicity: Exactly (n-1) passages for n cells

    The grid is not modified.

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    total_cells = grid.num_cells
    passage_count = grid.edge_count()

    if total_cells == 0:
        return {
            "is_perfect": True,
            "is_connected": True,
            "is_no_loops": True,
            "visited_cells": 0,
            "total_cells": 0,
            "passage_count": 0,
            "expected_passages": 0,
        }

    seen = {0}
    queue = deque([0])
    while queue:
        current = grid.cell_at(queue.popleft())
        for index in current.connections:
            if index not in seen:
                seen.add(index)
                queue.append(index)

    is_connected = len(seen) == total_cells
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": len(seen),
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }
