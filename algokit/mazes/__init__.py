"""
Maze generation on a shared grid structure.

A :class:`Grid` owns a rectangle of cells and the passages between them.
Generators turn a fresh grid into a perfect maze (connected, loop-free):

- DFSGenerator, PrimsGenerator: grow a tree from a start point
- KruskalsGenerator: random edges over a disjoint-set forest
- RecursiveDivisionGenerator: wall builder on a fully open grid
- BinaryTreeGenerator, SidewinderGenerator: row-local carvers

Examples
--------
>>> from algokit.mazes import DFSGenerator, verify_perfect_maze
>>> maze = DFSGenerator()(5, 10, (0, 0), seed=0)
>>> maze.edge_count()
49
>>> verify_perfect_maze(maze)["is_perfect"]
True
"""

from .grid import BucketCellInfo, Cell, CellInfo, DistanceCellInfo, Edge, Grid, Point
from .maze_config import MazeConfig, generate_from_config
from .maze_generator import (
    BinaryTreeGenerator,
    DFSGenerator,
    KruskalsGenerator,
    MazeAlgorithm,
    MazeGenerator,
    PrimsGenerator,
    RecursiveDivisionGenerator,
    RootedMazeGenerator,
    SidewinderGenerator,
    generate_maze,
    get_generator,
    verify_perfect_maze,
)

__all__ = [
    # Grid structure
    "Grid",
    "Cell",
    "Edge",
    "Point",
    "CellInfo",
    "DistanceCellInfo",
    "BucketCellInfo",
    # Generators
    "MazeAlgorithm",
    "MazeGenerator",
    "RootedMazeGenerator",
    "DFSGenerator",
    "KruskalsGenerator",
    "PrimsGenerator",
    "RecursiveDivisionGenerator",
    "BinaryTreeGenerator",
    "SidewinderGenerator",
    "get_generator",
    "generate_maze",
    "verify_perfect_maze",
    # Configuration
    "MazeConfig",
    "generate_from_config",
]
