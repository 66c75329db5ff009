"""
algokit: canonical algorithms behind a uniform, testable interface.

Subpackages:
- mazes: Grid/graph structure and six perfect-maze generators
- sort: In-place partition, bubble, quick and merge sorts
- utils: Logging, exceptions and a union-find structure

Examples
--------
>>> from algokit import generate_maze, verify_perfect_maze
>>> maze = generate_maze(10, 10, algorithm="sidewinder", seed=3)
>>> verify_perfect_maze(maze)["is_perfect"]
True
"""

from __future__ import annotations

from algokit.mazes import (
    BinaryTreeGenerator,
    DFSGenerator,
    Grid,
    KruskalsGenerator,
    MazeAlgorithm,
    MazeConfig,
    PrimsGenerator,
    RecursiveDivisionGenerator,
    SidewinderGenerator,
    generate_from_config,
    generate_maze,
    verify_perfect_maze,
)
from algokit.sort import bubble_sort, merge_sort, partition, quick_sort
from algokit.utils import configure_logging, get_logger

__version__ = "0.3.0"

__all__ = [
    "BinaryTreeGenerator",
    "DFSGenerator",
    "Grid",
    "KruskalsGenerator",
    "MazeAlgorithm",
    "MazeConfig",
    "PrimsGenerator",
    "RecursiveDivisionGenerator",
    "SidewinderGenerator",
    "__version__",
    "bubble_sort",
    "configure_logging",
    "generate_from_config",
    "generate_maze",
    "get_logger",
    "merge_sort",
    "partition",
    "quick_sort",
    "verify_perfect_maze",
]
