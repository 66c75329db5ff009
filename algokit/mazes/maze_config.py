"""
Maze configuration.

Validated description of one maze generation run, built on pydantic so that
bad dimensions, unknown algorithms and misplaced start points are reported
before any generator runs.

Examples
--------
>>> config = MazeConfig(width=20, height=10, algorithm="prims", start_point=(3, 4), seed=7)
>>> maze = generate_from_config(config)
>>> (maze.width, maze.height)
(20, 10)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from algokit.mazes.grid import Grid, Point
from algokit.mazes.maze_generator import MazeAlgorithm, generate_maze, get_generator
from algokit.utils.logging import LoggedOperation, get_logger

logger = get_logger(__name__)


class MazeConfig(BaseModel):
    """
    Configuration for a maze generation run.

    Attributes:
        width: Number of columns
        height: Number of rows
        algorithm: Generation algorithm
        start_point: Start cell for DFS and Prim's (``None`` means ``(0, 0)``)
        seed: Random seed for reproducibility
    """

    width: int = Field(..., ge=1, description="Number of columns")
    height: int = Field(..., ge=1, description="Number of rows")
    algorithm: MazeAlgorithm = Field(MazeAlgorithm.DFS, description="Generation algorithm")
    start_point: tuple[int, int] | None = Field(None, description="Start cell for tree-growing algorithms")
    seed: int = Field(0, ge=0, description="Random seed")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        """Accept algorithm names regardless of case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def validate_start_point(self) -> MazeConfig:
        """Check the start point lies inside the grid and is used by the algorithm."""
        if self.start_point is None:
            return self

        if not get_generator(self.algorithm).takes_start_point:
            raise ValueError(f"algorithm '{self.algorithm.value}' does not take a start point")

        x, y = self.start_point
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"start_point {self.start_point} outside {self.width}x{self.height} grid")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MazeConfig:
        """Build a configuration from a plain mapping, e.g. a parsed YAML or JSON document."""
        return cls.model_validate(data)

    @property
    def start(self) -> Point:
        return Point(*self.start_point) if self.start_point is not None else Point(0, 0)


def generate_from_config(config: MazeConfig) -> Grid:
    """
    Run the generator described by a configuration.

    Args:
        config: Validated maze configuration

    Returns:
        Generated maze grid
    """
    with LoggedOperation(logger, f"maze generation {config.model_dump()}"):
        maze = generate_maze(
            config.width,
            config.height,
            algorithm=config.algorithm,
            start_point=config.start,
            seed=config.seed,
        )
    # A validated config never describes a rejected input
    assert maze is not None
    return maze
