"""
Shared utilities for algokit.

- logging: Colored, configurable logging infrastructure
- exceptions: Structured exception hierarchy with diagnostic context
- union_find: Disjoint-set structure used by Kruskal's maze generator
"""

from __future__ import annotations

from .exceptions import AlgoKitError, ConfigurationError, GridIndexError
from .logging import LoggedOperation, configure_logging, get_logger
from .union_find import UnionFind

__all__ = [
    "AlgoKitError",
    "ConfigurationError",
    "GridIndexError",
    "LoggedOperation",
    "UnionFind",
    "configure_logging",
    "get_logger",
]
