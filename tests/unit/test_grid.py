"""
Unit tests for the maze grid structure.

Tests construction, the symmetric passage relation, bulk wall operations,
edge ordering and the numpy query helpers.
"""

import pytest

import numpy as np

from algokit.mazes import BucketCellInfo, DistanceCellInfo, Edge, Grid, Point
from algokit.utils.exceptions import GridIndexError


def assert_symmetric(grid):
    for cell in grid.cells():
        for other in grid.connected_cells(cell):
            assert cell.index in other.connections


class TestGridConstruction:
    """Test grid allocation and initial passages."""

    @pytest.mark.parametrize("pre_connected", [False, True])
    def test_empty_grid(self, pre_connected):
        """Test that a 0 x 0 grid has no cells."""
        grid = Grid(0, 0, pre_connected)

        assert grid.width == 0
        assert grid.height == 0
        assert grid.num_cells == 0
        assert list(grid.cells()) == []
        assert grid.edge_count() == 0

    @pytest.mark.parametrize(("width", "height"), [(5, 0), (0, 7)])
    def test_degenerate_grid_is_empty(self, width, height):
        """Test that a zero dimension empties the whole grid."""
        grid = Grid(width, height)

        assert grid.width == 0
        assert grid.height == 0
        assert grid.num_cells == 0

    def test_negative_dimensions(self):
        """Test that negative dimensions are a programming error."""
        with pytest.raises(GridIndexError):
            Grid(-1, 3)

    @pytest.mark.parametrize("pre_connected", [False, True])
    def test_dimensions(self, pre_connected):
        """Test 10 x 10 grids report their dimensions."""
        grid = Grid(10, 10, pre_connected)

        assert grid.width == 10
        assert grid.height == 10
        assert grid.num_cells == 100
        assert len(grid) == 10

    def test_cells_have_coordinates(self):
        """Test that every cell knows its coordinate and linear id."""
        grid = Grid(4, 3)

        for x in range(4):
            for y in range(3):
                cell = grid[x][y]
                assert (cell.x, cell.y) == (x, y)
                assert cell.point == Point(x, y)
                assert grid.cell(x, y) is cell
                assert grid.cell_at(cell.index) is cell

    def test_disconnected_by_default(self):
        """Test that a fresh grid has no passages."""
        grid = Grid(6, 4)

        assert grid.edge_count() == 0
        assert all(not cell.connections for cell in grid.cells())

    def test_pre_connected_grid(self):
        """Test that every cell links to its west and north neighbours."""
        grid = Grid(10, 10, pre_connected=True)

        for x in range(10):
            for y in range(10):
                cell = grid[x][y]
                if x > 0:
                    assert grid.is_connected(cell, grid[x - 1][y])
                if y > 0:
                    assert grid.is_connected(cell, grid[x][y - 1])

        assert grid.edge_count() == 2 * 10 * 9
        assert len(grid[0][0].connections) == 2
        assert len(grid[5][5].connections) == 4
        assert len(grid[9][5].connections) == 3
        assert_symmetric(grid)

    def test_info_factory(self):
        """Test that each cell gets its own payload."""
        grid = Grid(3, 3, info_factory=DistanceCellInfo)

        grid[0][0].info.root_distance = 7

        assert isinstance(grid[1][1].info, DistanceCellInfo)
        assert grid[1][1].info.root_distance == 0
        assert grid[0][0].info.visited is False


class TestGridAccess:
    """Test bounds checking of accessors."""

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (4, 0), (0, 3)])
    def test_cell_out_of_bounds(self, x, y):
        """Test that out-of-range coordinates raise."""
        grid = Grid(4, 3)

        with pytest.raises(GridIndexError):
            grid.cell(x, y)

    def test_column_out_of_bounds(self):
        """Test that indexing a missing column raises an IndexError."""
        grid = Grid(4, 3)

        with pytest.raises(IndexError):
            grid[4]

    def test_neighbours_order(self):
        """Test that neighbours come west, north, east, south."""
        grid = Grid(3, 3)

        points = [n.point for n in grid.neighbours(grid.cell(1, 1))]

        assert points == [(0, 1), (1, 0), (2, 1), (1, 2)]

    def test_corner_neighbours(self):
        """Test that neighbours stay inside the grid."""
        grid = Grid(3, 3)

        assert [n.point for n in grid.neighbours(grid.cell(0, 0))] == [(1, 0), (0, 1)]
        assert [n.point for n in grid.neighbours(grid.cell(2, 2))] == [(1, 2), (2, 1)]

    def test_single_cell_has_no_neighbours(self):
        """Test the 1 x 1 grid."""
        grid = Grid(1, 1)

        assert grid.neighbours(grid.cell(0, 0)) == []


class TestGridConnections:
    """Test connect/disconnect semantics."""

    def test_connect_is_symmetric(self):
        """Test that connecting a to b also connects b to a."""
        grid = Grid(3, 3)
        a, b = grid.cell(0, 0), grid.cell(1, 0)

        grid.connect(a, b)

        assert grid.is_connected(a, b)
        assert grid.is_connected(b, a)
        assert grid.connected_cells(a) == [b]
        assert grid.connected_cells(b) == [a]

    def test_connect_is_idempotent(self):
        """Test that connecting twice equals connecting once."""
        grid = Grid(3, 3)
        a, b = grid.cell(0, 0), grid.cell(0, 1)

        grid.connect(a, b)
        once = [set(c.connections) for c in grid.cells()]
        grid.connect(a, b)
        grid.connect(b, a)

        assert [set(c.connections) for c in grid.cells()] == once
        assert grid.edge_count() == 1

    def test_connect_many(self):
        """Test connecting a cell to a list of neighbours."""
        grid = Grid(3, 3)
        center = grid.cell(1, 1)

        grid.connect(center, grid.neighbours(center))

        assert grid.edge_count() == 4
        assert len(center.connections) == 4
        assert_symmetric(grid)

    def test_connect_empty_list(self):
        """Test that an empty neighbour list is a no-op."""
        grid = Grid(3, 3)

        grid.connect(grid.cell(1, 1), [])

        assert grid.edge_count() == 0

    def test_disconnect(self):
        """Test that disconnect removes the passage both ways and is idempotent."""
        grid = Grid(3, 3, pre_connected=True)
        a, b = grid.cell(1, 1), grid.cell(1, 2)

        grid.disconnect(a, b)
        after_once = [set(c.connections) for c in grid.cells()]
        grid.disconnect(b, a)

        assert not grid.is_connected(a, b)
        assert not grid.is_connected(b, a)
        assert [set(c.connections) for c in grid.cells()] == after_once
        assert grid.edge_count() == 11
        assert_symmetric(grid)

    def test_disconnect_unconnected_pair(self):
        """Test that disconnecting cells without a passage changes nothing."""
        grid = Grid(2, 2)

        grid.disconnect(grid.cell(0, 0), grid.cell(1, 1))

        assert grid.edge_count() == 0

    def test_foreign_cell_rejected(self):
        """Test that cells of another grid cannot be connected."""
        grid = Grid(3, 3)
        other = Grid(3, 3)

        with pytest.raises(GridIndexError):
            grid.connect(grid.cell(0, 0), other.cell(1, 0))

        with pytest.raises(GridIndexError):
            grid.connect(grid.cell(0, 0), [grid.cell(1, 0), other.cell(0, 1)])

        assert grid.edge_count() == 0


class TestGridWalls:
    """Test bulk row/column wall operations."""

    def test_disconnect_row(self):
        """Test a horizontal wall with a single gap."""
        grid = Grid(4, 3, pre_connected=True)

        grid.disconnect_row(Point(0, 0), 0, 4, 2)

        for x in range(4):
            connected = grid.is_connected(grid.cell(x, 0), grid.cell(x, 1))
            assert connected == (x == 2)
        # Rows below the wall and the row itself are untouched
        assert all(grid.is_connected(grid.cell(x, 1), grid.cell(x, 2)) for x in range(4))
        assert all(grid.is_connected(grid.cell(x, 0), grid.cell(x + 1, 0)) for x in range(3))
        assert grid.edge_count() == 17 - 3

    def test_disconnect_col(self):
        """Test a vertical wall with a single gap."""
        grid = Grid(3, 4, pre_connected=True)

        grid.disconnect_col((0, 0), 1, 4, 0)

        for y in range(4):
            connected = grid.is_connected(grid.cell(1, y), grid.cell(2, y))
            assert connected == (y == 0)
        assert all(grid.is_connected(grid.cell(0, y), grid.cell(1, y)) for y in range(4))

    def test_wall_in_subregion(self):
        """Test that a wall only spans its region."""
        grid = Grid(6, 6, pre_connected=True)

        grid.disconnect_row(Point(2, 1), 1, 3, 0)

        assert grid.is_connected(grid.cell(2, 2), grid.cell(2, 3))
        assert not grid.is_connected(grid.cell(3, 2), grid.cell(3, 3))
        assert not grid.is_connected(grid.cell(4, 2), grid.cell(4, 3))
        assert grid.is_connected(grid.cell(1, 2), grid.cell(1, 3))
        assert grid.is_connected(grid.cell(5, 2), grid.cell(5, 3))

    @pytest.mark.parametrize(
        ("origin", "row_index", "width", "path_index"),
        [
            ((0, 0), 2, 4, 0),  # no row below the wall
            ((0, 0), 0, 5, 0),  # wider than the grid
            ((0, 0), 0, 4, 4),  # gap outside the wall
            ((0, 0), -1, 4, 0),
        ],
    )
    def test_disconnect_row_preconditions(self, origin, row_index, width, path_index):
        """Test that invalid walls raise before mutating the grid."""
        grid = Grid(4, 3, pre_connected=True)

        with pytest.raises(GridIndexError):
            grid.disconnect_row(origin, row_index, width, path_index)

        assert grid.edge_count() == 17

    def test_disconnect_col_preconditions(self):
        """Test that a wall on the last column raises."""
        grid = Grid(3, 3, pre_connected=True)

        with pytest.raises(GridIndexError):
            grid.disconnect_col((0, 0), 2, 3, 0)


class TestEdge:
    """Test edge ordering and equality."""

    def test_edge_is_unordered_pair(self):
        """Test that swapping endpoints gives an equal edge."""
        grid = Grid(3, 3)
        a, b = grid.cell(1, 1), grid.cell(2, 1)

        assert Edge(a, b) == Edge(b, a)
        assert hash(Edge(a, b)) == hash(Edge(b, a))
        assert len({Edge(a, b), Edge(b, a)}) == 1

    def test_edge_order_is_total(self):
        """Test lexicographic ordering on normalized coordinates."""
        grid = Grid(3, 3)
        e1 = Edge(grid.cell(0, 1), grid.cell(0, 0))
        e2 = Edge(grid.cell(0, 0), grid.cell(1, 0))
        e3 = Edge(grid.cell(1, 0), grid.cell(1, 1))

        assert sorted([e3, e2, e1]) == [e1, e2, e3]
        assert e1.key == (0, 0, 0, 1)
        assert not (e1 < e1)
        assert e1 < e2 and not (e2 < e1)

    def test_grid_edges(self):
        """Test that the grid lists each passage once."""
        grid = Grid(2, 2, pre_connected=True)

        edges = grid.edges()

        assert len(edges) == 4
        assert edges == sorted(edges)


class TestGridArrays:
    """Test numpy views of the grid."""

    def test_adjacency_matrix(self):
        """Test that the adjacency matrix mirrors the passage relation."""
        grid = Grid(4, 5, pre_connected=True)

        matrix = grid.adjacency_matrix()

        assert matrix.shape == (20, 20)
        assert matrix.dtype == np.int8
        np.testing.assert_array_equal(matrix, matrix.T)
        assert matrix.sum() == 2 * grid.edge_count()
        assert np.all(np.diag(matrix) == 0)

    def test_info_array(self):
        """Test collecting a payload field per cell."""
        grid = Grid(3, 2, info_factory=BucketCellInfo)
        for cell in grid.cells():
            cell.info.bucket_id = cell.x * 10 + cell.y

        buckets = grid.info_array("bucket_id")

        assert buckets.shape == (3, 2)
        assert buckets[2, 1] == 21
        assert buckets[0, 1] == 1

    def test_reset_visited(self):
        """Test clearing visited flags."""
        grid = Grid(2, 2)
        for cell in grid.cells():
            cell.info.visited = True

        grid.reset_visited()

        assert not grid.info_array("visited", dtype=bool).any()
