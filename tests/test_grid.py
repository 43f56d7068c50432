import unittest
from itertools import product

from fixedgrid import FixedGrid, Grid, update
from fixedgrid.errors import OutOfBounds, ShapeMismatch
from utils import backends, all_coords

class TestGrid(unittest.TestCase):

    def setUp(self):
        self.fixedgrid = [FixedGrid(backend) for backend in backends]
        self.extents = [(7,), (2, 3), (4, 1, 5), (3, 2, 2, 3)]

    def test_scenario(self):
        for fg in self.fixedgrid:
            grid = fg.generate(fg.shape(2, 3), lambda i: i)
            self.assertEqual(list(grid.data), [0, 1, 2, 3, 4, 5])
            self.assertEqual(grid.to_nested_lists(), [[0, 1, 2], [3, 4, 5]])
            self.assertEqual(grid[1, 2], 5)
            self.assertEqual(grid.index((1, 2)), 5)

    def test_index(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.tabulate(extents, lambda c: c)
            for coord in all_coords(extents):
                self.assertEqual(grid[coord], coord)
            self.assertRaises(OutOfBounds, grid.index, tuple(extents))
            self.assertRaises(IndexError, grid.index, tuple(-1 for _ in extents))

        grid = self.fixedgrid[0].generate([4], lambda i: 10*i)
        self.assertEqual(grid[3], 30)
        self.assertEqual(grid[(3,)], 30)
        self.assertRaises(OutOfBounds, grid.index, 4)

    def test_update(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.generate(extents, lambda i: i)
            coord = tuple(e - 1 for e in extents)
            res = grid.update([(coord, -1)])
            self.assertEqual(res[coord], -1)
            self.assertEqual(res.shape, grid.shape)
            for other in grid.shape.coords():
                if other != coord:
                    self.assertEqual(res[other], grid[other])
            # the input is left untouched
            self.assertEqual(grid[coord], grid.shape.from_coord(coord))

    def test_update_last_write_wins(self):
        for fg in self.fixedgrid:
            grid = fg.fill([2, 2], 0)
            res = update(grid, [((0, 1), 1), ((1, 0), 2), ((0, 1), 3)])
            self.assertEqual(res.to_nested_lists(), [[0, 3], [2, 0]])

    def test_update_no_partial_result(self):
        for fg in self.fixedgrid:
            grid = fg.fill([2, 2], 0)
            self.assertRaises(OutOfBounds, grid.update, [((0, 0), 1), ((2, 0), 1)])
            self.assertEqual(grid, fg.fill([2, 2], 0))
            self.assertEqual(grid.update([]), grid)

    def test_map(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.generate(extents, lambda i: i)
            self.assertEqual(grid.map(lambda x: x), grid)
            f = lambda x: x + 1
            h = lambda x: 3 * x
            self.assertEqual(grid.map(lambda x: f(h(x))), grid.map(h).map(f))
            self.assertEqual(grid.map(str).shape, grid.shape)

    def test_zip_with(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid1 = fg.generate(extents, lambda i: i)
            grid2 = fg.generate(extents, lambda i: 10*i)
            res = grid1.zip_with(lambda a, b: a + b, grid2)
            self.assertEqual(res, fg.generate(extents, lambda i: 11*i))
            res = grid1.zip_with(lambda a, b, c: (a, b, c), grid2, grid1)
            self.assertEqual(res[tuple(0 for _ in extents)], (0, 0, 0))

        for fg in self.fixedgrid:
            grid1 = fg.fill([2, 3], 1)
            grid2 = fg.fill([3, 2], 1)
            grid3 = fg.fill([6], 1)
            self.assertRaises(ShapeMismatch, grid1.zip_with, max, grid2)
            self.assertRaises(ShapeMismatch, grid1.zip_with, max, grid3)
            self.assertRaises(ShapeMismatch, grid1.zip_with, lambda *xs: 0, grid1, grid2)

    def test_eq(self):
        for fg in self.fixedgrid:
            grid = fg.generate([2, 3], lambda i: i)
            self.assertEqual(grid, fg.from_list([2, 3], range(6)))
            self.assertNotEqual(grid, fg.from_list([3, 2], range(6)))
            self.assertNotEqual(grid, fg.from_list([2, 3], range(1, 7)))
            self.assertNotEqual(grid, list(range(6)))
            self.assertEqual(hash(grid), hash(fg.from_list([2, 3], range(6))))

    def test_foldable(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.generate(extents, lambda i: i)
            self.assertEqual(len(grid), grid.shape.size())
            self.assertEqual(list(grid), list(range(len(grid))))
            self.assertEqual(grid.to_list(), list(range(len(grid))))
            self.assertIn(0, grid)
            self.assertNotIn(-1, grid)

    def test_items(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.generate(extents, lambda i: i)
            for coord, value in grid.items():
                self.assertEqual(grid.shape.from_coord(coord), value)

    def test_repr(self):
        for fg in self.fixedgrid:
            grid = fg.generate([2, 3], lambda i: i)
            self.assertEqual(repr(grid), "Grid([[0, 1, 2], [3, 4, 5]])")
            self.assertEqual(str(fg.fill([2], "a")), "Grid(['a', 'a'])")

    def test_immutable(self):
        grid = Grid([2], [1, 2])
        with self.assertRaises(TypeError):
            grid.data[0] = 3 # type: ignore
        with self.assertRaises(AttributeError):
            grid.shape = None # type: ignore

if __name__ == "__main__":
    unittest.main()
