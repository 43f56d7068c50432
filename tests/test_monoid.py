import unittest
from itertools import product
import operator

from fixedgrid import FixedGrid, SUM, PRODUCT, ALL, ANY, mappend
from fixedgrid.errors import ShapeMismatch
from utils import backends

class TestMonoid(unittest.TestCase):

    def setUp(self):
        self.fixedgrid = [FixedGrid(backend) for backend in backends]
        self.extents = [(7,), (2, 3), (4, 1, 5)]

    def test_mempty(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            self.assertEqual(fg.mempty(SUM, extents), fg.fill(extents, 0))
            self.assertEqual(fg.mempty(PRODUCT, extents), fg.fill(extents, 1))

    def test_mappend(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid1 = fg.generate(extents, lambda i: i)
            grid2 = fg.generate(extents, lambda i: i + 2)
            self.assertEqual(fg.mappend(SUM, grid1, grid2), fg.generate(extents, lambda i: 2*i + 2))
            self.assertEqual(fg.mappend(PRODUCT, grid1, grid2), fg.generate(extents, lambda i: i*(i + 2)))

    def test_identity(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grid = fg.generate(extents, lambda i: i - 3)
            for monoid in (SUM, PRODUCT):
                empty = fg.mempty(monoid, extents)
                self.assertEqual(fg.mappend(monoid, empty, grid), grid)
                self.assertEqual(fg.mappend(monoid, grid, empty), grid)

    def test_associativity(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            concat = fg.monoid(operator.add, "")
            a = fg.generate(extents, lambda i: f"a{i}")
            b = fg.generate(extents, lambda i: f"b{i}")
            c = fg.generate(extents, lambda i: f"c{i}")
            left = fg.mappend(concat, fg.mappend(concat, a, b), c)
            right = fg.mappend(concat, a, fg.mappend(concat, b, c))
            self.assertEqual(left, right)
            self.assertEqual(fg.mappend(concat, a, b, c), left)
            self.assertEqual(left[tuple(0 for _ in extents)], "a0b0c0")

    def test_mconcat(self):
        for fg, extents in product(self.fixedgrid, self.extents):
            grids = [fg.fill(extents, i) for i in range(1, 5)]
            self.assertEqual(fg.mconcat(SUM, extents, grids), fg.fill(extents, 10))
            self.assertEqual(fg.mconcat(PRODUCT, extents, grids), fg.fill(extents, 24))
            self.assertEqual(fg.mconcat(SUM, extents, []), fg.fill(extents, 0))
            self.assertEqual(fg.mconcat(SUM, extents, grids[:1]), grids[0])

    def test_boolean(self):
        for fg in self.fixedgrid:
            grid1 = fg.from_list([2, 2], [True, True, False, False])
            grid2 = fg.from_list([2, 2], [True, False, True, False])
            self.assertEqual(fg.mappend(ALL, grid1, grid2).to_list(), [True, False, False, False])
            self.assertEqual(fg.mappend(ANY, grid1, grid2).to_list(), [True, True, True, False])

    def test_shape_mismatch(self):
        for fg in self.fixedgrid:
            self.assertRaises(ShapeMismatch, mappend, SUM, fg.fill([2, 3], 1), fg.fill([3, 2], 1))
            self.assertRaises(ShapeMismatch, fg.mconcat, SUM, [2, 3], [fg.fill([6], 1)])

    def test_concat(self):
        self.assertEqual(SUM.concat(1, 2, 3), 6)
        self.assertEqual(PRODUCT.concat(), 1)

if __name__ == "__main__":
    unittest.main()
