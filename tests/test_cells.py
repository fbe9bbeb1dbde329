import unittest

import numpy as np

from hexmesh.errors import UnsupportedCellLayout
from hexmesh.model.cells import Cell, triangulate_hexahedra, triangulate_hexahedron

FACE_TABLE = [
    (0, 1, 2), (0, 2, 3),
    (4, 6, 5), (4, 7, 6),
    (0, 7, 4), (0, 3, 7),
    (1, 5, 6), (1, 6, 2),
    (0, 4, 5), (0, 5, 1),
    (3, 2, 6), (3, 6, 7),
]


class TestTriangulateHexahedron(unittest.TestCase):

    def test_identity_cell_gives_face_table(self):
        self.assertEqual(triangulate_hexahedron(list(range(8))), FACE_TABLE)

    def test_indices_are_mapped_through_the_cell(self):
        cell = [10, 11, 12, 13, 14, 15, 16, 17]
        expected = [tuple(cell[i] for i in tri) for tri in FACE_TABLE]
        self.assertEqual(triangulate_hexahedron(cell), expected)

    def test_every_face_is_covered(self):
        faces = {
            frozenset((0, 1, 2, 3)), frozenset((4, 5, 6, 7)),
            frozenset((0, 3, 7, 4)), frozenset((1, 2, 6, 5)),
            frozenset((0, 1, 5, 4)), frozenset((2, 3, 7, 6)),
        }
        triangles = triangulate_hexahedron(list(range(8)))
        covered = {frozenset(a + b) for a, b in zip(triangles[::2], triangles[1::2])}
        self.assertEqual(covered, faces)

    def test_wrong_point_count(self):
        with self.assertRaises(UnsupportedCellLayout):
            triangulate_hexahedron([0, 1, 2, 3])
        with self.assertRaises(UnsupportedCellLayout):
            triangulate_hexahedra(np.zeros((2, 4), dtype=int))

    def test_cell_value(self):
        cell = Cell(points=tuple(range(8)))
        self.assertEqual(len(cell), 8)
        self.assertEqual(cell.triangles(), FACE_TABLE)


class TestTriangulateHexahedra(unittest.TestCase):

    def test_matches_per_cell_concatenation(self):
        rng = np.random.default_rng(0)
        cells = rng.integers(0, 100, size=(5, 8))
        expected = [tri for cell in cells for tri in triangulate_hexahedron(cell)]
        result = triangulate_hexahedra(cells)
        self.assertEqual(result.shape, (60, 3))
        self.assertEqual([tuple(int(i) for i in row) for row in result], expected)

    def test_no_cells(self):
        self.assertEqual(triangulate_hexahedra(np.empty((0, 8), dtype=int)).shape, (0, 3))


if __name__ == '__main__':
    unittest.main()
