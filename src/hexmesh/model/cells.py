"""
Hexahedron Triangulation
========================
Splits 8-point hexahedral cells into the 12 triangles drawn by the renderer,
using one fixed face table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

from hexmesh.config import HEXAHEDRON_POINT_COUNT
from hexmesh.errors import UnsupportedCellLayout

if TYPE_CHECKING:
    import numpy.typing as npt

# Local vertex numbering: 0-3 bottom quad, 4-7 top quad in the same rotational
# order, vertical edges 0-4, 1-5, 2-6, 3-7. Order and winding are fixed for
# back-face culling.
HEXAHEDRON_TRIANGLES: npt.NDArray[np.int64] = np.array(
    [
        # bottom
        (0, 1, 2), (0, 2, 3),
        # top
        (4, 6, 5), (4, 7, 6),
        # side A
        (0, 7, 4), (0, 3, 7),
        # side B
        (1, 5, 6), (1, 6, 2),
        # side C
        (0, 4, 5), (0, 5, 1),
        # side D
        (3, 2, 6), (3, 6, 7),
    ],
    dtype=np.int64,
)
HEXAHEDRON_TRIANGLES.flags.writeable = False


@dataclass(frozen=True)
class Cell:
    """
    Connectivity of one cell, as point indices into the points sequence.
    """
    points: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.points)

    def triangles(self) -> list[tuple[int, int, int]]:
        """Render triangles of this cell."""
        return triangulate_hexahedron(self.points)


def _check_hexahedron(point_count: int) -> None:
    if point_count != HEXAHEDRON_POINT_COUNT:
        raise UnsupportedCellLayout(
            f"Expected a hexahedron with {HEXAHEDRON_POINT_COUNT} points, got {point_count}."
        )


def triangulate_hexahedron(cell: Sequence[int]) -> list[tuple[int, int, int]]:
    """
    Split one hexahedron into 12 triangles, two per face.

    Args:
        cell: The 8 point indices of the hexahedron.

    Returns:
        12 triangles as triples of point indices.

    Raises:
        UnsupportedCellLayout: If the cell does not have exactly 8 points.
    """
    _check_hexahedron(len(cell))
    return [(int(cell[a]), int(cell[b]), int(cell[c])) for a, b, c in HEXAHEDRON_TRIANGLES]


def triangulate_hexahedra(cells: npt.ArrayLike) -> npt.NDArray[np.int64]:
    """
    Triangulate a (C, 8) connectivity array in one go.

    Equivalent to concatenating `triangulate_hexahedron` over the cells in
    order; the result has shape (12 * C, 3).
    """
    connectivity = np.asarray(cells, dtype=np.int64)
    if connectivity.size == 0:
        return np.empty((0, 3), dtype=np.int64)
    if connectivity.ndim != 2:
        raise UnsupportedCellLayout(f"Expected a (C, 8) connectivity array, got shape {connectivity.shape}.")
    _check_hexahedron(connectivity.shape[1])

    # (C, 12, 3) -> (12 * C, 3), keeping cell order
    return connectivity[:, HEXAHEDRON_TRIANGLES].reshape(-1, 3)
