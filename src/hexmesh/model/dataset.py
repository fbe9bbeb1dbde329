"""
Dataset (Render Mesh)
=====================
The immutable mesh handed to the renderer: points, an optional per-point
vector attribute, and the triangle index buffer.

Classes:
    Dataset: Read-only container. Safe to read every frame without locks.

Functions:
    assemble: Triangulates hexahedral cells and builds a checked Dataset.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from hexmesh.config import TRIANGLES_PER_HEXAHEDRON
from hexmesh.errors import MalformedInput, OutOfRangeIndex
from hexmesh.model.cells import triangulate_hexahedra

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _frozen(array: npt.ArrayLike, dtype: type) -> npt.NDArray:
    """Copy into a contiguous array and clear its write flag."""
    out = np.array(array, dtype=dtype, copy=True, order="C")
    out.flags.writeable = False
    return out


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Render mesh built once from a single input and never mutated afterwards.

    `triangle_indices` holds 12 triangles per source hexahedron, in cell order.
    """
    points: npt.NDArray[np.float64]
    triangle_indices: npt.NDArray[np.uint32]
    point_vectors: Optional[npt.NDArray[np.float64]] = None
    point_vectors_name: Optional[str] = None
    title: str = ""

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(n_points={self.n_points}, "
            f"n_triangles={self.n_triangles}, point_vectors={self.point_vectors_name!r})"
        )

    @property
    def n_points(self) -> int:
        return int(self.points.shape[0])

    @property
    def n_triangles(self) -> int:
        return int(self.triangle_indices.shape[0])

    @property
    def n_cells(self) -> int:
        """Number of hexahedra the triangles were generated from."""
        return self.n_triangles // TRIANGLES_PER_HEXAHEDRON

    @property
    def has_point_vectors(self) -> bool:
        return self.point_vectors is not None


def assemble(
    points: npt.ArrayLike,
    cells: npt.ArrayLike,
    point_vectors: Optional[npt.ArrayLike] = None,
    point_vectors_name: Optional[str] = None,
    title: str = "",
) -> Dataset:
    """
    Build the Dataset from parsed sections.

    Args:
        points: (N, 3) point coordinates.
        cells: (C, 8) hexahedron connectivity.
        point_vectors: Optional (N, 3) vector per point.
        point_vectors_name: Name of the vector attribute.
        title: Title line of the source file.

    Raises:
        MalformedInput: If the vector attribute does not match the points.
        OutOfRangeIndex: If a triangle references a missing point.
    """
    points_arr = _frozen(np.reshape(points, (-1, 3)), np.float64)
    n_points = points_arr.shape[0]

    vectors_arr = None
    if point_vectors is not None:
        vectors_arr = _frozen(np.reshape(point_vectors, (-1, 3)), np.float64)
        if vectors_arr.shape[0] != n_points:
            raise MalformedInput(
                f"Point vectors '{point_vectors_name}' have {vectors_arr.shape[0]} entries, "
                f"expected one per point ({n_points})."
            )

    triangles = triangulate_hexahedra(cells)
    if triangles.size:
        lowest, highest = int(triangles.min()), int(triangles.max())
        if lowest < 0 or highest >= n_points:
            bad = lowest if lowest < 0 else highest
            raise OutOfRangeIndex(
                f"Triangle index {bad} is out of range for {n_points} points."
            )

    dataset = Dataset(
        points=points_arr,
        triangle_indices=_frozen(triangles, np.uint32),
        point_vectors=vectors_arr,
        point_vectors_name=point_vectors_name,
        title=title,
    )
    logger.debug(f"Assembled {dataset!r}.")
    return dataset
