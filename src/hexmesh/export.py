"""
Dataset Export
Helpers handing a Dataset to downstream consumers (GPU buffers, PyVista, meshio).
None of them modify the Dataset.
"""
from __future__ import annotations

import logging

import meshio
import numpy as np
import numpy.typing as npt
import pyvista as pv

from hexmesh.model.dataset import Dataset

logger = logging.getLogger(__name__)

DEFAULT_VECTORS_NAME = "vectors"


def vertex_buffer(dataset: Dataset) -> npt.NDArray[np.float32]:
    """Point coordinates as a contiguous (N, 3) float32 array."""
    return np.ascontiguousarray(dataset.points, dtype=np.float32)


def index_buffer(dataset: Dataset) -> npt.NDArray[np.uint32]:
    """Triangle indices flattened to a contiguous uint32 array of length 3 * T."""
    return np.ascontiguousarray(dataset.triangle_indices, dtype=np.uint32).ravel()


def to_polydata(dataset: Dataset) -> pv.PolyData:
    """
    Convert the Dataset to a triangulated PolyData surface.

    The vector attribute, if any, is attached as point data and made active.
    """
    if dataset.n_points == 0:
        return pv.PolyData()

    n_triangles = dataset.n_triangles
    # face cell layout: [3, i0, i1, i2] per triangle
    faces = np.hstack([
        np.full((n_triangles, 1), 3, dtype=np.int64),
        dataset.triangle_indices.astype(np.int64),
    ]).ravel()

    points = np.array(dataset.points, dtype=np.float64)
    if n_triangles:
        pd = pv.PolyData(points, faces=faces)
    else:
        pd = pv.PolyData(points)

    if dataset.point_vectors is not None:
        name = dataset.point_vectors_name or DEFAULT_VECTORS_NAME
        pd.point_data[name] = np.array(dataset.point_vectors, dtype=np.float64)
        pd.set_active_vectors(name)

    logger.debug(f"Converted {dataset!r} to PolyData with {pd.n_cells} faces.")
    return pd


def to_meshio(dataset: Dataset) -> meshio.Mesh:
    """Convert the Dataset to a meshio Mesh with a single triangle block."""
    point_data = {}
    if dataset.point_vectors is not None:
        name = dataset.point_vectors_name or DEFAULT_VECTORS_NAME
        point_data[name] = np.array(dataset.point_vectors, dtype=np.float64)

    return meshio.Mesh(
        points=np.array(dataset.points, dtype=np.float64),
        cells=[("triangle", dataset.triangle_indices.astype(np.int64))],
        point_data=point_data,
    )
