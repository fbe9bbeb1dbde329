"""
Legacy VTK Loader
=================
Entry points turning a legacy VTK ASCII unstructured grid into a `Dataset`.

The whole file is parsed in one synchronous pass. Any error aborts the load;
there is never a partially built Dataset.
"""
from __future__ import annotations

import logging
import os
from typing import Union

from hexmesh.config import DEFAULT_MESH_PATH
from hexmesh.errors import MalformedInput, MeshLoadError
from hexmesh.io.section_reader import SectionReader
from hexmesh.io.tokens import tokenize
from hexmesh.model.dataset import Dataset, assemble

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load(text: str) -> Dataset:
    """
    Parse the text of a legacy VTK file.

    Raises:
        MalformedInput: Truncated input, wrong keyword or count mismatch.
        UnsupportedCellLayout: A cell is not a hexahedron.
        OutOfRangeIndex: A cell references a missing point.
    """
    try:
        sections = SectionReader(tokenize(text)).read()
        point_data = sections.point_data
        dataset = assemble(
            points=sections.points,
            cells=sections.cells,
            point_vectors=point_data.values if point_data else None,
            point_vectors_name=point_data.name if point_data else None,
            title=sections.header.title if sections.header else "",
        )
    except MeshLoadError as e:
        logger.error(f"Failed to load mesh: {e}")
        raise

    logger.info(
        f"Mesh loaded: {dataset.n_points} points, {sections.n_cells} cells, "
        f"{dataset.n_triangles} triangles."
    )
    return dataset


def load_bytes(data: bytes) -> Dataset:
    """Parse a legacy VTK file given as raw bytes (UTF-8)."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Mesh data is not valid UTF-8 text: {e}")
        raise MalformedInput(f"Mesh data is not valid UTF-8 text: {e}") from e
    return load(text)


def load_file(filepath: PathLike) -> Dataset:
    """Load a legacy VTK file from disk."""
    logger.info(f"Loading mesh from: {filepath}")
    with open(filepath, "rb") as f:
        data = f.read()
    return load_bytes(data)


def load_default() -> Dataset:
    """Load the mesh bundled in the assets directory."""
    return load_file(DEFAULT_MESH_PATH)
