"""Load legacy VTK hexahedral meshes into immutable render-ready datasets."""
from hexmesh.errors import MeshLoadError, MalformedInput, UnsupportedCellLayout, OutOfRangeIndex
from hexmesh.io import load, load_bytes, load_file, load_default
from hexmesh.logging_config import setup_logging
from hexmesh.model.dataset import Dataset

__all__ = [
    "Dataset",
    "MeshLoadError",
    "MalformedInput",
    "UnsupportedCellLayout",
    "OutOfRangeIndex",
    "load",
    "load_bytes",
    "load_file",
    "load_default",
    "setup_logging",
]
