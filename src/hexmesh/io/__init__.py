"""
The IO layer reads legacy VTK ASCII text into the MODEL layer's Dataset.
"""
from hexmesh.io.legacy_vtk import load, load_bytes, load_file, load_default

__all__ = ["load", "load_bytes", "load_file", "load_default"]
