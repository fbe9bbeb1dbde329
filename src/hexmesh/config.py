"""
Configuration & Path Management
===============================
Central registry for file paths and legacy VTK format constants.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_MESH_PATH (str): Absolute path to the bundled mesh asset.
    VTK_HEXAHEDRON (int): VTK cell type code of a linear hexahedron.
    HEXAHEDRON_POINT_COUNT (int): Number of points of a hexahedron cell.
    TRIANGLES_PER_HEXAHEDRON (int): Render triangles produced per hexahedron.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Resources ship inside the package, next to config.py
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_MESH_PATH: str = os.path.join(ASSETS_PATH, "solution.vtk")

VTK_HEXAHEDRON: int = 12
HEXAHEDRON_POINT_COUNT: int = 8
TRIANGLES_PER_HEXAHEDRON: int = 12
