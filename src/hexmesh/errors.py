"""
Error Taxonomy
==============
Every failure while loading a mesh is fatal to the whole load. There is no
partial mesh, so callers only need to catch ``MeshLoadError``.
"""


class MeshLoadError(ValueError):
    """Base class of all mesh loading errors."""


class MalformedInput(MeshLoadError):
    """The token stream ended early, a keyword or number was wrong, or a declared count did not match."""


class UnsupportedCellLayout(MeshLoadError):
    """A cell is not an 8-point hexahedron."""


class OutOfRangeIndex(MeshLoadError):
    """A triangle references a point that does not exist."""
