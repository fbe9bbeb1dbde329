"""
Section Reader
==============
Fixed-order, non-backtracking state machine over a `TokenStream`:

    DATASET_HEADER -> POINTS -> CELLS -> CELL_TYPES -> POINT_DATA -> DONE

Each state consumes exactly the tokens implied by the counts it has just
read. Keywords are checked case-insensitively.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from hexmesh.config import HEXAHEDRON_POINT_COUNT, VTK_HEXAHEDRON
from hexmesh.errors import MalformedInput, UnsupportedCellLayout

if TYPE_CHECKING:
    import numpy.typing as npt
    from hexmesh.io.tokens import Header, TokenStream

logger = logging.getLogger(__name__)

DATASET_TYPE = "UNSTRUCTURED_GRID"


class ReaderState(Enum):
    DATASET_HEADER = auto()
    POINTS = auto()
    CELLS = auto()
    CELL_TYPES = auto()
    POINT_DATA = auto()
    DONE = auto()


@dataclass(frozen=True)
class PointDataAttribute:
    """A named 3-component vector per point."""
    name: str
    values: npt.NDArray[np.float64]


@dataclass
class RawSections:
    """Arrays materialized by the reader, before triangulation."""
    header: Optional[Header] = None
    dataset_type: str = ""
    points: npt.NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 3), dtype=np.float64))
    cells: npt.NDArray[np.int64] = field(default_factory=lambda: np.empty((0, HEXAHEDRON_POINT_COUNT), dtype=np.int64))
    cell_types: npt.NDArray[np.int64] = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    point_data: Optional[PointDataAttribute] = None

    @property
    def n_points(self) -> int:
        return int(self.points.shape[0])

    @property
    def n_cells(self) -> int:
        return int(self.cells.shape[0])


class SectionReader:
    """
    Reads the sections of a legacy VTK unstructured grid in their fixed order.

    Usage:
        sections = SectionReader(tokenize(text)).read()
    """
    def __init__(self, tokens: TokenStream) -> None:
        self.tokens = tokens
        self.state = ReaderState.DATASET_HEADER
        self.sections = RawSections(header=tokens.header)
        self._handlers = {
            ReaderState.DATASET_HEADER: self._read_dataset_header,
            ReaderState.POINTS: self._read_points,
            ReaderState.CELLS: self._read_cells,
            ReaderState.CELL_TYPES: self._read_cell_types,
            ReaderState.POINT_DATA: self._read_point_data,
        }

    def read(self) -> RawSections:
        """Run the state machine to completion."""
        while self.state is not ReaderState.DONE:
            handler = self._handlers[self.state]
            self.state = handler()
            logger.debug(f"Reader state -> {self.state.name} ({self.tokens.remaining} tokens left).")

        if not self.tokens.exhausted:
            raise MalformedInput(
                f"Unexpected trailing data: {self.tokens.remaining} tokens left after the point data, "
                f"starting with '{self.tokens.peek()}'."
            )
        return self.sections

    def _read_dataset_header(self) -> ReaderState:
        self.tokens.expect("DATASET")
        dataset_type = self.tokens.next(what="dataset type")
        if dataset_type.upper() != DATASET_TYPE:
            raise MalformedInput(f"Only {DATASET_TYPE} datasets are supported, got '{dataset_type}'.")
        self.sections.dataset_type = dataset_type
        return ReaderState.POINTS

    def _read_points(self) -> ReaderState:
        self.tokens.expect("POINTS")
        n_points = self.tokens.read_count(what="point count")
        data_type = self.tokens.next(what="point data type")
        if data_type.lower() != "double":
            logger.debug(f"Point coordinates declared as '{data_type}', reading as double.")

        self.sections.points = self.tokens.read_vectors(n_points, what=f"{n_points} points")
        logger.debug(f"Read {n_points} points.")
        return ReaderState.CELLS

    def _read_cells(self) -> ReaderState:
        self.tokens.expect("CELLS")
        n_cells = self.tokens.read_count(what="cell count")
        declared_size = self.tokens.read_count(what="cell list size")
        # Each cell takes at least one token; check before allocating from the declared counts
        if n_cells > self.tokens.remaining or declared_size > self.tokens.remaining:
            raise MalformedInput(
                f"CELLS declares {n_cells} cells with {declared_size} values, "
                f"but only {self.tokens.remaining} tokens remain."
            )

        cells = np.empty((n_cells, HEXAHEDRON_POINT_COUNT), dtype=np.int64)
        size = 0
        for i in range(n_cells):
            n_cell_points = self.tokens.read_count(what=f"point count of cell {i}")
            if n_cell_points != HEXAHEDRON_POINT_COUNT:
                raise UnsupportedCellLayout(
                    f"Cell {i} has {n_cell_points} points; only hexahedra "
                    f"({HEXAHEDRON_POINT_COUNT} points) are supported."
                )
            cells[i] = self.tokens.read_ints(n_cell_points, what=f"point indices of cell {i}")
            size += 1 + n_cell_points

        if size != declared_size:
            raise MalformedInput(
                f"CELLS declares a list size of {declared_size}, but the {n_cells} cells hold {size} values."
            )

        self.sections.cells = cells
        logger.debug(f"Read {n_cells} cells.")
        return ReaderState.CELL_TYPES

    def _read_cell_types(self) -> ReaderState:
        self.tokens.expect("CELL_TYPES")
        n_types = self.tokens.read_count(what="cell type count")
        if n_types != self.sections.n_cells:
            raise MalformedInput(
                f"CELL_TYPES declares {n_types} entries, expected one per cell ({self.sections.n_cells})."
            )

        cell_types = self.tokens.read_ints(n_types, what=f"{n_types} cell types")
        unsupported = np.flatnonzero(cell_types != VTK_HEXAHEDRON)
        if unsupported.size:
            first = int(unsupported[0])
            raise UnsupportedCellLayout(
                f"Cell {first} has VTK cell type {int(cell_types[first])}; "
                f"only hexahedra (type {VTK_HEXAHEDRON}) are supported."
            )

        self.sections.cell_types = cell_types
        # Point data is optional
        if self.tokens.exhausted:
            return ReaderState.DONE
        return ReaderState.POINT_DATA

    def _read_point_data(self) -> ReaderState:
        self.tokens.expect("POINT_DATA")
        n_points = self.tokens.read_count(what="point data count")
        if n_points != self.sections.n_points:
            raise MalformedInput(
                f"POINT_DATA declares {n_points} entries, expected one per point ({self.sections.n_points})."
            )

        self.tokens.expect("VECTORS")
        name = self.tokens.next(what="vector attribute name")
        data_type = self.tokens.next(what="vector data type")
        if data_type.lower() != "double":
            logger.debug(f"Vector attribute '{name}' declared as '{data_type}', reading as double.")

        values = self.tokens.read_vectors(n_points, what=f"vector attribute '{name}'")
        self.sections.point_data = PointDataAttribute(name=name, values=values)
        logger.debug(f"Read vector attribute '{name}'.")
        return ReaderState.DONE
