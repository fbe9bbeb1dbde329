'''Sample legacy VTK files shared by the test modules.'''

import os

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
UNIT_CUBE_PATH = os.path.join(DATA_DIR, 'unit_cube.vtk')
TWO_HEXAHEDRA_PATH = os.path.join(DATA_DIR, 'two_hexahedra.vtk')

UNIT_CUBE_POINTS = [
    (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
    (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
]


def make_vtk(points, cells, cell_types=None, vectors=None, vectors_name='v',
             cells_size=None, newline='\n'):
    '''Build the text of a legacy VTK unstructured grid.

    `cells` is a list of point index lists; each is written with its own
    length prefix, so non-hexahedral cells can be produced too.
    '''
    if cell_types is None:
        cell_types = [12] * len(cells)
    if cells_size is None:
        cells_size = sum(1 + len(cell) for cell in cells)

    lines = [
        '# vtk DataFile Version 3.0',
        'test mesh',
        'ASCII',
        'DATASET UNSTRUCTURED_GRID',
        f'POINTS {len(points)} double',
    ]
    lines += [' '.join(str(c) for c in p) for p in points]
    lines.append(f'CELLS {len(cells)} {cells_size}')
    lines += [' '.join(str(i) for i in [len(cell), *cell]) for cell in cells]
    lines.append(f'CELL_TYPES {len(cell_types)}')
    lines += [str(t) for t in cell_types]
    if vectors is not None:
        lines.append(f'POINT_DATA {len(vectors)}')
        lines.append(f'VECTORS {vectors_name} double')
        lines += [' '.join(str(c) for c in v) for v in vectors]
    return newline.join(lines) + newline


def unit_cube_vtk(**kwargs):
    kwargs.setdefault('vectors', [(0, 0, 0)] * 8)
    return make_vtk(UNIT_CUBE_POINTS, [list(range(8))], **kwargs)
