"""Miscellaneous functions relating to corner point grid indexing.

Dimensions are held in the order (nx, ny, nz), as in the SPECGRID keyword.
The natural (linear) cell index has i cycling fastest: i + nx * j + nx * ny * k.
ZCORN holds 8 depths per cell; consecutive entries alternate across the I axis
fastest, then J, then K, each pillar carrying a top and a base depth per layer.
"""

import logging

log = logging.getLogger(__name__)

import numpy as np

from cpchop.olio.exceptions import FormatError


def check_dimensions(dims):
    """Returns dims as a tuple of 3 python ints; raises FormatError unless all are positive."""

    if dims is None or len(dims) != 3:
        raise FormatError(f'grid dimensions must be a triplet (nx, ny, nz): {dims}')
    result = tuple(int(d) for d in dims)
    if min(result) <= 0:
        raise FormatError(f'grid dimensions must all be positive: {result}')
    return result


def cell_count(dims):
    """Returns the total number of cells for grid dimensions (nx, ny, nz)."""
    return dims[0] * dims[1] * dims[2]


def coord_length(dims):
    """Returns the expected length of the COORD array: 6 values for each of (nx + 1) * (ny + 1) pillars."""
    return 6 * (dims[0] + 1) * (dims[1] + 1)


def zcorn_length(dims):
    """Returns the expected length of the ZCORN array: 8 depths per cell."""
    return 8 * cell_count(dims)


def check_array_length(keyword, a, expected):
    """Raises FormatError if the array for keyword does not hold exactly the expected number of values."""

    if len(a) != expected:
        log.error('%s size (%1d) not consistent with SPECGRID (%1d expected)', keyword, len(a), expected)
        raise FormatError(f'inconsistent {keyword} and SPECGRID: {keyword} size is {len(a)}; expected {expected}')


def natural_cell_index(i, j, k, dims):
    """Returns the linear cell index of cell (i, j, k), zero based."""
    return dims[0] * dims[1] * k + dims[0] * j + i


def zcorn_deltas(dims):
    """Returns the ZCORN strides for a step of one corner in each of the I, J & K directions."""
    return (1, 2 * dims[0], 4 * dims[0] * dims[1])


def corner_indices(i, j, k, dims):
    """Returns numpy int vector of the 8 ZCORN indices for the corners of cell (i, j, k).

    arguments:
       i, j, k (ints): zero based cell indices
       dims (triplet of ints): grid dimensions (nx, ny, nz)

    returns:
       numpy int array of shape (8,), ordered with the I corner changing fastest, then J, then K
       (ie. top face corners first)
    """

    d0, d1, d2 = zcorn_deltas(dims)
    base = 2 * (i * d0 + j * d1 + k * d2)
    return np.array(
        (base, base + d0, base + d1, base + d1 + d0, base + d2, base + d2 + d0, base + d2 + d1, base + d2 + d1 + d0),
        dtype = int)


def zcorn_as_corner_array(zcorn, dims):
    """Returns a view of a flat ZCORN array with shape (2 * nz, 2 * ny, 2 * nx)."""
    return np.asarray(zcorn).reshape((2 * dims[2], 2 * dims[1], 2 * dims[0]))


def coord_as_pillar_array(coord, dims):
    """Returns a view of a flat COORD array with shape (ny + 1, nx + 1, 6)."""
    return np.asarray(coord).reshape((dims[1] + 1, dims[0] + 1, 6))


def layer_depth_extremes(zcorn, dims):
    """Returns a pair of numpy float vectors of length nz: the minimum and maximum corner depth of each layer."""

    layers = np.asarray(zcorn).reshape((dims[2], 8 * dims[0] * dims[1]))
    return np.min(layers, axis = 1), np.max(layers, axis = 1)
