"""Corner depth (ZCORN) clipping and the new to old cell index map."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpchop.olio.grid_functions as gf

from ._bounds import check_ij_range


def cell_index_map(dims, imin, imax, jmin, jmax, kmin, kmax):
    """Returns a read only numpy int vector holding the source natural cell index for each cell of the box.

    note:
       the ordering of the returned vector, with i cycling fastest then j then k, defines the cell numbering of the
       chopped grid; every per cell property array is filtered with it
    """

    nx, ny = dims[0], dims[1]
    k = np.arange(kmin, kmax, dtype = int).reshape((-1, 1, 1))
    j = np.arange(jmin, jmax, dtype = int).reshape((1, -1, 1))
    i = np.arange(imin, imax, dtype = int).reshape((1, 1, -1))
    cell_map = (i + nx * (j + ny * k)).reshape(-1)
    cell_map.flags.writeable = False
    return cell_map


def clip_zcorn(zcorn, dims, imin, imax, jmin, jmax, kmin, kmax, zmin, zmax):
    """Returns (new ZCORN array, cell index map) for the box of cells, with every depth clamped to [zmin, zmax].

    arguments:
       zcorn (flat numpy float array): ZCORN data for the source grid
       dims (triplet of ints): source grid dimensions (nx, ny, nz)
       imin, imax, jmin, jmax, kmin, kmax (ints): zero based cell index ranges, max values excluded
       zmin, zmax (floats): the depth limits to clamp to

    returns:
       pair: numpy float array of length 8 * number of cells in box; read only numpy int vector from cell_index_map()

    note:
       for each cell (i, j, k) of the box the 8 depths at corner_indices(i, j, k, dims) in the source are copied to
       corner_indices(i - imin, j - jmin, k - kmin, new_dims) in the new array
    """

    gf.check_array_length('ZCORN', zcorn, gf.zcorn_length(dims))
    check_ij_range(dims, imin, imax, jmin, jmax)
    assert 0 <= kmin < kmax <= dims[2]
    corners = gf.zcorn_as_corner_array(zcorn, dims)
    box = corners[2 * kmin:2 * kmax, 2 * jmin:2 * jmax, 2 * imin:2 * imax]
    new_zcorn = np.clip(box, zmin, zmax).astype(float).reshape(-1)
    cell_map = cell_index_map(dims, imin, imax, jmin, jmax, kmin, kmax)
    assert new_zcorn.size == 8 * cell_map.size
    log.debug('%1d cells in chopped grid', cell_map.size)
    return new_zcorn, cell_map
