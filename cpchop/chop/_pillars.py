"""Pillar (COORD) projection onto an I, J sub rectangle."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpchop.olio.grid_functions as gf

from ._bounds import check_ij_range


def project_pillars(coord, dims, imin, imax, jmin, jmax):
    """Returns a new flat COORD array holding the pillars of the cells in i range [imin, imax), j range [jmin, jmax).

    arguments:
       coord (flat numpy float array): COORD data for the source grid, 6 values per pillar
       dims (triplet of ints): source grid dimensions (nx, ny, nz)
       imin, imax, jmin, jmax (ints): zero based cell index ranges, max values excluded

    returns:
       numpy float array of length 6 * (imax - imin + 1) * (jmax - jmin + 1)

    note:
       pillars are shared by neighbouring cells, so pillars imin..imax and jmin..jmax inclusive are kept
    """

    gf.check_array_length('COORD', coord, gf.coord_length(dims))
    check_ij_range(dims, imin, imax, jmin, jmax)
    pillars = gf.coord_as_pillar_array(coord, dims)
    new_coord = np.array(pillars[jmin:jmax + 1, imin:imax + 1], dtype = float).reshape(-1)
    assert new_coord.size == gf.coord_length((imax - imin, jmax - jmin, 1))
    log.debug('%1d pillars projected', new_coord.size // 6)
    return new_coord
