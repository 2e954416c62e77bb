"""Functions resolving the index bounds of a chop region."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpchop.olio.grid_functions as gf
from cpchop.olio.exceptions import RangeError


def check_ij_range(dims, imin, imax, jmin, jmax):
    """Raises RangeError unless 0 <= imin < imax <= nx and 0 <= jmin < jmax <= ny."""

    nx, ny = dims[0], dims[1]
    if not 0 <= imin < imax <= nx:
        raise RangeError(f'invalid i range [{imin}, {imax}) for grid with nx = {nx}')
    if not 0 <= jmin < jmax <= ny:
        raise RangeError(f'invalid j range [{jmin}, {jmax}) for grid with ny = {ny}')


def z_limits(zcorn, dims):
    """Returns (botmax, topmin): the depth limits within which a flat topped and based box can be cut.

    arguments:
       zcorn (flat numpy float array): ZCORN data for the grid
       dims (triplet of ints): grid dimensions (nx, ny, nz)

    returns:
       pair of floats: the maximum depth of the top surface of the first layer and the minimum depth of the
       base surface of the last layer
    """

    gf.check_array_length('ZCORN', zcorn, gf.zcorn_length(dims))
    half_layer = 4 * dims[0] * dims[1]
    zcorn = np.asarray(zcorn)
    return float(np.max(zcorn[:half_layer])), float(np.min(zcorn[-half_layer:]))


def resolve_k_range(zcorn, dims, zmin, zmax):
    """Clamps the requested z limits to the grid and finds the layer range which covers them.

    arguments:
       zcorn (flat numpy float array): ZCORN data for the grid
       dims (triplet of ints): grid dimensions (nx, ny, nz)
       zmin, zmax (floats): requested depth limits; these are clamped to the values returned by z_limits()

    returns:
       (kmin, kmax, zmin, zmax) where layers kmin <= k < kmax are to be kept and zmin, zmax are the clamped limits

    notes:
       kmin is the first layer with any corner strictly deeper than zmin; kmax is one more than the last layer
       with any corner strictly shallower than zmax; raises RangeError if the clamped limits are empty or no
       layers qualify
    """

    botmax, topmin = z_limits(zcorn, dims)
    zmin = max(zmin, botmax)
    zmax = min(zmax, topmin)
    if zmin >= zmax:
        raise RangeError(f'zmin >= zmax (zmin = {zmin}, zmax = {zmax}) after clamping to grid z limits '
                         f'({botmax}, {topmin})')
    log.info('zmin = %g, zmax = %g', zmin, zmax)

    layer_min, layer_max = gf.layer_depth_extremes(zcorn, dims)
    deeper = np.flatnonzero(layer_max > zmin)
    shallower = np.flatnonzero(layer_min < zmax)
    if len(deeper) == 0:
        raise RangeError(f'no layer extends below zmin = {zmin}')
    if len(shallower) == 0:
        raise RangeError(f'no layer extends above zmax = {zmax}')
    kmin = int(deeper[0])
    kmax = int(shallower[-1]) + 1
    if kmax <= kmin:
        raise RangeError(f'empty layer range [{kmin}, {kmax}) for z range ({zmin}, {zmax})')
    log.debug('layer range for chop: [%1d, %1d)', kmin, kmax)
    return kmin, kmax, zmin, zmax
