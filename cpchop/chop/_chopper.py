"""CornerPointChopper and SubGrid classes: extraction of a shoe-box sub grid from a corner point deck."""

import logging

log = logging.getLogger(__name__)

import os

import cpchop.olio.grid_functions as gf
from cpchop.deck import GridDeck, PROPERTY_KEYWORDS, read_grdecl, write_grdecl
from cpchop.olio.exceptions import ChopError, FormatError

from ._bounds import check_ij_range, resolve_k_range, z_limits
from ._pillars import project_pillars
from ._properties import filter_properties
from ._zcorn import clip_zcorn


class SubGrid:
    """Class holding the geometry and filtered properties of a chopped grid."""

    def __init__(self, dimensions, coord, zcorn, cell_map, properties, ij_range, k_range, z_range):
        """Create a sub grid from arrays produced by a chop; not normally called directly.

        arguments:
           dimensions (triplet of ints): (nx, ny, nz) of the sub grid
           coord (flat numpy float array): new COORD data
           zcorn (flat numpy float array): new ZCORN data
           cell_map (numpy int vector): source natural cell index for each cell of the sub grid
           properties (dict): keyword to filtered per cell array, for the keywords present in the source
           ij_range (quadruplet of ints): (imin, imax, jmin, jmax) in the source grid
           k_range (pair of ints): (kmin, kmax) in the source grid
           z_range (pair of floats): the clamped (zmin, zmax) depth limits
        """

        self.dimensions = tuple(dimensions)  #: (nx, ny, nz) of the sub grid
        self.coord = coord  #: flat COORD array
        self.zcorn = zcorn  #: flat ZCORN array
        self.cell_map = cell_map  #: read only vector of source natural cell indices
        self.properties = properties  #: dict of keyword to filtered per cell array
        self.ij_range = tuple(ij_range)  #: (imin, imax, jmin, jmax) in source grid
        self.k_range = tuple(k_range)  #: (kmin, kmax) in source grid
        self.z_range = tuple(z_range)  #: clamped (zmin, zmax)

    def cell_count(self):
        """Returns the number of cells in the sub grid."""
        return gf.cell_count(self.dimensions)

    def property(self, keyword):
        """Returns the filtered array for keyword, or None if the source deck did not hold it."""
        return self.properties.get(keyword.upper())

    def to_deck(self):
        """Returns a new GridDeck holding the sub grid's dimensions, geometry and properties."""

        fields = {'COORD': self.coord, 'ZCORN': self.zcorn}
        fields.update(self.properties)
        return GridDeck(dimensions = self.dimensions, fields = fields)

    def write_grdecl(self, file_name, property_keywords = PROPERTY_KEYWORDS):
        """Writes the sub grid to a grdecl ascii file."""
        write_grdecl(self.to_deck(), file_name, property_keywords = property_keywords)


class CornerPointChopper:
    """Class for extracting logical i, j boxes of a corner point grid, cut flat to a depth range."""

    def __init__(self, source, comment_char = '--'):
        """Set up a chopper for a source deck.

        arguments:
           source (GridDeck, or string or path): the source deck, or the name of a grdecl file to read it from
           comment_char (string, default '--'): comment introducer, only used if source is a file name

        note:
           the source deck must hold SPECGRID and ZCORN; COORD is required when chop() is called
        """

        if isinstance(source, (str, os.PathLike)):
            source = read_grdecl(source, comment_char = comment_char)
        self.source = source  #: the GridDeck being chopped; never modified
        self._dims = gf.check_dimensions(source.dimensions())
        self._z_limits = z_limits(_mandatory_field(source, 'ZCORN'), self._dims)
        self.sub_grid = None  #: the SubGrid from the most recent successful chop, or None
        log.debug('chopper set up for grid with dimensions (%1d, %1d, %1d); z limits %g to %g', *self._dims,
                  *self._z_limits)

    def dimensions(self):
        """Returns the source grid dimensions (nx, ny, nz)."""
        return self._dims

    def new_dimensions(self):
        """Returns the dimensions of the most recently chopped grid, or None if chop() has not been called."""
        return None if self.sub_grid is None else self.sub_grid.dimensions

    def z_limits(self):
        """Returns (botmax, topmin): the depth range within which a flat topped and based grid can be cut."""
        return self._z_limits

    def chop(self, imin, imax, jmin, jmax, zmin, zmax, property_keywords = PROPERTY_KEYWORDS):
        """Extracts the cells in i range [imin, imax), j range [jmin, jmax), cut to the depth range [zmin, zmax].

        arguments:
           imin, imax, jmin, jmax (ints): zero based cell index ranges in the source grid, max values excluded
           zmin, zmax (floats): requested depth limits; clamped so that the sub grid has flat top and base
           property_keywords (sequence of strings): per cell keywords to carry over, where present in the source

        returns:
           SubGrid, which is also held as the sub_grid attribute

        notes:
           raises RangeError for invalid i, j ranges or if no layers fall within the clamped depth range, and
           FormatError if COORD, ZCORN or a property array has a length inconsistent with SPECGRID;
           on failure the sub grid from any previous chop is left in place
        """

        dims = self._dims
        check_ij_range(dims, imin, imax, jmin, jmax)
        coord = _mandatory_field(self.source, 'COORD')
        zcorn = _mandatory_field(self.source, 'ZCORN')
        gf.check_array_length('COORD', coord, gf.coord_length(dims))
        gf.check_array_length('ZCORN', zcorn, gf.zcorn_length(dims))

        kmin, kmax, zmin, zmax = resolve_k_range(zcorn, dims, zmin, zmax)
        new_coord = project_pillars(coord, dims, imin, imax, jmin, jmax)
        new_zcorn, cell_map = clip_zcorn(zcorn, dims, imin, imax, jmin, jmax, kmin, kmax, zmin, zmax)
        properties = filter_properties(self.source, cell_map, keywords = property_keywords)

        sub_grid = SubGrid((imax - imin, jmax - jmin, kmax - kmin),
                           new_coord,
                           new_zcorn,
                           cell_map,
                           properties,
                           ij_range = (imin, imax, jmin, jmax),
                           k_range = (kmin, kmax),
                           z_range = (zmin, zmax))
        self.sub_grid = sub_grid
        log.info('chopped grid has dimensions (%1d, %1d, %1d)', *sub_grid.dimensions)
        return sub_grid

    def cell_index_map(self):
        """Returns the read only cell index map of the most recent chop."""
        return self._require_sub_grid().cell_map

    def sub_deck(self):
        """Returns a new GridDeck holding the most recently chopped grid."""
        return self._require_sub_grid().to_deck()

    def write_grdecl(self, file_name):
        """Writes the most recently chopped grid to a grdecl ascii file."""
        self._require_sub_grid().write_grdecl(file_name)

    def _require_sub_grid(self):
        if self.sub_grid is None:
            raise ChopError('no chopped grid available: chop() has not been called successfully')
        return self.sub_grid


def _mandatory_field(deck, keyword):
    if not deck.has_field(keyword):
        raise FormatError(f'mandatory keyword {keyword} missing from deck')
    return deck.floating_point_field(keyword)
