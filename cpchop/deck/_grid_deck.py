"""GridDeck class: read only snapshot of the keyword arrays of a corner point grid deck."""

import logging

log = logging.getLogger(__name__)

import io
import numpy as np

import cpchop.olio.grid_functions as gf
from cpchop.olio.exceptions import FormatError

# per cell keywords carried over to a chopped grid, in the order they are written
PROPERTY_KEYWORDS = ('ACTNUM', 'PORO', 'PERMX', 'PERMY', 'PERMZ', 'SATNUM')

# keywords holding integer data; all other arrays are treated as floating point
INTEGER_KEYWORDS = ('ACTNUM', 'SATNUM', 'EQLNUM', 'FIPNUM', 'PVTNUM', 'IMBNUM', 'ROCKNUM', 'MULTNUM', 'OPERNUM')


def data_type_for_keyword(keyword):
    """Returns 'integer' for keywords in INTEGER_KEYWORDS, otherwise 'real'."""
    return 'integer' if keyword.upper() in INTEGER_KEYWORDS else 'real'


class GridDeck:
    """Class holding the grid dimensions and named flat arrays of a grdecl deck."""

    def __init__(self, dimensions = None, fields = None):
        """Create a deck, optionally populated with dimensions and a dictionary of keyword arrays.

        arguments:
           dimensions (triplet of ints, optional): (nx, ny, nz) as given by the SPECGRID keyword
           fields (dict, optional): mapping from keyword to array like data; integer keywords are stored
              as numpy int arrays, all others as numpy float arrays

        note:
           arrays are copied on the way in and flagged as read only, so a deck never aliases caller data
        """

        self._dims = None
        self._fields = {}
        if dimensions is not None:
            self.set_dimensions(dimensions)
        if fields:
            for keyword, a in fields.items():
                self.set_field(keyword, a)

    @classmethod
    def from_text(cls, text, comment_char = '--'):
        """Returns a new GridDeck parsed from a string holding grdecl text."""

        from cpchop.deck._read_grdecl import deck_from_ascii_file

        return deck_from_ascii_file(io.StringIO(text), comment_char = comment_char)

    def dimensions(self):
        """Returns the grid dimensions (nx, ny, nz) as a tuple of ints."""

        if self._dims is None:
            raise FormatError('SPECGRID not present in deck')
        return self._dims

    def set_dimensions(self, dims):
        """Sets the grid dimensions (nx, ny, nz); raises FormatError unless three positive integers."""

        self._dims = gf.check_dimensions(dims)

    def keywords(self):
        """Returns list of the keywords of the arrays held, in the order they were added."""
        return list(self._fields.keys())

    def has_field(self, keyword):
        """Returns True if the deck holds data for the keyword; SPECGRID is present once dimensions are set."""

        keyword = keyword.upper()
        if keyword == 'SPECGRID':
            return self._dims is not None
        return keyword in self._fields

    def set_field(self, keyword, a):
        """Stores a read only copy of array a as a flat numpy array for the keyword.

        note:
           raises FormatError if the keyword holds integer data and a has any non integral value
        """

        keyword = keyword.upper()
        if data_type_for_keyword(keyword) == 'integer':
            a = np.asarray(a)
            if a.dtype.kind not in 'iub' and not np.all(np.mod(a, 1.0) == 0.0):
                raise FormatError(f'keyword {keyword} holds non integer values')
            d_type = 'int'
        else:
            d_type = 'float'
        stored = np.array(a, dtype = d_type).reshape(-1)
        stored.flags.writeable = False
        if keyword in self._fields:
            log.debug('replacing data for keyword %s', keyword)
        self._fields[keyword] = stored

    def field(self, keyword):
        """Returns the read only array stored for keyword, in its stored type."""

        try:
            return self._fields[keyword.upper()]
        except KeyError:
            raise FormatError(f'keyword {keyword} not present in deck') from None

    def floating_point_field(self, keyword):
        """Returns the array for keyword as numpy float array."""

        a = self.field(keyword)
        if a.dtype.kind == 'f':
            return a
        return a.astype(float)

    def integer_field(self, keyword):
        """Returns the array for keyword as numpy int array; raises FormatError if any value is not integral."""

        a = self.field(keyword)
        if a.dtype.kind in 'iu':
            return a
        if not np.all(np.mod(a, 1.0) == 0.0):
            raise FormatError(f'keyword {keyword} holds non integer values')
        return a.astype(int)
