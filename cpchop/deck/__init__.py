"""Reading, holding and writing corner point grid decks in grdecl format."""

__all__ = [
    'GridDeck', 'PROPERTY_KEYWORDS', 'INTEGER_KEYWORDS', 'data_type_for_keyword', 'read_grdecl',
    'deck_from_ascii_file', 'grdecl_text', 'write_grdecl'
]

from ._grid_deck import GridDeck, PROPERTY_KEYWORDS, INTEGER_KEYWORDS, data_type_for_keyword
from ._read_grdecl import read_grdecl, deck_from_ascii_file
from ._write_grdecl import grdecl_text, write_grdecl

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
