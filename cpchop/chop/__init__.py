"""Extracting flat topped and based sub grids from corner point grid decks."""

__all__ = [
    'CornerPointChopper', 'SubGrid', 'check_ij_range', 'z_limits', 'resolve_k_range', 'project_pillars',
    'cell_index_map', 'clip_zcorn', 'filter_property', 'filter_properties'
]

from ._bounds import check_ij_range, z_limits, resolve_k_range
from ._pillars import project_pillars
from ._zcorn import cell_index_map, clip_zcorn
from ._properties import filter_property, filter_properties
from ._chopper import CornerPointChopper, SubGrid

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
