"""Per cell property array filtering through a cell index map."""

import logging

log = logging.getLogger(__name__)

import numpy as np

import cpchop.olio.grid_functions as gf
from cpchop.deck import PROPERTY_KEYWORDS, data_type_for_keyword


def filter_property(field, cell_map):
    """Returns a new array with element c taken from field[cell_map[c]]; None if field is None."""

    if field is None:
        return None
    return np.asarray(field)[cell_map]


def filter_properties(deck, cell_map, keywords = PROPERTY_KEYWORDS):
    """Returns a dictionary mapping keyword to filtered array, for each of keywords present in the deck.

    arguments:
       deck (GridDeck): the source deck
       cell_map (numpy int vector): source natural cell index for each new cell
       keywords (sequence of strings): per cell keywords to filter; absent keywords are skipped

    returns:
       dict, ordered as keywords; integer keywords yield int arrays, others float arrays

    note:
       all present arrays are checked against the source cell count before any filtering is done
    """

    expected = gf.cell_count(deck.dimensions())
    sources = {}
    for keyword in keywords:
        keyword = keyword.upper()
        if not deck.has_field(keyword):
            log.debug('keyword %s not present in source deck', keyword)
            continue
        if data_type_for_keyword(keyword) == 'integer':
            field = deck.integer_field(keyword)
        else:
            field = deck.floating_point_field(keyword)
        gf.check_array_length(keyword, field, expected)
        sources[keyword] = field
    return {keyword: filter_property(field, cell_map) for keyword, field in sources.items()}
