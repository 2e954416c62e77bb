"""Functions for reading a corner point grid deck from a grdecl ascii file."""

import logging

log = logging.getLogger(__name__)

import cpchop.olio.keyword_files as kf
import cpchop.olio.load_data as ld
from cpchop.olio.exceptions import FormatError

from ._grid_deck import GridDeck, PROPERTY_KEYWORDS, INTEGER_KEYWORDS, data_type_for_keyword

# keywords whose data must parse as numbers; other keywords with unreadable data are skipped with a warning
NUMERIC_KEYWORDS = ('COORD', 'ZCORN', 'NTG', 'DX', 'DY', 'DZ', 'TOPS') + PROPERTY_KEYWORDS + INTEGER_KEYWORDS


def read_grdecl(file_name, comment_char = '--'):
    """Reads a grdecl ascii file and returns a GridDeck holding its dimensions and numeric keyword arrays.

    arguments:
       file_name (string or path): the grdecl file to read
       comment_char (string, default '--'): text introducing a comment running to the end of a line

    returns:
       GridDeck object

    note:
       INCLUDE files are not followed
    """

    log.info('reading grdecl file %s', file_name)
    with open(file_name, 'r') as ascii_file:
        deck = deck_from_ascii_file(ascii_file, comment_char = comment_char)
    nx, ny, nz = deck.dimensions()
    log.info('Parsed grdecl file with dimensions (%1d, %1d, %1d)', nx, ny, nz)
    return deck


def deck_from_ascii_file(ascii_file, comment_char = '--'):
    """Returns a GridDeck populated from an open ascii file (or other iterable of lines)."""

    deck = GridDeck()
    for keyword, words in kf.keyword_blocks(ascii_file, comment_char = comment_char):
        if keyword in ('SPECGRID', 'DIMENS'):
            _set_dimensions(deck, keyword, words)
        elif not words:
            log.debug('keyword %s has no data', keyword)
        elif keyword in kf.MULTI_RECORD_KEYWORDS:
            log.warning('skipping multi record keyword %s: edits and faults are not applied', keyword)
        elif keyword in NUMERIC_KEYWORDS:
            deck.set_field(keyword, ld.expand_repeat_tokens(words, data_type_for_keyword(keyword), keyword))
        else:
            try:
                a = ld.expand_repeat_tokens(words, data_type = data_type_for_keyword(keyword), keyword = keyword)
            except FormatError:
                log.warning('skipping keyword %s: data is not numeric', keyword)
                continue
            deck.set_field(keyword, a)
    if not deck.has_field('SPECGRID'):
        raise FormatError('no SPECGRID keyword found in deck')
    return deck


def _set_dimensions(deck, keyword, words):
    if len(words) < 3:
        raise FormatError(f'{keyword} needs three dimensions; found {len(words)} data items')
    try:
        dims = [int(w) for w in words[:3]]
    except ValueError:
        raise FormatError(f'{keyword} dimensions are not integers: {words[:3]}') from None
    deck.set_dimensions(dims)
