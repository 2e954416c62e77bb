"""Functions for writing a corner point grid deck in grdecl ascii format."""

import logging

log = logging.getLogger(__name__)

import cpchop.olio.write_data as wd

from ._grid_deck import PROPERTY_KEYWORDS


def grdecl_text(deck, property_keywords = PROPERTY_KEYWORDS):
    """Returns the complete grdecl text for a deck: SPECGRID, COORD, ZCORN then any property keywords present.

    arguments:
       deck (GridDeck): the deck to be written; must hold COORD and ZCORN
       property_keywords (sequence of strings): the per cell keywords to write, in this order; keywords not
          present in the deck are skipped

    returns:
       string

    note:
       COORD and ZCORN are written uncompressed with one pillar (6 values) or one cell (8 values) per line;
       property arrays are run length encoded
    """

    nx, ny, nz = deck.dimensions()
    blocks = [f'SPECGRID\n{nx} {ny} {nz} 1 F\n/\n\n']
    blocks.append(wd.dense_rows_block('COORD', deck.floating_point_field('COORD'), columns = 6))
    blocks.append(wd.dense_rows_block('ZCORN', deck.floating_point_field('ZCORN'), columns = 8))
    for keyword in property_keywords:
        if deck.has_field(keyword):
            blocks.append(wd.run_length_block(keyword.upper(), deck.field(keyword)))
    return ''.join(blocks)


def write_grdecl(deck, file_name, property_keywords = PROPERTY_KEYWORDS):
    """Writes a deck to a grdecl ascii file; raises OSError if the file cannot be written.

    note:
       the text is fully assembled before the file is opened, so a failure in formatting the data never leaves
       a partial file behind
    """

    text = grdecl_text(deck, property_keywords = property_keywords)
    try:
        with open(file_name, 'w') as grdecl_file:
            grdecl_file.write(text)
    except OSError:
        log.error('Could not write grdecl file %s', file_name)
        raise
    log.info('Grdecl file %s created', file_name)
