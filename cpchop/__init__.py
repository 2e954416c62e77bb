"""Corner point grid chopping library.

Subpackages and modules:

    chop: extraction of a logical i, j box cut flat to a depth range
    deck: grid deck object with grdecl reading and writing
    olio: miscellaneous grid, keyword parsing and ascii array functions
"""

import logging

__version__ = "0.0.0"  # Set at build time
log = logging.getLogger(__name__)
log.info(f"Imported cpchop version {__version__}")
