"""Functions to load array data from grdecl keyword blocks."""

import logging

log = logging.getLogger(__name__)

import io
import numpy as np

import cpchop.olio.keyword_files as kf
from cpchop.olio.exceptions import FormatError


def numpy_type_for_data_type(data_type):
    """Returns the numpy dtype name for one of 'real', 'float', 'int', 'integer' (or the python types)."""

    if data_type in ['real', 'float', float]:
        return 'float'
    if data_type in ['int', 'integer', int]:
        return 'int'
    raise ValueError(f'unknown data type: {data_type}')


def _converter(d_type):
    if d_type == 'int':
        return int
    return lambda word: float(word.replace('D', 'E').replace('d', 'e'))  # fortran style exponent


def expand_repeat_tokens(words, data_type = 'real', keyword = None):
    """Returns a flat numpy array of the values in a list of data words, expanding repeat counts.

    arguments:
       words (list of strings): data words, each either a single value, eg. '0.25', or a repeat, eg. '8*0.25'
       data_type (string, default 'real'): one of 'real', 'float', 'int' or 'integer'
       keyword (string, optional): used in error messages only

    returns:
       numpy array of dtype float or int

    note:
       the default value repeat form ('8*', with no value) is not supported and raises FormatError
    """

    d_type = numpy_type_for_data_type(data_type)
    convert = _converter(d_type)
    counts = np.empty(len(words), dtype = int)
    values = np.empty(len(words), dtype = d_type)
    for index, word in enumerate(words):
        count, star, value = word.partition('*')
        try:
            if star:
                if not value:
                    raise FormatError(f'default value repeat {word!r} not supported (keyword {keyword})')
                counts[index] = int(count)
                values[index] = convert(value)
            else:
                counts[index] = 1
                values[index] = convert(word)
        except ValueError:
            raise FormatError(f'invalid {d_type} datum {word!r} for keyword {keyword}') from None
        if counts[index] < 1:
            raise FormatError(f'invalid repeat count in {word!r} for keyword {keyword}')
    return np.repeat(values, counts)


def load_keyword_array(text, keyword = None, data_type = 'real', comment_char = '--'):
    """Returns (keyword, numpy array) for a keyword block held in a string.

    arguments:
       text (string): ascii grdecl text holding one or more keyword blocks
       keyword (string, optional): if present, the block for this keyword is decoded; otherwise the first block
          holding data is used
       data_type (string, default 'real'): one of 'real', 'float', 'int' or 'integer'
       comment_char (string, default '--'): text introducing a trailing comment

    returns:
       pair (keyword, flat numpy array); raises FormatError if no suitable block is found
    """

    for found, words in kf.keyword_blocks(io.StringIO(text), comment_char = comment_char):
        if keyword is None and not words:
            continue
        if keyword is None or found == keyword.upper():
            return found, expand_repeat_tokens(words, data_type = data_type, keyword = found)
    raise FormatError(f'keyword {keyword} not found in text')
