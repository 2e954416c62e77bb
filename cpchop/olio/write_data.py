"""Array writing functions for grdecl keyword blocks."""

import logging

log = logging.getLogger(__name__)

import numpy as np


def value_formatter(a):
    """Returns a function converting an element of array a to text which reads back to an identical value."""

    if np.asarray(a).dtype.kind in 'biu':
        return lambda v: str(int(v))
    return lambda v: repr(float(v))  # shortest repr which round trips


def run_lengths(a):
    """Returns (counts, values) for the maximal runs of bit-identical consecutive values in flat array a.

    note:
       floating point values are compared by bit pattern, so nan values form runs and 0.0 differs from -0.0
    """

    a = np.ascontiguousarray(a).reshape(-1)
    if a.size == 0:
        return np.zeros(0, dtype = int), a.copy()
    if a.dtype.kind == 'f':
        keys = a.view(f'u{a.itemsize}')
    else:
        keys = a
    starts = np.concatenate(([0], np.flatnonzero(keys[1:] != keys[:-1]) + 1))
    counts = np.diff(np.concatenate((starts, [a.size])))
    return counts, a[starts]


def run_length_lines(a):
    """Returns list of strings, one per run of identical values, in the form 'value' or 'count*value'."""

    counts, values = run_lengths(a)
    fmt = value_formatter(values)
    lines = []
    for count, value in zip(counts, values):
        if count == 1:
            lines.append(fmt(value))
        else:
            lines.append(f'{count}*{fmt(value)}')
    return lines


def dense_row_lines(a, columns):
    """Returns list of strings each holding a record of exactly columns space separated values."""

    assert columns > 0
    a = np.asarray(a).reshape(-1)
    assert a.size % columns == 0, f'array of {a.size} values does not divide into rows of {columns}'
    fmt = value_formatter(a)
    return [' '.join(fmt(v) for v in row) for row in a.reshape((-1, columns))]


def keyword_block(keyword, lines):
    """Returns text for a keyword block: keyword line, data lines, terminating slash and a blank line."""

    return keyword + '\n' + ''.join(line + '\n' for line in lines) + '/\n\n'


def run_length_block(keyword, a):
    """Returns a run length encoded keyword block for per cell array a; empty string if a is empty."""

    if np.asarray(a).size == 0:
        log.debug('no data for keyword %s: block omitted', keyword)
        return ''
    return keyword_block(keyword, run_length_lines(a))


def dense_rows_block(keyword, a, columns):
    """Returns an uncompressed keyword block for array a with a fixed number of values per line."""

    return keyword_block(keyword, dense_row_lines(a, columns))
