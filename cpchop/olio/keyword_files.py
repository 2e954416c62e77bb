"""Basic functions for splitting an ascii grdecl deck into keyword blocks.

Ascii file must already have been opened for reading before calling any of these functions.
"""

import logging

log = logging.getLogger(__name__)

import re

from cpchop.olio.exceptions import FormatError

# section headers and flags which are not followed by data or a terminating slash
DATALESS_KEYWORDS = ('RUNSPEC', 'GRID', 'EDIT', 'PROPS', 'REGIONS', 'SOLUTION', 'SUMMARY', 'SCHEDULE', 'ECHO',
                     'NOECHO', 'NONNC', 'NEWTRAN', 'OLDTRAN', 'INIT', 'END', 'ENDBOX', 'METRIC', 'FIELD', 'LAB',
                     'OIL', 'WATER', 'GAS', 'DISGAS', 'VAPOIL', 'BRINE', 'UNIFIN', 'UNIFOUT', 'FMTIN', 'FMTOUT',
                     'NOSIM', 'NOINSPEC', 'NORSSPEC', 'IMPES', 'FULLIMP', 'MULTOUT', 'MULTIN', 'NOGGF', 'NOWARN',
                     'WARN', 'NOCASC')

# keywords holding a list of slash terminated records, the list itself ending with an empty record
MULTI_RECORD_KEYWORDS = ('FAULTS', 'MULTFLT', 'EQUALS', 'MULTIPLY', 'COPY', 'ADD', 'EDITNNC', 'NNC', 'THPRES',
                         'EQUALREG', 'MULTREGT', 'MULTREGP', 'COPYREG', 'ADDREG', 'MULTIREG', 'OPERATE', 'OPERATER',
                         'AQUNUM', 'AQUCON')

_keyword_re = re.compile(r'[A-Za-z][A-Za-z0-9_+-]*$')


def is_keyword(word):
    """Returns True if word has the form of a deck keyword."""
    return _keyword_re.match(word) is not None


def split_trailing_comment(line, comment_char = '--'):
    """Returns a pair of strings: (line stripped of trailing comment, trailing comment)."""
    # also removes trailing newline
    local_line = line.rstrip('\r\n')
    pos = local_line.find(comment_char)
    if pos < 0:
        return (local_line, '')
    return (local_line[:pos], local_line[pos + len(comment_char):])


def strip_trailing_comment(line, comment_char = '--'):
    """Returns a copy of line with any trailing comment removed."""
    (result, _) = split_trailing_comment(line, comment_char = comment_char)
    return result


def keyword_blocks(ascii_file,
                   comment_char = '--',
                   dataless_keywords = DATALESS_KEYWORDS,
                   multi_record_keywords = MULTI_RECORD_KEYWORDS):
    """Generator yielding (keyword, list of data words) for each keyword found in an open ascii file.

    arguments:
       ascii_file: file object (or any iterable of lines) open for reading
       comment_char (string, default '--'): text introducing a comment which runs to the end of the line
       dataless_keywords (sequence of strings): keywords which stand alone, without data or terminating slash;
          these are yielded with an empty list of words
       multi_record_keywords (sequence of strings): keywords whose data is a list of slash terminated records,
          closed by an empty record (a lone slash); the words of all the records are yielded as one list

    notes:
       keywords are returned in upper case; data words are returned unconverted, so repeat counts such as
       '8*0.2' are still present; a slash attached to the last datum, eg. '0.2/', terminates the block (or record);
       raises FormatError for data found outside a keyword block or for an unterminated final block
    """

    keyword = None
    multi_record = False
    words = []
    record = []
    line_number = 0
    for line in ascii_file:
        line_number += 1
        for word in strip_trailing_comment(line, comment_char = comment_char).split():
            if keyword is None:
                if not is_keyword(word):
                    raise FormatError(f'unexpected data {word!r} outside of keyword block at line {line_number}')
                keyword = word.upper()
                if keyword in dataless_keywords:
                    yield keyword, []
                    keyword = None
                multi_record = keyword in multi_record_keywords
                continue
            terminated = word.endswith('/')
            if terminated:
                word = word[:-1]
            if word:
                record.append(word)
            if not terminated:
                continue
            if multi_record and record:
                words += record
                record = []
                continue
            yield keyword, words + record
            keyword = None
            multi_record = False
            words = []
            record = []
    if keyword is not None:
        raise FormatError(f'keyword {keyword} block not terminated with slash before end of file')


# end of keyword_files module
