import numpy as np
import pytest

import cpchop.olio.load_data as ld
import cpchop.olio.write_data as wd
from cpchop.olio.exceptions import FormatError


def test_expand_repeat_tokens_real():
    a = ld.expand_repeat_tokens(['3*0.5', '1', '2*2.25'])
    assert a.dtype == float
    np.testing.assert_array_equal(a, [0.5, 0.5, 0.5, 1.0, 2.25, 2.25])


def test_expand_repeat_tokens_integer():
    a = ld.expand_repeat_tokens(['4*1', '0', '2*3'], data_type = 'integer')
    assert a.dtype.kind == 'i'
    np.testing.assert_array_equal(a, [1, 1, 1, 1, 0, 3, 3])


def test_expand_repeat_tokens_fortran_exponent():
    np.testing.assert_array_equal(ld.expand_repeat_tokens(['1.5D2', '2*1.0d-1']), [150.0, 0.1, 0.1])


def test_expand_repeat_tokens_empty():
    assert ld.expand_repeat_tokens([]).size == 0


@pytest.mark.parametrize('word', ['8*', 'abc', '0*1.0', 'x*2.0'])
def test_expand_repeat_tokens_invalid(word):
    with pytest.raises(FormatError):
        ld.expand_repeat_tokens(['1.0', word], keyword = 'PORO')


def test_expand_repeat_tokens_non_integer_for_integer_type():
    with pytest.raises(FormatError) as excinfo:
        ld.expand_repeat_tokens(['2*1.5'], data_type = 'int', keyword = 'SATNUM')
    assert 'SATNUM' in str(excinfo.value)


def test_numpy_type_for_unknown_data_type():
    with pytest.raises(ValueError):
        ld.numpy_type_for_data_type('complex')


def test_run_length_round_trip():
    a = np.array([0.1, 0.1, 0.1 + 0.2, 1.0e-300, 1.0e-300, 2.5, -0.0, 7.0])
    keyword, b = ld.load_keyword_array(wd.run_length_block('PORO', a))
    assert keyword == 'PORO'
    assert b.size == a.size
    assert b.tobytes() == a.tobytes()


def test_run_length_round_trip_integers():
    a = np.array([1, 1, 1, 2, 2, 1, 3, 3, 3, 3])
    _, b = ld.load_keyword_array(wd.run_length_block('SATNUM', a), data_type = 'integer')
    np.testing.assert_array_equal(a, b)


def test_load_keyword_array_selects_keyword():
    text = 'GRID\nPORO\n2*0.2 /\nPERMX\n100.0 3*200.0\n/\n'
    keyword, a = ld.load_keyword_array(text, keyword = 'permx')
    assert keyword == 'PERMX'
    np.testing.assert_array_equal(a, [100.0, 200.0, 200.0, 200.0])
    keyword, a = ld.load_keyword_array(text)
    assert keyword == 'PORO'
    with pytest.raises(FormatError):
        ld.load_keyword_array(text, keyword = 'NTG')
