"""Unit tests for shortcode generation and validation in shortener.py.

Test coverage includes:

1. Generation
   - Ensures generated shortcodes have the requested length (default 6).
   - All characters belong to the Base62 alphabet.
   - Generated shortcodes vary between calls.

2. Generation error handling
   - Ensures invalid lengths raise TypeError / ValueError.

3. Validation
   - Accepts 3-20 alphanumeric characters only.
   - Rejects non-string values.
"""

import re
import string

import pytest

from linkshortener.utils import generate_shortcode, validate_shortcode
from linkshortener.utils.shortener import ALPHABET, BASE


# -------------------------------
# 1. Generation
# -------------------------------


def test_alphabet_is_base62():
    assert BASE == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


def test_generate_shortcode_default_length():
    for _ in range(200):
        assert re.fullmatch(r'[A-Za-z0-9]{6}', generate_shortcode())


@pytest.mark.parametrize('length', [1, 3, 8, 20])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length)) == length


def test_generate_shortcode_is_random():
    assert len({generate_shortcode() for _ in range(100)}) > 95


# -------------------------------
# 2. Generation error handling
# -------------------------------


@pytest.mark.parametrize('length', ['6', 6.0, None, True])
def test_generate_shortcode_with_non_integer_length(length):
    with pytest.raises(TypeError):
        generate_shortcode(length)


@pytest.mark.parametrize('length', [0, -1])
def test_generate_shortcode_with_non_positive_length(length):
    with pytest.raises(ValueError):
        generate_shortcode(length)


# -------------------------------
# 3. Validation
# -------------------------------


@pytest.mark.parametrize('shortcode', ['abc', 'abc123', 'ABCxyz789', 'a' * 20, '000'])
def test_validate_shortcode_accepts(shortcode):
    assert validate_shortcode(shortcode) is True


@pytest.mark.parametrize(
    'shortcode',
    ['ab', 'a' * 21, 'abc-123', 'abc_123', 'abc 123', 'abc123\n', 'ünï', '', None, 123456, ['abc123']],
)
def test_validate_shortcode_rejects(shortcode):
    assert validate_shortcode(shortcode) is False
