"""Tests for line color decoding."""

import pytest

from chsearch_trips.adapters.search_ch.color import decode_color
from chsearch_trips.domain.errors import ColorDecodeError, TripDecodeError


def test_short_color_is_widened_per_channel() -> None:
    """Given a 3-digit color, when decoding, then it equals its doubled 6-digit form."""
    assert decode_color("f0a") == decode_color("ff00aa") == 0xFF00AA


def test_long_color_is_read_as_hex() -> None:
    """Given a 6-digit color, when decoding, then it is read as 0xRRGGBB."""
    assert decode_color("eb0000") == 0xEB0000


def test_leading_hash_is_accepted() -> None:
    """Given a CSS-style color, when decoding, then the hash is ignored."""
    assert decode_color("#FFF") == 0xFFFFFF


def test_missing_color_is_none() -> None:
    """Given no color, when decoding, then there is no color."""
    assert decode_color(None) is None


@pytest.mark.parametrize("raw", ["ff", "ffff", "fffffff", "", "ggg"])
def test_invalid_color_is_an_error(raw: str) -> None:
    """Given a color of the wrong length or alphabet, when decoding, then it is rejected."""
    with pytest.raises(ColorDecodeError):
        decode_color(raw)


def test_color_error_is_a_decode_error() -> None:
    """Color errors surface as response decode failures."""
    assert issubclass(ColorDecodeError, TripDecodeError)
