"""Line color decoding."""

from chsearch_trips.domain.errors import ColorDecodeError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_color(raw: str | None) -> int | None:
    """Decode a 3- or 6-digit hex color into a 0xRRGGBB integer.

    Short colors are widened per channel, so "f0a" reads as "ff00aa".
    """
    if raw is None:
        return None
    value = raw.strip().removeprefix("#")
    if not value or not set(value) <= _HEX_DIGITS:
        raise ColorDecodeError(f"Invalid color value: {raw!r}")
    if len(value) == 3:
        value = "".join(digit * 2 for digit in value)
    elif len(value) != 6:
        raise ColorDecodeError(f"Color must have 3 or 6 hex digits: {raw!r}")
    return int(value, 16)
