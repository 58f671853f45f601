"""Decimal string to integer conversion.

An independent utility; it does not interact with the tree.

``string_to_long`` deliberately mirrors fixed-width 64-bit arithmetic:

1. Overflow is not detected. Values beyond LONG_MAX or below LONG_MIN wrap
   around in two's complement, so "9223372036854775808" parses to LONG_MIN.
2. Only a single optional leading minus sign followed by ASCII digits is
   accepted. Spaces, plus signs, thousands separators, decimal points,
   currency symbols and non-ASCII digits are all rejected.
3. The empty string, a lone "-" and any run of zeros all parse to 0.
"""

from .errors import ParseError

LONG_BITS = 64
LONG_MAX = (1 << (LONG_BITS - 1)) - 1
LONG_MIN = -(1 << (LONG_BITS - 1))

_LONG_MODULUS = 1 << LONG_BITS


def _wrap_long(value: int) -> int:
    """Truncate an arbitrary-precision int to signed 64-bit."""
    return ((value - LONG_MIN) % _LONG_MODULUS) + LONG_MIN


def _char_to_digit(c: str, index: int) -> int:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    raise ParseError(f"Illegal character {c!r}", index, c)


def string_to_long(s: str) -> int:
    """Convert a base-10 string to a signed 64-bit integer.

    Args:
        s: Numeric string, optionally starting with "-"

    Returns:
        The parsed value, wrapped to the signed 64-bit range

    Raises:
        ParseError: If a character other than a leading "-" is not 0-9;
            ``index`` is the character's position in ``s`` counting any
            leading "-", so "--123" fails at index 1
    """
    negative = s.startswith("-")
    start = 1 if negative else 0

    result = 0
    for index in range(start, len(s)):
        digit = _char_to_digit(s[index], index)
        result = result * 10 + (-digit if negative else digit)

    return _wrap_long(result)
