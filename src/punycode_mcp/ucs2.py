"""Conversion between text and Unicode code point sequences.

Python strings normally hold whole scalar values, but they can also carry
surrogate halves, e.g. after decoding UTF-16 with ``surrogatepass`` or reading
JSON produced by a UTF-16 based runtime. ``decode`` reassembles such pairs into
a single code point so the Bootstring encoder only ever sees scalar values.
"""

from .exceptions import InvalidArgumentError, UnpairedSurrogateError, require_text

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SUPPLEMENTARY_START = 0x10000
MAX_CODE_POINT = 0x10FFFF


def _is_high_surrogate(code: int) -> bool:
    return HIGH_SURROGATE_START <= code <= HIGH_SURROGATE_END


def _is_low_surrogate(code: int) -> bool:
    return LOW_SURROGATE_START <= code <= LOW_SURROGATE_END


def decode(text: str) -> list[int]:
    """Create a list of the code points of each character in ``text``.

    A high surrogate immediately followed by a low surrogate is combined into
    one supplementary code point.

    Args:
        text: The Unicode input string.

    Returns:
        list[int]: The code points, one per Unicode scalar value.

    Raises:
        InvalidArgumentError: ``text`` is not a string.
        UnpairedSurrogateError: A surrogate half has no matching partner.
    """
    require_text(text)
    output: list[int] = []
    position = 0
    length = len(text)
    while position < length:
        code = ord(text[position])
        if _is_high_surrogate(code):
            low = ord(text[position + 1]) if position + 1 < length else None
            if low is None or not _is_low_surrogate(low):
                raise UnpairedSurrogateError(
                    f"high surrogate U+{code:04X} at index {position} "
                    "not followed by low surrogate"
                )
            output.append(
                (code - HIGH_SURROGATE_START) * 0x400
                + (low - LOW_SURROGATE_START)
                + SUPPLEMENTARY_START
            )
            position += 2
            continue
        if _is_low_surrogate(code):
            raise UnpairedSurrogateError(
                f"low surrogate U+{code:04X} at index {position} "
                "not preceded by high surrogate"
            )
        output.append(code)
        position += 1
    return output


def encode(code_points: list[int]) -> str:
    """Create a string from a sequence of code points."""
    for code in code_points:
        if not 0 <= code <= MAX_CODE_POINT:
            raise InvalidArgumentError(f"code point {code!r} outside the Unicode range")
    return "".join(chr(code) for code in code_points)


def utf16_units(code_points: list[int]) -> list[int]:
    """Split code points into their UTF-16 code units.

    Supplementary code points become a high/low surrogate pair, everything
    else is a single unit.
    """
    units: list[int] = []
    for code in code_points:
        if code >= SUPPLEMENTARY_START:
            code -= SUPPLEMENTARY_START
            units.append(HIGH_SURROGATE_START + (code >> 10))
            units.append(LOW_SURROGATE_START + (code & 0x3FF))
        else:
            units.append(code)
    return units
