"""Bootstring encoding and decoding with the Punycode parameters.

This module implements the generalized variable-length integer coding of
RFC 3492: the bias adaptation function (section 3.4), the decoding procedure
(section 6.2) and the encoding procedure (section 6.3). The parameters are held
in an immutable BootstringParameters record so the same routines can run any
Bootstring instance, with PUNYCODE as the default.

All arithmetic is bounded by ``max_int`` (2**31 - 1) exactly like a 32-bit
implementation would be, so inputs that would overflow there raise
PunycodeOverflowError here instead of silently producing a different result.
"""

from dataclasses import dataclass

from . import ucs2
from .exceptions import MalformedInputError, PunycodeOverflowError, require_text


@dataclass(frozen=True)
class BootstringParameters:
    """Constants of one Bootstring instance (RFC 3492 section 5 for Punycode)."""

    base: int = 36
    tmin: int = 1
    tmax: int = 26
    skew: int = 38
    damp: int = 700
    initial_bias: int = 72
    initial_n: int = 0x80
    delimiter: str = "-"
    max_int: int = 0x7FFFFFFF


PUNYCODE = BootstringParameters()


def adapt(
    delta: int,
    num_points: int,
    first_time: bool,
    params: BootstringParameters = PUNYCODE,
) -> int:
    """Bias adaptation function as per section 3.4 of RFC 3492.

    Args:
        delta: The delta that was just encoded or decoded.
        num_points: The number of code points handled so far, including this one.
        first_time: Whether this is the first delta of the string.
        params: The Bootstring parameters.

    Returns:
        int: The new bias.
    """
    delta = delta // params.damp if first_time else delta >> 1
    delta += delta // num_points

    threshold = ((params.base - params.tmin) * params.tmax) // 2
    k = 0
    while delta > threshold:
        delta //= params.base - params.tmin
        k += params.base

    return k + ((params.base - params.tmin + 1) * delta) // (delta + params.skew)


def _threshold(k: int, bias: int, params: BootstringParameters) -> int:
    if k <= bias + params.tmin:
        return params.tmin
    if k >= bias + params.tmax:
        return params.tmax
    return k - bias


def _decode_digit(char: str) -> int:
    code = ord(char)
    if 0x30 <= code <= 0x39:  # 0..9
        return code - 0x16
    if 0x41 <= code <= 0x5A:  # A..Z
        return code - 0x41
    if 0x61 <= code <= 0x7A:  # a..z
        return code - 0x61
    raise MalformedInputError(f"invalid extended code point {char!r}")


def _encode_digit(digit: int) -> str:
    # 0..25 map to a..z, 26..35 map to 0..9
    return chr(digit + 0x61) if digit < 26 else chr(digit + 0x16)


def _encode_generalized_integer(
    q: int, bias: int, params: BootstringParameters
) -> list[str]:
    digits = []
    k = params.base
    while True:
        t = _threshold(k, bias, params)
        if q < t:
            digits.append(_encode_digit(q))
            return digits
        digits.append(_encode_digit(t + (q - t) % (params.base - t)))
        q = (q - t) // (params.base - t)
        k += params.base


def decode(text: str, params: BootstringParameters = PUNYCODE) -> str:
    """Convert a Punycode string of ASCII-only symbols to a string of Unicode symbols.

    Args:
        text: The Punycode string, without any ``xn--`` prefix.
        params: The Bootstring parameters.

    Returns:
        str: The decoded Unicode string.

    Raises:
        InvalidArgumentError: ``text`` is not a string.
        MalformedInputError: The digit stream is truncated or contains a
            character outside the digit alphabet.
        PunycodeOverflowError: An intermediate value exceeds ``max_int``.
    """
    require_text(text)
    if not text:
        return ""

    delimiter = text.rfind(params.delimiter)
    output: list[int] = []
    for char in text[: max(delimiter, 0)]:
        if ord(char) >= params.initial_n:
            raise MalformedInputError(f"non-basic code point {char!r} in basic segment")
        output.append(ord(char))

    position = delimiter + 1
    length = len(text)
    n = params.initial_n
    bias = params.initial_bias
    i = 0
    while position < length:
        oldi = i
        w = 1
        k = params.base
        while True:
            if position >= length:
                raise MalformedInputError("incomplete punycode string")
            digit = _decode_digit(text[position])
            position += 1
            if digit >= params.base or digit > (params.max_int - i) // w:
                raise PunycodeOverflowError("overflow detected while decoding digit")

            i += digit * w
            t = _threshold(k, bias, params)
            if digit < t:
                break

            if w > params.max_int // (params.base - t):
                raise PunycodeOverflowError("overflow detected in digit weight")
            w *= params.base - t
            k += params.base

        out_len = len(output) + 1
        bias = adapt(i - oldi, out_len, oldi == 0, params)
        if i // out_len > params.max_int - n:
            raise PunycodeOverflowError("overflow detected in code point")

        n += i // out_len
        i %= out_len
        if n > ucs2.MAX_CODE_POINT:
            raise MalformedInputError(f"decoded code point {n:#x} outside the Unicode range")

        output.insert(i, n)
        i += 1

    return ucs2.encode(output)


def encode(text: str, params: BootstringParameters = PUNYCODE) -> str:
    """Convert a string of Unicode symbols to a Punycode string of ASCII-only symbols.

    Args:
        text: The Unicode string, e.g. a single domain name label.
        params: The Bootstring parameters.

    Returns:
        str: The Punycode string, digits in lowercase.

    Raises:
        InvalidArgumentError: ``text`` is not a string.
        UnpairedSurrogateError: ``text`` contains an unpaired surrogate.
        PunycodeOverflowError: An intermediate value exceeds ``max_int``.
    """
    require_text(text)
    if not text:
        return ""

    code_points = ucs2.decode(text)
    output = [chr(code) for code in code_points if code < params.initial_n]
    basic_count = len(output)
    if basic_count:
        output.append(params.delimiter)

    # Each outer step handles every occurrence of the next larger non-basic
    # code point, so walking the distinct values in order is equivalent to
    # rescanning for the minimum each time.
    extended = sorted({code for code in code_points if code >= params.initial_n})

    n = params.initial_n
    delta = 0
    bias = params.initial_bias
    h = basic_count
    for m in extended:
        if (m - n) * (h + 1) > params.max_int - delta:
            raise PunycodeOverflowError("overflow detected while encoding delta")
        delta += (m - n) * (h + 1)
        n = m

        for code in code_points:
            if code < n:
                delta += 1
                if delta > params.max_int:
                    raise PunycodeOverflowError("overflow detected while encoding delta")
            elif code == n:
                output.extend(_encode_generalized_integer(delta, bias, params))
                bias = adapt(delta, h + 1, h == basic_count, params)
                delta = 0
                h += 1

        delta += 1
        n += 1

    return "".join(output)
