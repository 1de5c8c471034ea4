"""Punycode (RFC 3492) codec with an IDNA label wrapper and an MCP server front end."""

from punycode_mcp.bootstring import PUNYCODE, BootstringParameters, adapt, decode, encode
from punycode_mcp.exceptions import (
    InvalidArgumentError,
    MalformedInputError,
    PunycodeError,
    PunycodeOverflowError,
    UnpairedSurrogateError,
)
from punycode_mcp.labels import to_ascii, to_unicode

__all__ = [
    "PUNYCODE",
    "BootstringParameters",
    "adapt",
    "decode",
    "encode",
    "to_ascii",
    "to_unicode",
    "PunycodeError",
    "InvalidArgumentError",
    "UnpairedSurrogateError",
    "MalformedInputError",
    "PunycodeOverflowError",
]
