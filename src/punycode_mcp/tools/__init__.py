"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    label_breakdown_impl,
    punycode_decode_impl,
    punycode_encode_impl,
)

__all__ = [
    "domain_to_ascii_impl",
    "domain_to_unicode_impl",
    "punycode_encode_impl",
    "punycode_decode_impl",
    "label_breakdown_impl",
]
