"""Domain name and email address conversion, one label at a time.

Only the labels that need it are converted, so it doesn't matter whether the
input is already in the target form: ``to_ascii`` leaves ASCII labels alone and
``to_unicode`` leaves labels without the ``xn--`` prefix alone.
"""

from fastmcp.utilities.logging import get_logger

from . import bootstring
from .exceptions import require_text

logger = get_logger(__name__)

ACE_PREFIX = "xn--"
LABEL_SEPARATOR = "."


def split_labels(domain: str) -> list[str]:
    """Split a domain name or email address into its dot-separated labels."""
    return require_text(domain, "domain").split(LABEL_SEPARATOR)


def needs_encoding(label: str) -> bool:
    """Return True if the label contains a character outside printable ASCII."""
    return any(ord(char) >= 0x7F for char in label)


def is_ace_label(label: str) -> bool:
    """Return True if the label carries the ACE prefix, ignoring case."""
    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def label_to_ascii(label: str) -> str:
    if not needs_encoding(label):
        return label
    encoded = ACE_PREFIX + bootstring.encode(label)
    logger.debug("Encoded label %r as %s", label, encoded)
    return encoded


def label_to_unicode(label: str) -> str:
    if not is_ace_label(label):
        return label
    decoded = bootstring.decode(label[len(ACE_PREFIX) :].lower())
    logger.debug("Decoded label %s as %r", label, decoded)
    return decoded


def to_ascii(domain: str) -> str:
    """Convert a Unicode domain name or email address to Punycode.

    Args:
        domain: The domain name or email address, as a Unicode string.

    Returns:
        str: The input with every non-ASCII label replaced by its
        ``xn--`` prefixed Punycode form.
    """
    labels = split_labels(domain)
    if not domain:
        return ""
    return LABEL_SEPARATOR.join(label_to_ascii(label) for label in labels)


def to_unicode(domain: str) -> str:
    """Convert a Punycoded domain name or email address to Unicode.

    Args:
        domain: The domain name or email address, possibly with ``xn--`` labels.

    Returns:
        str: The input with every ``xn--`` label decoded.
    """
    labels = split_labels(domain)
    if not domain:
        return ""
    return LABEL_SEPARATOR.join(label_to_unicode(label) for label in labels)
