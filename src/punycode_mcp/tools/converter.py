from fastmcp.utilities.logging import get_logger

from punycode_mcp import bootstring, labels, ucs2
from punycode_mcp.exceptions import PunycodeError, handle_punycode_error
from punycode_mcp.typedefs import LabelConversion, ToolResult

logger = get_logger(__name__)


def _error_result(error: PunycodeError, value: str) -> ToolResult:
    logger.warning("Conversion of %r failed: %s", value, error)
    return ToolResult(
        success=False,
        error=handle_punycode_error(error),
        details={"input": value, "error_type": type(error).__name__},
    )


async def domain_to_ascii_impl(domain: str) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name or email address to convert to punycode.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    try:
        punycode = labels.to_ascii(domain)
    except PunycodeError as e:
        return _error_result(e, domain)
    return ToolResult(success=True, output={"domain": domain, "punycode": punycode})


async def domain_to_unicode_impl(domain: str) -> ToolResult:
    """Perform punycode domain name conversion back into Unicode.

    Args:
        domain (str): The domain name or email address with ``xn--`` labels.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    try:
        unicode = labels.to_unicode(domain)
    except PunycodeError as e:
        return _error_result(e, domain)
    return ToolResult(success=True, output={"domain": domain, "unicode": unicode})


async def punycode_encode_impl(text: str) -> ToolResult:
    """Encode a single string with Bootstring, without the ACE prefix.

    Args:
        text (str): The Unicode string to encode.

    Returns:
        ToolResult: The raw Punycode string or error details.
    """
    try:
        encoded = bootstring.encode(text)
    except PunycodeError as e:
        return _error_result(e, text)
    return ToolResult(success=True, output={"text": text, "punycode": encoded})


async def punycode_decode_impl(punycode: str) -> ToolResult:
    """Decode a single raw Punycode string, without the ACE prefix.

    Args:
        punycode (str): The Punycode string to decode.

    Returns:
        ToolResult: The decoded Unicode string or error details.
    """
    try:
        decoded = bootstring.decode(punycode)
    except PunycodeError as e:
        return _error_result(e, punycode)
    return ToolResult(success=True, output={"punycode": punycode, "text": decoded})


async def label_breakdown_impl(domain: str) -> ToolResult:
    """Show how each label of a domain name converts in both directions.

    Args:
        domain (str): A domain name in either Unicode or punycode form.

    Returns:
        ToolResult: One LabelConversion per label, plus both full forms.
    """
    try:
        breakdown: list[LabelConversion] = []
        for label in labels.split_labels(domain):
            ace = labels.is_ace_label(label)
            converted = labels.label_to_unicode(label) if ace else labels.label_to_ascii(label)
            code_points = ucs2.decode(converted if ace else label)
            breakdown.append(
                LabelConversion(
                    label=label,
                    converted=converted,
                    changed=converted != label,
                    ace=ace,
                    code_points=len(code_points),
                    utf16_units=len(ucs2.utf16_units(code_points)),
                )
            )
        ascii_form = labels.to_ascii(labels.to_unicode(domain))
        unicode_form = labels.to_unicode(domain)
    except PunycodeError as e:
        return _error_result(e, domain)

    return ToolResult(
        success=True,
        output=[dict(entry) for entry in breakdown],
        details={"ascii": ascii_form, "unicode": unicode_form, "label_count": len(breakdown)},
    )
