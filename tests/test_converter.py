"""Unit tests for the punycode conversion tool implementations.

Tests cover:
- Successful conversions returning ToolResult output
- Codec errors converted into failed ToolResults
- The per-label breakdown
- Error message formatting
"""

import pytest

from punycode_mcp.exceptions import (
    InvalidArgumentError,
    MalformedInputError,
    PunycodeOverflowError,
    UnpairedSurrogateError,
    handle_punycode_error,
)
from punycode_mcp.tools import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    label_breakdown_impl,
    punycode_decode_impl,
    punycode_encode_impl,
)
from punycode_mcp.typedefs import ToolResult


class TestDomainConversionTools:
    """Test suite for the domain conversion tools."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii(self):
        """Test conversion of an IDN to punycode."""
        result = await domain_to_ascii_impl("mañana.com")

        assert isinstance(result, ToolResult)
        assert result.success is True
        assert result.output == {"domain": "mañana.com", "punycode": "xn--maana-pta.com"}
        assert result.error is None

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii_passthrough(self):
        """Test that ASCII domains are returned unchanged."""
        result = await domain_to_ascii_impl("example.com")

        assert result.success is True
        assert result.output["punycode"] == "example.com"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii_unpaired_surrogate(self):
        """Test that codec errors become a failed result."""
        result = await domain_to_ascii_impl("ma\ud83dna.com")

        assert result.success is False
        assert "Unpaired surrogate" in result.error
        assert result.details["error_type"] == "UnpairedSurrogateError"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_unicode(self):
        """Test conversion of a punycode domain to Unicode."""
        result = await domain_to_unicode_impl("xn--maana-pta.com")

        assert result.success is True
        assert result.output == {"domain": "xn--maana-pta.com", "unicode": "mañana.com"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_unicode_malformed(self):
        """Test that malformed ACE labels produce a failed result."""
        result = await domain_to_unicode_impl("xn--a-9.com")

        assert result.success is False
        assert "Malformed punycode input" in result.error
        assert result.details["input"] == "xn--a-9.com"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_non_string_domain(self):
        """Test that a non-string domain produces a failed result."""
        result = await domain_to_ascii_impl(None)

        assert result.success is False
        assert "Invalid argument" in result.error


class TestRawBootstringTools:
    """Test suite for the raw Bootstring tools."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_punycode_encode(self):
        """Test raw Bootstring encoding without prefix."""
        result = await punycode_encode_impl("mañana")

        assert result.success is True
        assert result.output == {"text": "mañana", "punycode": "maana-pta"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_punycode_encode_does_not_split(self):
        """Test that dots are encoded as basic code points."""
        result = await punycode_encode_impl("mañana.com")

        assert result.output["punycode"].startswith("maana.com-")
        assert result.output["punycode"] == "mañana.com".encode("punycode").decode("ascii")

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_punycode_decode(self):
        """Test raw Bootstring decoding."""
        result = await punycode_decode_impl("maana-pta")

        assert result.success is True
        assert result.output == {"punycode": "maana-pta", "text": "mañana"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_punycode_decode_overflow(self):
        """Test that overflowing input produces a failed result."""
        result = await punycode_decode_impl("9" * 20)

        assert result.success is False
        assert "Punycode overflow" in result.error
        assert result.details["error_type"] == "PunycodeOverflowError"


class TestLabelBreakdownTool:
    """Test suite for the label breakdown tool."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_unicode_domain(self):
        """Test breakdown of a Unicode domain."""
        result = await label_breakdown_impl("mañana.com")

        assert result.success is True
        assert result.output == [
            {
                "label": "mañana",
                "converted": "xn--maana-pta",
                "changed": True,
                "ace": False,
                "code_points": 6,
                "utf16_units": 6,
            },
            {
                "label": "com",
                "converted": "com",
                "changed": False,
                "ace": False,
                "code_points": 3,
                "utf16_units": 3,
            },
        ]
        assert result.details == {
            "ascii": "xn--maana-pta.com",
            "unicode": "mañana.com",
            "label_count": 2,
        }

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_ace_domain(self):
        """Test breakdown of a punycode domain."""
        result = await label_breakdown_impl("xn--maana-pta.com")

        assert result.success is True
        first = result.output[0]
        assert first["ace"] is True
        assert first["converted"] == "mañana"
        assert result.details["unicode"] == "mañana.com"
        assert result.details["ascii"] == "xn--maana-pta.com"

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_supplementary_label_units(self):
        """Test that UTF-16 lengths count surrogate pairs."""
        result = await label_breakdown_impl("\U0001F600.example")

        assert result.success is True
        assert result.output[0]["code_points"] == 1
        assert result.output[0]["utf16_units"] == 2

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_malformed_label(self):
        """Test that a malformed ACE label produces a failed result."""
        result = await label_breakdown_impl("xn--99.com")

        assert result.success is False
        assert result.details["error_type"] == "MalformedInputError"


class TestErrorMessages:
    """Test suite for codec error message formatting."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error,prefix",
        [
            (InvalidArgumentError("bad"), "Invalid argument"),
            (UnpairedSurrogateError("bad"), "Unpaired surrogate in input"),
            (MalformedInputError("bad"), "Malformed punycode input"),
            (PunycodeOverflowError("bad"), "Punycode overflow"),
            (RuntimeError("bad"), "Unexpected error"),
        ],
    )
    def test_handle_punycode_error(self, error, prefix):
        """Test that each error kind gets a descriptive message."""
        assert handle_punycode_error(error) == f"{prefix}: bad"
