"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from dataclasses import asdict
from typing import Any, Dict

from punycode_mcp.bootstring import PUNYCODE
from punycode_mcp.labels import ACE_PREFIX, LABEL_SEPARATOR


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: Dict[str, Any]  # Configuration dictionary

    def register_bootstring_resources(self) -> None:
        """Register Bootstring resources such as the codec parameters."""

        @self.server.resource(
            uri="resource://bootstring_parameters",
            name="bootstring_parameters",
            description="The Bootstring parameters used for punycode (RFC 3492 section 5).",
        )
        async def get_bootstring_parameters() -> Dict[str, Any]:
            return await self._get_bootstring_parameters_impl()

        @self.server.resource(
            uri="resource://ace_prefix",
            name="ace_prefix",
            description="The IDNA ACE prefix marking punycode labels (RFC 3490).",
        )
        async def get_ace_prefix() -> Dict[str, Any]:
            return await self._get_ace_prefix_impl()

    async def _get_bootstring_parameters_impl(self) -> Dict[str, Any]:
        """Implementation to get the Bootstring parameters."""
        return asdict(PUNYCODE)

    async def _get_ace_prefix_impl(self) -> Dict[str, Any]:
        """Implementation to get the ACE prefix and label separator."""
        return {"ace_prefix": ACE_PREFIX, "label_separator": LABEL_SEPARATOR}
