"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from punycode_mcp.tools import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    label_breakdown_impl,
    punycode_decode_impl,
    punycode_encode_impl,
)
from punycode_mcp.typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""

        @self.server.tool(
            name="domain_to_ascii",
            description=(
                "Use this tool to convert the specified internationalized domain name (IDN) "
                "or email address into punycode format. ASCII labels are left unchanged."
            ),
            tags=set(("idn", "punycode", "converter", "ascii")),
            enabled=True,
        )
        async def domain_to_ascii(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await domain_to_ascii_impl(domain.strip())

        @self.server.tool(
            name="domain_to_unicode",
            description=(
                "Use this tool to convert a punycode domain name or email address "
                "(labels starting with `xn--`) back into its Unicode form."
            ),
            tags=set(("idn", "punycode", "converter", "unicode")),
            enabled=True,
        )
        async def domain_to_unicode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing Unicode conversion for domain `{domain}`.")
            return await domain_to_unicode_impl(domain.strip())

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Use this tool to Bootstring-encode a single string with the punycode "
                "parameters. No `xn--` prefix is added and the string is not split on dots."
            ),
            tags=set(("punycode", "bootstring", "encode")),
            enabled=self.config.get("features", {}).get("raw_bootstring_tools", False),
        )
        async def punycode_encode(text: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding `{text}` with Bootstring.")
            return await punycode_encode_impl(text)

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Use this tool to decode a single raw punycode string, given "
                "without its `xn--` prefix."
            ),
            tags=set(("punycode", "bootstring", "decode")),
            enabled=self.config.get("features", {}).get("raw_bootstring_tools", False),
        )
        async def punycode_decode(punycode: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding `{punycode}` with Bootstring.")
            return await punycode_decode_impl(punycode.strip())

        @self.server.tool(
            name="label_breakdown",
            description=(
                "Use this tool to show how every label of a domain name converts "
                "between its Unicode and punycode forms."
            ),
            tags=set(("idn", "punycode", "labels", "diagnostics")),
            enabled=self.config.get("features", {}).get("label_breakdown", False),
        )
        async def label_breakdown(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Breaking down the labels of domain `{domain}`.")
            return await label_breakdown_impl(domain.strip())
