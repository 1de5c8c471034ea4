"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from punycode_mcp.labels import ACE_PREFIX


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools_prompts() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools_prompts(self) -> None:
        """Register prompts for tools with the server."""

        @self.server.prompt(
            name="convert_to_punycode",
            description="Return the punycode version of an internationalized domain name (IDN).",
            tags=set(("idn", "punycode", "converter", "ascii")),
            enabled=True,
        )
        def convert_to_punycode(domain: str) -> str:
            """Convert IDN domain name to punycode."""
            return (
                f"Convert the domain {domain} to punycode format using the domain to"
                " ascii tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="convert_from_punycode",
            description="Return the Unicode version of a punycode domain name.",
            tags=set(("idn", "punycode", "converter", "unicode")),
            enabled=True,
        )
        def convert_from_punycode(domain: str) -> str:
            """Convert punycode domain name to Unicode."""
            return (
                f"Convert the `{ACE_PREFIX}` labels of the domain {domain} back to Unicode"
                " using the domain to unicode tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="explain_labels",
            description="Explain how each label of a domain name is converted.",
            tags=set(("idn", "punycode", "labels", "diagnostics")),
            enabled=self.config.get("features", {}).get("label_breakdown", False),
        )
        def explain_labels(domain: str) -> str:
            """Explain the label conversion of a domain name."""
            return (
                f"Break down the labels of the domain {domain} using the label breakdown"
                " tool and explain which labels needed punycode conversion and why."
            )
