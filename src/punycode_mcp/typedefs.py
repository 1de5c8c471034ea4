"""Type definitions for Punycode conversion operations.

This module provides the structured result types used throughout the Punycode
Model Context Protocol (MCP) server implementation. Every tool returns a
ToolResult, and the per-label breakdown reports one LabelConversion per label.

Note: TypedDict classes are used for the per-label entries so they serialise as
plain dictionaries while still documenting the expected shape.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class LabelConversion(TypedDict):
    """A TypedDict describing the conversion of a single domain label.

    Attributes:
        label (str): The label as it appeared in the input.
        converted (str): The label after conversion.
        changed (bool): Whether the conversion altered the label.
        ace (bool): Whether the input label carries the ``xn--`` prefix.
        code_points (int): Number of Unicode scalar values in the Unicode form.
        utf16_units (int): Number of UTF-16 code units in the Unicode form.
    """

    label: str
    converted: str
    changed: bool
    ace: bool
    code_points: int
    utf16_units: int
