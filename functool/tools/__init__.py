"""Tool system: explicit tool registration and string-argument calls for LLM tool use.

Usage:
    from functool.tools import ToolRegistry, param

    registry = ToolRegistry()

    @registry.tool(name="add", usage="Adds two numbers", parameters=[param("a", "integer"), param("b", "integer")])
    def add(a: int, b: int) -> int:
        return a + b

    registry.call("add", ["3", "4"])
"""
from functool.tools.adapters import (
    BOOLEAN,
    INTEGER,
    NUMBER,
    STRING,
    AdaptedArgument,
    ArgumentAdapter,
    adapter_for_label,
)
from functool.tools.descriptor import (
    ParameterDescriptor,
    ToolDescriptor,
    ToolRegistrationError,
    param,
)
from functool.tools.registry import BoundTool, ToolRegistry
from functool.tools.response import ToolOutcome, ToolResponse

__all__ = [
    "AdaptedArgument",
    "ArgumentAdapter",
    "BOOLEAN",
    "BoundTool",
    "INTEGER",
    "NUMBER",
    "ParameterDescriptor",
    "STRING",
    "ToolDescriptor",
    "ToolOutcome",
    "ToolRegistrationError",
    "ToolRegistry",
    "ToolResponse",
    "adapter_for_label",
    "param",
]
