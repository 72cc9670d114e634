"""functool: a typed tool registry with string-argument adaptation for LLM agents."""
from functool.tools import (
    BoundTool,
    ParameterDescriptor,
    ToolDescriptor,
    ToolOutcome,
    ToolRegistrationError,
    ToolRegistry,
    ToolResponse,
    param,
)

__version__ = "0.1.0"

__all__ = [
    "BoundTool",
    "ParameterDescriptor",
    "ToolDescriptor",
    "ToolOutcome",
    "ToolRegistrationError",
    "ToolRegistry",
    "ToolResponse",
    "param",
]
