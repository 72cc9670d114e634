"""Tool descriptors: the static shape of a callable, independent of how it is invoked.

Descriptors are built explicitly by the caller at registration time:

    add = ToolDescriptor(
        name="add",
        usage="Adds two numbers together. a + b",
        parameters=[param("a", "integer"), param("b", "integer")],
    )

and export the native LLM tool-calling formats (OpenAI function calling and
Anthropic tool_use).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from functool.tools.adapters import ArgumentAdapter, adapter_for_label


class ToolRegistrationError(ValueError):
    """Raised for malformed descriptors or rejected registrations."""


# ---------------------------------------------------------------------------
# ParameterDescriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParameterDescriptor:
    """One positional parameter of a tool."""

    name: str
    type_label: str = "string"
    usage: str = ""
    required: bool = True
    # Runtime conversion; None means "derive from type_label"
    adapter: ArgumentAdapter | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ToolRegistrationError("Parameter name must not be empty")

    @property
    def resolved_adapter(self) -> ArgumentAdapter:
        return self.adapter or adapter_for_label(self.type_label)

    def to_property(self) -> dict:
        return {"type": self.type_label, "description": self.usage}


def param(
    name: str,
    type_label: str = "string",
    usage: str = "",
    *,
    required: bool = True,
    adapter: ArgumentAdapter | None = None,
) -> ParameterDescriptor:
    """Shorthand for building a ParameterDescriptor."""
    return ParameterDescriptor(
        name=name,
        type_label=type_label,
        usage=usage,
        required=required,
        adapter=adapter,
    )


# ---------------------------------------------------------------------------
# ToolDescriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ToolDescriptor:
    """Name, usage text and ordered parameters of one tool.

    Parameter order is the positional order the handler expects; arguments
    are matched by position only, never by name.
    """

    name: str
    usage: str = ""
    parameters: Sequence[ParameterDescriptor] = ()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ToolRegistrationError("Tool name must not be empty")

        params = tuple(self.parameters)
        seen: set[str] = set()
        for p in params:
            if p.name in seen:
                raise ToolRegistrationError(
                    f"Tool '{self.name}' declares parameter '{p.name}' more than once"
                )
            seen.add(p.name)
        object.__setattr__(self, "parameters", params)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def required_names(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    # -- Output formats for different LLM providers --

    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.to_property() for p in self.parameters},
            "required": self.required_names,
        }

    def to_specification(self) -> dict[str, Any]:
        """OpenAI Chat Completions function-calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.usage,
                "parameters": self.parameters_schema(),
            },
        }

    def to_anthropic(self) -> dict[str, Any]:
        """Anthropic Messages API tool format."""
        return {
            "name": self.name,
            "description": self.usage,
            "input_schema": self.parameters_schema(),
        }

    # -- Human-readable rendering --

    def signature(self) -> str:
        args = ", ".join(f"{p.name}: {p.type_label}" for p in self.parameters)
        return f"{self.name}({args})"

    def describe(self) -> str:
        return (
            f"\tName:  {self.name}\n"
            f"\tUsage: {self.usage}\n"
            f"\tFunc:  {self.signature()}\n"
        )
