"""ToolResponse: the result of a registry call.

Agent loops usually just forward `str(response)` to the LLM as the observation
for the tool call; `outcome` lets code branch without matching on the text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from functool.config import settings


class ToolOutcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ARITY_MISMATCH = "arity_mismatch"
    HANDLER_FAILURE = "handler_failure"


@dataclass(frozen=True)
class ToolResponse:
    tool_name: str
    outcome: ToolOutcome
    text: str
    value: Any = None
    fallbacks: tuple[str, ...] = ()  # parameters that were replaced by defaults
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is ToolOutcome.SUCCESS

    def __str__(self) -> str:
        return self.text

    # -- Constructors --

    @classmethod
    def not_found(cls, name: str) -> "ToolResponse":
        text = (
            f"{settings.observation_prefix}Error. "
            f"No tool named '{name}' found in the tools registry."
        )
        return cls(tool_name=name, outcome=ToolOutcome.NOT_FOUND, text=text)

    @classmethod
    def arity_mismatch(cls, name: str, expected: int, given: int) -> "ToolResponse":
        text = (
            f"{settings.observation_prefix}Error using tool named '{name}'. "
            f"The tool '{name}' expects {expected} arguments, but {given} were given."
        )
        return cls(tool_name=name, outcome=ToolOutcome.ARITY_MISMATCH, text=text)

    @classmethod
    def success(
        cls, name: str, value: Any, fallbacks: Sequence[str] = (),
    ) -> "ToolResponse":
        text = f"{settings.observation_prefix}the tool '{name}' returned: {value!s}"
        if fallbacks and settings.report_fallbacks:
            text += (
                f" (warning: could not parse arguments {', '.join(fallbacks)}; "
                f"default values were used)"
            )
        return cls(
            tool_name=name,
            outcome=ToolOutcome.SUCCESS,
            text=text,
            value=value,
            fallbacks=tuple(fallbacks),
        )

    @classmethod
    def handler_failure(
        cls, name: str, exc: BaseException, fallbacks: Sequence[str] = (),
    ) -> "ToolResponse":
        reason = f"{type(exc).__name__}: {exc}"
        text = (
            f"{settings.observation_prefix}Error using tool named '{name}'. "
            f"The tool '{name}' failed: {reason}"
        )
        return cls(
            tool_name=name,
            outcome=ToolOutcome.HANDLER_FAILURE,
            text=text,
            fallbacks=tuple(fallbacks),
            error=reason,
        )
