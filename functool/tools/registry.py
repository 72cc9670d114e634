"""ToolRegistry: explicit tool registration and call-by-name with string arguments.

The agent loop parses the LLM's requested tool call into a name and an ordered
list of strings, then hands both to the registry:

    registry = ToolRegistry()
    registry.register(
        ToolDescriptor("add", "Adds two numbers. a + b",
                       [param("a", "integer"), param("b", "integer")]),
        lambda a, b: a + b,
    )

    observation = registry.call("add", ["3", "4"])
    # Observation: the tool 'add' returned: 7

Handlers can also be registered with the decorator:

    @registry.tool(name="greet", usage="Greets a person", parameters=[param("name")])
    def greet(name: str) -> str:
        return f"Hello, {name}!"

Every failure reachable from `call` comes back as a ToolResponse so the loop can
report it to the LLM; nothing is raised to the caller.
"""
from __future__ import annotations

import inspect
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from functool.config import settings
from functool.tools.adapters import AdaptedArgument, adapt_arguments
from functool.tools.descriptor import (
    ParameterDescriptor,
    ToolDescriptor,
    ToolRegistrationError,
)
from functool.tools.response import ToolResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# BoundTool
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BoundTool:
    """A descriptor paired with the function that implements it."""

    descriptor: ToolDescriptor
    handler: Callable[..., Any]

    @property
    def name(self) -> str:
        return self.descriptor.name

    def adapt(self, args: Sequence[str]) -> list[AdaptedArgument]:
        return adapt_arguments(self.descriptor.parameters, args)

    def invoke(self, adapted: Sequence[AdaptedArgument]) -> Any:
        """Call the handler positionally with already-adapted arguments.

        The result may be an awaitable when the handler is async.
        """
        return self.handler(*(a.value for a in adapted))

    def fallback_names(self, adapted: Sequence[AdaptedArgument]) -> list[str]:
        return [
            p.name
            for p, a in zip(self.descriptor.parameters, adapted)
            if a.used_default
        ]


# ---------------------------------------------------------------------------
# ToolRegistry
# ---------------------------------------------------------------------------

class ToolRegistry:
    """Name-keyed collection of bound tools.

    Registering a name that already exists replaces the old tool, unless the
    registry was created with strict=True, in which case it raises
    ToolRegistrationError. Mutation and reads of the mapping are serialized by
    a lock; handlers always run outside it.
    """

    def __init__(
        self,
        tools: Iterable[BoundTool] = (),
        *,
        strict: bool | None = None,
    ):
        self._tools: dict[str, BoundTool] = {}
        self._lock = threading.RLock()
        self.strict = settings.strict_registration if strict is None else strict
        for bound in tools:
            self.register_tool(bound)

    # -- Registration --

    def register(
        self, descriptor: ToolDescriptor, handler: Callable[..., Any],
    ) -> None:
        """Insert or replace the tool stored under descriptor.name."""
        self.register_tool(BoundTool(descriptor=descriptor, handler=handler))

    def register_tool(self, bound: BoundTool) -> None:
        if not callable(bound.handler):
            raise ToolRegistrationError(f"Handler for tool '{bound.name}' is not callable")

        with self._lock:
            if bound.name in self._tools:
                if self.strict:
                    raise ToolRegistrationError(
                        f"Tool '{bound.name}' is already registered"
                    )
                logger.warning(f"Replacing registered tool: {bound.name}")
            self._tools[bound.name] = bound
        logger.info(f"Registered tool: {bound.descriptor.signature()}")

    def tool(
        self,
        name: str,
        usage: str = "",
        parameters: Sequence[ParameterDescriptor] = (),
    ) -> Callable:
        """Register the decorated function as the handler of a new tool.

        Example:
            @registry.tool(
                name="add",
                usage="Adds two numbers. a + b",
                parameters=[param("a", "integer"), param("b", "integer")],
            )
            def add(a: int, b: int) -> int: ...
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(ToolDescriptor(name, usage, parameters), func)
            return func

        return decorator

    def unregister(self, name: str) -> bool:
        """Remove a tool. Returns True if it was present."""
        with self._lock:
            removed = self._tools.pop(name, None)
        if removed is not None:
            logger.info(f"Unregistered tool: {name}")
        return removed is not None

    # -- Lookups --

    def lookup(self, name: str) -> BoundTool | None:
        with self._lock:
            return self._tools.get(name)

    def is_registered(self, name: str) -> bool:
        return self.lookup(name) is not None

    def names(self) -> list[str]:
        with self._lock:
            return list(self._tools.keys())

    def count(self) -> int:
        return len(self)

    def _snapshot(self) -> list[BoundTool]:
        with self._lock:
            return list(self._tools.values())

    # -- Bulk format conversions --

    def specifications(self) -> list[dict]:
        """Return every tool in OpenAI function-calling format, in registration order."""
        return [t.descriptor.to_specification() for t in self._snapshot()]

    def specifications_for_anthropic(self) -> list[dict]:
        """Return every tool in Anthropic API format, in registration order."""
        return [t.descriptor.to_anthropic() for t in self._snapshot()]

    # -- Tool execution --

    def _resolve(self, name: str, args: Sequence[str]) -> BoundTool | ToolResponse:
        bound = self.lookup(name)
        if bound is None:
            logger.warning(f"Call to unknown tool '{name}'")
            return ToolResponse.not_found(name)

        expected = bound.descriptor.arity
        if len(args) != expected:
            logger.warning(
                f"Tool '{name}' called with {len(args)} arguments, expected {expected}"
            )
            return ToolResponse.arity_mismatch(name, expected, len(args))
        return bound

    def call(self, name: str, args: Sequence[str]) -> ToolResponse:
        """Call a tool by name with string arguments.

        Async handlers must go through `acall`; calling one here is reported
        as a handler failure.
        """
        resolved = self._resolve(name, args)
        if isinstance(resolved, ToolResponse):
            return resolved

        fallbacks: list[str] = []
        try:
            adapted = resolved.adapt(args)
            fallbacks = resolved.fallback_names(adapted)
            result = resolved.invoke(adapted)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(
                    f"tool '{name}' is asynchronous; call it with ToolRegistry.acall()"
                )
            return ToolResponse.success(name, result, fallbacks)
        except Exception as e:
            logger.exception(f"Tool '{name}' execution failed")
            return ToolResponse.handler_failure(name, e, fallbacks)

    async def acall(self, name: str, args: Sequence[str]) -> ToolResponse:
        """Async variant of `call`; awaits handlers that return awaitables.

        Cancellation of the awaiting task propagates to the handler and out
        of this method. No timeout is imposed.
        """
        resolved = self._resolve(name, args)
        if isinstance(resolved, ToolResponse):
            return resolved

        fallbacks: list[str] = []
        try:
            adapted = resolved.adapt(args)
            fallbacks = resolved.fallback_names(adapted)
            result = resolved.invoke(adapted)
            if inspect.isawaitable(result):
                result = await result
            return ToolResponse.success(name, result, fallbacks)
        except Exception as e:
            logger.exception(f"Tool '{name}' execution failed")
            return ToolResponse.handler_failure(name, e, fallbacks)

    # -- Rendering --

    def describe(self) -> str:
        return "\n" + "".join(f"{t.descriptor.describe()}\n" for t in self._snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._tools)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tools

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<ToolRegistry tools=[{', '.join(self.names())}]>"
