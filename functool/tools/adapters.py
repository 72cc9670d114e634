"""Argument adapters: turn the raw strings an LLM sends into typed handler arguments.

Every adapter follows the same policy: try to parse the string, and if that
fails substitute the type's zero value instead of rejecting the call. The
substitution is recorded on the returned AdaptedArgument so the registry can
report which arguments were defaulted.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from functool.tools.descriptor import ParameterDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdaptedArgument:
    """One string argument after conversion."""

    raw: str
    value: Any
    used_default: bool = False


@dataclass(frozen=True)
class ArgumentAdapter:
    """Construct-from-string with a defined fallback.

    `parse` may raise ValueError or TypeError; `default` builds the value used
    in that case.
    """

    label: str
    parse: Callable[[str], Any]
    default: Callable[[], Any]

    def adapt(self, raw: str) -> AdaptedArgument:
        # Loosely decoded tool calls can carry numbers or booleans
        if not isinstance(raw, str):
            raw = str(raw)
        try:
            return AdaptedArgument(raw=raw, value=self.parse(raw))
        except (ValueError, TypeError):
            return AdaptedArgument(raw=raw, value=self.default(), used_default=True)


# ---------------------------------------------------------------------------
# Built-in adapters
# ---------------------------------------------------------------------------

_TRUE_WORDS = {"true", "1", "yes"}
_FALSE_WORDS = {"false", "0", "no"}


def _parse_int(raw: str) -> int:
    return int(raw.strip())


def _parse_float(raw: str) -> float:
    value = float(raw.strip())
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"not a finite number: {raw!r}")
    return value


def _parse_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


STRING = ArgumentAdapter("string", str, str)
INTEGER = ArgumentAdapter("integer", _parse_int, int)
NUMBER = ArgumentAdapter("number", _parse_float, float)
BOOLEAN = ArgumentAdapter("boolean", _parse_bool, bool)

# Type label → adapter. Labels are display strings, so accept the common
# spellings LLM schemas and Python/Swift signatures use.
_LABEL_MAP: dict[str, ArgumentAdapter] = {
    "string": STRING,
    "str": STRING,
    "integer": INTEGER,
    "int": INTEGER,
    "number": NUMBER,
    "float": NUMBER,
    "double": NUMBER,
    "boolean": BOOLEAN,
    "bool": BOOLEAN,
}


def adapter_for_label(type_label: str) -> ArgumentAdapter:
    """Return the built-in adapter for a type label (case-insensitive).

    Unknown labels get STRING, i.e. the raw argument is passed through.
    """
    return _LABEL_MAP.get(type_label.strip().lower(), STRING)


def adapt_arguments(
    parameters: Sequence["ParameterDescriptor"],
    raw_args: Sequence[str],
) -> list[AdaptedArgument]:
    """Adapt raw_args positionally against parameters.

    Callers must check arity first; extra arguments on either side are ignored.
    """
    adapted: list[AdaptedArgument] = []
    for param, raw in zip(parameters, raw_args):
        arg = param.resolved_adapter.adapt(raw)
        if arg.used_default:
            logger.warning(
                f"Argument '{param.name}' could not be parsed as {param.type_label} "
                f"(got {raw!r}); using default {arg.value!r}"
            )
        adapted.append(arg)
    return adapted
