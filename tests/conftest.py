"""Test configuration and fixtures."""
import pytest

from functool.config import settings
from functool.tools import ToolDescriptor, ToolRegistry, param


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin settings to their defaults so FUNCTOOL_* env vars can't leak in."""
    monkeypatch.setattr(settings, "strict_registration", False)
    monkeypatch.setattr(settings, "observation_prefix", "Observation: ")
    monkeypatch.setattr(settings, "report_fallbacks", True)
    yield settings


# ---------------------------------------------------------------------------
# Descriptor fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def add_descriptor():
    return ToolDescriptor(
        name="add",
        usage="Adds two numbers together. a + b",
        parameters=[param("a", "integer"), param("b", "integer")],
    )


@pytest.fixture
def greet_descriptor():
    return ToolDescriptor(
        name="greet",
        usage="Greets a person",
        parameters=[param("name", "string", "Who to greet")],
    )


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def calls():
    """Records every handler invocation as a tuple of its arguments."""
    return []


@pytest.fixture
def math_registry(registry, add_descriptor, calls):
    def add(a, b):
        calls.append((a, b))
        return a + b

    registry.register(add_descriptor, add)
    return registry
