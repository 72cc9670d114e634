"""Example client: registers a few tools and calls them the way an agent loop would."""
import logging
import random
from dataclasses import dataclass

from functool.config import settings
from functool.tools import ToolDescriptor, ToolRegistry, param


def foo(a: int, b: int) -> int:
    return a + b


@dataclass
class Person:
    """Any return value with a text rendering can be handed back to the LLM."""

    name: str
    age: int

    def __str__(self) -> str:
        return f"{self.name} is {self.age} years old"


def make_person(name: str, age: int) -> Person:
    return Person(name=name, age=age)


def add(a: int = 1, b: int = -1) -> int:
    return a + b


def build_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        ToolDescriptor(
            name="foo",
            usage="Adds together two numbers a + b",
            parameters=[param("a", "integer"), param("b", "integer")],
        ),
        foo,
    )
    registry.register(
        ToolDescriptor(
            name="makePerson",
            parameters=[param("name", "string"), param("age", "integer")],
        ),
        make_person,
    )
    registry.register(
        ToolDescriptor(
            name="add",
            parameters=[
                param("a", "integer", required=False),
                param("b", "integer", required=False),
            ],
        ),
        add,
    )
    return registry


def main() -> None:
    logging.basicConfig(level=settings.log_level)

    registry = build_registry()
    print(f"Tool Registry: {registry}")
    print(registry.call("foo", [str(random.randint(1, 9)), "4"]))
    print(registry.call("makePerson", ["Alice", str(random.randint(0, 99))]))
    print(registry.call("add", []))
