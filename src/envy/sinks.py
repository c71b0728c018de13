"""
Property sinks
==============

Targets that receive each validated value when `envy.init` is called
with `use=`.

A sink exposes a single capability, `set_property(name, value)`, and is
called once per requirement with the lower-cased variable name.
"""

from types import SimpleNamespace
from typing import Protocol, runtime_checkable


@runtime_checkable
class PropertySink(Protocol):
    """Anything that accepts named string properties."""

    def set_property(self, name: str, value: str) -> None:
        ...


class NamespaceSink(SimpleNamespace):
    """
    Attribute bag that stores every property it receives.

    >>> sink = NamespaceSink()
    >>> sink.set_property("foo", "bar")
    >>> sink.foo
    'bar'
    """

    def set_property(self, name: str, value: str) -> None:
        setattr(self, name, value)
