"""
envy
====

Startup validation of required environment variables.

>>> import envy
>>> requirements = envy.init(parse=".env")
>>> envy.HASHING_SALT
'...'

After a successful `init`, each required variable with an upper-case name
is readable as an attribute of this package. The values are held by the
process-wide `registry`; attribute access is a read-only view of it.
Other names are reachable through `registry.get(name)`.
"""

import logging
import sys
import types

from .binder import init
from .environment import environment
from .env_loader import load_overrides
from .errors import (
    EnvyError,
    FileNotFound,
    InvalidConfiguration,
    MissingVariable,
    UnknownEnvironment,
)
from .registry import BindingRegistry, registry
from .requirements import Requirement, load_requirements, load_store
from .sinks import NamespaceSink, PropertySink

__version__ = "0.1.0"

__all__ = [
    "BindingRegistry",
    "EnvyError",
    "FileNotFound",
    "InvalidConfiguration",
    "MissingVariable",
    "NamespaceSink",
    "PropertySink",
    "Requirement",
    "UnknownEnvironment",
    "environment",
    "init",
    "load_overrides",
    "load_requirements",
    "load_store",
    "registry",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def _is_binding_name(name: str) -> bool:
    return name.isupper()


def __getattr__(name: str) -> str:
    if _is_binding_name(name) and name in registry:
        return registry[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


class _EnvyModule(types.ModuleType):
    """Package module whose upper-case attributes are read-only bindings."""

    def __setattr__(self, name, value):
        if _is_binding_name(name):
            raise AttributeError(f"binding {name!r} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if _is_binding_name(name):
            raise AttributeError(f"binding {name!r} is read-only")
        super().__delattr__(name)


sys.modules[__name__].__class__ = _EnvyModule
