"""
Binding Registry
================

Process-wide store of the values published by the last `envy.init`
call.

A binding is a name mapped to the string value of the environment
variable with the same name. Bindings change only through `publish`
and `clear`; readers get them through `get`, item access, or the
read-only `bindings` view.

Notes
-----
- The registry is not thread-safe. At most one `init` call should run
  against a registry at a time.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

logger = logging.getLogger(__name__)


class BindingRegistry:
    """
    Ordered name-to-value store with an explicit reset.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, str] = {}

    @property
    def bindings(self) -> Mapping[str, str]:
        """Live read-only view of the published bindings."""
        return MappingProxyType(self._bindings)

    def publish(self, name: str, value: str) -> None:
        """
        Publish `value` under `name`, replacing any existing binding.
        """
        self._bindings.pop(name, None)
        self._bindings[name] = value

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._bindings.get(name, default)

    def names(self) -> List[str]:
        """Published names, in publication order."""
        return list(self._bindings)

    def clear(self) -> None:
        """
        Remove every published binding.
        """
        if self._bindings:
            logger.debug("Clearing %d binding(s)", len(self._bindings))
        self._bindings.clear()

    clear_all = clear

    def __getitem__(self, name: str) -> str:
        return self._bindings[name]

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(names={self.names()!r})"


# Default registry shared by `envy.init` and `envy.<NAME>` lookups.
registry = BindingRegistry()
