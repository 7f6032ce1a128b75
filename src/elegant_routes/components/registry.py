"""Component registries — name to loadable component handle.

Handles are opaque to the router: a component object, or a zero-argument
loader (often async) that produces one. They are passed through to the
output records and never invoked here.
"""

from collections.abc import Awaitable, Callable, Iterator, Mapping
from typing import Any, TypeAlias

from elegant_routes.errors import ComponentNotFound

ComponentHandle: TypeAlias = Any | Callable[[], Awaitable[Any]]


class ComponentRegistry:
    """Read-only lookup of component handles by bare name.

    Usage::

        layouts = ComponentRegistry("layout", {"base": BaseLayout})
        layouts.get("base")      # BaseLayout
        layouts.get("blank")     # None
        layouts.require("blank") # raises ComponentNotFound
    """

    __slots__ = ("_entries", "kind")

    def __init__(self, kind: str, entries: Mapping[str, ComponentHandle] | None = None) -> None:
        self.kind = kind
        # None handles are dropped
        self._entries: dict[str, ComponentHandle] = {
            name: handle for name, handle in (entries or {}).items() if handle is not None
        }

    @classmethod
    def coerce(
        cls, kind: str, entries: "ComponentRegistry | Mapping[str, ComponentHandle]"
    ) -> "ComponentRegistry":
        """Return *entries* as a registry, wrapping plain mappings."""
        if isinstance(entries, ComponentRegistry):
            return entries
        return cls(kind, entries)

    def get(self, name: str) -> ComponentHandle | None:
        """Return the handle for *name*, or ``None`` if it is not registered."""
        return self._entries.get(name)

    def require(self, name: str) -> ComponentHandle:
        """Return the handle for *name* or raise ``ComponentNotFound``."""
        handle = self.get(name)
        if handle is None:
            raise ComponentNotFound(self.kind, name)
        return handle

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ComponentRegistry({self.kind!r}, names={sorted(self._entries)!r})"
