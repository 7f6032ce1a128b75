"""elegant_routes exception hierarchy.

Shared across the resolver, transformer, and route map so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class ElegantRouteError(Exception):
    """Base for all elegant_routes errors."""


class ConfigurationError(ElegantRouteError):
    """Raised when router configuration or declarative input is invalid.

    Typically raised while building a ``RouterConfig``, coercing node
    dicts, or assembling a ``RouteMap`` from a route tree.
    """


class ResolutionError(ElegantRouteError):
    """A component reference on a single route could not be resolved.

    The transformer catches these at the per-route boundary and drops the
    route (and its subtree) from the output.
    """


@dataclass(frozen=True, slots=True)
class ComponentNotFound(ResolutionError):  # noqa: N818 — mirrors NotFound naming
    """A layout or view name is absent from its registry."""

    kind: str
    name: str

    def __str__(self) -> str:
        return f'{self.kind.capitalize()} component "{self.name}" not found'

    def __reduce__(self) -> tuple[type["ComponentNotFound"], tuple[str, str]]:
        return (type(self), (self.kind, self.name))


@dataclass(frozen=True, slots=True)
class MalformedComponentRef(ResolutionError):
    """A component reference does not follow the prefix/splitter convention."""

    ref: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"Malformed component reference {self.ref!r}: {self.reason}"
        return f"Malformed component reference {self.ref!r}"

    def __reduce__(self) -> tuple[type["MalformedComponentRef"], tuple[str, str]]:
        return (type(self), (self.ref, self.reason))
