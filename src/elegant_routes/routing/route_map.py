"""Route map — bidirectional lookup between route names and path patterns.

Paths are compared as plain strings; no pattern matching happens here.
Reverse lookup scans in declaration order and returns the first name
whose path is equal, so reordering the table can change which name wins
when two routes share a path.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from elegant_routes.errors import ConfigurationError
from elegant_routes.routing.types import RouteNode, coerce_node


class RouteMap:
    """Immutable ordered table of ``name -> path`` pairs.

    Usage::

        route_map = RouteMap({"home": "/home", "manage_menu": "/manage/menu"})
        route_map.path_of("home")          # "/home"
        route_map.name_of("/manage/menu")  # "manage_menu"
        route_map.name_of("/nope")         # None
    """

    __slots__ = ("_paths",)

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        self._paths: dict[str, str] = dict(entries)

    @classmethod
    def from_routes(cls, nodes: Iterable[RouteNode | Mapping[str, Any]]) -> "RouteMap":
        """Collect ``name -> path`` from a declarative tree, depth-first.

        Raises ``ConfigurationError`` if a name appears twice.
        """
        paths: dict[str, str] = {}

        def _collect(node: RouteNode) -> None:
            if node.name in paths:
                msg = f"Duplicate route name {node.name!r} ({paths[node.name]!r} and {node.path!r})"
                raise ConfigurationError(msg)
            paths[node.name] = node.path
            for child in node.children:
                _collect(child)

        for node in nodes:
            _collect(coerce_node(node))
        return cls(paths)

    def path_of(self, name: str) -> str | None:
        """Return the path pattern for *name*, or ``None``."""
        return self._paths.get(name)

    def name_of(self, path: str) -> str | None:
        """Return the first name whose path pattern equals *path*, or ``None``."""
        for name, route_path in self._paths.items():
            if route_path == path:
                return name
        return None

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._paths.items())

    def __contains__(self, name: object) -> bool:
        return name in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"RouteMap({self._paths!r})"


ROUTE_MAP = RouteMap(
    {
        "root": "/",
        "not-found": "/:pathMatch(.*)*",
        "403": "/403",
        "404": "/404",
        "500": "/500",
        "home": "/home",
        "iframe-page": "/iframe-page/:url",
        "login": "/login/:module(pwd-login|code-login|register|reset-pwd|bind-wechat)?",
        "manage": "/manage",
        "manage_menu": "/manage/menu",
        "manage_role": "/manage/role",
        "manage_user": "/manage/user",
        "manage_user-detail": "/manage/user-detail/:id",
    }
)


def get_route_path(name: str) -> str | None:
    """Get the path pattern of a route by name."""
    return ROUTE_MAP.path_of(name)


def get_route_name(path: str) -> str | None:
    """Get the route name for an exact path pattern."""
    return ROUTE_MAP.name_of(path)
