"""Declarative route nodes and concrete routing records.

Both are frozen dataclasses. ``RouteNode`` is the input tree as written
in (generated) configuration; ``RouteRecord`` is what the navigation
engine consumes. Transformation always builds new records and never
touches the nodes it reads.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from elegant_routes.config import DEFAULT_CONFIG, RouterConfig
from elegant_routes.errors import ConfigurationError

# Keys with dedicated fields; anything else in a node dict is passthrough
_NODE_FIELDS = frozenset({"name", "path", "component", "children", "meta", "props", "redirect"})


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A declarative route before component resolution.

    Attributes:
        name: Unique route name. Hierarchy segments are joined by the
            degree splitter (``"manage_user"`` sits under ``"manage"``).
        path: Absolute URL pattern, may contain ``:param`` segments.
        component: Symbolic reference (``"layout.base"``, ``"view.home"``,
            or ``"layout.base$view.home"``), if any.
        children: Nested routes in declaration order.
        meta: Route metadata, forwarded as-is.
        props: Explicit props setting. ``None`` means unset.
        redirect: Explicit redirect. ``None`` means unset.
        extra: Any other passthrough fields.
    """

    name: str
    path: str
    component: str | None = None
    children: tuple["RouteNode", ...] = ()
    meta: Mapping[str, Any] | None = None
    props: Any = None
    redirect: Any = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def is_first_level(self, config: RouterConfig = DEFAULT_CONFIG) -> bool:
        """True if the name carries no hierarchy separator."""
        return config.degree_splitter not in self.name

    def is_single_level(self, config: RouterConfig = DEFAULT_CONFIG) -> bool:
        """True for a first-level route with no children."""
        return self.is_first_level(config) and not self.children

    def has_params(self, config: RouterConfig = DEFAULT_CONFIG) -> bool:
        return config.param_marker in self.path

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RouteNode":
        """Build a node (and its subtree) from the plain-dict form.

        Unknown keys are kept in ``extra``. Raises ``ConfigurationError``
        when ``name`` or ``path`` is missing or not a string, or when
        ``children`` is not a list of mappings.
        """
        name = data.get("name")
        path = data.get("path")
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Route node needs a non-empty string 'name', got {name!r}")
        if not isinstance(path, str):
            raise ConfigurationError(f"Route {name!r} needs a string 'path', got {path!r}")

        component = data.get("component")
        if component is not None and not isinstance(component, str):
            raise ConfigurationError(
                f"Route {name!r} has a non-string component reference: {component!r}"
            )

        raw_children = data.get("children") or ()
        if isinstance(raw_children, (str, Mapping)) or not isinstance(raw_children, Sequence):
            raise ConfigurationError(f"Route {name!r} children must be a list of route nodes")

        return cls(
            name=name,
            path=path,
            component=component,
            children=tuple(coerce_node(child) for child in raw_children),
            meta=data.get("meta"),
            props=data.get("props"),
            redirect=data.get("redirect"),
            extra={k: v for k, v in data.items() if k not in _NODE_FIELDS},
        )


def coerce_node(node: RouteNode | Mapping[str, Any]) -> RouteNode:
    """Return *node* as a ``RouteNode``, converting plain dicts."""
    if isinstance(node, RouteNode):
        return node
    if isinstance(node, Mapping):
        return RouteNode.from_dict(node)
    raise ConfigurationError(f"Expected a route node or mapping, got {type(node).__name__}")


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """A resolved route, shaped for the navigation engine's route table.

    ``name`` is ``None`` only for the layout parent generated for a
    single-level route; the named record is its child.
    """

    path: str
    name: str | None = None
    component: Any = None
    children: tuple["RouteRecord", ...] | None = None
    redirect: Any = None
    meta: Mapping[str, Any] | None = None
    props: Any = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Render as a plain route dict, omitting unset keys.

        Passthrough fields from ``extra`` are flattened into the top level.
        """
        out: dict[str, Any] = {}
        if self.name is not None:
            out["name"] = self.name
        out["path"] = self.path
        if self.component is not None:
            out["component"] = self.component
        if self.redirect is not None:
            out["redirect"] = self.redirect
        if self.meta is not None:
            out["meta"] = dict(self.meta)
        if self.props is not None:
            out["props"] = self.props
        out.update(self.extra)
        if self.children is not None:
            out["children"] = [child.to_dict() for child in self.children]
        return out


def iter_records(records: Iterable[RouteRecord]) -> Iterator[RouteRecord]:
    """Yield every record depth-first, parents before their nested children."""
    for record in records:
        yield record
        if record.children:
            yield from iter_records(record.children)
