"""Route tree transformer — declarative routes to navigation records.

Walks the declarative tree depth-first and produces records the way a
vue-router style engine wants them: first-level routes keep their
children nested (for layout composition), deeper levels are flattened
into sibling records.

Usage::

    records = transform_routes(routes, layouts={"base": BaseLayout}, views=views)
    router_table = [record.to_dict() for record in records]
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from elegant_routes.components.refs import parse_component_ref
from elegant_routes.components.registry import ComponentHandle, ComponentRegistry
from elegant_routes.components.resolve import resolve_composite, resolve_ref
from elegant_routes.config import DEFAULT_CONFIG, RouterConfig
from elegant_routes.errors import ResolutionError
from elegant_routes.routing.result import RouteFailure, TransformResult
from elegant_routes.routing.types import RouteNode, RouteRecord, coerce_node

logger = logging.getLogger("elegant_routes.transform")

NodeInput: TypeAlias = RouteNode | Mapping[str, Any]
RegistryInput: TypeAlias = ComponentRegistry | Mapping[str, ComponentHandle]


class RouteTransformer:
    """Transforms declarative routes against a fixed pair of registries.

    A route whose component cannot be resolved is logged and dropped
    along with its subtree; its siblings are transformed normally.
    """

    __slots__ = ("_config", "_layouts", "_views")

    def __init__(
        self,
        layouts: RegistryInput,
        views: RegistryInput,
        config: RouterConfig | None = None,
    ) -> None:
        self._layouts = ComponentRegistry.coerce("layout", layouts)
        self._views = ComponentRegistry.coerce("view", views)
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RouterConfig:
        return self._config

    def transform(self, nodes: Iterable[NodeInput]) -> list[RouteRecord]:
        """Transform root routes into records, flat-mapped in input order."""
        return list(self.transform_with_report(nodes).records)

    def transform_with_report(self, nodes: Iterable[NodeInput]) -> TransformResult:
        """Like ``transform`` but also report every skipped route."""
        return TransformResult.combine(self.transform_node(node) for node in nodes)

    def transform_node(self, node: NodeInput) -> TransformResult:
        """Transform one route and its subtree.

        The route's own record always comes first in ``records``. For a
        route below the first level, its descendants follow as siblings.
        """
        node = coerce_node(node)
        config = self._config

        props = node.props
        if props is None and node.has_params(config):
            props = True

        try:
            if node.component and self._wraps_in_layout(node, node.component):
                record = self._single_level_record(node, node.component, props)
                return TransformResult(records=(record,))
            component = self._resolve_component(node.component)
        except ResolutionError as exc:
            logger.error("Error transforming route %r: %s", node.name, exc)
            return TransformResult(failures=(RouteFailure(node.name, exc),))

        if not node.children:
            record = RouteRecord(
                path=node.path,
                name=node.name,
                component=component,
                redirect=node.redirect,
                meta=_copy_meta(node.meta),
                props=props,
                extra=dict(node.extra),
            )
            return TransformResult(records=(record,))

        redirect = node.redirect
        if redirect is None:
            redirect = {"name": node.children[0].name}

        descendants = TransformResult.combine(
            self.transform_node(child) for child in node.children
        )
        nest = node.is_first_level(config)

        record = RouteRecord(
            path=node.path,
            name=node.name,
            component=component,
            children=descendants.records if nest else None,
            redirect=redirect,
            meta=_copy_meta(node.meta),
            props=props,
            extra=dict(node.extra),
        )
        spliced = () if nest else descendants.records
        return TransformResult(records=(record, *spliced), failures=descendants.failures)

    def _wraps_in_layout(self, node: RouteNode, ref: str) -> bool:
        """A leaf wraps in its layout if it is first-level or names a layout/view pair."""
        if node.is_single_level(self._config):
            return True
        return not node.children and self._config.composite_splitter in ref

    def _resolve_component(self, ref: str | None) -> ComponentHandle | None:
        if not ref:
            return None
        parsed = parse_component_ref(ref, self._config)
        return resolve_ref(parsed, self._layouts, self._views, self._config)

    def _single_level_record(self, node: RouteNode, ref: str, props: Any) -> RouteRecord:
        """Wrap a leaf route in its layout.

        The layout record takes the path and the title; the view becomes
        its only child, named after the route, at the empty relative path.
        """
        layout, view = resolve_composite(ref, self._layouts, self._views, self._config)

        title = (node.meta or {}).get("title") or ""
        child = RouteRecord(
            path="",
            name=node.name,
            component=view,
            redirect=node.redirect,
            meta=_copy_meta(node.meta),
            props=props,
            extra=dict(node.extra),
        )
        return RouteRecord(
            path=node.path,
            component=layout,
            meta={"title": title},
            children=(child,),
        )


def _copy_meta(meta: Mapping[str, Any] | None) -> dict[str, Any] | None:
    return None if meta is None else dict(meta)


def transform_routes(
    nodes: Iterable[NodeInput],
    layouts: RegistryInput,
    views: RegistryInput,
    config: RouterConfig | None = None,
) -> list[RouteRecord]:
    """Transform declarative root routes into navigation records.

    Args:
        nodes: Root routes, as ``RouteNode`` objects or plain dicts.
        layouts: Layout registry (``ComponentRegistry`` or mapping).
        views: View registry (``ComponentRegistry`` or mapping).
        config: Marker conventions; defaults to ``DEFAULT_CONFIG``.

    Returns:
        Records in input order. Routes that failed to resolve, and their
        subtrees, are absent; failures are logged, never raised.
    """
    return RouteTransformer(layouts, views, config).transform(nodes)
