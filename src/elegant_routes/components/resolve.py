"""Name resolution — bind component references to registry handles.

Every function here raises a ``ResolutionError`` subclass on failure;
containment is the transformer's job.
"""

import logging

from elegant_routes.components.refs import (
    ComponentRef,
    CompositeRef,
    LayoutRef,
    UnknownRef,
    ViewRef,
    is_layout_ref,
    is_view_ref,
    split_composite_ref,
)
from elegant_routes.components.registry import ComponentHandle, ComponentRegistry
from elegant_routes.config import DEFAULT_CONFIG, RouterConfig
from elegant_routes.errors import MalformedComponentRef

logger = logging.getLogger("elegant_routes.resolve")


def resolve_layout(
    ref: str,
    registry: ComponentRegistry,
    config: RouterConfig = DEFAULT_CONFIG,
) -> ComponentHandle:
    """Resolve ``"layout.<name>"`` against the layout registry.

    Raises ``MalformedComponentRef`` if *ref* lacks the layout prefix and
    ``ComponentNotFound`` if the name is not registered.
    """
    if not is_layout_ref(ref, config):
        raise MalformedComponentRef(ref, f"expected prefix {config.layout_prefix!r}")
    return registry.require(ref.removeprefix(config.layout_prefix))


def resolve_view(
    ref: str,
    registry: ComponentRegistry,
    config: RouterConfig = DEFAULT_CONFIG,
) -> ComponentHandle:
    """Resolve ``"view.<name>"`` against the view registry."""
    if not is_view_ref(ref, config):
        raise MalformedComponentRef(ref, f"expected prefix {config.view_prefix!r}")
    return registry.require(ref.removeprefix(config.view_prefix))


def resolve_composite(
    ref: str,
    layouts: ComponentRegistry,
    views: ComponentRegistry,
    config: RouterConfig = DEFAULT_CONFIG,
) -> tuple[ComponentHandle, ComponentHandle]:
    """Resolve ``"layout.<a>$view.<b>"`` into a ``(layout, view)`` pair."""
    layout_ref, view_ref = split_composite_ref(ref, config)
    return (
        resolve_layout(layout_ref, layouts, config),
        resolve_view(view_ref, views, config),
    )


def resolve_ref(
    ref: ComponentRef,
    layouts: ComponentRegistry,
    views: ComponentRegistry,
    config: RouterConfig = DEFAULT_CONFIG,
) -> ComponentHandle | None:
    """Resolve a parsed single-component reference.

    Returns ``None`` for an ``UnknownRef`` unless the config is strict.
    A ``CompositeRef`` is only meaningful on a first-level leaf route, so
    it is rejected here.
    """
    match ref:
        case LayoutRef(name=name):
            return layouts.require(name)
        case ViewRef(name=name):
            return views.require(name)
        case CompositeRef():
            raise MalformedComponentRef(
                f"{config.layout_prefix}{ref.layout}{config.composite_splitter}"
                f"{config.view_prefix}{ref.view}",
                "layout/view pairs are only allowed on first-level routes without children",
            )
        case UnknownRef(raw=raw):
            if config.strict_component_refs:
                raise MalformedComponentRef(
                    raw,
                    f"expected prefix {config.layout_prefix!r} or {config.view_prefix!r}",
                )
            logger.warning("Component reference %r matches no known prefix; skipped", raw)
            return None
