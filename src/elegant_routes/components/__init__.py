"""Components — symbolic references and the registries they resolve against.

A route's ``component`` is a string such as ``"layout.base"`` or
``"view.manage_user"``. It is parsed into a tagged reference and bound
to a handle from the layout or view registry.
"""

from elegant_routes.components.refs import (
    ComponentRef,
    CompositeRef,
    LayoutRef,
    UnknownRef,
    ViewRef,
    is_layout_ref,
    is_view_ref,
    parse_component_ref,
)
from elegant_routes.components.registry import ComponentHandle, ComponentRegistry
from elegant_routes.components.resolve import (
    resolve_composite,
    resolve_layout,
    resolve_ref,
    resolve_view,
)

__all__ = [
    "ComponentHandle",
    "ComponentRef",
    "ComponentRegistry",
    "CompositeRef",
    "LayoutRef",
    "UnknownRef",
    "ViewRef",
    "is_layout_ref",
    "is_view_ref",
    "parse_component_ref",
    "resolve_composite",
    "resolve_layout",
    "resolve_ref",
    "resolve_view",
]
