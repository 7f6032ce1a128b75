"""Tagged component references.

A declarative route names its component with a string such as
``"layout.base"``, ``"view.home"`` or ``"layout.base$view.home"``.
``parse_component_ref`` reads that string once and returns one of the
frozen variants below, so callers dispatch on type rather than on
string prefixes.
"""

from dataclasses import dataclass
from typing import TypeAlias

from elegant_routes.config import DEFAULT_CONFIG, RouterConfig
from elegant_routes.errors import MalformedComponentRef


@dataclass(frozen=True, slots=True)
class LayoutRef:
    """Reference to an entry in the layout registry."""

    name: str


@dataclass(frozen=True, slots=True)
class ViewRef:
    """Reference to an entry in the view registry."""

    name: str


@dataclass(frozen=True, slots=True)
class CompositeRef:
    """A layout and a view bound together for a single-level route.

    The layout becomes the parent record and the view its only child.
    """

    layout: str
    view: str


@dataclass(frozen=True, slots=True)
class UnknownRef:
    """A reference matching neither the layout nor the view prefix."""

    raw: str


ComponentRef: TypeAlias = LayoutRef | ViewRef | CompositeRef | UnknownRef


def is_layout_ref(ref: str, config: RouterConfig = DEFAULT_CONFIG) -> bool:
    """True if *ref* starts with the layout prefix."""
    return ref.startswith(config.layout_prefix)


def is_view_ref(ref: str, config: RouterConfig = DEFAULT_CONFIG) -> bool:
    """True if *ref* starts with the view prefix."""
    return ref.startswith(config.view_prefix)


def split_composite_ref(
    ref: str, config: RouterConfig = DEFAULT_CONFIG
) -> tuple[str, str]:
    """Split a composite reference into its layout and view halves.

    Raises ``MalformedComponentRef`` unless *ref* contains exactly one
    composite splitter with a layout reference on the left and a view
    reference on the right.
    """
    parts = ref.split(config.composite_splitter)
    if len(parts) != 2:
        reason = (
            f"expected exactly one {config.composite_splitter!r} separating "
            f"layout and view, found {len(parts) - 1}"
        )
        raise MalformedComponentRef(ref, reason)

    layout, view = parts
    if not is_layout_ref(layout, config):
        raise MalformedComponentRef(
            ref, f"left side must start with {config.layout_prefix!r}"
        )
    if not is_view_ref(view, config):
        raise MalformedComponentRef(
            ref, f"right side must start with {config.view_prefix!r}"
        )
    return layout, view


def parse_component_ref(ref: str, config: RouterConfig = DEFAULT_CONFIG) -> ComponentRef:
    """Parse a component reference string into a tagged variant.

    Examples::

        "layout.base"            -> LayoutRef("base")
        "view.manage_user"       -> ViewRef("manage_user")
        "layout.base$view.home"  -> CompositeRef("base", "home")
        "widget.chart"           -> UnknownRef("widget.chart")

    Raises ``MalformedComponentRef`` for a string that contains the
    composite splitter but is not a well-formed layout/view pair.
    """
    if config.composite_splitter in ref:
        layout, view = split_composite_ref(ref, config)
        return CompositeRef(
            layout=layout.removeprefix(config.layout_prefix),
            view=view.removeprefix(config.view_prefix),
        )
    if is_layout_ref(ref, config):
        return LayoutRef(ref.removeprefix(config.layout_prefix))
    if is_view_ref(ref, config):
        return ViewRef(ref.removeprefix(config.view_prefix))
    return UnknownRef(ref)
