"""Tests for elegant_routes.components.resolve — binding references to handles."""

import logging

import pytest

from elegant_routes.components.refs import CompositeRef, LayoutRef, UnknownRef, ViewRef
from elegant_routes.components.registry import ComponentRegistry
from elegant_routes.components.resolve import (
    resolve_composite,
    resolve_layout,
    resolve_ref,
    resolve_view,
)
from elegant_routes.config import RouterConfig
from elegant_routes.errors import ComponentNotFound, MalformedComponentRef


def _base_layout() -> str:
    return "base"


def _user_detail_view() -> str:
    return "user-detail"


LAYOUTS = ComponentRegistry("layout", {"base": _base_layout})
VIEWS = ComponentRegistry("view", {"manage_user-detail": _user_detail_view})


class TestResolveLayout:
    def test_found(self) -> None:
        assert resolve_layout("layout.base", LAYOUTS) is _base_layout

    def test_missing(self) -> None:
        with pytest.raises(ComponentNotFound, match='Layout component "blank" not found'):
            resolve_layout("layout.blank", LAYOUTS)

    def test_wrong_prefix(self) -> None:
        with pytest.raises(MalformedComponentRef):
            resolve_layout("view.base", LAYOUTS)


class TestResolveView:
    def test_found(self) -> None:
        assert resolve_view("view.manage_user-detail", VIEWS) is _user_detail_view

    def test_missing(self) -> None:
        with pytest.raises(ComponentNotFound, match='View component "home" not found'):
            resolve_view("view.home", VIEWS)


class TestResolveComposite:
    def test_pair(self) -> None:
        layout, view = resolve_composite("layout.base$view.manage_user-detail", LAYOUTS, VIEWS)
        assert layout is _base_layout
        assert view is _user_detail_view

    def test_missing_view(self) -> None:
        with pytest.raises(ComponentNotFound) as exc_info:
            resolve_composite("layout.base$view.home", LAYOUTS, VIEWS)
        assert exc_info.value.kind == "view"

    def test_missing_layout(self) -> None:
        with pytest.raises(ComponentNotFound) as exc_info:
            resolve_composite("layout.blank$view.manage_user-detail", LAYOUTS, VIEWS)
        assert exc_info.value.kind == "layout"

    def test_no_splitter(self) -> None:
        with pytest.raises(MalformedComponentRef):
            resolve_composite("layout.base", LAYOUTS, VIEWS)


class TestResolveRef:
    def test_layout_ref(self) -> None:
        assert resolve_ref(LayoutRef("base"), LAYOUTS, VIEWS) is _base_layout

    def test_view_ref(self) -> None:
        assert resolve_ref(ViewRef("manage_user-detail"), LAYOUTS, VIEWS) is _user_detail_view

    def test_composite_rejected(self) -> None:
        with pytest.raises(MalformedComponentRef, match="first-level"):
            resolve_ref(CompositeRef("base", "home"), LAYOUTS, VIEWS)

    def test_unknown_skipped_with_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="elegant_routes.resolve"):
            assert resolve_ref(UnknownRef("widget.chart"), LAYOUTS, VIEWS) is None
        assert any("widget.chart" in r.getMessage() for r in caplog.records)

    def test_unknown_strict(self) -> None:
        cfg = RouterConfig(strict_component_refs=True)
        with pytest.raises(MalformedComponentRef, match="widget.chart"):
            resolve_ref(UnknownRef("widget.chart"), LAYOUTS, VIEWS, cfg)
