"""Tests for elegant_routes.config — RouterConfig frozen dataclass."""

import pytest

from elegant_routes.config import DEFAULT_CONFIG, RouterConfig
from elegant_routes.errors import ConfigurationError


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.layout_prefix == "layout."
        assert cfg.view_prefix == "view."
        assert cfg.composite_splitter == "$"
        assert cfg.degree_splitter == "_"
        assert cfg.param_marker == ":"
        assert cfg.strict_component_refs is False

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == RouterConfig()

    def test_override(self) -> None:
        cfg = RouterConfig(degree_splitter="-", strict_component_refs=True)

        assert cfg.degree_splitter == "-"
        assert cfg.strict_component_refs is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.view_prefix = "page."  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field_name",
        ["layout_prefix", "view_prefix", "composite_splitter", "degree_splitter", "param_marker"],
    )
    def test_empty_marker_rejected(self, field_name: str) -> None:
        with pytest.raises(ConfigurationError, match=field_name):
            RouterConfig(**{field_name: ""})

    def test_identical_prefixes_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="must differ"):
            RouterConfig(layout_prefix="c.", view_prefix="c.")
