"""Router configuration.

One frozen ``RouterConfig`` holds every marker the resolver and transformer
read. Defaults follow the conventions of generated elegant route trees.
"""

from dataclasses import dataclass

from elegant_routes.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Markers used to read declarative routes. Immutable after creation.

    Override what you need::

        config = RouterConfig(degree_splitter="-", strict_component_refs=True)
    """

    # Component references
    layout_prefix: str = "layout."
    view_prefix: str = "view."
    composite_splitter: str = "$"  # "layout.base$view.home"

    # Route names and paths
    degree_splitter: str = "_"  # "manage_user" is a second-level route
    param_marker: str = ":"

    # Unknown prefixes raise MalformedComponentRef instead of being skipped
    strict_component_refs: bool = False

    def __post_init__(self) -> None:
        for field_name in (
            "layout_prefix",
            "view_prefix",
            "composite_splitter",
            "degree_splitter",
            "param_marker",
        ):
            if not getattr(self, field_name):
                msg = f"RouterConfig.{field_name} must not be empty."
                raise ConfigurationError(msg)
        if self.layout_prefix == self.view_prefix:
            msg = (
                f"RouterConfig.layout_prefix and view_prefix must differ "
                f"(both are {self.layout_prefix!r})."
            )
            raise ConfigurationError(msg)


DEFAULT_CONFIG = RouterConfig()
