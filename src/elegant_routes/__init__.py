"""elegant_routes — turn declarative route trees into navigation route tables.

Resolves ``layout.*`` / ``view.*`` component references against two
registries, nests first-level routes under their layouts, flattens deeper
levels, and keeps a name <-> path lookup for building links.

Basic usage::

    from elegant_routes import transform_routes

    records = transform_routes(
        [{"name": "home", "path": "/home", "component": "layout.base$view.home"}],
        layouts={"base": BaseLayout},
        views={"home": lambda: import_home()},
    )
    table = [record.to_dict() for record in records]

Route lookups::

    from elegant_routes import get_route_name, get_route_path

    get_route_path("manage_menu")   # "/manage/menu"
    get_route_name("/manage/menu")  # "manage_menu"
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ROUTE_MAP",
    "ComponentNotFound",
    "ComponentRegistry",
    "ConfigurationError",
    "ElegantRouteError",
    "MalformedComponentRef",
    "ResolutionError",
    "RouteFailure",
    "RouteMap",
    "RouteNode",
    "RouteRecord",
    "RouteTransformer",
    "RouterConfig",
    "TransformResult",
    "get_route_name",
    "get_route_path",
    "iter_records",
    "transform_routes",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ROUTE_MAP": "elegant_routes.routing.route_map",
    "ComponentNotFound": "elegant_routes.errors",
    "ComponentRegistry": "elegant_routes.components.registry",
    "ConfigurationError": "elegant_routes.errors",
    "ElegantRouteError": "elegant_routes.errors",
    "MalformedComponentRef": "elegant_routes.errors",
    "ResolutionError": "elegant_routes.errors",
    "RouteFailure": "elegant_routes.routing.result",
    "RouteMap": "elegant_routes.routing.route_map",
    "RouteNode": "elegant_routes.routing.types",
    "RouteRecord": "elegant_routes.routing.types",
    "RouteTransformer": "elegant_routes.routing.transform",
    "RouterConfig": "elegant_routes.config",
    "TransformResult": "elegant_routes.routing.result",
    "get_route_name": "elegant_routes.routing.route_map",
    "get_route_path": "elegant_routes.routing.route_map",
    "iter_records": "elegant_routes.routing.types",
    "transform_routes": "elegant_routes.routing.transform",
}


def __getattr__(name: str) -> object:
    """Resolve a public name from the module listed in ``_LAZY_IMPORTS``.

    Importing the package pulls in nothing until a name is first used.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
