"""Waypoint — bidirectional URL-to-route matching for navigation stacks.

Parses browser paths into navigation segments and serializes segments
back into canonical paths.

Basic usage::

    from waypoint import LinkConfig, RouteDefinition, UrlSerializer

    serializer = UrlSerializer(LinkConfig(links=(
        RouteDefinition("user", "UserView", path="users/:id"),
        RouteDefinition("settings", "SettingsView", path="users/settings"),
    )))

    path = serializer.parse("/users/42?tab=bio")
    serializer.serialize(path)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "IdSequence",
    "LinkConfig",
    "NavSegment",
    "RouteDefinition",
    "RouteTable",
    "RouteTemplate",
    "TabGroup",
    "UrlSerializer",
    "ViewId",
    "WaypointError",
    "format_url_part",
    "normalize",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "waypoint.errors",
    "IdSequence": "waypoint.navigation",
    "LinkConfig": "waypoint.config",
    "NavSegment": "waypoint.routing.route",
    "RouteDefinition": "waypoint.routing.route",
    "RouteTable": "waypoint.routing.table",
    "RouteTemplate": "waypoint.routing.route",
    "TabGroup": "waypoint.navigation",
    "UrlSerializer": "waypoint.routing.serializer",
    "ViewId": "waypoint.routing.route",
    "WaypointError": "waypoint.errors",
    "format_url_part": "waypoint.routing.formatting",
    "normalize": "waypoint.routing.table",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
