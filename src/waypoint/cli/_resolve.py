"""Link import resolution — resolves ``"module:attribute"`` strings to serializers.

Shared by ``waypoint routes`` and ``waypoint parse`` to locate the
user's link configuration.
"""

import importlib
from collections.abc import Sequence

from waypoint.config import LinkConfig
from waypoint.routing.route import RouteDefinition
from waypoint.routing.serializer import UrlSerializer


def _coerce(obj: object) -> UrlSerializer | None:
    if isinstance(obj, UrlSerializer):
        return obj
    if isinstance(obj, LinkConfig):
        return UrlSerializer(obj)
    if (
        isinstance(obj, Sequence)
        and not isinstance(obj, str)
        and all(isinstance(item, RouteDefinition) for item in obj)
    ):
        return UrlSerializer(LinkConfig(links=tuple(obj)))
    return None


def resolve_serializer(import_string: str) -> UrlSerializer:
    """Resolve an import string to a UrlSerializer.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"links"``.

    The attribute may be a ``UrlSerializer``, a ``LinkConfig``, a
    sequence of ``RouteDefinition``, or a factory returning one of those.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is none of the accepted types.
        ConfigurationError: If the links fail validation.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "links"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    serializer = _coerce(obj)
    if serializer is None and callable(obj):
        try:
            produced = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
        serializer = _coerce(produced)
        obj = produced

    if serializer is None:
        msg = (
            f"{import_string!r} resolved to {type(obj).__name__}, not a "
            f"UrlSerializer, LinkConfig, or list of RouteDefinition"
        )
        raise TypeError(msg)

    return serializer
