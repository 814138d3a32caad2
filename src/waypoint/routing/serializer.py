"""UrlSerializer — parse browser URLs into navigation paths and back.

Built once from a ``LinkConfig``; the route table it holds is never
mutated afterwards, so a single serializer can be shared freely.
"""

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from waypoint.config import LinkConfig
from waypoint.routing.formatting import encode_component, format_url_part
from waypoint.routing.matcher import parse_url_parts, split_url
from waypoint.routing.route import NavPath, NavSegment, Parameter, RouteTemplate
from waypoint.routing.table import RouteTable, normalize


class UrlSerializer:
    """Converts between browser URLs and navigation paths.

    Usage::

        serializer = UrlSerializer(LinkConfig(links=(
            RouteDefinition("user", UserView, path="users/:id"),
            RouteDefinition("settings", SettingsView, path="users/settings"),
        )))
        path = serializer.parse("/users/42")
        serializer.serialize(path)
    """

    __slots__ = ("_config", "_table")

    def __init__(self, config: LinkConfig | None = None) -> None:
        self._config = config or LinkConfig()
        self._table = normalize(self._config.links, validate=self._config.validate)

    @classmethod
    def from_table(cls, table: RouteTable, config: LinkConfig | None = None) -> "UrlSerializer":
        """Wrap an already-normalized table without re-sorting it."""
        serializer = cls.__new__(cls)
        serializer._config = config or LinkConfig(links=table.definitions())
        serializer._table = table
        return serializer

    @property
    def config(self) -> LinkConfig:
        return self._config

    @property
    def table(self) -> RouteTable:
        return self._table

    def parse(self, browser_url: str) -> NavPath:
        """Parse a browser URL into one segment per configured route."""
        return parse_url_parts(
            split_url(browser_url),
            self._table,
            log_fallbacks=self._config.log_fallbacks,
        )

    def serialize(self, path: Iterable[NavSegment]) -> str:
        """Join segment ids into a URL: ``/`` + ids joined by ``/``."""
        return "/" + "/".join(segment.id for segment in path)

    def serialize_component(
        self,
        view: Hashable,
        data: Mapping[str, Any] | None = None,
    ) -> NavSegment | None:
        """Build the segment for *view* with *data* substituted into its template.

        Returns ``None`` when no route is configured for *view*.
        """
        if view is None:
            return None
        template = self._find(view)
        if template is None:
            return None
        return self.create_segment(template, data)

    def create_segment(
        self,
        template: RouteTemplate,
        data: Mapping[str, Any] | None = None,
    ) -> NavSegment:
        """Build a segment from a template and a data record.

        Parameters with a matching key are replaced by the percent-encoded
        value. Parameters without one stay as their ``:key`` token.
        """
        parts = [str(part) for part in template.parts]
        if data:
            for index, part in enumerate(template.parts):
                if isinstance(part, Parameter) and part.key in data:
                    parts[index] = encode_component(data[part.key])

        return NavSegment(
            id="/".join(parts),
            name=template.name,
            view=template.view,
            data=data,
        )

    def create_segment_from_name(self, name_or_view: Hashable) -> NavSegment | None:
        """Build a data-less segment for a route given its name or view."""
        template = self._find(name_or_view, by_name=True)
        if template is None:
            return None
        return NavSegment(id=template.name, name=template.name, view=template.view)

    def format_url_part(self, name: str) -> str:
        return format_url_part(name)

    def _find(self, token: Hashable, *, by_name: bool = False) -> RouteTemplate | None:
        # Views may also be found by their __name__ matching a route name
        view_name = getattr(token, "__name__", None)
        for template in self._table:
            if template.view == token or (view_name is not None and template.name == view_name):
                return template
            if by_name and template.name == token:
                return template
        return None
