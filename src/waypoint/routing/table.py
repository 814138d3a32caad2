"""Route table normalization and specificity ordering.

Raw route definitions are split into tagged template parts, counted,
and sorted most-specific-first into an immutable ``RouteTable``.
"""

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass

from waypoint.errors import ConfigurationError
from waypoint.routing.route import (
    Literal,
    Parameter,
    RouteDefinition,
    RouteTemplate,
    TemplatePart,
    parse_part,
)

logger = logging.getLogger("waypoint.routing")


def split_template(path: str) -> tuple[TemplatePart, ...]:
    """Split a path template into classified parts.

    A single leading ``/`` is dropped, so ``/users/:id`` and ``users/:id``
    are the same template.

    Examples::

        "users"        -> (Literal("users"),)
        "/users/:id"   -> (Literal("users"), Parameter("id"))
        "/"            -> (Literal(""),)
    """
    if path.startswith("/"):
        path = path[1:]
    return tuple(parse_part(raw) for raw in path.split("/"))


def build_template(route: RouteDefinition) -> RouteTemplate:
    """Build a RouteTemplate and its specificity counts from a definition."""
    path = route.name if route.path is None else route.path
    parts = split_template(path)

    static_parts = 0
    data_parts = 0
    still_counting_static = True
    for part in parts:
        if isinstance(part, Parameter):
            data_parts += 1
            still_counting_static = False
        elif still_counting_static:
            static_parts += 1

    return RouteTemplate(
        name=route.name,
        parts=parts,
        view=route.view,
        static_parts=static_parts,
        data_parts=data_parts,
    )


def specificity(template: RouteTemplate) -> tuple[int, int, int]:
    """Sort key placing the most specific template first.

    More parts, then more leading literal parts, then fewer parameters.
    Full ties keep declaration order (``sorted`` is stable).
    """
    return (-len(template.parts), -template.static_parts, template.data_parts)


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Normalized templates in specificity order. Read-only.

    Usage::

        table = normalize([
            RouteDefinition("user", UserView, path="users/:id"),
            RouteDefinition("settings", SettingsView, path="users/settings"),
        ])
        [t.name for t in table]  # ["settings", "user"]
    """

    templates: tuple[RouteTemplate, ...] = ()

    def __iter__(self) -> Iterator[RouteTemplate]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def __getitem__(self, index: int) -> RouteTemplate:
        return self.templates[index]

    def __bool__(self) -> bool:
        return bool(self.templates)

    def get(self, name: str) -> RouteTemplate | None:
        """Return the template named *name*, or ``None``."""
        for template in self.templates:
            if template.name == name:
                return template
        return None

    def find_by_view(self, view: Hashable) -> RouteTemplate | None:
        """Return the first template (in table order) whose view equals *view*."""
        for template in self.templates:
            if template.view == view:
                return template
        return None

    def definitions(self) -> tuple[RouteDefinition, ...]:
        """The table written back out as definitions, in table order."""
        return tuple(
            RouteDefinition(name=t.name, view=t.view, path=t.path) for t in self.templates
        )


def _validate(templates: list[RouteTemplate]) -> None:
    seen: set[str] = set()
    for template in templates:
        if not template.name:
            msg = f"Route for view {template.view!r} has an empty name."
            raise ConfigurationError(msg)
        if template.name in seen:
            msg = f"Duplicate route name {template.name!r}. Route names must be unique."
            raise ConfigurationError(msg)
        seen.add(template.name)

        for part in template.parts:
            if isinstance(part, Parameter) and not part.key:
                msg = (
                    f"Route {template.name!r} has a bare ':' in {template.path!r}. "
                    f"Parameters need a name, e.g. ':id'."
                )
                raise ConfigurationError(msg)
            # A lone empty part is the root template ("/"); anywhere else it
            # comes from a doubled or trailing slash.
            if len(template.parts) > 1 and part == Literal(""):
                msg = (
                    f"Route {template.name!r} has an empty part in {template.path!r}. "
                    f"Remove doubled or trailing slashes."
                )
                raise ConfigurationError(msg)


def normalize(
    routes: Iterable[RouteDefinition | RouteTemplate] | None,
    *,
    validate: bool = True,
) -> RouteTable:
    """Build a specificity-sorted RouteTable from route definitions.

    Accepts already-normalized templates as well, so re-normalizing a
    table's contents yields the same table. The input is never mutated.

    Raises ``ConfigurationError`` for duplicate or empty names and
    malformed templates when *validate* is true.
    """
    if not routes:
        return RouteTable()

    templates: list[RouteTemplate] = []
    for route in routes:
        if isinstance(route, RouteTemplate):
            route = RouteDefinition(name=route.name, view=route.view, path=route.path)
        templates.append(build_template(route))

    if validate:
        _validate(templates)

    table = RouteTable(templates=tuple(sorted(templates, key=specificity)))
    logger.debug(
        "Normalized %d routes: %s",
        len(table),
        ", ".join(t.name for t in table),
    )
    return table
