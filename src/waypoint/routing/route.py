"""Route definitions, template parts, and navigation segments.

Everything here is a frozen dataclass. Templates are built once by the
normalizer; segments are created fresh per parse/serialize call.
"""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class ViewId:
    """An opaque handle naming a view.

    Compared by value, so two ``ViewId("users")`` built in different places
    refer to the same view. Any other hashable token (a string, a class)
    works too.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A route as supplied by the hosting application.

    ``path`` defaults to ``name`` when omitted.
    """

    name: str
    view: Hashable
    path: str | None = None


@dataclass(frozen=True, slots=True)
class Literal:
    """A template part that matches one exact URL part."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Parameter:
    """A template part (``:key``) that matches any URL part and captures it."""

    key: str

    def __str__(self) -> str:
        return f":{self.key}"


TemplatePart: TypeAlias = Literal | Parameter


def parse_part(raw: str) -> TemplatePart:
    """Classify a raw template part.

    Examples::

        "users" -> Literal("users")
        ":id"   -> Parameter("id")
    """
    if raw.startswith(":"):
        return Parameter(raw[1:])
    return Literal(raw)


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A normalized route, ready for matching.

    Attributes:
        name: Unique route name.
        parts: Template parts, never empty.
        view: Opaque view token.
        static_parts: Literal parts before the first parameter.
        data_parts: Parameter parts anywhere in the template.
    """

    name: str
    parts: tuple[TemplatePart, ...]
    view: Hashable
    static_parts: int = 0
    data_parts: int = 0

    @property
    def path(self) -> str:
        """The template written back out, e.g. ``users/:id``."""
        return "/".join(str(part) for part in self.parts)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(part.key for part in self.parts if isinstance(part, Parameter))


@dataclass(frozen=True, slots=True)
class NavSegment:
    """One entry of a navigation path.

    ``view`` is ``None`` for pass-through (fallback) segments. ``data`` is
    ``None`` when the route captured nothing.
    """

    id: str
    name: str
    view: Hashable | None = None
    data: Mapping[str, Any] | None = None

    @property
    def is_fallback(self) -> bool:
        return self.view is None


NavPath: TypeAlias = tuple[NavSegment, ...]
