"""Link configuration.

LinkConfig is a frozen dataclass — immutable after creation, handed to
``UrlSerializer`` once at startup.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from waypoint.routing.route import RouteDefinition


@dataclass(frozen=True, slots=True)
class LinkConfig:
    """Link configuration. Immutable after creation.

    Override what you need::

        config = LinkConfig(
            links=(RouteDefinition("users", UsersView, path="users/:id"),),
            log_fallbacks=True,
        )
    """

    links: tuple[RouteDefinition, ...] = ()

    # Reject duplicate names and empty templates while normalizing
    validate: bool = True

    # Emit a debug record for every fallback segment produced by parse()
    log_fallbacks: bool = False

    @classmethod
    def from_links(cls, links: Iterable[RouteDefinition], **options: bool) -> "LinkConfig":
        """Build a config from any iterable of route definitions."""
        return cls(links=tuple(links), **options)
