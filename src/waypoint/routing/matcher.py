"""URL parsing against a normalized route table.

Every template is tried independently against the URL parts, most
specific first, and contributes exactly one segment to the result:
the match at the first offset where all its parts line up, or a
pass-through fallback segment.
"""

import logging
from collections.abc import Sequence

from waypoint.routing.formatting import decode_component
from waypoint.routing.route import (
    Literal,
    NavPath,
    NavSegment,
    Parameter,
    RouteTemplate,
    TemplatePart,
)
from waypoint.routing.table import RouteTable

logger = logging.getLogger("waypoint.routing")


def split_url(browser_url: str) -> list[str]:
    """Split a browser path into URL parts.

    Strips a single leading ``/`` and everything from the first ``?`` or
    ``#``. No other normalization: empty parts are kept.

    Examples::

        "/users/42/profile?tab=bio#x" -> ["users", "42", "profile"]
        "/"                           -> [""]
        "/users/"                     -> ["users", ""]
    """
    if browser_url.startswith("/"):
        browser_url = browser_url[1:]
    browser_url = browser_url.split("?", 1)[0].split("#", 1)[0]
    return browser_url.split("/")


def is_part_match(url_part: str | None, template_part: TemplatePart) -> bool:
    """Check one URL part against one template part.

    A missing URL part (past the end of the URL) never matches.
    """
    if url_part is None:
        return False
    match template_part:
        case Parameter():
            return True
        case Literal(text=text):
            return url_part == text
    return False


def create_matched_data(matched: Sequence[str], template: RouteTemplate) -> dict[str, str] | None:
    """Decode the URL parts captured by the template's parameters.

    Returns ``None`` when the template has no parameters.
    """
    data: dict[str, str] | None = None
    for url_part, part in zip(matched, template.parts, strict=True):
        if isinstance(part, Parameter):
            if data is None:
                data = {}
            data[part.key] = decode_component(url_part)
    return data


def match_url_parts(start: int, url_parts: Sequence[str], template: RouteTemplate) -> NavSegment | None:
    """Try *template* against the URL parts beginning at offset *start*."""
    size = len(template.parts)
    if start < 0 or start + size > len(url_parts):
        return None

    matched = url_parts[start : start + size]
    for url_part, part in zip(matched, template.parts, strict=True):
        if not is_part_match(url_part, part):
            return None

    return NavSegment(
        id="/".join(matched) or template.name,
        name=template.name,
        view=template.view,
        data=create_matched_data(matched, template),
    )


def fallback_segment(url_parts: Sequence[str]) -> NavSegment:
    """Pass-through segment for a template that matched nowhere.

    Carries the URL part at the last offset the scan examined.
    """
    token = url_parts[-1] if url_parts else ""
    return NavSegment(id=token, name=token)


def parse_url_parts(
    url_parts: Sequence[str],
    table: RouteTable,
    *,
    log_fallbacks: bool = False,
) -> NavPath:
    """Match URL parts against every template in the table.

    The result has one segment per template, in table order, regardless
    of how many URL parts there are.
    """
    path: list[NavSegment] = []
    for template in table:
        segment = None
        for start in range(len(url_parts)):
            segment = match_url_parts(start, url_parts, template)
            if segment is not None:
                break

        if segment is None:
            segment = fallback_segment(url_parts)
            if log_fallbacks:
                logger.debug(
                    "No match for route %r (%s) in %r; passing through %r",
                    template.name,
                    template.path,
                    "/".join(url_parts),
                    segment.id,
                )

        path.append(segment)

    return tuple(path)
