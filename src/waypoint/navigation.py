"""Headless tab-group state driven by deep links.

A ``TabGroup`` tracks its tabs, which one is selected, and the order
tabs were selected in. It reads parsed segments to decide which tab a
deep link opens and asks a ``UrlSerializer`` for each tab's href.
Rendering is left to the host UI.
"""

import logging
import re
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

from waypoint.routing.formatting import format_url_part
from waypoint.routing.route import NavSegment
from waypoint.routing.serializer import UrlSerializer

logger = logging.getLogger("waypoint.navigation")

_TAB_INDEX_RE = re.compile(r"tab-(\d+)")


class IdSequence:
    """Hands out ``<prefix>0``, ``<prefix>1``, ... in order.

    Owned by whatever creates the numbered instances; pass the same
    sequence around to share numbering.
    """

    __slots__ = ("_last", "prefix")

    def __init__(self, prefix: str = "t") -> None:
        self.prefix = prefix
        self._last = -1

    def next(self) -> str:
        self._last += 1
        return f"{self.prefix}{self._last}"

    @property
    def issued(self) -> int:
        """How many ids have been handed out."""
        return self._last + 1


@dataclass(slots=True)
class Tab:
    """One tab of a group. Mutable: selection flips ``is_selected``."""

    id: str
    title: str
    root: Hashable | None = None
    root_params: Mapping[str, Any] | None = None
    enabled: bool = True
    show: bool = True
    url_path: str | None = None
    is_selected: bool = False

    @property
    def available(self) -> bool:
        return self.enabled and self.show


class TabGroup:
    """Tab selection state for one tab container.

    Usage::

        ids = IdSequence()
        group = TabGroup(ids)
        group.add("Home", root=HomeView)
        group.add("Settings", root=SettingsView)
        group.select(group.initial_index(segment=path[0]))
    """

    __slots__ = ("_select_history", "_tab_ids", "id", "tabs")

    def __init__(self, ids: IdSequence) -> None:
        self.id = ids.next()
        self.tabs: list[Tab] = []
        self._tab_ids = IdSequence(prefix=f"{self.id}-")
        self._select_history: list[str] = []

    def __len__(self) -> int:
        return len(self.tabs)

    @property
    def history(self) -> tuple[str, ...]:
        """Tab ids in the order they were selected."""
        return tuple(self._select_history)

    def add(
        self,
        title: str,
        root: Hashable | None = None,
        *,
        root_params: Mapping[str, Any] | None = None,
        enabled: bool = True,
        show: bool = True,
        url_path: str | None = None,
    ) -> Tab:
        tab = Tab(
            id=self._tab_ids.next(),
            title=title,
            root=root,
            root_params=root_params,
            enabled=enabled,
            show=show,
            url_path=url_path,
        )
        self.tabs.append(tab)
        return tab

    def get_by_index(self, index: int) -> Tab | None:
        if 0 <= index < len(self.tabs):
            return self.tabs[index]
        return None

    def index_of(self, tab: Tab) -> int:
        """Position of *tab* in the group, or ``-1``."""
        for i, candidate in enumerate(self.tabs):
            if candidate is tab:
                return i
        return -1

    @property
    def selected(self) -> Tab | None:
        for tab in self.tabs:
            if tab.is_selected:
                return tab
        return None

    def select(self, tab_or_index: Tab | int) -> Tab | None:
        """Select a tab by instance or index.

        Unknown indexes are ignored. A tab without a root is recorded in
        the history but leaves the visible selection alone.
        """
        tab = self.get_by_index(tab_or_index) if isinstance(tab_or_index, int) else tab_or_index
        if tab is None:
            return None

        if tab is self.selected:
            return tab

        if tab.root is not None:
            for candidate in self.tabs:
                candidate.is_selected = candidate is tab

        if not self._select_history or self._select_history[-1] != tab.id:
            self._select_history.append(tab.id)

        logger.debug("Tab group %s selected %s", self.id, tab.id)
        return tab

    def previous_tab(self, trim_history: bool = True) -> Tab | None:
        """Walk back through the selection history to the last available tab.

        With *trim_history*, entries after the returned tab are dropped.
        """
        logger.debug("previous_tab %s", self._select_history)
        for i in range(len(self._select_history) - 2, -1, -1):
            tab_id = self._select_history[i]
            tab = next((t for t in self.tabs if t.id == tab_id), None)
            if tab is not None and tab.available:
                if trim_history:
                    del self._select_history[i + 1 :]
                return tab
        return None

    def tab_index_for(self, path_name: str, fallback: int = 0) -> int:
        """Resolve a URL part to a tab index.

        ``tab-<n>`` names a tab by position; otherwise the part is compared
        with each tab's ``url_path`` and formatted title.
        """
        index_match = _TAB_INDEX_RE.search(path_name)
        if index_match:
            return int(index_match.group(1))

        for i, tab in enumerate(self.tabs):
            if tab.url_path is not None and tab.url_path == path_name:
                return i
            if tab.title and format_url_part(tab.title) == path_name:
                return i
        return fallback

    def initial_index(
        self,
        selected_index: int | str | None = None,
        segment: NavSegment | None = None,
    ) -> int | None:
        """Index of the tab a (deep-linked) start should select.

        A pass-through segment names the tab to open. Disabled or hidden
        choices fall back to the first available tab; ``None`` when no tab
        is available at all.
        """
        index = 0 if selected_index is None else int(selected_index)
        if segment is not None and segment.is_fallback:
            index = self.tab_index_for(segment.name, fallback=index)

        tab = self.get_by_index(index)
        if tab is not None and tab.available:
            return index

        for i, candidate in enumerate(self.tabs):
            if candidate.available:
                return i

        logger.warning("Tab group %s has no enabled, visible tab to select", self.id)
        return None


def tab_href(serializer: UrlSerializer, tab: Tab) -> str | None:
    """The URL a tab's link points at, or ``None`` if its root has no route."""
    segment = serializer.serialize_component(tab.root, tab.root_params)
    if segment is None:
        return None
    return serializer.serialize([segment])
