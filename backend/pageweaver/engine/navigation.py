from dataclasses import replace
from typing import Iterable

from pageweaver.domain.document import NavigationEntry, Page
from pageweaver.utils.order import compact_order, sort_by_order
from .pages import Navigation
from .tree import index_of, map_by_id


def update_navigation(navigation: Navigation, entries: Iterable[NavigationEntry]) -> Navigation:
    """Replace the whole list, ordered by each entry's ``order``."""
    entries = sort_by_order(tuple(entries))
    return navigation if entries == navigation else entries


def move_navigation_entry(navigation: Navigation, from_index: int, to_index: int) -> Navigation:
    """
    Splice the entry at ``from_index`` back in at ``to_index`` and renumber
    the whole list.
    """
    size = len(navigation)
    if not (0 <= from_index < size) or not (0 <= to_index < size) or from_index == to_index:
        return navigation

    entries = list(navigation)
    moved = entries.pop(from_index)
    entries.insert(to_index, moved)
    return compact_order(entries)


def sync_navigation_entry(navigation: Navigation, entry_id: str, page: Page) -> Navigation:
    """Copy a page's title and slug onto a linked navigation entry."""
    if page is None or index_of(navigation, entry_id) < 0:
        return navigation

    def _sync(entry: NavigationEntry) -> NavigationEntry:
        if entry.title == page.title and entry.url == page.slug:
            return entry
        return replace(entry, title=page.title, url=page.slug)

    return map_by_id(navigation, entry_id, _sync)
