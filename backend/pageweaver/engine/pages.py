from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple

from pageweaver.domain.document import NavigationEntry, Page, find_page
from .tree import map_by_id, merge_fields, remove_by_id

Pages = Tuple[Page, ...]
Navigation = Tuple[NavigationEntry, ...]

PAGE_UPDATE_FIELDS = {"title", "slug", "sections", "is_published", "published_at"}


def add_page(pages: Pages, page: Page) -> Pages:
    return pages + (page,)


def remove_page(pages: Pages, navigation: Navigation, page_id: str) -> Tuple[Pages, Navigation]:
    """
    Delete a page and drop navigation entries linking to its slug.

    Keeping at least one page alive is the caller's job, as is moving the
    active page to a fallback.
    """
    page = find_page(pages, page_id)
    if page is None:
        return pages, navigation

    remaining = remove_by_id(pages, page_id)
    kept_links = tuple(entry for entry in navigation if entry.url != page.slug)
    if len(kept_links) == len(navigation):
        kept_links = navigation

    return remaining, kept_links


def update_page(
    pages: Pages,
    navigation: Navigation,
    page_id: str,
    changes: Mapping[str, Any],
) -> Tuple[Pages, Navigation]:
    page = find_page(pages, page_id)
    if page is None:
        return pages, navigation

    updated = merge_fields(page, changes, PAGE_UPDATE_FIELDS, coerce={"sections": tuple})
    if updated is page:
        return pages, navigation

    new_pages = map_by_id(pages, page_id, lambda _: updated)

    if updated.slug != page.slug:
        navigation = repoint_navigation(navigation, page.slug, updated.slug)

    return new_pages, navigation


def repoint_navigation(navigation: Navigation, old_url: str, new_url: str) -> Navigation:
    if not any(entry.url == old_url for entry in navigation):
        return navigation

    return tuple(
        replace(entry, url=new_url) if entry.url == old_url else entry
        for entry in navigation
    )


def publish_page(pages: Pages, page_id: str, now: Optional[datetime] = None) -> Pages:
    stamp = now or datetime.now(timezone.utc)
    return map_by_id(
        pages,
        page_id,
        lambda page: replace(page, is_published=True, published_at=stamp),
    )


def unpublish_page(pages: Pages, page_id: str) -> Pages:
    def _clear(page: Page) -> Page:
        if not page.is_published and page.published_at is None:
            return page
        return replace(page, is_published=False, published_at=None)

    return map_by_id(pages, page_id, _clear)
