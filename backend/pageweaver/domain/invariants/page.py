from typing import Iterable, Optional

from pageweaver.domain.document import Page, find_page
from .exceptions import InvariantViolation


def assert_unique_slug(pages: Iterable[Page], slug: str, *, page_id: Optional[str] = None) -> None:
    """
    No two pages may share a slug. ``page_id`` is the page being written,
    which may of course keep its own slug.
    """
    for page in pages:
        if page.slug == slug and page.id != page_id:
            raise InvariantViolation(
                f"Slug '{slug}' is already used by page '{page.id}'."
            )


def assert_page_removable(pages, page_id: str, fallback_page_id: str) -> None:
    pages = tuple(pages)

    if find_page(pages, page_id) is None:
        # Removing an unknown page is a no-op, nothing to protect
        return

    if len(pages) <= 1:
        raise InvariantViolation("Cannot remove the last remaining page.")

    if fallback_page_id == page_id:
        raise InvariantViolation("Fallback page must differ from the removed page.")

    if find_page(pages, fallback_page_id) is None:
        raise InvariantViolation(
            f"Fallback page '{fallback_page_id}' does not exist."
        )
