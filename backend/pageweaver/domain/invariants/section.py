from typing import Optional

from pageweaver.domain.document import Page, Section
from .exceptions import InvariantViolation


def assert_single_banner(page: Page, section: Section, *, replacing: Optional[str] = None) -> None:
    """
    A page holds at most one header and one footer. ``replacing`` names a
    section being retyped in place; it does not count against the limit.
    """
    if not section.is_banner:
        return

    for existing in page.sections:
        if existing.id != replacing and existing.section_type == section.section_type:
            raise InvariantViolation(
                f"Page '{page.id}' already has a {section.section_type.value} section; "
                f"replace it instead of adding another."
            )
