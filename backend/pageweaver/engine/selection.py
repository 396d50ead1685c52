from dataclasses import dataclass
from typing import Optional

from pageweaver.domain.document import Element, find_page


@dataclass(frozen=True)
class SelectedElement:
    page_id: str
    section_id: str
    element: Element


def get_selected_element(selected_id: Optional[str], active_page_id: str, pages) -> Optional[SelectedElement]:
    """
    Locate the selected element on the active page only.

    Returns None when nothing is selected, when the element lives on
    another page, or when it no longer exists.
    """
    if not selected_id:
        return None

    page = find_page(pages, active_page_id)
    if page is None:
        return None

    for section in page.sections:
        for element in section.elements:
            if element.id == selected_id:
                return SelectedElement(page_id=page.id, section_id=section.id, element=element)

    return None
