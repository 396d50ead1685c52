from typing import Any, Dict

from dateutil.parser import parse

from pageweaver.domain.document import Page
from .section import normalize_section, section_from_dict


def normalize_page(page: Page, include_sections: bool = True) -> Dict[str, Any]:
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "is_published": page.is_published,
        "published_at": page.published_at.isoformat() if page.published_at else None,
    }

    if include_sections:
        data["sections"] = [normalize_section(s) for s in page.sections]

    return data


def page_from_dict(data: Dict[str, Any]) -> Page:
    published_at = data.get("published_at")

    return Page(
        id=data["id"],
        title=data.get("title", ""),
        slug=data["slug"],
        sections=tuple(section_from_dict(s) for s in data.get("sections", [])),
        is_published=bool(data.get("is_published", False)),
        published_at=parse(published_at) if published_at else None,
    )
