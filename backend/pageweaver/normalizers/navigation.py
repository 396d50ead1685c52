from typing import Any, Dict

from pageweaver.domain.document import NavigationEntry


def normalize_navigation_entry(entry: NavigationEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "title": entry.title,
        "url": entry.url,
        "order": entry.order,
    }


def navigation_entry_from_dict(data: Dict[str, Any]) -> NavigationEntry:
    return NavigationEntry(
        id=data["id"],
        title=data.get("title", ""),
        url=data.get("url", "#"),
        order=int(data.get("order", 0)),
    )
