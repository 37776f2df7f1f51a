from typing import List, Optional

from catalog.resources import STATIC_RESOURCES
from models.schemas import ResourceItem

RESOURCES: List[ResourceItem] = [ResourceItem(**item) for item in STATIC_RESOURCES]


def find_resources(tag: Optional[str] = None, query: Optional[str] = None) -> List[ResourceItem]:
    """Filter by exact tag (case-insensitive) and free text over title, description and tags."""
    results = RESOURCES
    if tag:
        wanted = tag.strip().lower()
        results = [r for r in results if wanted in (t.lower() for t in r.tags)]
    if query:
        needle = query.strip().lower()
        results = [
            r for r in results
            if needle in r.title.lower() or needle in r.description.lower() or any(needle in t.lower() for t in r.tags)
        ]
    return list(results)


def all_tags() -> List[str]:
    return sorted({t for r in RESOURCES for t in r.tags}, key=str.lower)
