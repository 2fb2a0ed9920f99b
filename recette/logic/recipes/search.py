"""Recipe browsing helpers: keyword search, tag filter, tag listing, liked shelf."""
from __future__ import annotations
from typing import Iterable, List

from recette.domain.Recipe import Recipe

__all__ = ["filter_recipes", "all_tags", "liked_recipes"]


def _contains(haystack: str, needle: str) -> bool:
    return needle in (haystack or "").casefold()


def filter_recipes(recipes: Iterable[Recipe], search_text: str = "",
                   selected_tags: Iterable[str] = ()) -> List[Recipe]:
    """Return recipes matching the keyword (title, description or a tag) and any selected tag.

    Both filters are skipped when empty. Input order is preserved.
    """
    result = list(recipes)
    needle = (search_text or "").casefold()
    if needle:
        result = [
            r for r in result
            if _contains(r.title, needle)
            or _contains(r.description, needle)
            or any(_contains(t, needle) for t in r.tags)
        ]
    tags = set(selected_tags or ())
    if tags:
        result = [r for r in result if not tags.isdisjoint(r.tags)]
    return result


def all_tags(recipes: Iterable[Recipe]) -> List[str]:
    tags = set()
    for r in recipes:
        tags.update(r.tags)
    return sorted(tags)


def liked_recipes(recipes: Iterable[Recipe], *, min_likes: int = 5, limit: int = 10) -> List[Recipe]:
    """Most-liked recipes with at least ``min_likes`` likes, highest first, at most ``limit``."""
    liked = [r for r in recipes if r.likes >= min_likes]
    liked.sort(key=lambda r: r.likes, reverse=True)
    return liked[:limit]
