# categories.py
# Category Index: groups records under a small fixed set of picker tags.

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from emoji_catalog.core.models import EmojiRecord

MISC = "misc"

# source taxonomy label -> canonical tag
CATEGORY_TAGS: Dict[str, str] = {
    "Activities": "activity",
    "Animals & Nature": "animal",
    "Flags": "flag",
    "Food & Drink": "food",
    "Objects": "object",
    "Travel & Places": "travel",
    "Smileys & People": "emoji",
    # newer datasets split Smileys & People in two
    "Smileys & Emotion": "emoji",
    "People & Body": "emoji",
    "Symbols": "symbol",
}

TAGS: Tuple[str, ...] = (
    "emoji", "animal", "food", "activity", "travel", "object", "symbol", "flag", MISC,
)


def category_tag(label: object) -> str:
    """Total: any unknown label (or non-string) lands in 'misc'."""
    if not isinstance(label, str):
        return MISC
    return CATEGORY_TAGS.get(label, MISC)


def build_categories(records: Iterable[EmojiRecord]) -> Dict[str, Tuple[EmojiRecord, ...]]:
    """
    Tag -> records sorted by sort_order. sorted() is stable, so equal
    sort_orders keep catalog order. Tags appear in first-seen order.
    """
    groups: Dict[str, List[EmojiRecord]] = {}
    for rec in records:
        groups.setdefault(category_tag(rec.category), []).append(rec)
    return {
        tag: tuple(sorted(recs, key=lambda r: r.sort_order))
        for tag, recs in groups.items()
    }
