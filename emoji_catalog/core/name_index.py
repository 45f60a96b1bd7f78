# name_index.py
# Name Index: short name / alias -> EmojiRecord.
#
# Collision policy (order dependent, kept on purpose):
#   1. every record's primary short_name is registered, in catalog order
#   2. then every alias of every record, in catalog order
# Later writes win. So an alias claimed by a later record beats an earlier
# one, and any alias beats another record's primary name. A dataset reorder
# can silently change which record owns a contested name; see
# tests/test_name_index.py for the pinned behavior.

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from emoji_catalog.core.models import EmojiRecord


class NameIndex:
    """Read-only after build()."""

    def __init__(self, by_name: Dict[str, EmojiRecord]):
        self._by_name = by_name

    @classmethod
    def build(cls, records: Iterable[EmojiRecord]) -> "NameIndex":
        records = list(records)
        by_name: Dict[str, EmojiRecord] = {}
        for rec in records:
            by_name[rec.short_name] = rec
        for rec in records:
            for alias in rec.short_names:
                by_name[alias] = rec
        return cls(by_name)

    def lookup(self, name: str) -> Optional[EmojiRecord]:
        """Record owning `name`, or None."""
        return self._by_name.get(name)

    def is_known_name(self, name: str) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        return sorted(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)
