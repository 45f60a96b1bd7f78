# catalog.py
"""
EmojiCatalog - application facade.

Purpose:
 - Own the indexes built from one loaded dataset (names, categories, search)
 - Simple public API for UI/CLI/tests:
     lookup(name), is_known_name(name), resolve(record, tone), has_variant(name, tone),
     to_literal(item), convert(name, tone), image_path(name, tone), replace(text),
     search(query), categories()
 - Explicitly constructed and passed around; there is no global instance.

Everything is built in __init__ and never changes afterwards, so one catalog
can be shared between threads without locking.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from emoji_catalog.core import loader
from emoji_catalog.core.categories import build_categories
from emoji_catalog.core.models import EmojiRecord, ToneSelector
from emoji_catalog.core.name_index import NameIndex
from emoji_catalog.core.replacer import TokenReplacer
from emoji_catalog.core.search import SearchIndex
from emoji_catalog.core.variants import Resolved, convert, has_variant, resolve, to_literal
from emoji_catalog.logging_system import log, time_block
from emoji_catalog.utils.config_manager import CatalogConfig

BUNDLED_DATA = Path(__file__).resolve().parent.parent / "data" / "emoji.json"


class EmojiCatalog:
    """Lookup, tone resolution, shortcode replacement and search over one catalog."""

    def __init__(self, records: Iterable[EmojiRecord], config: Optional[CatalogConfig] = None):
        self.config = config or CatalogConfig()
        self._records: Tuple[EmojiRecord, ...] = tuple(records)
        with time_block(f"[EmojiCatalog] building indexes for {len(self._records)} records"):
            self.names = NameIndex.build(self._records)
            self._categories = build_categories(self._records)
            self.search_index = SearchIndex.build(self._records, self.config.search)
            self.replacer = TokenReplacer(self.names)
        log.info(
            f"[EmojiCatalog] ready: {len(self._records)} records, "
            f"{len(self.names)} names, {len(self._categories)} categories"
        )

    # constructors ---------------------------------------------------------
    @classmethod
    def from_raw(cls, raw_records: Any, config: Optional[CatalogConfig] = None) -> "EmojiCatalog":
        config = config or CatalogConfig()
        return cls(loader.load(raw_records, platform=config.platform), config)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], config: Optional[CatalogConfig] = None
    ) -> "EmojiCatalog":
        config = config or CatalogConfig()
        return cls(loader.load_file(path, platform=config.platform), config)

    @classmethod
    def bundled(cls, config: Optional[CatalogConfig] = None) -> "EmojiCatalog":
        """Catalog over the small sample dataset shipped with the package."""
        return cls.from_file(BUNDLED_DATA, config)

    # Public API ---------------------------------------------------------
    def lookup(self, name: str) -> Optional[EmojiRecord]:
        return self.names.lookup(name)

    def is_known_name(self, name: str) -> bool:
        return self.names.is_known_name(name)

    def resolve(self, record: EmojiRecord, tone: ToneSelector = None) -> Resolved:
        return resolve(record, tone)

    def has_variant(self, name: str, tone: ToneSelector = 0) -> bool:
        return has_variant(self.names, name, tone)

    def to_literal(self, item: Union[Resolved, str]) -> str:
        return to_literal(item)

    def convert(self, name: str, tone: ToneSelector = 0) -> str:
        return convert(self.names, name, tone)

    def image_path(self, name: str, tone: ToneSelector = 0) -> Optional[str]:
        """Where the image for name + tone would live; no existence check."""
        base = self.names.lookup(name)
        if base is None:
            return None
        image = resolve(base, tone).image
        return f"{self.config.image_root.rstrip('/')}/{image}"

    def replace(self, text: str) -> str:
        return self.replacer.replace(text)

    def search(self, query: str, limit: Optional[int] = None) -> List[EmojiRecord]:
        return self.search_index.search(query, limit=limit)

    def categories(self) -> Dict[str, Tuple[EmojiRecord, ...]]:
        # fresh dict each call; the tuples inside are shared
        return dict(self._categories)

    @property
    def records(self) -> Tuple[EmojiRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EmojiRecord]:
        return iter(self._records)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.names.is_known_name(name)
