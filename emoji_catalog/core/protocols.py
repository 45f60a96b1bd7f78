# emoji_catalog/core/protocols.py
"""
Protocol interfaces and raw input shapes for the catalog core.

RawEmoji/RawVariation describe one entry of the emoji-datasource JSON as it
arrives from upstream (only the fields the loader reads are listed). The
Protocols describe what SearchIndex needs from its fuzzy and prefix
structures, so tests can swap in small fakes.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol, Tuple
from typing_extensions import TypedDict


# Raw dataset shapes ------------------------------------------------------------

class RawVariation(TypedDict, total=False):
    unified: str
    image: str
    has_img_apple: bool
    has_img_google: bool
    has_img_twitter: bool
    has_img_facebook: bool


class RawEmoji(TypedDict, total=False):
    name: Optional[str]
    unified: str
    image: str
    short_name: str
    short_names: List[str]
    text: Optional[str]
    category: str
    sort_order: int
    has_img_apple: bool
    has_img_google: bool
    has_img_twitter: bool
    has_img_facebook: bool
    skin_variations: Dict[str, RawVariation]


# Protocols ------------------------------------------------------------------

class FuzzyIndexProtocol(Protocol):
    """Edit-distance lookup over index tokens (BK-tree)."""

    def insert_many(self, words: Iterable[str]) -> None:
        ...

    def query(self, word: str, max_dist: int = 2) -> List[Tuple[str, int]]:
        """
        Return list of (matched_token, distance).
        """
        ...


class PrefixIndexProtocol(Protocol):
    """Prefix completion over index tokens (trie)."""

    def insert(self, word: str) -> None:
        ...

    def search_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        ...
