# search.py
"""
SearchIndex - typo-tolerant search over emoji names.

Built once from the loaded records. Every configured key (name, short_name,
short_names) is lower-cased and split on `token_separators`; the resulting
tokens go into a prefix trie and a BK-tree, each token remembering which
records own it.

Per query token the best match against a record's tokens is scored
(lower is better):
  exact token          0.0
  prefix completion    threshold * (1 - Lq/Lt) / 2
  inner substring      threshold * (1 - Lq/Lt)        (query tokens of 2+ chars)
  typo                 edits / Lq, edits <= floor(threshold * Lq)
A record's score is the mean over query tokens (a missed token counts 1.0).
Records whose whole key equals the whole query rank first, then by score,
then by catalog position.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from emoji_catalog.core.bktree import BKTree
from emoji_catalog.core.models import EmojiRecord
from emoji_catalog.core.protocols import FuzzyIndexProtocol, PrefixIndexProtocol
from emoji_catalog.core.trie import Trie
from emoji_catalog.logging_system import log, time_block
from emoji_catalog.utils.config_manager import SearchConfig

MISS = 1.0


def _normalize(s: str) -> str:
    return s.strip().lower()


class SearchIndex:
    """Immutable once built; search() is safe to call from any thread."""

    def __init__(
        self,
        records: Sequence[EmojiRecord],
        config: Optional[SearchConfig] = None,
        fuzzy: Optional[FuzzyIndexProtocol] = None,
        prefix: Optional[PrefixIndexProtocol] = None,
    ):
        self.config = config or SearchConfig()
        self._records: Tuple[EmojiRecord, ...] = tuple(records)
        self._sep = re.compile(self.config.token_separators)
        # whole normalized key -> record positions
        self._exact: Dict[str, Set[int]] = {}
        # token -> record positions
        self._owners: Dict[str, Set[int]] = {}
        self._fuzzy = fuzzy if fuzzy is not None else BKTree()
        self._prefix = prefix if prefix is not None else Trie()
        self._index()

    @classmethod
    def build(
        cls, records: Iterable[EmojiRecord], config: Optional[SearchConfig] = None
    ) -> "SearchIndex":
        return cls(list(records), config)

    # building -------------------------------------------------------------
    def _key_values(self, rec: EmojiRecord) -> List[str]:
        out: List[str] = []
        for key in self.config.keys:
            value = getattr(rec, key, None)
            if isinstance(value, str):
                out.append(value)
            elif isinstance(value, (list, tuple)):
                out.extend(v for v in value if isinstance(v, str))
        return out

    def tokenize(self, text: str) -> List[str]:
        return [t for t in self._sep.split(_normalize(text)) if t]

    def _index(self) -> None:
        with time_block(f"[SearchIndex] indexing {len(self._records)} records"):
            for pos, rec in enumerate(self._records):
                for value in self._key_values(rec):
                    whole = _normalize(value)
                    if not whole:
                        continue
                    self._exact.setdefault(whole, set()).add(pos)
                    for tok in self.tokenize(whole):
                        self._owners.setdefault(tok, set()).add(pos)
            self._fuzzy.insert_many(self._owners)
            for tok in self._owners:
                self._prefix.insert(tok)
        log.debug(f"[SearchIndex] {len(self._owners)} distinct tokens")

    # matching -------------------------------------------------------------
    def _credit(self, scores: Dict[int, float], token: str, score: float) -> None:
        for pos in self._owners.get(token, ()):
            if score < scores.get(pos, MISS):
                scores[pos] = score

    def _match_token(self, qtok: str) -> Dict[int, float]:
        """Best score per record position for one query token."""
        threshold = self.config.threshold
        lq = len(qtok)
        scores: Dict[int, float] = {}

        max_edits = int(math.floor(threshold * lq))
        for tok, dist in self._fuzzy.query(qtok, max_edits):
            self._credit(scores, tok, dist / lq if dist else 0.0)

        for tok in self._prefix.search_prefix(qtok):
            if tok != qtok:
                self._credit(scores, tok, threshold * (1 - lq / len(tok)) / 2)

        if lq >= 2:
            for tok in self._owners:
                if len(tok) > lq and not tok.startswith(qtok) and qtok in tok:
                    self._credit(scores, tok, threshold * (1 - lq / len(tok)))
        return scores

    def search(self, query: str, limit: Optional[int] = None) -> List[EmojiRecord]:
        """Best match first. Empty or unmatched queries give []."""
        if not query:
            return []
        q = _normalize(query[: self.config.max_pattern_length])
        qtokens = [
            t for t in self.tokenize(q) if len(t) >= self.config.min_match_char_length
        ]
        if not qtokens:
            return []

        per_token = [self._match_token(t) for t in qtokens]
        candidates: Set[int] = set()
        for scores in per_token:
            candidates.update(scores)
        if self.config.match_all_tokens:
            candidates = {p for p in candidates if all(p in s for s in per_token)}

        exact = self._exact.get(q, set())
        ranked = sorted(
            candidates,
            key=lambda p: (
                0 if p in exact else 1,
                sum(s.get(p, MISS) for s in per_token) / len(per_token),
                p,
            ),
        )
        if limit is not None:
            ranked = ranked[:limit]
        return [self._records[p] for p in ranked]

    def __len__(self) -> int:
        return len(self._records)
