# config_manager.py - JSON config manager plus the typed configs built from it

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from emoji_catalog.logging_system import log

# record fields the search index is allowed to read
SEARCHABLE_FIELDS = ("name", "short_name", "short_names")


@dataclass(frozen=True)
class SearchConfig:
    """
    Fuzzy search tuning.
      threshold: match strictness in [0, 1], lower = stricter. A query token of
        length L may be matched with at most floor(threshold * L) edits.
      token_separators: regex splitting compound names ("thumbs_up",
        "face-with-tears") into independently matchable tokens.
      keys: record fields indexed for matching.
      max_pattern_length: queries are truncated to this many characters.
      min_match_char_length: shorter query tokens are ignored.
      match_all_tokens: every query token must match some token of a record.
    """

    threshold: float = 0.2
    token_separators: str = r"[-_\s]+"
    keys: Tuple[str, ...] = SEARCHABLE_FIELDS
    max_pattern_length: int = 32
    min_match_char_length: int = 1
    match_all_tokens: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {self.threshold}")
        if self.max_pattern_length < 1:
            raise ValueError("max_pattern_length must be positive")
        if self.min_match_char_length < 1:
            raise ValueError("min_match_char_length must be positive")
        object.__setattr__(self, "keys", tuple(self.keys))
        if not self.keys:
            raise ValueError("at least one search key is required")
        unknown = [k for k in self.keys if k not in SEARCHABLE_FIELDS]
        if unknown:
            raise ValueError(f"unknown search keys: {unknown}")
        try:
            re.compile(self.token_separators)
        except re.error as e:
            raise ValueError(f"bad token_separators pattern: {e}") from e


@dataclass(frozen=True)
class CatalogConfig:
    """Which platform's images count as supported, and where they live."""

    platform: str = "apple"
    image_root: str = "emoji-datasource-apple/img/apple/64"
    search: SearchConfig = field(default_factory=SearchConfig)


class Config:
    """Option store backed by an optional JSON file."""

    DEFAULTS: Dict[str, Any] = {
        "platform": "apple",
        "image_root": "emoji-datasource-apple/img/apple/64",
        "threshold": 0.2,
        "token_separators": r"[-_\s]+",
        "keys": list(SEARCHABLE_FIELDS),
        "max_pattern_length": 32,
        "min_match_char_length": 1,
        "match_all_tokens": True,
    }

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(self.DEFAULTS)
        self.data["keys"] = list(self.DEFAULTS["keys"])
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            log.warn(f"[Config] ignoring unreadable config {self.path}: {e}")
            return
        if not isinstance(loaded, dict):
            log.warn(f"[Config] ignoring {self.path}: expected a JSON object")
            return
        for k, v in loaded.items():
            if k in self.DEFAULTS:
                self.data[k] = v
            else:
                log.warn(f"[Config] unknown option '{k}' ignored")

    def save(self):
        if not self.path:
            raise ValueError("Config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def set(self, key, val):
        if key not in self.DEFAULTS:
            raise KeyError(f"No such option: {key}")
        default = self.DEFAULTS[key]
        if isinstance(default, bool) and isinstance(val, str):
            self.data[key] = val.strip().lower() in ("1", "true", "yes", "on")
        elif isinstance(default, list) and isinstance(val, str):
            self.data[key] = [p.strip() for p in val.split(",") if p.strip()]
        else:
            self.data[key] = type(default)(val)

    # typed views ---------------------------------------------------------
    def search_config(self) -> SearchConfig:
        d = self.data
        return SearchConfig(
            threshold=float(d["threshold"]),
            token_separators=str(d["token_separators"]),
            keys=tuple(d["keys"]),
            max_pattern_length=int(d["max_pattern_length"]),
            min_match_char_length=int(d["min_match_char_length"]),
            match_all_tokens=bool(d["match_all_tokens"]),
        )

    def catalog_config(self) -> CatalogConfig:
        return CatalogConfig(
            platform=str(self.data["platform"]),
            image_root=str(self.data["image_root"]),
            search=self.search_config(),
        )
