# loader.py
# Catalog Loader: turns raw emoji-datasource entries into typed EmojiRecords.
# - keeps only records with an image for the target platform
# - strict field validation; anything malformed is dropped, never raised
# - output order follows input order

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from emoji_catalog.core.models import EmojiRecord, VariantRecord
from emoji_catalog.core.protocols import RawEmoji, RawVariation
from emoji_catalog.logging_system import log

DEFAULT_PLATFORM = "apple"

_MAX_CODE_POINT = 0x10FFFF


def valid_unified(unified: Any) -> bool:
    """True if `unified` is a hyphen-joined list of hex code points."""
    if not isinstance(unified, str) or not unified:
        return False
    for part in unified.split("-"):
        try:
            cp = int(part, 16)
        except ValueError:
            return False
        if cp < 0 or cp > _MAX_CODE_POINT:
            return False
    return True


def _platforms(raw: Mapping[str, Any]) -> frozenset:
    return frozenset(
        k[len("has_img_"):] for k, v in raw.items() if k.startswith("has_img_") and v is True
    )


def parse_variation(raw: RawVariation) -> Optional[VariantRecord]:
    if not isinstance(raw, Mapping) or not valid_unified(raw.get("unified")):
        return None
    image = raw.get("image")
    return VariantRecord(
        unified=raw["unified"],
        image=image if isinstance(image, str) else "",
        platforms=_platforms(raw),
    )


def parse_record(raw: RawEmoji) -> Optional[EmojiRecord]:
    """
    Validate one raw entry. Returns None when a required field is missing
    or has the wrong type (short_name, unified, sort_order).
    """
    if not isinstance(raw, Mapping):
        return None

    short_name = raw.get("short_name")
    if not isinstance(short_name, str) or not short_name:
        return None
    if not valid_unified(raw.get("unified")):
        return None
    sort_order = raw.get("sort_order")
    # bool is an int subclass; reject it
    if not isinstance(sort_order, int) or isinstance(sort_order, bool):
        return None

    aliases = raw.get("short_names")
    if isinstance(aliases, list):
        short_names = tuple(a for a in aliases if isinstance(a, str) and a)
    else:
        short_names = (short_name,)

    variations: Dict[str, VariantRecord] = {}
    raw_variations = raw.get("skin_variations")
    if isinstance(raw_variations, Mapping):
        for code, raw_var in raw_variations.items():
            var = parse_variation(raw_var)
            if var is not None and isinstance(code, str):
                variations[code.upper()] = var

    name = raw.get("name")
    category = raw.get("category")
    image = raw.get("image")
    text = raw.get("text")
    return EmojiRecord(
        name=name if isinstance(name, str) and name else short_name.upper(),
        short_name=short_name,
        unified=raw["unified"],
        short_names=short_names,
        category=category if isinstance(category, str) else "",
        sort_order=sort_order,
        image=image if isinstance(image, str) else "",
        text=text if isinstance(text, str) else None,
        platforms=_platforms(raw),
        skin_variations=variations,
    )


def load(raw_records: Sequence[RawEmoji], platform: str = DEFAULT_PLATFORM) -> List[EmojiRecord]:
    """Parse and filter the raw dataset down to platform-supported records."""
    if not isinstance(raw_records, (list, tuple)):
        log.warn(f"[Loader] expected a list of records, got {type(raw_records).__name__}")
        return []

    out: List[EmojiRecord] = []
    dropped = 0
    for raw in raw_records:
        rec = parse_record(raw)
        if rec is None or platform not in rec.platforms:
            dropped += 1
            continue
        out.append(rec)

    log.debug(f"[Loader] kept {len(out)} records for '{platform}', dropped {dropped}")
    return out


def read_raw(path: Union[str, Path]) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_file(path: Union[str, Path], platform: str = DEFAULT_PLATFORM) -> List[EmojiRecord]:
    """Read an emoji-datasource style JSON array from disk and load it."""
    return load(read_raw(path), platform=platform)

