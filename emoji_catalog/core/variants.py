# variants.py
# Variant Resolver: skin tone selection and code point decoding.
# Resolution never fails: a missing variant falls back to the base record.

from __future__ import annotations

from typing import Optional, Union

from emoji_catalog.core.models import SKIN_TONES, EmojiRecord, SkinTone, ToneSelector, VariantRecord
from emoji_catalog.core.name_index import NameIndex

Resolved = Union[EmojiRecord, VariantRecord]


def tone_code(tone: ToneSelector) -> Optional[str]:
    """
    Normalize a tone selector to a skin_variations key.
    None / 0 / "" -> None (no selection). Ints are 1-based ordinals; outside
    1..5 the result is undefined (caller error). Strings are tone codes.
    """
    if tone is None:
        return None
    if isinstance(tone, SkinTone):
        return tone.value
    if isinstance(tone, bool):
        return None
    if isinstance(tone, int):
        if tone == 0:
            return None
        return SKIN_TONES[tone - 1]
    if isinstance(tone, str):
        return tone.upper() or None
    return None


def resolve(record: EmojiRecord, tone: ToneSelector = None) -> Resolved:
    """The variant for `tone`, or `record` itself when there is none."""
    code = tone_code(tone)
    if code is None:
        return record
    return record.skin_variations.get(code, record)


def has_variant(names: NameIndex, name: str, tone: ToneSelector = 0) -> bool:
    code = tone_code(tone)
    if code is None:
        return False
    base = names.lookup(name)
    if base is None:
        return False
    return code in base.skin_variations


def unified_to_emoji(unified: str) -> str:
    """'1F44D-1F3FC' -> the literal characters."""
    return "".join(chr(int(part, 16)) for part in unified.split("-"))


def to_literal(item: Union[Resolved, str]) -> str:
    """Literal emoji for a record, a variant, or a raw unified string."""
    unified = item if isinstance(item, str) else item.unified
    return unified_to_emoji(unified)


def convert(names: NameIndex, name: str, tone: ToneSelector = 0) -> str:
    """Literal emoji for name + tone; empty string for unknown names."""
    base = names.lookup(name)
    if base is None:
        return ""
    return to_literal(resolve(base, tone))
