# models.py
# Typed records built from the raw emoji dataset.
# Records are frozen: once the catalog is loaded nothing mutates them.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple, Union


class SkinTone(Enum):
    """The five Fitzpatrick modifiers, in ordinal order (1..5)."""

    LIGHT = "1F3FB"
    MEDIUM_LIGHT = "1F3FC"
    MEDIUM = "1F3FD"
    MEDIUM_DARK = "1F3FE"
    DARK = "1F3FF"

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "SkinTone":
        """1-based lookup. Ordinals outside 1..5 are a caller error."""
        return _ORDERED[ordinal - 1]

    @property
    def ordinal(self) -> int:
        return _ORDERED.index(self) + 1


_ORDERED: Tuple[SkinTone, ...] = tuple(SkinTone)

# tone codes in ordinal order, as they appear as keys in skin_variations
SKIN_TONES: Tuple[str, ...] = tuple(t.value for t in _ORDERED)

# anything accepted as a tone selector; None/0 mean "no selection"
ToneSelector = Union[None, int, str, SkinTone]


@dataclass(frozen=True)
class VariantRecord:
    """A skin-tone rendering of a base emoji. Has no name of its own."""

    unified: str
    image: str = ""
    platforms: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class EmojiRecord:
    """
    One base emoji.
    short_name is the primary identifier, short_names the aliases
    (the dataset repeats the primary inside short_names).
    """

    name: str
    short_name: str
    unified: str
    short_names: Tuple[str, ...] = ()
    category: str = ""
    sort_order: int = 0
    image: str = ""
    text: Optional[str] = None
    platforms: FrozenSet[str] = frozenset()
    skin_variations: Mapping[str, VariantRecord] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # freeze whatever mapping the caller handed in
        if not isinstance(self.skin_variations, MappingProxyType):
            object.__setattr__(
                self, "skin_variations", MappingProxyType(dict(self.skin_variations))
            )

    @property
    def has_variations(self) -> bool:
        return bool(self.skin_variations)

    def all_names(self) -> Tuple[str, ...]:
        """Primary identifier followed by aliases, without duplicates."""
        seen = [self.short_name]
        for alias in self.short_names:
            if alias not in seen:
                seen.append(alias)
        return tuple(seen)
