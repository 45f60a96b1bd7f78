# replacer.py
# Token Replacer: swaps ":name:" and ":name::skin-tone-N:" tokens in free
# text for literal emoji. Unknown names are left exactly as written, so
# things like "10:30:45" or ":not-a-real-emoji:" survive untouched.

from __future__ import annotations

import re

from emoji_catalog.core.name_index import NameIndex
from emoji_catalog.core.variants import resolve, to_literal

TOKEN_RE = re.compile(
    r":(?P<name>[a-z0-9\-_+]+):(?::skin-tone-(?P<tone>[1-5]):)?",
    re.IGNORECASE,
)


class TokenReplacer:
    """Single left-to-right pass; matches never overlap."""

    def __init__(self, names: NameIndex):
        self.names = names

    def _substitute(self, m: re.Match[str]) -> str:
        name = m.group("name").lower()
        record = self.names.lookup(name)
        if record is None:
            return m.group(0)
        tone = int(m.group("tone") or 0)
        return to_literal(resolve(record, tone))

    def replace(self, text: str) -> str:
        if not text:
            return text
        return TOKEN_RE.sub(self._substitute, text)
