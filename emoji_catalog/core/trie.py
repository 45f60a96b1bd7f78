# trie.py
# Simple Trie (prefix tree) over emoji name tokens.
# Lets the search index complete a partial query token ("thu" -> "thumbsup")
# without scanning every token.

from __future__ import annotations
from collections import defaultdict
from typing import Dict, List, Optional


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: marks the end of an inserted token
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_word = False


class Trie:

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert a token (lowercased)."""
        if not word:
            return

        node = self._root
        for ch in word.lower():
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # search/traversal ---------------------------------------------------------
    def search_prefix(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Every stored token starting with `prefix` (the prefix itself included
        when stored), shortest first, then lexicographic.
        """
        if not prefix:
            return []

        node = self._root
        for ch in prefix.lower():
            nxt = node.children.get(ch)
            if nxt is None:
                return []
            node = nxt

        out: List[str] = []
        self._collect(node, prefix.lower(), out)
        out.sort(key=lambda w: (len(w), w))
        return out if limit is None else out[:limit]

    def _collect(self, node: TrieNode, prefix: str, results: List[str]) -> None:
        """DFS collecting words under a prefix node."""
        if node.is_word:
            results.append(prefix)
        for ch, child in node.children.items():
            self._collect(child, prefix + ch, results)

    def size(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        node = self._root
        for ch in word.lower():
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word
