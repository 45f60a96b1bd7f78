# bktree.py
# BK-tree for approximate/fuzzy string matching (typo-tolerant lookup).
# Holds the tokens of every searchable emoji name; the search index asks
# it for tokens within a small edit distance of each query token.
# - Levenshtein implements an early-exit cutoff to speed up searches.
# Query uses an explicit stack (no recursion) and prunes using triangle property of edit distance.

from typing import Iterable, List, Optional, Tuple


def _normalize(s: str) -> str:
    """Simple normalizer used across the tree (lowercase + trim)."""
    return s.strip().lower()


def levenshtein_with_cutoff(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Compute Levenshtein distance with optional early exit when distance
    exceeds max_dist.
    Returns the computed distance, or max_dist + 1 once it is known to be larger.
    """
    if a == b:
        return 0

    # ensure a is the longer string to simplify indexing
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)

    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1

    prev = list(range(lb + 1))

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr = [i]
        row_min = curr[0]

        for j in range(1, lb + 1):
            cb = b[j - 1]
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == cb else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr.append(val)
            if val < row_min:
                row_min = val

        # early exit: every cell in the row already exceeds the cutoff
        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev = curr
    return prev[-1]


class BKTree:
    """BK-tree for approximate string lookup."""

    class Node:
        __slots__ = ("word", "children")

        def __init__(self, word: str):
            self.word = word
            self.children: dict[int, "BKTree.Node"] = {}

    def __init__(self):
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> None:
        """Inserts a single word; duplicates are ignored."""
        if not word or not isinstance(word, str):
            return

        w = _normalize(word)
        if not w:
            return

        if self.root is None:
            self.root = BKTree.Node(w)
            self._size = 1
            return

        node = self.root
        while True:
            d = levenshtein_with_cutoff(w, node.word)
            if d == 0:
                return
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(w)
                self._size += 1
                return
            node = child

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # query ---------------------------------------------------------------------------
    def query(self, word: str, max_dist: int = 2) -> List[Tuple[str, int]]:
        """
        Return list of (word, distance) for words within max_dist of 'word'.
        Sorted by (distance, word).
        """
        if not word or self.root is None or max_dist < 0:
            return []

        q = _normalize(word)
        if not q:
            return []

        results: List[Tuple[str, int]] = []

        stack = [self.root]
        while stack:
            node = stack.pop()
            # the exact distance is needed to prune children, so no cutoff here
            d = levenshtein_with_cutoff(q, node.word)
            if d <= max_dist:
                results.append((node.word, d))

            # children worth visiting: [d - max_dist, d + max_dist]
            low = max(1, d - max_dist)
            high = d + max_dist
            for dist_key, child in node.children.items():
                if low <= dist_key <= high:
                    stack.append(child)

        results.sort(key=lambda item: (item[1], item[0]))
        return results

    # utilities -------------------------------------------------------------------
    def __contains__(self, word: str) -> bool:
        """True if exact word exists in the tree (case/space normalized)."""
        return any(w == _normalize(word) for w, _ in self.query(word, 0))

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size
