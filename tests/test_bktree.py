# tests/test_bktree.py
from emoji_catalog.core.bktree import BKTree, levenshtein_with_cutoff
from emoji_catalog.core.trie import Trie


def test_levenshtein():
    assert levenshtein_with_cutoff("smile", "smile") == 0
    assert levenshtein_with_cutoff("smile", "smiles") == 1
    assert levenshtein_with_cutoff("kitten", "sitting") == 3
    assert levenshtein_with_cutoff("", "abc") == 3


def test_levenshtein_cutoff_bails_early():
    assert levenshtein_with_cutoff("thumbsup", "cat", max_dist=1) == 2
    assert levenshtein_with_cutoff("pizza", "pizzza", max_dist=1) == 1


def test_query_within_distance():
    t = BKTree()
    t.insert_many(["pizza", "piazza", "pizzas", "dog", "pizza"])
    assert t.size() == 4
    assert t.query("pizza", 0) == [("pizza", 0)]
    assert t.query("pizza", 1) == [("pizza", 0), ("piazza", 1), ("pizzas", 1)]
    assert t.query("pizza", -1) == []
    assert t.query("", 2) == []


def test_contains_normalizes():
    t = BKTree()
    t.insert(" Smile ")
    assert "smile" in t
    assert "SMILE" in t
    assert "smiles" not in t


def test_trie_prefix():
    tr = Trie()
    for w in ["thumbs", "thumbsup", "the", "smile"]:
        tr.insert(w)
    tr.insert("thumbs")
    assert tr.size() == 4
    assert tr.search_prefix("th") == ["the", "thumbs", "thumbsup"]
    assert tr.search_prefix("thumbs", limit=1) == ["thumbs"]
    assert tr.search_prefix("x") == []
    assert tr.search_prefix("") == []
    assert "thumbs" in tr
    assert "thumb" not in tr
