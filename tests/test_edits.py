import pytest

from src.lexicon.edits import (
    deletions,
    insertions,
    is_single_edit,
    single_edits,
    substitutions,
    transpositions,
)

SYMBOLS = "abc"


def test_deletions():
    assert list(deletions("cab")) == ["ab", "cb", "ca"]
    assert list(deletions("")) == []


def test_insertions_count():
    # (L + 1) positions times |alphabet| symbols
    candidates = list(insertions("cab", SYMBOLS))
    assert len(candidates) == 4 * 3
    assert candidates[:3] == ["acab", "bcab", "ccab"]
    assert list(insertions("", SYMBOLS)) == ["a", "b", "c"]


def test_substitutions_skip_identity():
    # L positions times (|alphabet| - 1) symbols
    candidates = list(substitutions("cab", SYMBOLS))
    assert len(candidates) == 3 * 2
    assert "cab" not in candidates
    assert candidates[:2] == ["aab", "bab"]


def test_substitutions_of_foreign_symbol():
    assert list(substitutions("x", SYMBOLS)) == ["a", "b", "c"]


def test_transpositions():
    assert list(transpositions("cab")) == ["acb", "cba"]
    assert list(transpositions("a")) == []
    assert list(transpositions("")) == []


def test_transpositions_skip_equal_neighbours():
    assert list(transpositions("aab")) == ["aba"]


def test_single_edits_order():
    candidates = list(single_edits("ab", "ab"))
    assert candidates == [
        # deletions
        "b",
        "a",
        # insertions
        "aab",
        "bab",
        "aab",
        "abb",
        "aba",
        "abb",
        # substitutions
        "bb",
        "aa",
        # transpositions
        "ba",
    ]


@pytest.mark.parametrize(
    "source,target,expected",
    [
        ("cat", "cat", False),
        ("cat", "at", True),
        ("cat", "ca", True),
        ("cat", "cart", True),
        ("cat", "cats", True),
        ("cat", "scat", True),
        ("cat", "cot", True),
        ("cat", "act", True),
        ("cat", "cta", True),
        ("cat", "tac", False),
        ("cat", "dog", False),
        ("cat", "c", False),
        ("cat", "coats", False),
        ("", "a", True),
        ("", "", False),
        ("ab", "ba", True),
        ("abcd", "badc", False),
    ],
)
def test_is_single_edit(source, target, expected):
    assert is_single_edit(source, target) is expected
    assert is_single_edit(target, source) is expected


@pytest.mark.parametrize("word", ["", "a", "ab", "abc", "cab", "aab", "bca"])
def test_generated_candidates_are_single_edits(word):
    for candidate in single_edits(word, SYMBOLS):
        assert is_single_edit(word, candidate)
