from __future__ import annotations

import itertools
import random
from collections import deque
from typing import Dict, List

import pytest

import truedl.engine.damerau as damerau_module
from truedl import ResourceExhaustionError, damerau_levenshtein


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("a", "", 1),
        ("", "abc", 3),
        ("abc", "abc", 0),
        ("ab", "ba", 1),
        ("ca", "ac", 1),
        ("abcd", "abdc", 1),
        ("kitten", "sitting", 3),
        ("CA", "ABC", 2),  # optimal string alignment would give 3
        ("abcdef", "badcfe", 3),
        ("a", "b", 1),
        ("abc", "xyz", 3),
    ],
)
def test_reference_values(a: str, b: str, expected: int) -> None:
    assert damerau_levenshtein(a, b) == expected


def test_transposition_embedded_among_repeated_symbols() -> None:
    assert damerau_levenshtein("aaabaa", "aaaaba") == 1
    assert damerau_levenshtein("abab", "baba") == 2
    assert damerau_levenshtein("xaxbx", "xaxxb") == 1


def test_transposition_across_a_gap() -> None:
    # swap a..b around one inserted symbol: transpose + insert
    assert damerau_levenshtein("ab", "bxa") == 2
    assert damerau_levenshtein("abc", "ca") == 2


def test_accepts_bytes_and_token_sequences() -> None:
    assert damerau_levenshtein(b"kitten", b"sitting") == 3
    assert damerau_levenshtein(["GET", "/a"], ["/a", "GET"]) == 1
    assert damerau_levenshtein((1, 2, 3), (1, 3, 2, 4)) == 2


def test_inputs_are_not_mutated() -> None:
    a = ["x", "y", "z"]
    b = ["y", "x", "z", "z"]
    damerau_levenshtein(a, b)
    assert a == ["x", "y", "z"]
    assert b == ["y", "x", "z", "z"]


def _random_pairs(count: int, seed: int) -> List[tuple[str, str]]:
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        pairs.append((a, b))
    return pairs


@pytest.mark.parametrize("a, b", _random_pairs(60, seed=5))
def test_metric_properties(a: str, b: str) -> None:
    value = damerau_levenshtein(a, b)
    assert value == damerau_levenshtein(b, a)
    assert abs(len(a) - len(b)) <= value <= max(len(a), len(b))
    assert (value == 0) == (a == b)
    assert damerau_levenshtein(a, a) == 0
    assert damerau_levenshtein(a, "") == len(a)
    assert damerau_levenshtein("", a) == len(a)


def test_repeated_calls_are_deterministic() -> None:
    results = {damerau_levenshtein("GATTACA", "TAGACAT") for _ in range(5)}
    assert len(results) == 1


def _neighbours(word: str, alphabet: str, max_len: int) -> List[str]:
    out = []
    for i in range(len(word)):
        out.append(word[:i] + word[i + 1 :])
        for ch in alphabet:
            if ch != word[i]:
                out.append(word[:i] + ch + word[i + 1 :])
    for i in range(len(word) - 1):
        out.append(word[:i] + word[i + 1] + word[i] + word[i + 2 :])
    if len(word) < max_len:
        for i in range(len(word) + 1):
            for ch in alphabet:
                out.append(word[:i] + ch + word[i:])
    return out


def _bfs_distances(source: str, alphabet: str, max_len: int) -> Dict[str, int]:
    seen = {source: 0}
    queue = deque([source])
    while queue:
        word = queue.popleft()
        for nxt in _neighbours(word, alphabet, max_len):
            if nxt not in seen:
                seen[nxt] = seen[word] + 1
                queue.append(nxt)
    return seen


def test_matches_shortest_edit_path_on_small_alphabet() -> None:
    alphabet = "abc"
    words = [
        "".join(letters)
        for length in range(4)
        for letters in itertools.product(alphabet, repeat=length)
    ]
    for source in words:
        reachable = _bfs_distances(source, alphabet, max_len=5)
        for target in words:
            assert damerau_levenshtein(source, target) == reachable[target], (source, target)


def test_max_cells_rejects_large_inputs_before_allocating() -> None:
    with pytest.raises(ResourceExhaustionError) as excinfo:
        damerau_levenshtein("a" * 10, "b" * 10, max_cells=100)
    assert excinfo.value.cells == 144
    assert excinfo.value.limit == 100
    assert damerau_levenshtein("a" * 10, "b" * 10, max_cells=144) == 10


def test_allocation_failure_surfaces_as_resource_exhaustion(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(rows: int, cols: int, fill: int) -> List[List[int]]:
        raise MemoryError

    monkeypatch.setattr(damerau_module, "_allocate_table", _fail)
    with pytest.raises(ResourceExhaustionError) as excinfo:
        damerau_levenshtein("abc", "abd")
    assert isinstance(excinfo.value, MemoryError)
    assert excinfo.value.limit is None
    assert (excinfo.value.n, excinfo.value.m) == (3, 3)
