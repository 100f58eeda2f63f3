import random

import pytest

from contestlib.palindrome_tree import PalindromeTree


def _spell(tree):
    strings = {0: "", 1: ""}
    stack = [0, 1]
    while stack:
        v = stack.pop()
        for c, u in tree.nodes[v].transitions.items():
            strings[u] = c if v == 0 else c + strings[v] + c
            stack.append(u)
    return strings


def _palindromic_substrings(s):
    return {
        s[i:j]
        for i in range(len(s))
        for j in range(i + 1, len(s) + 1)
        if s[i:j] == s[i:j][::-1]
    }


def _longest_proper_pal_suffix(t):
    for k in range(1, len(t)):
        suffix = t[k:]
        if suffix == suffix[::-1]:
            return suffix
    return ""


def _random_strings(seed, count=25, alphabet="abc", max_len=15):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(1, max_len)))
        for _ in range(count)
    ]


def test_repeated_letter():
    tree = PalindromeTree("aaa")
    assert [node.length for node in tree.nodes] == [-1, 0, 1, 2, 3]
    assert [node.link for node in tree.nodes[2:]] == [1, 2, 3]


@pytest.mark.parametrize(
    "s", _random_strings(5) + _random_strings(6, alphabet="ab") + ["abacaba"]
)
def test_nodes_are_the_distinct_palindromes(s):
    tree = PalindromeTree(s)
    strings = _spell(tree)
    assert len(strings) == len(tree)
    spelled = [strings[u] for u in range(2, len(tree))]
    assert set(spelled) == _palindromic_substrings(s)
    assert len(set(spelled)) == len(spelled)
    for u in range(2, len(tree)):
        node = tree.nodes[u]
        assert len(strings[u]) == node.length
        assert node.link < u
        assert strings[node.link] == _longest_proper_pal_suffix(strings[u])


@pytest.mark.parametrize("s", _random_strings(12, count=10))
def test_counts_cover_every_position(s):
    tree = PalindromeTree(s)
    assert sum(node.count for node in tree.nodes) == len(s)
    strings = _spell(tree)
    assert strings[tree.last] == max(
        (s[k:] for k in range(len(s)) if s[k:] == s[k:][::-1]), key=len
    )


def test_integer_sequence():
    seq = [1, 2, 1, 2, 2, 1]
    tree = PalindromeTree(seq)
    brute = {
        tuple(seq[i:j])
        for i in range(len(seq))
        for j in range(i + 1, len(seq) + 1)
        if seq[i:j] == seq[i:j][::-1]
    }
    assert len(tree) - 2 == len(brute)


def test_empty_sequence_has_only_roots():
    tree = PalindromeTree("")
    assert len(tree) == 2
    assert tree.nodes[0].length == -1
    assert tree.nodes[1].link == 0