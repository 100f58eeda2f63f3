"""Palindromic tree (eertree) of a sequence."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PalindromeNode:
    """A distinct palindrome: its length, longest proper palindromic suffix and children.

    ``count`` is how many prefixes have this palindrome as their longest
    palindromic suffix.
    """

    link: int
    length: int
    transitions: dict = field(default_factory=dict)
    count: int = 0


class PalindromeTree:
    """Palindromic tree of a string or sequence of hashable items.

    Node 0 is the odd root (length -1) and node 1 the even root (length 0);
    every other node is a distinct palindromic substring, and its ``link``
    is always smaller than its own index.
    """

    def __init__(self, s):
        self.s = s
        self.nodes = [PalindromeNode(-1, -1), PalindromeNode(0, 0)]
        self.last = 0
        for pos in range(len(s)):
            self._extend(pos)

    def __len__(self):
        return len(self.nodes)

    def _extendable(self, i, pos):
        s = self.s
        nodes = self.nodes
        while pos == nodes[i].length or s[pos - 1 - nodes[i].length] != s[pos]:
            i = nodes[i].link
        return i

    def _extend(self, pos):
        nodes = self.nodes
        c = self.s[pos]
        node = self._extendable(self.last, pos)
        if c not in nodes[node].transitions:
            if node == 0:
                link = 1
            else:
                link = nodes[self._extendable(nodes[node].link, pos)].transitions[c]
            nodes.append(PalindromeNode(link, nodes[node].length + 2))
            nodes[node].transitions[c] = len(nodes) - 1
        node = nodes[node].transitions[c]
        nodes[node].count += 1
        self.last = node