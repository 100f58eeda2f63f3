"""Aho-Corasick automaton over a contiguous alphabet."""

from __future__ import annotations


class AhoCorasick:
    """Multi-pattern automaton over ``size`` consecutive characters from ``start``.

    After ``build()``, ``count[v]`` is the number of inserted patterns that
    are suffixes of state ``v``, and ``fail[v]`` its suffix link.
    """

    def __init__(self, start="a", size=26):
        if size < 1:
            raise ValueError("alphabet size must be positive")
        self._start = ord(start)
        self.size = size
        self.transitions = [[-1] * size]
        self.fail = [-1]
        self.count = [0]
        self._order = None

    def __len__(self):
        return len(self.transitions)

    def _code(self, ch):
        c = ord(ch) - self._start
        if not 0 <= c < self.size:
            raise ValueError(f"character {ch!r} outside the alphabet")
        return c

    def insert(self, s):
        """Add a pattern; return the id of the state it ends in."""
        if self._order is not None:
            raise RuntimeError("cannot insert after build()")
        node = 0
        for ch in s:
            c = self._code(ch)
            if self.transitions[node][c] == -1:
                self.transitions.append([-1] * self.size)
                self.fail.append(-1)
                self.count.append(0)
                self.transitions[node][c] = len(self.transitions) - 1
            node = self.transitions[node][c]
        self.count[node] += 1
        return node

    def build(self):
        """Compute suffix links and complete the transition table."""
        order = [0]
        for node in order:
            parent = self.fail[node]
            row = self.transitions[node]
            for c in range(self.size):
                fallback = 0 if parent == -1 else self.transitions[parent][c]
                if row[c] == -1:
                    row[c] = fallback
                else:
                    self.fail[row[c]] = fallback
                    order.append(row[c])
            if parent != -1:
                self.count[node] += self.count[parent]
        self._order = order

    def query(self, s):
        """How many times each state occurs as a suffix of some prefix of ``s``."""
        if self._order is None:
            raise RuntimeError("call build() before query()")
        visits = [0] * len(self.transitions)
        node = 0
        for ch in s:
            node = self.transitions[node][self._code(ch)]
            visits[node] += 1
        for node in reversed(self._order):
            parent = self.fail[node]
            if parent != -1:
                visits[parent] += visits[node]
        return visits