"""Suffix automaton of a sequence and general suffix automaton of a trie."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field


@dataclass
class SamState:
    """A state of a suffix automaton.

    ``length`` is the longest string of the state, ``link`` its suffix link,
    ``occ`` marks (then, after counting, gives) occurrences and ``pos`` an
    end position of the state's strings.
    """

    link: int = -1
    length: int = 0
    transitions: dict = field(default_factory=dict)
    occ: int = 0
    pos: int = 0


class SuffixAutomaton:
    """Suffix automaton of a string or sequence of hashable items; state 0 is the root.

    ``at[i]`` is the state holding the prefix that ends at position ``i``.
    """

    def __init__(self, s):
        self.s = s
        self.states = [SamState()]
        self.at = []
        self._counted = False
        last = 0
        for i, c in enumerate(s):
            last = self._extend(last, i, c)

    def __len__(self):
        return len(self.states)

    def _extend(self, last, i, c):
        states = self.states
        cur = len(states)
        states.append(SamState(length=states[last].length + 1, occ=1, pos=i))
        self.at.append(cur)
        node = last
        while node != -1 and c not in states[node].transitions:
            states[node].transitions[c] = cur
            node = states[node].link
        if node == -1:
            states[cur].link = 0
            return cur
        p = states[node].transitions[c]
        if states[p].length == states[node].length + 1:
            states[cur].link = p
            return cur
        clone = dataclasses.replace(
            states[p],
            length=states[node].length + 1,
            occ=0,
            transitions=dict(states[p].transitions),
        )
        states.append(clone)
        np = len(states) - 1
        states[cur].link = states[p].link = np
        while node != -1 and states[node].transitions.get(c) == p:
            states[node].transitions[c] = np
            node = states[node].link
        return cur

    def calc_occurrence(self):
        """Turn ``occ`` into the number of occurrences of each state's strings.

        Calling it again has no further effect.
        """
        if self._counted:
            return
        states = self.states
        for v in sorted(range(1, len(states)), key=lambda v: states[v].length, reverse=True):
            states[states[v].link].occ += states[v].occ
        self._counted = True

    def reversed_prefix_tree(self):
        """Children of every state in the suffix-link tree, ordered by the extending item."""
        states = self.states
        children = [[] for _ in states]
        for v in range(1, len(states)):
            children[states[v].link].append(v)
        s = self.s
        for v, kids in enumerate(children):
            depth = states[v].length
            kids.sort(key=lambda u: s[states[u].pos - depth])
        return children


@dataclass
class TrieNode:
    """A trie node, also used as a state of the general suffix automaton."""

    transitions: dict = field(default_factory=dict)
    link: int = -1
    length: int = 0
    occ: int = 0


def build_trie(words):
    """Trie of ``words``; ``occ`` counts the words having the node's string as a prefix."""
    nodes = [TrieNode()]
    for word in words:
        node = 0
        for ch in word:
            nxt = nodes[node].transitions.get(ch)
            if nxt is None:
                nodes.append(TrieNode())
                nxt = len(nodes) - 1
                nodes[node].transitions[ch] = nxt
            node = nxt
            nodes[node].occ += 1
    return nodes


class GeneralSuffixAutomaton:
    """Suffix automaton of all strings spelled by root paths of a trie.

    The trie (as made by ``build_trie``) is copied, not modified; state 0 is
    the root and trie node ``i`` becomes state ``i``.
    """

    def __init__(self, trie):
        if not trie:
            raise ValueError("trie must contain a root")
        self.states = [
            TrieNode(dict(node.transitions), node.link, node.length, node.occ) for node in trie
        ]
        queue = [0]
        for node in queue:
            symbols = sorted(self.states[node].transitions)
            queue.extend(self.states[node].transitions[c] for c in symbols)
            for c in symbols:
                self._insert(node, c)

    def __len__(self):
        return len(self.states)

    def _insert(self, node, c):
        states = self.states
        last = states[node].transitions[c]
        states[last].length = states[node].length + 1
        node = states[node].link
        while node != -1 and c not in states[node].transitions:
            states[node].transitions[c] = last
            node = states[node].link
        if node == -1:
            states[last].link = 0
            return
        p = states[node].transitions[c]
        if states[p].length == states[node].length + 1:
            states[last].link = p
            return
        # Only edges into states already placed in the automaton are copied.
        clone = TrieNode(
            {ch: v for ch, v in states[p].transitions.items() if states[v].length > 0},
            states[p].link,
            states[node].length + 1,
        )
        states.append(clone)
        np = len(states) - 1
        states[last].link = states[p].link = np
        while node != -1 and states[node].transitions.get(c) == p:
            states[node].transitions[c] = np
            node = states[node].link