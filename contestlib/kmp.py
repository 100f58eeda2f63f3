"""Knuth-Morris-Pratt prefix function and pattern matching."""

from __future__ import annotations


class KMP:
    """Failure table of ``pattern``; ``fail[i]`` is the longest border of pattern[:i+1]."""

    def __init__(self, pattern):
        if len(pattern) == 0:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        n = len(pattern)
        fail = [0] * n
        j = 0
        for i in range(1, n):
            while j > 0 and pattern[j] != pattern[i]:
                j = fail[j - 1]
            if pattern[j] == pattern[i]:
                j += 1
            fail[i] = j
        self.fail = fail

    def __len__(self):
        return len(self.pattern)

    def match(self, text):
        """List with True at each index of ``text`` where the pattern starts."""
        s = self.pattern
        n = len(s)
        fail = self.fail
        result = [False] * len(text)
        j = 0
        for i, ch in enumerate(text):
            while j > 0 and (j == n or s[j] != ch):
                j = fail[j - 1]
            if s[j] == ch:
                j += 1
            if j == n:
                result[i - n + 1] = True
        return result