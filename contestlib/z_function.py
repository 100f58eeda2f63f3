"""Z-function: longest common prefix of a string with each of its suffixes."""

from __future__ import annotations


class ZFunction:
    """``z[i]`` is the length of the longest common prefix of ``s`` and ``s[i:]``."""

    def __init__(self, s):
        n = len(s)
        if n == 0:
            raise ValueError("sequence must not be empty")
        self.s = s
        z = [0] * n
        z[0] = n
        left = right = 0
        for i in range(1, n):
            z[i] = max(0, min(z[i - left], right - i))
            while i + z[i] < n and s[z[i]] == s[i + z[i]]:
                z[i] += 1
            if i + z[i] > right:
                left, right = i, i + z[i]
        self.z = z

    def __len__(self):
        return len(self.s)

    def match(self, text):
        """For each ``i``, the longest common prefix of ``s`` and ``text[i:]``."""
        s = self.s
        n = len(s)
        z = self.z
        m = len(text)
        result = [0] * m
        left = right = 0
        for i in range(m):
            known = z[i - left] if i - left < n else 0
            result[i] = max(0, min(known, right - i))
            while i + result[i] < m and result[i] < n and s[result[i]] == text[i + result[i]]:
                result[i] += 1
            if i + result[i] > right:
                left, right = i, i + result[i]
        return result