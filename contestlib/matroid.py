"""Maximum common independent set of two matroids."""

from __future__ import annotations

from collections import deque


def matroid_intersection(ground, rebuild, check1, check2):
    """Largest set independent in two matroids over ``ground``.

    ``rebuild(chosen)`` prepares the oracles for the set ``chosen``; then
    ``check1(x)`` and ``check2(x)`` tell whether ``chosen`` plus ``x`` stays
    independent in the first and second matroid respectively.
    """
    items = list(ground)
    n = len(items)
    used = [False] * n

    def chosen(skip=None):
        return [item for i, item in enumerate(items) if used[i] and i != skip]

    def augment():
        source, sink = n, n + 1
        graph = [[] for _ in range(n + 2)]
        rebuild(chosen())
        for y, item in enumerate(items):
            if used[y]:
                continue
            free1 = check1(item)
            free2 = check2(item)
            if free1:
                graph[source].append(y)
            if free2:
                graph[y].append(sink)
            if free1 and free2:
                # source -> y -> sink: augment along this path directly.
                used[y] = True
                return True
        for x in range(n):
            if not used[x]:
                continue
            rebuild(chosen(skip=x))
            for y, item in enumerate(items):
                if used[y]:
                    continue
                if check1(item):
                    graph[x].append(y)
                if check2(item):
                    graph[y].append(x)
        parent = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for v in graph[node]:
                if v not in parent:
                    parent[v] = node
                    queue.append(v)
        if sink not in parent:
            return False
        node = parent[sink]
        while node != source:
            used[node] = not used[node]
            node = parent[node]
        return True

    while augment():
        pass
    return chosen()