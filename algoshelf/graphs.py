"""Graph algorithms: topological ordering, components and two-colouring."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return True when all courses can be taken; ``[a, b]`` means b comes before a."""
    followers: list[list[int]] = [[] for _ in range(num_courses)]
    indegree = [0] * num_courses
    for course, before in prerequisites:
        followers[before].append(course)
        indegree[course] += 1
    ready = deque(node for node, degree in enumerate(indegree) if degree == 0)
    taken = 0
    while ready:
        node = ready.popleft()
        taken += 1
        for nxt in followers[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    return taken == num_courses


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix of ones and zeros."""
    size = len(is_connected)
    adjacent: list[set[int]] = [set() for _ in range(size)]
    for i, row in enumerate(is_connected):
        for j, linked in enumerate(row):
            if linked == 1 and i != j:
                adjacent[i].add(j)
                adjacent[j].add(i)
    seen: set[int] = set()
    groups = 0
    for start in range(size):
        if start in seen:
            continue
        groups += 1
        seen.add(start)
        pending = [start]
        while pending:
            node = pending.pop()
            for nxt in adjacent[node] - seen:
                seen.add(nxt)
                pending.append(nxt)
    return groups


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return True when the nodes of an adjacency list can be two-coloured."""
    colour: dict[int, int] = {}
    for start in range(len(graph)):
        if start in colour:
            continue
        colour[start] = 0
        pending = [start]
        while pending:
            node = pending.pop()
            for nxt in graph[node]:
                if nxt not in colour:
                    colour[nxt] = 1 - colour[node]
                    pending.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True