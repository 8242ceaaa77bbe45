"""Shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> list[float]:
    """Return shortest distances from ``source`` in a weighted adjacency matrix.

    A weight of zero means there is no edge. Unreachable vertices get ``math.inf``.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise IndexError(f"source vertex {source} out of range")
    distances: list[float] = [math.inf] * size
    distances[source] = 0
    settled = [False] * size
    queue: list[tuple[float, int]] = [(0, source)]
    while queue:
        distance, vertex = heapq.heappop(queue)
        if settled[vertex]:
            continue
        settled[vertex] = True
        for neighbour, weight in enumerate(graph[vertex]):
            if weight and not settled[neighbour]:
                candidate = distance + weight
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    heapq.heappush(queue, (candidate, neighbour))
    return distances


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices ordered so every edge points forward.

    Vertices are explored depth first in index order; the reversed finishing
    order is returned.
    """
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            vertex, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished