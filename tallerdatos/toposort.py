"""Directed graphs of lettered vertices: loading, a root check and Kahn's sort."""

from __future__ import annotations

import argparse
import string
import sys
from collections import deque
from collections.abc import Iterable

ALPHABET = string.ascii_uppercase
MAX_VERTICES = 702

Edge = tuple[int, int]


def _vertex(letter: str, vertex_count: int) -> int:
    index = ALPHABET.find(letter)
    if index < 0 or len(letter) != 1:
        raise ValueError(f"unknown vertex: {letter!r}")
    if index >= vertex_count:
        raise ValueError(f"vertex {letter} outside a graph of {vertex_count}")
    return index


def _check_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = list(edges)
    for source, target in checked:
        if not (0 <= source < vertex_count and 0 <= target < vertex_count):
            raise ValueError(f"edge ({source}, {target}) outside the graph")
    return checked


def load_graph(tokens: Iterable[str]) -> tuple[int, list[Edge]]:
    """Read vertex count, edge count and letter pairs; return the count and edges."""
    items = iter(tokens)
    try:
        vertex_count = int(next(items))
        edge_count = int(next(items))
    except StopIteration:
        raise ValueError("missing vertex or edge count") from None
    if not 0 < vertex_count <= MAX_VERTICES:
        raise ValueError(f"vertex count out of range: {vertex_count}")

    letters = (char for token in items for char in token)
    edges: list[Edge] = []
    for _ in range(edge_count):
        source = next(letters, None)
        target = next(letters, None)
        if source is None or target is None:
            raise ValueError("fewer edges than announced")
        edges.append((_vertex(source, vertex_count), _vertex(target, vertex_count)))
    return vertex_count, edges


def is_tree(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Return True when no vertex is left with an in-degree of zero."""
    in_degree = [0] * vertex_count
    for _, target in _check_edges(vertex_count, edges):
        in_degree[target] += 1
    return all(degree > 0 for degree in in_degree)


def topological_sort(vertex_count: int, edges: Iterable[Edge]) -> list[int]:
    """Order the vertices with Kahn's algorithm; raise ValueError on a cycle."""
    in_degree = [0] * vertex_count
    successors: list[list[int]] = [[] for _ in range(vertex_count)]
    for source, target in _check_edges(vertex_count, edges):
        in_degree[target] += 1
        successors[source].append(target)

    ready = deque(v for v, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while ready:
        vertex = ready.popleft()
        order.append(vertex)
        for target in successors[vertex]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                ready.append(target)

    if len(order) != vertex_count:
        raise ValueError("graph has a cycle")
    return order


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read a lettered directed graph and print a topological order."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    try:
        vertex_count = int(tokens[0])
    except ValueError:
        print(f"invalid vertex count: {tokens[0]!r}", file=sys.stderr)
        return 1
    if not 0 < vertex_count <= MAX_VERTICES:
        return 0

    try:
        vertex_count, edges = load_graph(tokens)
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1

    print("true" if is_tree(vertex_count, edges) else "false")
    try:
        order = topological_sort(vertex_count, edges)
    except ValueError:
        return 0
    print("".join(f"{ALPHABET[v]} " for v in order if v < len(ALPHABET)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())