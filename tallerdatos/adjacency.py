"""Adjacency matrix reading and adjacency list display for small graphs."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterable
from itertools import islice

ALPHABET = string.ascii_uppercase
MAX_NODES = len(ALPHABET) + len(ALPHABET) ** 2


def node_label(index: int) -> str:
    """Return the letter label of a node: A..Z, then AA..ZZ."""
    if not 0 <= index < MAX_NODES:
        raise ValueError(f"node index out of range: {index}")
    if index < len(ALPHABET):
        return ALPHABET[index]
    first, second = divmod(index - len(ALPHABET), len(ALPHABET))
    return ALPHABET[first] + ALPHABET[second]


def parse_matrix(tokens: Iterable[str | int]) -> list[list[int]]:
    """Read a size ``n`` followed by ``n * n`` integers into a square matrix."""
    numbers = iter(tokens)
    try:
        size = int(next(numbers))
    except StopIteration:
        raise ValueError("missing matrix size") from None
    if size < 0:
        raise ValueError(f"negative matrix size: {size}")
    matrix: list[list[int]] = []
    for _ in range(size):
        row = [int(value) for value in islice(numbers, size)]
        if len(row) != size:
            raise ValueError("matrix is incomplete")
        matrix.append(row)
    return matrix


def _check_square(matrix: list[list[int]]) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")


def adjacency_list(matrix: list[list[int]]) -> dict[str, list[str]]:
    """Map each node label to the labels it connects to (cells equal to 1)."""
    _check_square(matrix)
    return {
        node_label(i): [node_label(j) for j, cell in enumerate(row) if cell == 1]
        for i, row in enumerate(matrix)
    }


def format_matrix(matrix: list[list[int]]) -> list[str]:
    """Render each matrix row as space-terminated values."""
    return ["".join(f"{cell} " for cell in row) for row in matrix]


def format_adjacency(adjacency: dict[str, list[str]]) -> list[str]:
    """Render each node and its neighbours joined by `` - ``."""
    return [" - ".join([node, *neighbours]) for node, neighbours in adjacency.items()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read an adjacency matrix from standard input and show it as a list."
    )
    parser.parse_args(argv)
    try:
        matrix = parse_matrix(sys.stdin.read().split())
        adjacency = adjacency_list(matrix)
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1

    for line in format_matrix(matrix):
        print(line)
    print()
    for line in format_adjacency(adjacency):
        print(line)
    print()
    print()
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())