"""Max-heap priority queue of distinct integers and a small command interpreter."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def _sift_down(items: list[int], k: int, size: int) -> None:
    """Move the item at ``k`` down until both children are no larger."""
    while True:
        left = 2 * k + 1
        right = left + 1
        largest = k
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == k:
            return
        items[k], items[largest] = items[largest], items[k]
        k = largest


class PriorityQueue:
    """A max-heap of integers that silently ignores values already present."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def _rebuild(self) -> None:
        size = len(self._items)
        for k in range(size // 2, -1, -1):
            _sift_down(self._items, k, size)

    def push(self, value: int) -> bool:
        """Add ``value``; return False if it was already queued."""
        if value in self._items:
            return False
        self._items.append(value)
        self._rebuild()
        return True

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        largest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items))
        return largest

    def top(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in heap (array) order."""
        return iter(list(self._items))


def run_commands(tokens: Iterable[int | str]) -> list[str]:
    """Run a stream of numeric commands and return the lines they print.

    Commands: 1 <n> push, 2 pop, 3 print, 4 top, 5 empty, 6 size, 0 quit.
    Numbers outside 1..6 are skipped while waiting for a command.
    """
    stream = (int(token) for token in tokens)
    queue = PriorityQueue()
    output: list[str] = []

    command = next(stream, None)
    while command is not None and command != 0:
        while command is not None and not 1 <= command <= 6:
            command = next(stream, None)
        if command is None:
            break

        if command == 1:
            value = next(stream, None)
            if value is None:
                break
            queue.push(value)
        elif command == 2:
            output.append(str(queue.pop()) if not queue.is_empty() else "")
        elif command == 3:
            output.append("".join(f"{value} " for value in queue))
        elif command == 4:
            output.append(str(queue.top()) if not queue.is_empty() else "-1")
        elif command == 5:
            output.append("true" if queue.is_empty() else "false")
        else:
            output.append(str(len(queue)))

        command = next(stream, None)
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read priority-queue commands from standard input."
    )
    parser.parse_args(argv)
    for line in run_commands(sys.stdin.read().split()):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())