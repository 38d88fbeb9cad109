"""Heap of log lines ordered by zero-padded source address."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def _pad_octet(octet: str) -> str:
    return octet.zfill(3) if 1 <= len(octet) <= 2 else octet


def _pad_port(port: str) -> str:
    return port.zfill(4) if 1 <= len(port) <= 3 else port


def _strip_leading_zeros(text: str, keep: int) -> str:
    """Drop leading zeros, one per step, while the step count stays below len - keep."""
    removed = 0
    while text and removed < len(text) - keep and text[0] == "0":
        text = text[1:]
        removed += 1
    return text


def _split_address(address: str) -> tuple[list[str], str]:
    ip, sep, port = address.partition(":")
    octets = ip.split(".", 3)
    if not sep or len(octets) != 4:
        raise ValueError(f"malformed address: {address!r}")
    return octets, port


def pad_address(address: str) -> str:
    """Pad an ``a.b.c.d:port`` address to three-digit octets and a four-digit port."""
    octets, port = _split_address(address)
    return ".".join(_pad_octet(octet) for octet in octets) + ":" + _pad_port(port)


def strip_address(address: str) -> str:
    """Remove the zero padding added by :func:`pad_address`."""
    octets, port = _split_address(address)
    stripped = ".".join(_strip_leading_zeros(octet, 0) for octet in octets)
    return stripped + ":" + _strip_leading_zeros(port, 1)


def _split_fields(line: str) -> list[str]:
    fields = line.split(" ", 4)
    if len(fields) != 5:
        raise ValueError(f"malformed log line: {line!r}")
    return fields


def to_key(line: str) -> str:
    """Turn ``month day time address message`` into a sortable heap key."""
    month, day, time, address, message = _split_fields(line)
    return f"{pad_address(address)} {day} {time} {month} {message}"


def from_key(key: str) -> str:
    """Turn a heap key back into the original log line layout."""
    address, day, time, month, message = _split_fields(key)
    return f"{month} {day} {time} {strip_address(address)} {message}"


def _sift_down(items: list[str], k: int, size: int) -> None:
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


class LogHeap:
    """Max-heap of distinct log lines keyed by padded address."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._keys: list[str] = []
        for line in lines:
            self.push(line)

    def push(self, line: str) -> bool:
        """Add a log line; return False if an identical entry is already stored."""
        key = to_key(line)
        if key in self._keys:
            return False
        self._keys.append(key)
        size = len(self._keys)
        for k in range(size // 2, -1, -1):
            _sift_down(self._keys, k, size)
        return True

    def pop(self) -> str:
        """Remove and return the line with the highest address."""
        if not self._keys:
            raise IndexError("pop from an empty log heap")
        largest = self._keys[0]
        last = self._keys.pop()
        if self._keys:
            self._keys[0] = last
            _sift_down(self._keys, 0, len(self._keys))
        return from_key(largest)

    def top(self) -> str:
        """Return the line with the highest address without removing it."""
        if not self._keys:
            raise IndexError("top of an empty log heap")
        return from_key(self._keys[0])

    def is_empty(self) -> bool:
        return not self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the stored keys in heap (array) order."""
        return iter(list(self._keys))


def top_lines(lines: Iterable[str], count: int) -> list[str]:
    """Return up to ``count`` lines with the highest addresses, highest first."""
    heap = LogHeap(lines)
    return [heap.pop() for _ in range(min(count, len(heap)))]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the log entries with the highest source addresses."
    )
    parser.add_argument("path", nargs="?", default="bitacora.txt")
    parser.add_argument("-n", "--count", type=int, default=5)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle if line.strip()]
    except OSError as error:
        print(f"cannot read {args.path}: {error}", file=sys.stderr)
        return 1

    result = top_lines(lines, args.count)
    for line in result:
        print(line)
    for _ in range(args.count - len(result)):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())