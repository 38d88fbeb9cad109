"""Open-addressing hash table of vehicle records keyed by plate."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from itertools import islice

TABLE_SIZE = 97
NOT_FOUND_MESSAGE = "dato no encontrado"


class TableFullError(Exception):
    """Raised when every slot of the table is taken."""


class DuplicatePlateError(ValueError):
    """Raised when a plate is already stored."""


def plate_hash(plate: str) -> int:
    """Sum the character codes of ``plate`` modulo the table size."""
    return sum(map(ord, plate)) % TABLE_SIZE


def _plate_of(record: str) -> str:
    return record.split(" ", 1)[0]


class PlateTable:
    """Fixed-size table with linear probing; records are ``plate brand model year``."""

    def __init__(self) -> None:
        self._slots: list[str | None] = [None] * TABLE_SIZE
        self._count = 0

    def _find(self, plate: str) -> int | None:
        return next(
            (
                slot
                for slot, record in enumerate(self._slots)
                if record is not None and _plate_of(record) == plate
            ),
            None,
        )

    def insert(self, record: str) -> int:
        """Store ``record`` and return the slot it landed in."""
        plate = _plate_of(record)
        if self._count == TABLE_SIZE:
            raise TableFullError("tabla llena, imposible insertar")
        if self._find(plate) is not None:
            raise DuplicatePlateError("imposible insertar, placa duplicada")
        slot = plate_hash(plate)
        while self._slots[slot] is not None:
            slot = (slot + 1) % TABLE_SIZE
        self._slots[slot] = record
        self._count += 1
        return slot

    def delete(self, plate: str) -> str:
        """Remove the record with ``plate`` and return it."""
        slot = self._find(plate)
        if slot is None:
            raise KeyError(plate)
        record = self._slots[slot]
        self._slots[slot] = None
        self._count -= 1
        return record or ""

    def search(self, plate: str) -> str:
        """Return the record stored under ``plate``."""
        slot = self._find(plate)
        if slot is None:
            raise KeyError(plate)
        return self._slots[slot] or ""

    def rows(self) -> Iterator[tuple[int, str]]:
        """Yield ``(slot, record)`` for every slot; empty slots give ``""``."""
        for slot, record in enumerate(self._slots):
            yield slot, record or ""


def run_commands(tokens: Iterable[str]) -> list[str]:
    """Run table commands and return the printed lines.

    Commands: 1 plate brand model year insert, 2 plate delete,
    3 print, 4 plate search, 0 quit. Other numbers are ignored.
    """
    stream = iter(tokens)
    table = PlateTable()
    output: list[str] = []
    for token in stream:
        command = int(token)
        if command == 0:
            break
        if command == 1:
            fields = list(islice(stream, 4))
            if len(fields) < 4:
                break
            try:
                table.insert(" ".join(fields))
            except (TableFullError, DuplicatePlateError) as error:
                output.append(str(error))
        elif command == 2:
            plate = next(stream, None)
            if plate is None:
                break
            try:
                table.delete(plate)
            except KeyError:
                pass
        elif command == 3:
            output.extend(f"{slot} {record}" for slot, record in table.rows())
            output.append("")
        elif command == 4:
            plate = next(stream, None)
            if plate is None:
                break
            try:
                output.append(table.search(plate))
            except KeyError:
                output.append(NOT_FOUND_MESSAGE)
            output.append("")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read plate-table commands from standard input."
    )
    parser.parse_args(argv)
    try:
        lines = run_commands(sys.stdin.read().split())
    except ValueError as error:
        print(f"invalid command: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())