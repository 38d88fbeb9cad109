"""Hash table that groups log entries by network and tracks their unique hosts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

from .log_heap import _split_address, _split_fields, _strip_leading_zeros
from .plate_table import TableFullError

TABLE_SIZE = 32749
FULL_MESSAGE = "Tabla llena, imposible meter más datos"
# Only networks written in the padded "nnn.nnn" form are merged and found again.
_PADDED_NETWORK_LENGTH = 7


@dataclass
class DomainRecord:
    """Accesses to one network and the distinct addresses seen in it."""

    network: str
    accesses: int = 1
    addresses: list[str] = field(default_factory=list)

    @property
    def unique_hosts(self) -> int:
        return len(self.addresses)

    def _stored_text(self) -> str:
        head = f"{self.network} {self.accesses} {self.unique_hosts}"
        return " ".join([head, *self.addresses])


def domain_hash(key: str) -> int:
    """Sum the character codes of ``key`` modulo the table size."""
    return sum(map(ord, key)) % TABLE_SIZE


def _strip_parts(address: str, count: int) -> str:
    parts = address.split(".", count - 1)
    if len(parts) != count:
        raise ValueError(f"malformed address: {address!r}")
    return ".".join(_strip_leading_zeros(part, 0) for part in parts)


def strip_zeros(address: str) -> str:
    """Remove leading zeros from each part of ``nnn.nnn`` or ``a.b.c.d``."""
    count = 2 if len(address) == _PADDED_NETWORK_LENGTH else 4
    return _strip_parts(address, count)


class DomainTable:
    """Open-addressing table of :class:`DomainRecord` keyed by network."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._slots: list[DomainRecord | None] = [None] * TABLE_SIZE
        self._merged: dict[str, DomainRecord] = {}
        self._count = 0
        for line in lines:
            self.insert(line)

    def insert(self, line: str) -> DomainRecord:
        """Add a ``month day time a.b.c.d:port message`` line; return its record."""
        _, _, _, address, _ = _split_fields(line)
        octets, _port = _split_address(address)
        network = ".".join(octets[:2])
        host = ".".join(octets[2:])
        full = ".".join(octets)

        record = self._merged.get(network)
        if record is not None:
            known = host in record._stored_text()
            record.accesses += 1
            if not known:
                record.addresses.append(full)
            return record

        if self._count == TABLE_SIZE:
            raise TableFullError(FULL_MESSAGE)
        slot = domain_hash(network)
        while self._slots[slot] is not None:
            slot = (slot + 1) % TABLE_SIZE
        record = DomainRecord(network, addresses=[full])
        self._slots[slot] = record
        self._count += 1
        if len(network) == _PADDED_NETWORK_LENGTH:
            self._merged[network] = record
        return record

    def lookup(self, network: str) -> DomainRecord:
        """Return the record whose unpadded network equals ``network``."""
        for record in self._slots:
            if (
                record is not None
                and len(record.network) == _PADDED_NETWORK_LENGTH
                and strip_zeros(record.network) == network
            ):
                return record
        raise KeyError(network)


def format_record(record: DomainRecord) -> list[str]:
    """Network, access count, unique host count, then the sorted addresses."""
    return [
        strip_zeros(record.network),
        str(record.accesses),
        str(record.unique_hosts),
        *(_strip_parts(address, 4) for address in sorted(record.addresses)),
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Load an access log and report on the networks read from stdin."
    )
    parser.add_argument("path", nargs="?", default="bitacora2.txt")
    args = parser.parse_args(argv)

    tokens = sys.stdin.read().split()
    try:
        wanted = int(tokens[0]) if tokens else 0
    except ValueError:
        print(f"invalid count: {tokens[0]!r}", file=sys.stderr)
        return 1
    queries = tokens[1 : 1 + max(wanted, 0)]

    table = DomainTable()
    try:
        with open(args.path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    table.insert(line.rstrip("\n"))
                except TableFullError as error:
                    print(error)
    except OSError as error:
        print(f"cannot read {args.path}: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"invalid log: {error}", file=sys.stderr)
        return 1

    print()
    for query in queries:
        try:
            record = table.lookup(query)
        except KeyError:
            pass
        else:
            for line in format_record(record):
                print(line)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())