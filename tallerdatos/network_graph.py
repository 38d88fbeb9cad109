"""Visit counts per network and per host taken from an access log."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Mapping

from .log_heap import _split_address, _split_fields

# Hosts are told apart by what follows the "nnn.nnn." network prefix.
HOST_OFFSET = 8


class NetworkLog:
    """Collects log lines of the form ``month day time a.b.c.d:port message``."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._networks: list[str] = []
        self._addresses: list[str] = []
        for line in lines:
            self.add(line)

    def add(self, line: str) -> None:
        """Record the network (first two octets) and address of a log line."""
        _, _, _, address, _ = _split_fields(line)
        octets, _port = _split_address(address)
        self._networks.append(".".join(octets[:2]))
        self._addresses.append(".".join(octets))

    def network_counts(self) -> dict[str, int]:
        """Return how often each network appears, in sorted network order."""
        return dict(Counter(sorted(self._networks)))

    def host_counts(self) -> dict[str, int]:
        """Count addresses sharing the same host part, in sorted address order.

        Each group is labelled with the first address of the group in sorted order.
        """
        groups: dict[str, tuple[str, int]] = {}
        for address in sorted(self._addresses):
            if len(address) < HOST_OFFSET:
                raise ValueError(f"address too short for a host part: {address!r}")
            host = address[HOST_OFFSET:]
            label, count = groups.get(host, (address, 0))
            groups[host] = (label, count + 1)
        return {label: count for label, count in groups.values()}

    def busiest_networks(self) -> list[str]:
        return busiest(self.network_counts())

    def busiest_hosts(self) -> list[str]:
        return busiest(self.host_counts())


def busiest(counts: Mapping[str, int]) -> list[str]:
    """Return the labels holding the highest count, in their given order.

    Counts are compared as decimal text, so ``9`` ranks above ``10``.
    """
    if not counts:
        raise ValueError("no counts to compare")
    highest = max(str(count) for count in counts.values())
    return [label for label, count in counts.items() if str(count) == highest]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the most visited networks and hosts of an access log."
    )
    parser.add_argument("path", nargs="?", default="bitacora2.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            log = NetworkLog(line.rstrip("\n") for line in handle if line.strip())
        networks = log.busiest_networks()
        hosts = log.busiest_hosts()
    except OSError as error:
        print(f"cannot read {args.path}: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"invalid log: {error}", file=sys.stderr)
        return 1

    for network in networks:
        print(network)
    print()
    for host in hosts:
        print(host)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())