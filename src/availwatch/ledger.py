# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cumulative per-domain availability state."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .models.availability import DomainAvailability, DomainStats


class AvailabilityLedger:
    """
    Mapping of domain -> DomainStats, accumulated since the ledger was created.

    Domains are added lazily on their first `record` call and never removed,
    so every tracked domain has `total >= 1`. The ledger is not thread-safe;
    callers record and report sequentially.
    """

    def __init__(self) -> None:
        self._stats: dict[str, DomainStats] = {}

    def record(self, domain: str, up: bool) -> DomainStats:
        stats = self._stats.get(domain)
        if stats is None:
            stats = self._stats[domain] = DomainStats()
        stats.total += 1
        if up:
            stats.up += 1
        return stats

    def snapshot(self) -> list[DomainAvailability]:
        return [DomainAvailability(domain, stats.availability) for domain, stats in self._stats.items()]

    def report(self, out: TextIO | None = None) -> list[str]:
        """Write one availability line per tracked domain and return the lines."""
        stream = out if out is not None else sys.stdout
        lines = [str(row) for row in self.snapshot()]
        for line in lines:
            print(line, file=stream)
        stream.flush()
        return lines

    def stats(self, domain: str) -> DomainStats | None:
        stats = self._stats.get(domain)
        return DomainStats(total=stats.total, up=stats.up) if stats is not None else None

    def domains(self) -> list[str]:
        return list(self._stats)

    def __contains__(self, domain: object) -> bool:
        return domain in self._stats

    def __len__(self) -> int:
        return len(self._stats)

    def __iter__(self) -> Iterator[str]:
        return iter(self._stats)
