# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Availability aggregate models."""

from dataclasses import dataclass


@dataclass
class DomainStats:
    """Cumulative check counts for one domain. Invariant: 0 <= up <= total."""

    total: int = 0
    up: int = 0

    @property
    def availability(self) -> int:
        """Percentage of up checks, rounded half-up to an integer."""
        # Integer arithmetic keeps .5 boundaries exact (1/8 -> 13, not 12).
        return (200 * self.up + self.total) // (2 * self.total)


@dataclass(frozen=True)
class DomainAvailability:
    domain: str
    availability: int

    def __str__(self) -> str:
        return f"{self.domain} has {self.availability}% availability percentage"
