# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Round-based health-check loop."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TextIO

from .config import CHECK_INTERVAL_SECONDS
from .errors import InvalidURL
from .http.url import extract_domain
from .ledger import AvailabilityLedger
from .models.endpoint import EndpointSpec
from .probe import EndpointProber

logger = logging.getLogger(__name__)


class SchedulerState(str, Enum):
    RUNNING = "RUNNING"
    SLEEPING = "SLEEPING"


class IntervalTicker:
    """Fixed delay between rounds."""

    def __init__(self, interval: float = CHECK_INTERVAL_SECONDS, sleep: Callable[[float], None] = time.sleep):
        self.interval = interval
        self._sleep = sleep

    def wait(self) -> None:
        self._sleep(self.interval)


class HealthCheckScheduler:
    """
    Drives rounds over the configured endpoints.

    A round checks endpoints strictly in configured order. Each endpoint is
    probed, recorded in the ledger, and followed immediately by a full ledger
    report, so output grows with endpoints x rounds. Endpoints whose URL has
    no parseable hostname are skipped for the round without touching the ledger.
    """

    def __init__(
        self,
        endpoints: Sequence[EndpointSpec],
        prober: EndpointProber,
        ledger: AvailabilityLedger,
        *,
        ticker: IntervalTicker | None = None,
        out: TextIO | None = None,
    ):
        self.endpoints = list(endpoints)
        self.prober = prober
        self.ledger = ledger
        self.ticker = ticker or IntervalTicker()
        self.out = out
        self.state = SchedulerState.RUNNING
        self.rounds_completed = 0

    def check_endpoint(self, endpoint: EndpointSpec) -> bool | None:
        """Check one endpoint; returns its verdict, or None when it was skipped."""
        try:
            domain = extract_domain(endpoint.url)
        except InvalidURL:
            logger.warning("Invalid URL: %s", endpoint.url)
            return None

        result = self.prober.probe(endpoint)
        self.ledger.record(domain, result.up)
        self.ledger.report(self.out)
        return result.up

    def run_round(self) -> int:
        """Run one pass over all endpoints; returns how many were checked."""
        self.state = SchedulerState.RUNNING
        checked = 0
        for endpoint in self.endpoints:
            if self.check_endpoint(endpoint) is not None:
                checked += 1
        self.rounds_completed += 1
        return checked

    def run(self, max_rounds: int | None = None) -> None:
        """
        Run rounds until interrupted, or until `max_rounds` rounds have completed.

        KeyboardInterrupt is not handled here; it stops the loop wherever it lands.
        """
        rounds = 0
        while True:
            self.run_round()
            rounds += 1
            if max_rounds is not None and rounds >= max_rounds:
                return
            self.state = SchedulerState.SLEEPING
            self.ticker.wait()


__all__ = ["HealthCheckScheduler", "IntervalTicker", "SchedulerState"]
