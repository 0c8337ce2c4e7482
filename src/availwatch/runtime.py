# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level availwatch facade wiring the checker components together."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress
from typing import TextIO

from .config import load_monitor_settings
from .http.client import HttpClient, create_default_http_client
from .ledger import AvailabilityLedger
from .models.endpoint import EndpointSpec
from .probe import EndpointProber
from .scheduler import HealthCheckScheduler, IntervalTicker


class Monitor:
    """
    Convenience wrapper that shares one HTTP client across every round.

    The ledger is created fresh per Monitor unless one is passed in, and the
    HTTP client is closed when the monitor is closed.
    """

    def __init__(
        self,
        endpoints: Sequence[EndpointSpec],
        *,
        http_client: HttpClient | None = None,
        ledger: AvailabilityLedger | None = None,
        ticker: IntervalTicker | None = None,
        out: TextIO | None = None,
    ):
        self.http_client = http_client or create_default_http_client(load_monitor_settings())
        self.ledger = ledger if ledger is not None else AvailabilityLedger()
        self.prober = EndpointProber(self.http_client)
        self.scheduler = HealthCheckScheduler(endpoints, self.prober, self.ledger, ticker=ticker, out=out)

    def run_round(self) -> int:
        return self.scheduler.run_round()

    def run(self, max_rounds: int | None = None) -> None:
        self.scheduler.run(max_rounds=max_rounds)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> Monitor:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
