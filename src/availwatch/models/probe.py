# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result model."""

from dataclasses import dataclass


@dataclass
class ProbeResult:
    up: bool
    status_code: int | None = None
    elapsed_ms: float | None = None
    error_category: str | None = None
