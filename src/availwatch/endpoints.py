# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load endpoint descriptors from a YAML configuration file."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from os import PathLike
from typing import Any

import yaml

from .errors import ConfigError, InvalidEndpoint
from .models.endpoint import EndpointSpec

logger = logging.getLogger(__name__)


def parse_endpoints(data: Any) -> list[EndpointSpec]:
    """
    Convert a decoded configuration document into endpoint specs.

    The document must be a list of mappings. Entries that are individually
    unusable are logged and dropped; a structurally wrong document raises
    ConfigError.
    """
    if not isinstance(data, list):
        raise ConfigError("Configuration must be a YAML list of endpoints")

    endpoints: list[EndpointSpec] = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ConfigError(f"Endpoint #{index + 1} must be a mapping, got {type(item).__name__}")
        try:
            endpoints.append(EndpointSpec.from_mapping(item))
        except InvalidEndpoint as exc:
            logger.warning("Skipping endpoint #%d: %s", index + 1, exc)
    return endpoints


def load_endpoints(path: str | PathLike[str]) -> list[EndpointSpec]:
    """Read and parse the configuration file at `path`."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc.strerror or exc}") from exc
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot parse configuration file {path}: {exc}") from exc
    return parse_endpoints(data)


__all__ = ["load_endpoints", "parse_endpoints"]
