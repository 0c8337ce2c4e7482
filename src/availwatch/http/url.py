# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers."""

from urllib.parse import urlsplit

from ..errors import InvalidURL


def extract_domain(url: str) -> str:
    """
    Return the hostname of an absolute URL; this is the key availability is grouped by.

    Ports, credentials, paths and query strings are ignored, so
    ``https://user@API.example.com:8443/health`` and ``http://api.example.com``
    share the domain ``api.example.com``.

    Raises InvalidURL when `url` is not a string, has no scheme or network
    location, or cannot be parsed at all.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURL(url)
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        _ = parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidURL(url) from exc
    if not parts.scheme or not parts.netloc or not hostname:
        raise InvalidURL(url)
    return hostname


__all__ = ["extract_domain"]
