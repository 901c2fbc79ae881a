# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for building request targets from a client's base URL."""

from __future__ import annotations


def build_url(base_url: str, path: str) -> str:
    """
    Join a base URL and an endpoint path with exactly one slash between them.

    Any path prefix on the base is kept:
      http://host/v1 + secret/data -> http://host/v1/secret/data
    """
    base = str(base_url or "")
    raw_path = str(path or "")
    if not raw_path:
        return base
    if not base:
        return raw_path
    return f"{base.rstrip('/')}/{raw_path.lstrip('/')}"


__all__ = ["build_url"]
