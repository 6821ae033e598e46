# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

Responses keep the raw header block exactly as the client received it. These helpers
parse that block on demand and read values case-insensitively (RFC 9110).
"""

from __future__ import annotations

from collections.abc import Mapping


def parse_header_block(raw: str | bytes | None) -> dict[str, str]:
    """
    Parse a raw response header block into a lowercase-keyed dict.

    The block may hold several responses (``100 Continue``, proxy ``CONNECT`` replies);
    only the last status block is kept. Repeated fields are joined with ``", "``.
    """
    if not raw:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("latin-1")

    out: dict[str, str] = {}
    last_name: str | None = None
    for line in raw.replace("\r\n", "\n").split("\n"):
        if line.startswith("HTTP/"):
            out = {}
            last_name = None
            continue
        if not line.strip():
            continue
        if line[0] in " \t" and last_name is not None:
            # obsolete line folding
            out[last_name] = f"{out[last_name]} {line.strip()}".strip()
            continue
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        if not name:
            continue
        value = value.strip()
        out[name] = f"{out[name]}, {value}" if name in out else value
        last_name = name
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in headers:
            value = headers.get(key)
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = ["header_value", "parse_header_block"]
