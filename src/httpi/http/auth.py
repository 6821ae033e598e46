# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication descriptors attached to a Request.

A request carries at most one descriptor: HTTP basic, HTTP digest, or SSL client
certificates. ``None`` means no authentication.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str

    @property
    def credentials(self) -> tuple[str, str]:
        return (self.username, self.password)


@dataclass(frozen=True)
class DigestAuth:
    username: str
    password: str

    @property
    def credentials(self) -> tuple[str, str]:
        return (self.username, self.password)


@dataclass
class SslAuth:
    """Client certificate authentication (mutual TLS)."""

    cert_file: str | None = None
    cert_key_file: str | None = None
    ca_cert_file: str | None = None

    @property
    def present(self) -> bool:
        return bool(self.cert_file and self.cert_key_file)


Auth = BasicAuth | DigestAuth | SslAuth | None


__all__ = ["Auth", "BasicAuth", "DigestAuth", "SslAuth"]
