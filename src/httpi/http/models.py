# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by adapters."""

from __future__ import annotations

import gzip
import zlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlencode

from .auth import Auth
from .headers import header_value, parse_header_block

Headers = dict[str, str]

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD")


def normalize_url(url: object) -> str:
    """Return the url as a string, defaulting to ``http://`` when no scheme is given."""
    text = str(url or "").strip()
    if not text:
        raise ValueError("Request url must not be empty")
    if "://" not in text:
        text = f"http://{text}"
    return text


@dataclass
class Request:
    """
    Normalized request handed to an adapter.

    Optional fields left as ``None`` are treated as "not specified" and are never
    forwarded to the underlying client.
    """

    url: str
    method: str = "GET"
    body: bytes | str | None = None
    headers: Headers = field(default_factory=dict)
    proxy: str | None = None
    open_timeout: int | None = None
    read_timeout: int | None = None
    auth: Auth = None

    def __post_init__(self) -> None:
        self.url = normalize_url(self.url)
        self.method = str(self.method or "GET").upper()
        if self.method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        if self.headers is None:
            self.headers = {}
        if isinstance(self.body, Mapping):
            self.body = urlencode(list(self.body.items()), doseq=True)

    def gzip(self) -> None:
        """Ask the server for a compressed response."""
        self.headers["Accept-Encoding"] = "gzip,deflate"


@dataclass
class Response:
    """Status code, raw header block and raw body as read back from the client."""

    code: int
    headers: str = ""
    raw_body: bytes = b""

    @property
    def error(self) -> bool:
        return not 200 <= self.code < 300

    @property
    def header_map(self) -> Headers:
        return parse_header_block(self.headers)

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.header_map, name, default)

    @property
    def body(self) -> bytes:
        """
        Return the body, decompressed when the server sent it gzip/deflate encoded.

        A body that does not match its Content-Encoding is returned as received.
        """
        encoding = self.header("content-encoding").lower()
        if not self.raw_body:
            return self.raw_body
        try:
            if encoding in {"gzip", "x-gzip"}:
                return gzip.decompress(self.raw_body)
            if encoding == "deflate":
                try:
                    return zlib.decompress(self.raw_body)
                except zlib.error:
                    # some servers send raw deflate without the zlib wrapper
                    return zlib.decompress(self.raw_body, -zlib.MAX_WBITS)
        except (OSError, EOFError, zlib.error):
            return self.raw_body
        return self.raw_body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


__all__ = ["Headers", "Request", "Response", "SUPPORTED_METHODS", "normalize_url"]
