# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic, programmable EasyHandle for tests."""

from __future__ import annotations

from typing import Any

from ..errors import TransportError
from .handle import Option


class StubEasyHandle:
    """Records every option and verb call, then replays a canned result."""

    def __init__(
        self,
        code: int = 200,
        header_str: str = "",
        body: bytes = b"",
        error: Exception | None = None,
    ):
        self._code = code
        self._header_str = header_str
        self._body = body
        self._error = error
        self.options: list[tuple[Option, Any]] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.performed = False
        self.closed = False

    def setopt(self, option: Option, value: Any) -> None:
        self.options.append((Option(option), value))

    def http_get(self) -> None:
        self._record("http_get")

    def http_post(self, body: bytes | str | None) -> None:
        self._record("http_post", body)

    def http_put(self, body: bytes | str | None) -> None:
        self._record("http_put", body)

    def http_delete(self) -> None:
        self._record("http_delete")

    def http_head(self) -> None:
        self._record("http_head")

    def response_code(self) -> int:
        self._require_performed()
        return self._code

    def header_str(self) -> str:
        self._require_performed()
        return self._header_str

    def body_bytes(self) -> bytes:
        self._require_performed()
        return self._body

    def close(self) -> None:
        self.closed = True

    def values(self, option: Option) -> list[Any]:
        """Return every value set for ``option``, in call order."""
        return [value for opt, value in self.options if opt is option]

    def _record(self, verb: str, *args: Any) -> None:
        self.calls.append((verb, args))
        if self._error is not None:
            raise self._error
        self.performed = True

    def _require_performed(self) -> None:
        if not self.performed:
            raise TransportError("No request has been performed on this handle")


class StubHandleFactory:
    """Hands out StubEasyHandle instances and keeps them for inspection."""

    def __init__(self, **defaults: Any):
        self._defaults = defaults
        self.handles: list[StubEasyHandle] = []

    def __call__(self) -> StubEasyHandle:
        handle = StubEasyHandle(**self._defaults)
        self.handles.append(handle)
        return handle

    @property
    def last(self) -> StubEasyHandle:
        return self.handles[-1]


__all__ = ["StubEasyHandle", "StubHandleFactory"]
