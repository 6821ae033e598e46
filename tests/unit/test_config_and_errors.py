# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from httpi import config
from httpi.errors import ErrorCategory, TransportError, categorize_exception, error_category_to_reason


def test_http_settings_defaults(monkeypatch):
    for name in ("HTTPI_LOG", "HTTPI_REQUEST_LOG_LEVEL", "HTTPI_VERIFY_SSL", "HTTPI_DEFAULT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_http_settings()
    assert settings.log_requests is True
    assert settings.log_level == "DEBUG"
    assert settings.verify_ssl is True
    assert settings.default_timeout is None


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPI_LOG", "false")
    monkeypatch.setenv("HTTPI_REQUEST_LOG_LEVEL", "info")
    monkeypatch.setenv("HTTPI_VERIFY_SSL", "0")
    monkeypatch.setenv("HTTPI_DEFAULT_TIMEOUT", "12.5")

    settings = config.load_http_settings()

    assert settings.log_requests is False
    assert settings.log_level == "INFO"
    assert settings.verify_ssl is False
    assert settings.default_timeout == 12.5


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HTTPI_DEFAULT_TIMEOUT", "not-a-number")
    monkeypatch.setenv("HTTPI_REQUEST_LOG_LEVEL", "   ")

    settings = config.load_http_settings()

    assert settings.default_timeout == config.HttpSettings.default_timeout
    assert settings.log_level == config.HttpSettings.log_level


def test_non_positive_default_timeout_disables_it(monkeypatch):
    monkeypatch.setenv("HTTPI_DEFAULT_TIMEOUT", "0")
    assert config.load_http_settings().default_timeout is None


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("HTTPI_LOG", "on")
    assert config.load_http_settings().log_requests is True
    monkeypatch.setenv("HTTPI_LOG", "no")
    assert config.load_http_settings().log_requests is False


def test_categorize_exception():
    assert categorize_exception(httpx.ReadTimeout("slow")) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.UnsupportedProtocol("ftp")) is ErrorCategory.INVALID_URL
    assert categorize_exception(ssl.SSLError("bad handshake")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("no such host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("boom")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_looks_at_cause():
    try:
        try:
            raise socket.gaierror("no such host")
        except socket.gaierror as inner:
            raise httpx.ConnectError("lookup failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_transport_error_from_exception():
    error = TransportError.from_exception(httpx.ConnectTimeout("timed out"))
    assert str(error) == "timed out"
    assert error.category is ErrorCategory.TIMEOUT
    assert categorize_exception(error) is ErrorCategory.TIMEOUT
    assert str(TransportError.from_exception(RuntimeError())) == "Network error during request"
    assert str(TransportError.from_exception(httpx.ReadTimeout(""))) == "Network timeout during request"


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Network timeout during request"
    assert error_category_to_reason(None) == ""
