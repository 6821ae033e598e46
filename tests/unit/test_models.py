# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import gzip
import zlib

import pytest

from httpi.http.auth import BasicAuth, DigestAuth, SslAuth
from httpi.http.headers import header_value, parse_header_block
from httpi.http.models import Request, Response


def test_request_defaults():
    request = Request(url="http://example.com")
    assert request.method == "GET"
    assert request.headers == {}
    assert request.body is None
    assert request.proxy is None
    assert request.open_timeout is None
    assert request.read_timeout is None
    assert request.auth is None


def test_request_requires_url():
    with pytest.raises(ValueError):
        Request(url="")
    with pytest.raises(ValueError):
        Request(url="   ")


def test_request_adds_missing_scheme():
    assert Request(url="example.com/path").url == "http://example.com/path"
    assert Request(url="https://example.com").url == "https://example.com"


def test_request_normalizes_method():
    assert Request(url="http://x", method="post").method == "POST"
    with pytest.raises(ValueError):
        Request(url="http://x", method="PATCH")


def test_request_none_headers_become_empty_mapping():
    assert Request(url="http://x", headers=None).headers == {}


def test_request_mapping_body_is_form_encoded():
    request = Request(url="http://x", method="POST", body={"xml": "hi", "name": 123})
    assert request.body == "xml=hi&name=123"


def test_request_string_body_is_kept_verbatim():
    assert Request(url="http://x", body="xml=hi&name=123").body == "xml=hi&name=123"
    assert Request(url="http://x", body=b"\x00\x01").body == b"\x00\x01"


def test_request_gzip_sets_accept_encoding():
    request = Request(url="http://x")
    request.gzip()
    assert request.headers["Accept-Encoding"] == "gzip,deflate"


def test_auth_descriptors():
    assert BasicAuth("u", "p").credentials == ("u", "p")
    assert DigestAuth("u", "p").credentials == ("u", "p")
    assert SslAuth(cert_file="cert.pem", cert_key_file="key.pem").present is True
    assert SslAuth(cert_file="cert.pem").present is False


def test_response_error_flag():
    assert Response(code=200).error is False
    assert Response(code=204).error is False
    assert Response(code=302).error is True
    assert Response(code=404).error is True


def test_response_header_lookup():
    raw = "HTTP/1.1 200 OK\r\nContent-Type: text/xml\r\nSet-Cookie: a=1\r\nSet-Cookie: b=2\r\n\r\n"
    response = Response(code=200, headers=raw)
    assert response.header("content-type") == "text/xml"
    assert response.header("CONTENT-TYPE") == "text/xml"
    assert response.header_map["set-cookie"] == "a=1, b=2"
    assert response.header("x-missing", "none") == "none"


def test_response_body_is_decompressed():
    raw = "HTTP/1.1 200 OK\r\nContent-Encoding: gzip\r\n\r\n"
    response = Response(code=200, headers=raw, raw_body=gzip.compress(b"hello"))
    assert response.body == b"hello"
    assert response.text == "hello"

    deflate = Response(
        code=200,
        headers="HTTP/1.1 200 OK\r\nContent-Encoding: deflate\r\n\r\n",
        raw_body=zlib.compress(b"hello"),
    )
    assert deflate.body == b"hello"


def test_response_body_passthrough_without_encoding():
    response = Response(code=200, headers="", raw_body=b"plain")
    assert response.body == b"plain"


def test_parse_header_block_keeps_last_status_block():
    raw = (
        "HTTP/1.1 100 Continue\r\nX-Interim: 1\r\n\r\n"
        "HTTP/1.1 201 Created\r\nLocation: /items/1\r\nX-Long: part one\r\n  part two\r\n\r\n"
    )
    parsed = parse_header_block(raw)
    assert "x-interim" not in parsed
    assert parsed["location"] == "/items/1"
    assert parsed["x-long"] == "part one part two"


def test_parse_header_block_accepts_bytes_and_empty():
    assert parse_header_block(b"HTTP/1.0 200 OK\nServer: test\n\n") == {"server": "test"}
    assert parse_header_block("") == {}
    assert parse_header_block(None) == {}


def test_header_value_case_insensitive():
    headers = {"Content-Type": "text/html", "x-custom": " value "}
    assert header_value(headers, "content-type") == "text/html"
    assert header_value(headers, "X-Custom") == "value"
    assert header_value(headers, "missing", "default") == "default"
    assert header_value(None, "anything") == ""


@pytest.mark.parametrize(
    ("encoding", "raw_body"),
    [
        ("gzip", b"not gzip at all"),
        ("gzip", gzip.compress(b"hello")[:10]),
        ("deflate", b"not deflate either"),
    ],
)
def test_response_body_mislabelled_encoding_returns_raw_body(encoding, raw_body):
    response = Response(
        code=200,
        headers=f"HTTP/1.1 200 OK\r\nContent-Encoding: {encoding}\r\n\r\n",
        raw_body=raw_body,
    )
    assert response.body == raw_body
    assert response.text == raw_body.decode("utf-8", errors="replace")
