"""Tests for HTTP response DTO accessors."""

import json

import pytest

from src.ports.http import HttpResponseDto

__all__ = []


def test_response_text_defaults_to_utf8() -> None:
    """Body should decode as UTF-8 when no charset is declared."""
    resp = HttpResponseDto(status_code=200, body="héllo".encode())

    assert resp.charset == "utf-8"
    assert resp.text == "héllo"


def test_response_text_uses_declared_charset() -> None:
    """Body should decode with the charset from Content-Type."""
    resp = HttpResponseDto(
        status_code=200,
        headers={"content-type": 'text/plain; charset="latin-1"'},
        body="héllo".encode("latin-1"),
    )

    assert resp.charset == "latin-1"
    assert resp.text == "héllo"


def test_response_text_falls_back_on_unknown_charset() -> None:
    """Unknown charsets should fall back to UTF-8."""
    resp = HttpResponseDto(
        status_code=200,
        headers={"Content-Type": "text/plain; charset=no-such-codec"},
        body=b"ok",
    )

    assert resp.text == "ok"


def test_response_text_replaces_undecodable_bytes() -> None:
    """Invalid bytes should not raise."""
    resp = HttpResponseDto(status_code=200, body=b"ok\xff")

    assert resp.text.startswith("ok")


def test_response_json() -> None:
    """json() should parse the body."""
    resp = HttpResponseDto(status_code=200, body=b'{"ok": true}')

    assert resp.json() == {"ok": True}


def test_response_json_invalid() -> None:
    """json() should raise on invalid JSON."""
    resp = HttpResponseDto(status_code=502, body=b"<html>")

    with pytest.raises(json.JSONDecodeError):
        resp.json()
