"""Tests for KeyEvent."""

from __future__ import annotations

from kafkalens.session import KeyEvent


class TestKeyEvent:
    def test_char(self) -> None:
        assert KeyEvent.char("a") == KeyEvent("a", "a")
        assert KeyEvent.char(" ") == KeyEvent("space", " ")

    def test_printable(self) -> None:
        assert KeyEvent.char("-").is_printable
        assert not KeyEvent("enter", "\r").is_printable
        assert not KeyEvent("up").is_printable
