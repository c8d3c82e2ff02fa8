"""Tests for the gateway base class helpers."""

from __future__ import annotations

import pytest

from kafkalens.controllers.base import BaseController, matches_prefix


class TestMatchesPrefix:
    """Tests for the case-sensitive prefix filter."""

    @pytest.mark.parametrize(
        ("name", "prefix", "expected"),
        [
            ("payments-v1", "payments", True),
            ("payments-v1", "Payments", False),
            ("payments-v1", "v1", False),
            ("payments-v1", None, True),
            ("payments-v1", "", True),
            ("pay", "payments", False),
        ],
    )
    def test_matches_prefix(self, name: str, prefix: str | None, expected: bool) -> None:
        assert matches_prefix(name, prefix) is expected


class TestBaseController:
    def test_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    def test_deletion_candidates(self, gateway) -> None:
        assert gateway.topic_deletion_candidates("pay") == ["payments"]
        assert gateway.topic_deletion_candidates() == [
            "__consumer_offsets",
            "orders",
            "payments",
        ]
        assert gateway.calls_named("delete_topics") == []
