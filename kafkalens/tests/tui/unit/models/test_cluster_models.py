"""Tests for cluster models."""

from __future__ import annotations

from kafkalens.models.cluster import BrokerSummary, DeleteOutcome, WatermarkInfo
from kafkalens.models.cluster.delete_result import failed_outcomes, format_failures


class TestDeleteOutcome:
    def test_ok(self) -> None:
        assert DeleteOutcome(name="orders").ok
        assert not DeleteOutcome(name="orders", error="denied").ok

    def test_format_failures_skips_successes(self) -> None:
        outcomes = [
            DeleteOutcome(name="a"),
            DeleteOutcome(name="b", error="denied"),
            DeleteOutcome(name="c", error="unknown topic"),
        ]
        assert [outcome.name for outcome in failed_outcomes(outcomes)] == ["b", "c"]
        assert format_failures(outcomes) == "b: denied\nc: unknown topic"


class TestSmallModels:
    def test_watermark_retained(self) -> None:
        assert WatermarkInfo(low=10, high=60).retained == 50

    def test_broker_address(self) -> None:
        assert BrokerSummary(id=1, host="b-1", port=9092).address == "b-1:9092"
