"""Unit tests for target records and run reports."""

import pytest
from dataclasses import FrozenInstanceError

from perpcfg_app.models.records import (
    OutcomeStatus,
    RecordOutcome,
    RunReport,
)
from perpcfg_app.targets.limits import MINIMUM_POSITION_SIZE
from perpcfg_app.targets.markets import MARKET_CONFIGS
from perpcfg_app.utils.units import usd


class TestMarketConfigRecord:
    """Test suite for MarketConfigRecord."""

    def test_compiled_in_markets_in_index_order(self) -> None:
        assert [r.market_index for r in MARKET_CONFIGS] == [49, 50, 51, 52, 53]
        assert [r.symbol for r in MARKET_CONFIGS] == ["STRK", "PYTH", "PENDLE", "W", "ENA"]

    def test_records_are_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            MARKET_CONFIGS[0].active = False

    def test_contract_tuple_matches_struct_order(self) -> None:
        record = MARKET_CONFIGS[1]
        values = record.to_contract_tuple()

        assert len(values) == 12
        assert values[0] == record.asset_id
        assert values[1] == usd(100_000)
        assert values[2] == usd(100_000)
        assert values[3:8] == (5, 5, 1000, 50, 40000)
        assert values[8] == 0
        assert values[9] is True
        assert values[10] is True
        assert values[11] == (usd(50_000_000), 8 * 10**18)

    def test_minimum_position_size_target(self) -> None:
        assert MINIMUM_POSITION_SIZE.size == 10


class TestRunReport:
    """Test suite for RunReport."""

    def test_empty_report(self) -> None:
        report = RunReport(task="set-market-config", network="arbitrum")
        assert report.outcomes == []
        assert report.submitted_count == 0
        assert report.handles() == []
        assert report.completed is False

    def test_counts_and_handles(self) -> None:
        report = RunReport(task="set-market-config", network="arbitrum")
        report.outcomes.append(RecordOutcome(49, "STRK", OutcomeStatus.PROPOSED, ("0xaa",)))
        report.outcomes.append(RecordOutcome(50, "PYTH", OutcomeStatus.PROPOSED, ("0xbb", "0xcc")))
        report.outcomes.append(RecordOutcome(51, "PENDLE", OutcomeStatus.ABORTED, error="boom"))

        assert report.submitted_count == 2
        assert report.handles() == ["0xaa", "0xbb", "0xcc"]
