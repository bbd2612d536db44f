"""Target market configs for ConfigStorage.setMarketConfig."""

from ..models.records import FundingRateParams, MarketConfigRecord
from ..utils.units import WAD_DECIMALS, format_bytes32_string, parse_units, usd

CRYPTO = 0

_DEFAULT_MAX_FUNDING_RATE = parse_units(8, WAD_DECIMALS)


def _funding(max_skew_scale_usd: int) -> FundingRateParams:
    return FundingRateParams(
        max_skew_scale_usd=usd(max_skew_scale_usd),
        max_funding_rate=_DEFAULT_MAX_FUNDING_RATE,
    )


MARKET_CONFIGS: list[MarketConfigRecord] = [
    MarketConfigRecord(
        market_index=49,
        asset_id=format_bytes32_string("STRK"),
        max_long_position_size=0,
        max_short_position_size=0,
        increase_position_fee_rate_bps=5,
        decrease_position_fee_rate_bps=5,
        initial_margin_fraction_bps=1000,
        maintenance_margin_fraction_bps=50,
        max_profit_rate_bps=40000,
        asset_class=CRYPTO,
        allow_increase_position=True,
        active=True,
        funding_rate=_funding(50_000_000),
        is_adaptive_fee_enabled=True,
    ),
    MarketConfigRecord(
        market_index=50,
        asset_id=format_bytes32_string("PYTH"),
        max_long_position_size=usd(100_000),
        max_short_position_size=usd(100_000),
        increase_position_fee_rate_bps=5,
        decrease_position_fee_rate_bps=5,
        initial_margin_fraction_bps=1000,
        maintenance_margin_fraction_bps=50,
        max_profit_rate_bps=40000,
        asset_class=CRYPTO,
        allow_increase_position=True,
        active=True,
        funding_rate=_funding(50_000_000),
        is_adaptive_fee_enabled=True,
    ),
    MarketConfigRecord(
        market_index=51,
        asset_id=format_bytes32_string("PENDLE"),
        max_long_position_size=usd(100_000),
        max_short_position_size=usd(100_000),
        increase_position_fee_rate_bps=5,
        decrease_position_fee_rate_bps=5,
        initial_margin_fraction_bps=1000,
        maintenance_margin_fraction_bps=50,
        max_profit_rate_bps=40000,
        asset_class=CRYPTO,
        allow_increase_position=True,
        active=True,
        funding_rate=_funding(200_000_000),
        is_adaptive_fee_enabled=True,
    ),
    MarketConfigRecord(
        market_index=52,
        asset_id=format_bytes32_string("W"),
        max_long_position_size=0,
        max_short_position_size=0,
        increase_position_fee_rate_bps=5,
        decrease_position_fee_rate_bps=5,
        initial_margin_fraction_bps=400,
        maintenance_margin_fraction_bps=50,
        max_profit_rate_bps=100000,
        asset_class=CRYPTO,
        allow_increase_position=True,
        active=True,
        funding_rate=_funding(200_000_000),
        is_adaptive_fee_enabled=True,
    ),
    MarketConfigRecord(
        market_index=53,
        asset_id=format_bytes32_string("ENA"),
        max_long_position_size=usd(120_000),
        max_short_position_size=usd(120_000),
        increase_position_fee_rate_bps=5,
        decrease_position_fee_rate_bps=5,
        initial_margin_fraction_bps=400,
        maintenance_margin_fraction_bps=50,
        max_profit_rate_bps=100000,
        asset_class=CRYPTO,
        allow_increase_position=True,
        active=True,
        funding_rate=_funding(200_000_000),
        is_adaptive_fee_enabled=True,
    ),
]
