"""Hand-maintained ABI fragments for the contracts this tool touches."""

from typing import Any

CONFIG_STORAGE = "config_storage"
TRADE_HELPER = "trade_helper"
ORACLE_MIDDLEWARE = "oracle_middleware"

_FUNDING_RATE_COMPONENTS = [
    {"name": "maxSkewScaleUSD", "type": "uint256"},
    {"name": "maxFundingRate", "type": "uint256"},
]

_MARKET_CONFIG_COMPONENTS = [
    {"name": "assetId", "type": "bytes32"},
    {"name": "maxLongPositionSize", "type": "uint256"},
    {"name": "maxShortPositionSize", "type": "uint256"},
    {"name": "increasePositionFeeRateBPS", "type": "uint32"},
    {"name": "decreasePositionFeeRateBPS", "type": "uint32"},
    {"name": "initialMarginFractionBPS", "type": "uint32"},
    {"name": "maintenanceMarginFractionBPS", "type": "uint32"},
    {"name": "maxProfitRateBPS", "type": "uint32"},
    {"name": "assetClass", "type": "uint8"},
    {"name": "allowIncreasePosition", "type": "bool"},
    {"name": "active", "type": "bool"},
    {"name": "fundingRate", "type": "tuple", "components": _FUNDING_RATE_COMPONENTS},
]


def _function(name: str, inputs: list[dict[str, Any]], outputs=None, view: bool = False) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs or [],
        "stateMutability": "view" if view else "nonpayable",
    }


CONFIG_STORAGE_ABI = [
    # Public mapping getter flattens the struct into separate outputs
    _function(
        "marketConfigs",
        [{"name": "", "type": "uint256"}],
        outputs=_MARKET_CONFIG_COMPONENTS,
        view=True,
    ),
    _function(
        "setMarketConfig",
        [
            {"name": "_marketIndex", "type": "uint256"},
            {"name": "_newConfig", "type": "tuple", "components": _MARKET_CONFIG_COMPONENTS},
            {"name": "_isAdaptiveFeeEnabled", "type": "bool"},
        ],
        outputs=[{"name": "_config", "type": "tuple", "components": _MARKET_CONFIG_COMPONENTS}],
    ),
    _function(
        "setMinimumPositionSize",
        [{"name": "_minimumPositionSize", "type": "uint256"}],
    ),
    _function(
        "minimumPositionSize",
        [],
        outputs=[{"name": "", "type": "uint256"}],
        view=True,
    ),
]

TRADE_HELPER_ABI = [
    _function("updateBorrowingRate", [{"name": "_assetClassIndex", "type": "uint8"}]),
    _function("updateFundingRate", [{"name": "_marketIndex", "type": "uint256"}]),
]

ORACLE_MIDDLEWARE_ABI = [
    _function(
        "setUpdater",
        [
            {"name": "_account", "type": "address"},
            {"name": "_isActive", "type": "bool"},
        ],
    ),
]

SAFE_ABI = [
    _function("nonce", [], outputs=[{"name": "", "type": "uint256"}], view=True),
    _function(
        "getTransactionHash",
        [
            {"name": "to", "type": "address"},
            {"name": "value", "type": "uint256"},
            {"name": "data", "type": "bytes"},
            {"name": "operation", "type": "uint8"},
            {"name": "safeTxGas", "type": "uint256"},
            {"name": "baseGas", "type": "uint256"},
            {"name": "gasPrice", "type": "uint256"},
            {"name": "gasToken", "type": "address"},
            {"name": "refundReceiver", "type": "address"},
            {"name": "_nonce", "type": "uint256"},
        ],
        outputs=[{"name": "", "type": "bytes32"}],
        view=True,
    ),
]

CONTRACT_ABIS: dict[str, list[dict[str, Any]]] = {
    CONFIG_STORAGE: CONFIG_STORAGE_ABI,
    TRADE_HELPER: TRADE_HELPER_ABI,
    ORACLE_MIDDLEWARE: ORACLE_MIDDLEWARE_ABI,
}
