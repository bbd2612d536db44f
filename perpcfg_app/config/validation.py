"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from web3 import Web3

from ..models.records import MarketConfigRecord
from .defaults import RunnerParams, SafeServiceParams

BPS_DENOMINATOR = 10_000


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_bps(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_address(value: Any) -> bool:
    return isinstance(value, str) and Web3.is_address(value)


class ConfigValidator:
    """Validates network configuration and target records."""

    @staticmethod
    def validate_network(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a merged network configuration dictionary."""
        errors = []

        # Validate chain_id
        value = config.get("chain_id")
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            errors.append(ValidationError(
                field="chain_id",
                message="Must be a positive integer",
                value=value
            ))

        # Validate rpc_url
        value = config.get("rpc_url")
        if not isinstance(value, str) or not value.startswith(("http://", "https://", "ws://", "wss://")):
            errors.append(ValidationError(
                field="rpc_url",
                message="Must be an http(s) or ws(s) URL",
                value=value
            ))

        # Validate signer_env
        value = config.get("signer_env")
        if not isinstance(value, str) or not value:
            errors.append(ValidationError(
                field="signer_env",
                message="Must name an environment variable",
                value=value
            ))

        # Validate safe
        if config.get("safe") is not None and not _is_address(config["safe"]):
            errors.append(ValidationError(
                field="safe",
                message="Must be a hex address",
                value=config["safe"]
            ))

        # Validate contract and handler addresses
        for section in ("contracts", "handlers"):
            entries = config.get(section) or {}
            if not isinstance(entries, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of name to address",
                    value=entries
                ))
                continue
            for name, address in entries.items():
                if not _is_address(address):
                    errors.append(ValidationError(
                        field=f"{section}.{name}",
                        message="Must be a hex address",
                        value=address
                    ))

        errors.extend(ConfigValidator.validate_runner_params(config.get("runner") or {}))
        errors.extend(ConfigValidator.validate_safe_service_params(config.get("safe_service") or {}))

        return errors

    @staticmethod
    def validate_runner_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate runner parameters."""
        errors = []
        known = {f.name for f in fields(RunnerParams)}

        for key in params:
            if key not in known:
                errors.append(ValidationError(
                    field=f"runner.{key}",
                    message="Unknown runner parameter",
                    value=params[key]
                ))

        # Validate receipt_timeout_seconds
        if "receipt_timeout_seconds" in params:
            value = params["receipt_timeout_seconds"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="runner.receipt_timeout_seconds",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate receipt_poll_seconds
        if "receipt_poll_seconds" in params:
            value = params["receipt_poll_seconds"]
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="runner.receipt_poll_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate include_rate_updates
        if "include_rate_updates" in params:
            value = params["include_rate_updates"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="runner.include_rate_updates",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_safe_service_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate Safe Transaction Service parameters."""
        errors = []
        known = {f.name for f in fields(SafeServiceParams)}

        for key in params:
            if key not in known:
                errors.append(ValidationError(
                    field=f"safe_service.{key}",
                    message="Unknown safe_service parameter",
                    value=params[key]
                ))

        # Validate url
        value = params.get("url")
        if value is not None and (not isinstance(value, str) or not value.startswith(("http://", "https://"))):
            errors.append(ValidationError(
                field="safe_service.url",
                message="Must be an http(s) URL",
                value=value
            ))

        # Validate timeout_seconds
        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="safe_service.timeout_seconds",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_market_record(record: MarketConfigRecord) -> list[ValidationError]:
        """Validate a market config target record."""
        errors = []
        prefix = f"market[{record.market_index}]"

        # Validate market_index
        market_index = record.market_index
        if not isinstance(market_index, int) or isinstance(market_index, bool) or market_index < 0:
            errors.append(ValidationError(
                field=f"{prefix}.market_index",
                message="Must be a non-negative integer",
                value=record.market_index
            ))

        # Validate asset_id
        if len(record.asset_id) != 32 or not record.asset_id.strip(b"\x00"):
            errors.append(ValidationError(
                field=f"{prefix}.asset_id",
                message="Must be a non-empty bytes32 value",
                value=record.asset_id
            ))

        # Validate fee rates
        for name in ("increase_position_fee_rate_bps", "decrease_position_fee_rate_bps"):
            value = getattr(record, name)
            if not _is_bps(value) or value > BPS_DENOMINATOR:
                errors.append(ValidationError(
                    field=f"{prefix}.{name}",
                    message="Must be an integer between 0 and 10000",
                    value=value
                ))

        # Validate margin fractions
        for name in ("initial_margin_fraction_bps", "maintenance_margin_fraction_bps"):
            value = getattr(record, name)
            if not _is_bps(value) or value == 0 or value > BPS_DENOMINATOR:
                errors.append(ValidationError(
                    field=f"{prefix}.{name}",
                    message="Must be an integer between 1 and 10000",
                    value=value
                ))

        if (_is_bps(record.initial_margin_fraction_bps)
                and _is_bps(record.maintenance_margin_fraction_bps)
                and record.maintenance_margin_fraction_bps >= record.initial_margin_fraction_bps):
            errors.append(ValidationError(
                field=f"{prefix}.maintenance_margin_fraction_bps",
                message="Must be lower than initial_margin_fraction_bps",
                value=record.maintenance_margin_fraction_bps
            ))

        # Validate max_profit_rate_bps
        if not _is_bps(record.max_profit_rate_bps) or record.max_profit_rate_bps == 0:
            errors.append(ValidationError(
                field=f"{prefix}.max_profit_rate_bps",
                message="Must be a positive integer",
                value=record.max_profit_rate_bps
            ))

        # Validate asset_class
        if not isinstance(record.asset_class, int) or isinstance(record.asset_class, bool) or not 0 <= record.asset_class <= 255:
            errors.append(ValidationError(
                field=f"{prefix}.asset_class",
                message="Must be an integer between 0 and 255",
                value=record.asset_class
            ))

        # Validate flags
        for name in ("allow_increase_position", "active", "is_adaptive_fee_enabled"):
            value = getattr(record, name)
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field=f"{prefix}.{name}",
                    message="Must be a boolean",
                    value=value
                ))

        # Validate size caps
        for name in ("max_long_position_size", "max_short_position_size"):
            value = getattr(record, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field=f"{prefix}.{name}",
                    message="Must be a non-negative integer",
                    value=value
                ))

        # Validate funding rate
        for name in ("max_skew_scale_usd", "max_funding_rate"):
            value = getattr(record.funding_rate, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field=f"{prefix}.funding_rate.{name}",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_market_records(records: list[MarketConfigRecord]) -> list[ValidationError]:
        """Validate all market config target records."""
        errors = []
        for record in records:
            errors.extend(ConfigValidator.validate_market_record(record))
        return errors
