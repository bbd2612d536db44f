"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config
from .network import NetworkConfig
from .validation import ConfigValidator


@dataclass(frozen=True)
class ConfigLoader:
    """Manages network configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def networks_file(self) -> Path:
        return self.config_dir / "networks.yaml"

    def available_networks(self) -> list[str]:
        """Names of all networks declared in the networks file."""
        return sorted(self._load_networks().keys())

    def load_network_config(self, network: str) -> dict[str, Any]:
        """Load the raw entry for a network from networks.yaml."""
        networks = self._load_networks()
        if network not in networks:
            raise ConfigurationError(
                f"Unknown network '{network}' in {self.networks_file}",
                network=network,
            )
        return networks[network] or {}

    def merge_config(
        self,
        network: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command-line overrides (highest priority)
        2. Network entry from networks.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_network_config(network))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def get_network(
        self,
        network: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> NetworkConfig:
        """Merge, validate and build the NetworkConfig for a network."""
        config = self.merge_config(network, overrides)

        errors = ConfigValidator.validate_network(config)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors)
            raise ConfigurationError(
                f"Invalid configuration for network '{network}': {details}",
                network=network,
                field=errors[0].field,
            )

        return NetworkConfig.from_dict(network, config)

    def _load_networks(self) -> dict[str, Any]:
        if not self.networks_file.exists():
            raise ConfigurationError(f"Networks file not found: {self.networks_file}")

        with open(self.networks_file) as f:
            networks_config = yaml.safe_load(f) or {}

        return networks_config.get("networks", {}) or {}  # type: ignore[no-any-return]

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
