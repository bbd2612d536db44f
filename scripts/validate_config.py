#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from perpcfg_app.config.loader import ConfigLoader
from perpcfg_app.config.validation import ConfigValidator, ValidationError
from perpcfg_app.errors import ConfigurationError
from perpcfg_app.targets.markets import MARKET_CONFIGS


def validate_network_config(loader: ConfigLoader, network: str) -> List[ValidationError]:
    """Validate merged configuration for a specific network."""
    config = loader.merge_config(network)
    return ConfigValidator.validate_network(config)


def main():
    """Main validation function."""
    print("Validating perpcfg configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    try:
        networks = loader.available_networks()
    except ConfigurationError as e:
        print(f"  error: {e}")
        sys.exit(1)

    for network in networks:
        print(f"\nValidating network {network}...")
        errors = validate_network_config(loader, network)

        if errors:
            print(f"  found {len(errors)} validation errors:")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"  {network} configuration is valid")

    print(f"\nValidating {len(MARKET_CONFIGS)} market config records...")
    errors = ConfigValidator.validate_market_records(MARKET_CONFIGS)
    if errors:
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("  market config records are valid")

    if all_valid:
        print("\nAll configuration validation passed")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
