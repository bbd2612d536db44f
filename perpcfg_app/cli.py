"""Command-line entry point: ``perpcfg <task> --network <name>``."""

import argparse
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from .config.loader import ConfigLoader
from .config.network import NetworkConfig
from .contracts.gateway import ContractGateway
from .errors import ConfigurationError, PreconditionError, SystemFailureError
from .logging.config import configure_logging, get_logger
from .models.records import RunReport
from .runner import ConfigUpdateRunner
from .signers import resolve_deployer
from .submission import BaseSubmitter, DirectSubmitter, SafeSubmitter, SafeWrapper
from .tasks import TASKS

logger = get_logger(__name__)

MODES = ("direct", "safe")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="perpcfg",
        description="Push compiled-in configuration to deployed protocol contracts.",
    )
    parser.add_argument("task", choices=sorted(TASKS), help="Update task to run.")
    parser.add_argument("--network", required=True, help="Network name from networks.yaml.")
    parser.add_argument("--config-dir", type=Path, default=None, help="Directory holding networks.yaml.")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Send directly or propose to the Safe (default: per task).",
    )
    parser.add_argument(
        "--include-rate-updates",
        action="store_true",
        help="Also refresh borrowing and funding rates before each market config.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines.")
    return parser.parse_args(argv)


def build_submitter(mode: str, gateway: ContractGateway, network: NetworkConfig) -> BaseSubmitter:
    """Submitter for ``mode`` bound to the gateway's web3 and deployer."""
    if mode == "direct":
        return DirectSubmitter(gateway)

    if mode == "safe":
        if not network.safe:
            raise ConfigurationError(f"Network '{network.name}' has no Safe configured", network=network.name, field="safe")
        service_url = network.safe_service_url()
        if not service_url:
            raise ConfigurationError(
                f"No Safe transaction service known for chain {network.chain_id}",
                network=network.name,
                field="safe_service.url",
            )
        wrapper = SafeWrapper(
            chain_id=network.chain_id,
            safe_address=network.safe,
            signer=gateway.account,
            web3=gateway.web3,
            service_url=service_url,
            timeout_seconds=network.safe_service.timeout_seconds,
            origin=network.safe_service.origin,
        )
        return SafeSubmitter(wrapper)

    raise ConfigurationError(f"Unknown submission mode '{mode}'")


def run_task(
    task_name: str,
    network_name: str,
    mode: Optional[str] = None,
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RunReport:
    """Resolve network, signer and submitter, then run one task to completion."""
    network = ConfigLoader.create(config_dir).get_network(network_name, overrides)
    account = resolve_deployer(network, environ)
    gateway = ContractGateway.connect(network, account)

    task = TASKS[task_name](gateway, network)
    submitter = build_submitter(mode or task.default_mode, gateway, network)

    return ConfigUpdateRunner(task, submitter).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.json_logs)

    overrides: dict[str, Any] = {}
    if args.include_rate_updates:
        overrides["runner"] = {"include_rate_updates": True}

    try:
        run_task(
            args.task,
            args.network,
            mode=args.mode,
            config_dir=args.config_dir,
            overrides=overrides,
        )
    except PreconditionError as e:
        logger.error("Precondition failed, run aborted", record_index=e.index, error=str(e))
        return 1
    except SystemFailureError as e:
        logger.error("Run failed", error_type=type(e).__name__, error=str(e))
        return 1
    except Exception:
        logger.exception("Run failed with unexpected error")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
