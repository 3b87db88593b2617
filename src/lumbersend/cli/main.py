"""
Entry point for the lumbersend command.

Provides subcommands:
- basic: plain messages with cycling levels (10 messages, 1s apart)
- mixed: access, metric and error logs in rotation (30 records, 500ms apart)
"""

import argparse
import logging
import re
from collections.abc import Sequence

from lumbersend.adapters.transport.in_memory import InMemoryTransport
from lumbersend.adapters.transport.lumberjack import LumberjackTransport
from lumbersend.client import LogSender
from lumbersend.config import ClientConfig, configure_logging
from lumbersend.core.errors import ConnectionFailedError
from lumbersend.core.generator import TrafficGenerator
from lumbersend.core.ports import TransportPort
from lumbersend.driver import run

logger = logging.getLogger(__name__)

# command -> (help, default count, default interval)
COMMANDS = {
    "basic": ("plain messages with cycling levels", 10, "1s"),
    "mixed": ("access, metric and error logs in rotation", 30, "500ms"),
}

_DURATION = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h)?\s*$")
_UNIT_DIVISORS = {"ms": 1000.0}
_UNIT_MULTIPLIERS = {"s": 1.0, "m": 60.0, "h": 3600.0, None: 1.0}


def parse_interval(text: str) -> float:
    """Parse a duration such as "1s", "500ms", "2m" or "0.25" into seconds."""
    match = _DURATION.match(text)
    if not match:
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}")
    value, unit = match.groups()
    if unit in _UNIT_DIVISORS:
        return float(value) / _UNIT_DIVISORS[unit]
    return float(value) * _UNIT_MULTIPLIERS[unit]


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {value}")
    return value


def build_parser(config: ClientConfig | None = None) -> argparse.ArgumentParser:
    config = config or ClientConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="lumbersend",
        description="Send synthetic log traffic to a Lumberjack (Beats) collector.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="verbosity of lumbersend's own output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, (summary, count, interval) in COMMANDS.items():
        sub = subparsers.add_parser(command, help=summary)
        sub.add_argument(
            "--host",
            default=config.address,
            help=f"collector host:port (default: {config.address})",
        )
        sub.add_argument(
            "--count",
            type=_non_negative_int,
            default=count,
            help=f"number of records to send (default: {count})",
        )
        sub.add_argument(
            "--interval",
            type=parse_interval,
            default=parse_interval(interval),
            help=f"pause between records, e.g. 1s or 500ms (default: {interval})",
        )
        sub.add_argument(
            "--timeout",
            type=float,
            default=config.timeout,
            help=f"socket timeout in seconds (default: {config.timeout:g})",
        )
        sub.add_argument(
            "--seed",
            type=int,
            default=None,
            help="seed the random field values for reproducible traffic",
        )
        sub.add_argument(
            "--dry-run",
            action="store_true",
            help="build and encode records without contacting a collector",
        )
    return parser


def open_transport(args: argparse.Namespace, config: ClientConfig) -> TransportPort:
    if args.dry_run:
        return InMemoryTransport(address=args.host)
    return LumberjackTransport.connect(
        ClientConfig(
            address=args.host,
            timeout=args.timeout,
            ssl_enable=config.ssl_enable,
            ssl_verify=config.ssl_verify,
            ca_certs=config.ca_certs,
        )
    )


def main(argv: Sequence[str] | None = None) -> int:
    try:
        config = ClientConfig.from_env()
    except ValueError as exc:
        build_parser(ClientConfig()).error(str(exc))
    args = build_parser(config).parse_args(argv)
    configure_logging(args.log_level)

    try:
        transport = open_transport(args, config)
    except ConnectionFailedError as exc:
        logger.error("Failed to create lumberjack client: %s", exc)
        return 1

    generator = TrafficGenerator(seed=args.seed)
    with LogSender(transport) as sender:
        logger.info("Connected to %s", sender.address)
        logger.info(
            "Sending %d %s records with %gs interval",
            args.count,
            args.command,
            args.interval,
        )
        summary = run(
            sender,
            generator.records(args.command, args.count),
            args.interval,
        )

    logger.info(
        "Done: %d sent, %d failed, %d acknowledged",
        summary.sent,
        summary.failed,
        summary.acked,
    )
    return 0
