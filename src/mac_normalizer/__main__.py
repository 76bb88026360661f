"""Command-line front end for MAC address normalization."""

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from .address import MACAddress
from .config import Config, set_strict_errors
from .errors import MACAddressError
from .functions import errstr, new_mac
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

FORMATS = {
    "basic": "as_basic",
    "bpr": "as_bpr",
    "bridge_id": "as_bridge_id",
    "cisco": "as_cisco",
    "ieee": "as_ieee",
    "ipv6_suffix": "as_ipv6_suffix",
    "microsoft": "as_microsoft",
    "oid_suffix": "as_oid_suffix",
    "pgsql": "as_pgsql",
    "singledash": "as_singledash",
    "sun": "as_sun",
    "tokenring": "as_tokenring",
}

PROPERTIES = (
    "is_eui48",
    "is_eui64",
    "is_unicast",
    "is_multicast",
    "is_broadcast",
    "is_local",
    "is_universal",
    "is_vrrp",
    "is_hsrp",
    "is_hsrp2",
)


def render(address: MACAddress, format_name: str) -> str:
    return getattr(address, FORMATS[format_name])()


def describe(address: MACAddress) -> list[str]:
    """All renderings and properties of an address, one "name: value" per line."""
    lines = [f"original: {address.original}", f"oui: {address.oui}"]
    lines.extend(f"{name}: {render(address, name)}" for name in FORMATS)
    lines.extend(f"{name}: {getattr(address, name)}" for name in PROPERTIES)
    return lines


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse MAC addresses (EUI-48/EUI-64) and print them in other formats"
    )
    parser.add_argument("macs", nargs="+", metavar="MAC", help="MAC address text")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(FORMATS),
        help="Output format (default: MAC_DEFAULT_FORMAT or microsoft)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every format and property",
    )
    parser.add_argument(
        "--priority",
        type=int,
        default=None,
        help="Bridge priority used by the bridge_id format",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first invalid address",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["text", "json", "kv"],
        help="Log format (default: LOG_FORMAT or text)",
    )

    args = parser.parse_args(argv)

    if os.path.exists(args.env_file):
        load_dotenv(args.env_file)

    config = Config.from_env()
    if args.strict:
        config.strict_errors = True
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format

    setup_logging(level=config.log_level, format_type=config.log_format)
    set_strict_errors(config.strict_errors)

    format_name = args.format or config.default_format
    if format_name not in FORMATS:
        print(f"Error: unknown format '{format_name}'", file=sys.stderr)
        return 1

    failures = 0
    for text in args.macs:
        try:
            address = new_mac(text, priority=args.priority)
        except MACAddressError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 2

        if address is None:
            failures += 1
            logger.warning(errstr(), extra={"mac": text, "status": "invalid"})
            continue

        if args.all:
            print("\n".join(describe(address)))
        else:
            print(render(address, format_name))

    return 2 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
