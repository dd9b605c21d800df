"""Terminal CLI for computing and validating bech32-style checksums."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import controller
import view


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checksum32-terminal",
        description="Compute or validate BCH checksums over the bech32 alphabet",
    )
    parser.add_argument(
        "action",
        nargs="?",
        help="sum: append a checksum; validate: print OK or BAD; "
        "to_hrp_u5 / to_hrp_hex: show the expanded HRP form.",
    )
    parser.add_argument(
        "checksum",
        nargs="?",
        help="Checksum name (bech32, bech32m, codex32, long-codex32).",
    )
    parser.add_argument(
        "string",
        nargs="?",
        help="String with human-readable prefix, e.g. ms10tests...",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available checksums and exit.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print diagnostic lines before the result.",
    )
    args = parser.parse_args(argv)
    if args.action is not None and args.action not in controller.ACTIONS:
        parser.error(
            f"unknown action {args.action!r} (choose from {', '.join(controller.ACTIONS)})"
        )
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI runner."""
    args = parse_args(argv)
    if args.list:
        controller.list_checksums()
        return 0
    if args.action is None or args.checksum is None or args.string is None:
        view.display_usage("checksum32-terminal")
        return 0
    result = controller.run(
        action=args.action,
        checksum_name=args.checksum,
        s=args.string,
        verbose=args.verbose,
    )
    view.display_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
