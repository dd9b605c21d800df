"""Terminal output helpers for the checksum tool."""

from __future__ import annotations

from typing import Iterable


def display_usage(program: str) -> None:
    print(f"Usage: {program} <sum|validate|to_hrp_u5|to_hrp_hex> <checksum> <string>")


def display_result(result: str) -> None:
    print(result)


def display_error(message: str) -> None:
    print(f"Error: {message}")


def display_unknown_checksum(name: str, available: Iterable[str]) -> None:
    print(f"Unknown checksum {name}. Available checksums:")
    for checksum_name in available:
        print(f"     {checksum_name}")


def display_checksum_list(checksums: Iterable[tuple[str, str, str]]) -> None:
    """Print one line per checksum: name, modulus and target residue."""
    for name, modulus, residue in checksums:
        print(f"{name:<14} modulus {modulus:<18} residue {residue}")


def display_debug(message: str) -> None:
    print(f"debug: {message}")
