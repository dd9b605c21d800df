"""Controller logic for the checksum actions."""

from __future__ import annotations

import view
from base32 import U5String
from checksum32 import UnknownChecksumError, checksum_names, get_checksum
from gf32 import Base32Error


ACTION_SUM = "sum"
ACTION_VALIDATE = "validate"
ACTION_TO_HRP_U5 = "to_hrp_u5"
ACTION_TO_HRP_HEX = "to_hrp_hex"

ACTIONS = (ACTION_SUM, ACTION_VALIDATE, ACTION_TO_HRP_U5, ACTION_TO_HRP_HEX)

RESULT_OK = "OK"
RESULT_BAD = "BAD"
RESULT_ERROR = "ERROR"


def format_u5_list(data: U5String) -> str:
    """Render elements as a bracketed list of two-digit hex values."""
    return "[" + ", ".join(f"{v:02x}" for v in data.to_values()) + "]"


def _dispatch(action: str, checksum_name: str, s: str, verbose: bool) -> str:
    checksum = get_checksum(checksum_name)

    if action == ACTION_SUM:
        if verbose:
            expanded = U5String.from_hrpstring(s)
            view.display_debug(f"len {len(expanded)}   residue len {checksum.degree}")
        return checksum.checksum(s)
    if action == ACTION_VALIDATE:
        if verbose:
            view.display_debug(f"residue {checksum.residue_of(s)}   target {checksum.residue}")
        return RESULT_OK if checksum.validate_checksum(s) else RESULT_BAD
    if action == ACTION_TO_HRP_U5:
        return format_u5_list(U5String.from_hrpstring(s))
    if action == ACTION_TO_HRP_HEX:
        return U5String.from_hrpstring(s).to_bytes().hex()
    raise ValueError(f"unknown action {action}")


def run(action: str, checksum_name: str, s: str, verbose: bool = False) -> str:
    """Run one action and return the line to print.

    User errors (unknown checksum, bad characters) are reported through the
    view and turn into ``ERROR``. An unknown action raises ``ValueError``.
    """
    try:
        return _dispatch(action, checksum_name, s, verbose)
    except UnknownChecksumError as exc:
        view.display_unknown_checksum(exc.name, checksum_names())
        return RESULT_ERROR
    except Base32Error as exc:
        view.display_error(str(exc))
        return RESULT_ERROR


def list_checksums() -> None:
    rows = []
    for name in checksum_names():
        checksum = get_checksum(name)
        rows.append((name, checksum.modulus_str, checksum.residue_str))
    view.display_checksum_list(rows)
