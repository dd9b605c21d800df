"""Test rejection of corrupted and malformed checksummed strings."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from checksum32 import validate_checksum  # noqa: E402
from gf32 import Base32Error  # noqa: E402


# These parse but fail checksum validation
CHECKSUM_FAIL_VECTORS = [
    ("codex32", "ms10testsxxxxxxxxxxxxxxxxxxxxxxxxxx4nzvca9cmczlx"),
    ("codex32", "ms10testsxxxxxxxxxxxxxxxxxxxxxxxxxx4nzvca9cmczla"),
    # Header changed, checksum left alone
    ("codex32", "ms11testsxxxxxxxxxxxxxxxxxxxxxxxxxx4nzvca9cmczlw"),
    ("codex32", "ms10testaxxxxxxxxxxxxxxxxxxxxxxxxxx4nzvca9cmczlw"),
    ("codex32", "MS12NAMES6XQGUZTTXKEQNJSJZV4JV3NZ5K3KWGSPHUH6EVX"),
    # Truncated and extended
    ("codex32", "MS12NAMES6XQGUZTTXKEQNJSJZV4JV3NZ5K3KWGSPHUH6EV"),
    ("codex32", "MS12NAMES6XQGUZTTXKEQNJSJZV4JV3NZ5K3KWGSPHUH6EVWW"),
    # BIP-173: checksum calculated over the uppercase HRP
    ("bech32", "A1G7SGD8"),
    ("bech32", "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdr"),
]

# These are rejected before any checksum is computed
MALFORMED_VECTORS = [
    ("codex32", "MS12names6XQGUZTTXKEQNJSJZV4JV3NZ5K3KWGSPHUH6EVW", "mixes upper and lower case"),
    ("codex32", "ms12namesbxqguzttxkeqnjsjzv4jv3nz5k3kwgsphuh6evw", "'b'"),
    ("codex32", "ms12namesixqguzttxkeqnjsjzv4jv3nz5k3kwgsphuh6evw", "'i'"),
    ("codex32", "ms12namesoxqguzttxkeqnjsjzv4jv3nz5k3kwgsphuh6evw", "'o'"),
    ("bech32", "bc1qar0srrr7xfkvy5l643lydnw9re59gtzz wf5mdq", "' '"),
    # U+212A KELVIN SIGN lowercases to 'k'
    ("bech32", "BC1QAR0SRRR7XF\u212aVY5L643LYDNW9RE59GTZZWF5MDQ", "non-ASCII"),
    ("codex32", "MS12NAMES6XQGUZTTX\u212aEQNJSJZV4JV3NZ5K3KWGSPHUH6EVW", "non-ASCII"),
]


def test_invalid_checksum_vectors():
    for name, vector in CHECKSUM_FAIL_VECTORS:
        assert not validate_checksum(name, vector), f"Should have rejected: {vector}"

    print(f"test_invalid_checksum_vectors: PASS ({len(CHECKSUM_FAIL_VECTORS)} vectors rejected)")


def test_malformed_vectors():
    for name, vector, expected in MALFORMED_VECTORS:
        try:
            validate_checksum(name, vector)
            raise AssertionError(f"Should have raised for: {vector}")
        except Base32Error as exc:
            assert expected in str(exc), f"error {exc} should mention {expected}"

    print(f"test_malformed_vectors: PASS ({len(MALFORMED_VECTORS)} vectors rejected)")


def test_corrupted_single_char():
    """Single character corruption is detected at any data position."""
    valid = "MS12NAMES6XQGUZTTXKEQNJSJZV4JV3NZ5K3KWGSPHUH6EVW"
    assert validate_checksum("codex32", valid)

    # 3=threshold, 4=identifier, 8=share index, 20=payload middle,
    # 40=near checksum, 47=last char (checksum)
    positions_to_test = [3, 4, 8, 20, 30, 40, 47]
    corruptions_detected = 0

    for pos in positions_to_test:
        char_list = list(valid)
        new_char = "Q" if char_list[pos] != "Q" else "P"
        char_list[pos] = new_char
        corrupted = "".join(char_list)
        if not validate_checksum("codex32", corrupted):
            corruptions_detected += 1

    assert corruptions_detected == len(positions_to_test), (
        f"Only detected {corruptions_detected}/{len(positions_to_test)} corruptions"
    )
    print(f"test_corrupted_single_char: PASS ({corruptions_detected} corruptions detected)")


def main():
    test_invalid_checksum_vectors()
    test_malformed_vectors()
    test_corrupted_single_char()
    print("\nAll invalid vector tests passed!")


if __name__ == "__main__":
    main()
