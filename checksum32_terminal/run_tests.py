#!/usr/bin/env python3
"""Run the checksum32_terminal test scripts, each in its own interpreter.

Pass test file names (with or without ``.py``) to run a subset.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

TESTS_DIR = Path(__file__).parent / "tests"

TEST_FILES = [
    "test_gf32.py",
    "test_base32.py",
    "test_checksum32.py",
    "test_vectors.py",
    "test_invalid_vectors.py",
    "test_reference.py",
    "test_cli.py",
]


def _selected(names: list[str]) -> list[str]:
    if not names:
        return TEST_FILES
    return [name if name.endswith(".py") else f"{name}.py" for name in names]


def main(argv: list[str] | None = None) -> int:
    selected = _selected(sys.argv[1:] if argv is None else argv)
    failed = []
    passed = []

    for test_file in selected:
        test_path = TESTS_DIR / test_file
        if not test_path.exists():
            print(f"SKIP: {test_file} (not found)")
            continue

        print(f"\n{'=' * 60}")
        print(f"Running {test_file}")
        print("=" * 60)

        result = subprocess.run([sys.executable, str(test_path)], cwd=Path(__file__).parent)
        (passed if result.returncode == 0 else failed).append(test_file)

    print(f"\n{'=' * 60}")
    print(f"Passed: {len(passed)}  Failed: {len(failed)}")

    if failed:
        print(f"Failed tests: {', '.join(failed)}")
        return 1

    print("All tests passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
