"""Test runner entry points.

Usage: ``python -m tests.run_tests [all|unit|component]``.
"""

import subprocess
import sys

SUITES = {
    "all": "tests",
    "unit": "tests/unit",
    "component": "tests/component",
}


def run_suite(name: str) -> int:
    """Run one pytest suite and return its exit code."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", SUITES[name]],
        check=False,
    )
    return result.returncode


def main(argv: list[str] | None = None) -> None:
    """Run the suite named on the command line (default: all)."""
    argv = sys.argv[1:] if argv is None else argv
    name = argv[0] if argv else "all"
    if name not in SUITES:
        sys.stderr.write(f"Unknown suite {name!r}; choose from {', '.join(SUITES)}\n")
        sys.exit(2)
    sys.exit(run_suite(name))


if __name__ == "__main__":
    main()
