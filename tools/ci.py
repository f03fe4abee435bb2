#!/usr/bin/env python3
# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, example check, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=finapp", "--cov-report=term-missing"]),
    ("Example check", ["uv", "run", "finapp", "check", "examples/finance.finapp"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the CI steps in order and print a summary.

    Pass ``--fail-fast`` to stop after the first failing step; the remaining
    steps are listed as skipped.
    """
    fail_fast = "--fail-fast" in (sys.argv[1:] if argv is None else argv)
    root = pathlib.Path(__file__).resolve().parent.parent
    outcomes: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        passed, seconds = _run_step(name, cmd, root)
        outcomes.append((name, passed, seconds))
        if fail_fast and not passed:
            break

    _print_summary(outcomes)
    return 0 if all(passed for _, passed, _ in outcomes) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _banner(title: str) -> None:
    print(f"\n{chalk.blue(_RULE)}\n{chalk.blue(title)}\n{chalk.blue(_RULE)}")


def _run_step(name: str, cmd: list[str], root: pathlib.Path) -> tuple[bool, float]:
    _banner(name)
    started = time.monotonic()
    returncode = subprocess.run(cmd, cwd=root).returncode
    return returncode == 0, time.monotonic() - started


def _print_summary(outcomes: list[tuple[str, bool, float]]) -> None:
    _banner("  Summary")
    for name, passed, seconds in outcomes:
        color = chalk.green if passed else chalk.red
        label = "PASS" if passed else "FAIL"
        print(color(f"  {label}  {name} ({seconds:.1f}s)"))
    for name, _ in STEPS[len(outcomes) :]:
        print(chalk.yellow(f"  SKIP  {name}"))
    print()


if __name__ == "__main__":
    sys.exit(main())
