"""CI entrypoint running the plugin's lint, type, test, and audit gates."""

from __future__ import annotations

import os
import subprocess  # nosec B404
import sys
from collections.abc import Sequence

PACKAGE = "jfrog_cli_artifactory"
COVERAGE_FLOOR = 80
PIP_AUDIT_REQUIRED_ENV = "JFROG_CLI_CI_PIP_AUDIT_REQUIRED"

GATES: list[tuple[str, list[str]]] = [
    ("lint", [sys.executable, "-m", "ruff", "check", PACKAGE, "tests", "ci"]),
    ("types", [sys.executable, "-m", "mypy", PACKAGE]),
    (
        "tests",
        [
            sys.executable,
            "-m",
            "pytest",
            f"--cov={PACKAGE}",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
        ],
    ),
]
AUDIT = [sys.executable, "-m", "pip_audit", "--progress-spinner", "off"]


def _run(name: str, args: Sequence[str]) -> int:
    """Run one gate and return its exit code."""
    print(f"[{name}] $ {' '.join(args)}")
    result = subprocess.run(args, check=False)  # nosec B603
    if result.returncode != 0:
        print(f"[{name}] failed with exit code {result.returncode}")
    return int(result.returncode)


def _audit_required() -> bool:
    return os.environ.get(PIP_AUDIT_REQUIRED_ENV, "").lower() in {"1", "true", "yes"}


def main() -> int:
    """Run every gate in order, stopping at the first failure."""
    for name, args in GATES:
        exit_code = _run(name, args)
        if exit_code != 0:
            return exit_code
    audit_exit = _run("audit", AUDIT)
    if audit_exit == 0:
        return 0
    if _audit_required():
        return audit_exit
    print(f"pip_audit reported findings; set {PIP_AUDIT_REQUIRED_ENV}=1 to fail on them.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
