# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

#!/usr/bin/env python3
"""
Test runner for the AWS resource schema library.

Usage:
    python run_tests.py                    # Run all tests
    python run_tests.py --unit             # Run unit tests only
    python run_tests.py --property         # Run property tests only
    python run_tests.py --coverage         # Run with coverage report
    python run_tests.py --fast             # Skip property tests
    python run_tests.py --verbose          # Verbose output
"""

import argparse
import importlib.util
import subprocess
import sys


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and return the exit code."""
    print(f"\n{'=' * 70}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'=' * 70}\n")

    result = subprocess.run(cmd)
    return result.returncode


def main():
    """Main entry point for the test runner."""
    parser = argparse.ArgumentParser(
        description="Run tests for the AWS resource schema library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--unit",
        action="store_true",
        help="Run unit tests only",
    )
    parser.add_argument(
        "--property",
        action="store_true",
        help="Run property-based tests only",
    )
    parser.add_argument(
        "--coverage",
        action="store_true",
        help="Run with coverage reporting - target 80 percent",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Run unit tests only, skipping hypothesis suites",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--failfast",
        "-x",
        action="store_true",
        help="Stop on first failure",
    )
    parser.add_argument(
        "--keyword",
        "-k",
        type=str,
        help="Run tests matching the given keyword expression",
    )

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]

    paths = []
    if args.unit or args.fast:
        paths.append("tests/unit")
    if args.property:
        paths.append("tests/property")
    cmd.extend(paths or ["tests/"])

    if args.keyword:
        cmd.extend(["-k", args.keyword])

    cmd.append("-vv" if args.verbose else "-v")

    if args.coverage:
        if importlib.util.find_spec("pytest_cov") is not None:
            cmd.extend([
                "--cov=aws_resource_schemas",
                "--cov-report=html",
                "--cov-report=term-missing",
                "--cov-fail-under=80",
            ])
        else:
            print("WARNING: pytest-cov not installed. Install with: pip install pytest-cov")
            print("Skipping coverage reporting.\n")

    if args.failfast:
        cmd.append("-x")

    cmd.append("--color=yes")

    exit_code = run_command(cmd, "Resource Schema Test Suite")

    print(f"\n{'=' * 70}")
    if exit_code == 0:
        print("PASS: All tests passed!")
    else:
        print(f"FAIL: Tests failed with exit code: {exit_code}")
    print(f"{'=' * 70}\n")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
