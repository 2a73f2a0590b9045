#!/usr/bin/env python3
"""
Ginger Suite - UNIFIED TEST SYSTEM

Runs the test modules without pytest. Tests that need pytest fixtures
other than tmp_path are skipped here; run `pytest` for full coverage.

USAGE:
  python tests.py                    # Run ALL modules
  python tests.py --module tags      # One module (test_tags.py)
  python tests.py --verbose          # Print tracebacks of failures

TEST MODULES:
  test_binary.py       - IoBuffer and hex helpers
  test_tags.py         - tag framing and marker detection
  test_transform.py    - zlib / xor layers and positional layouts
  test_container.py    - QVRS / ACTF dispatch
  test_header.py       - header extraction
  test_channelgroup.py - decode, decode_flat, encode, file I/O
  test_cli.py          - ginger command line
  test_session.py      - GUI session loading (headless)
"""

import sys
import argparse
import importlib
import inspect
import tempfile
import traceback
from pathlib import Path
from datetime import datetime
from typing import List

TESTS_DIR = Path(__file__).parent
sys.path.insert(0, str(TESTS_DIR))
sys.path.insert(0, str(TESTS_DIR.parent.parent / "src"))

MODULES = ["binary", "tags", "transform", "container", "header", "channelgroup", "cli", "session"]


class TestResults:
    """Shared test results tracker."""
    def __init__(self, verbose: bool = False):
        self.passed = 0
        self.failed = 0
        self.skipped = 0
        self.errors: List[str] = []
        self.verbose = verbose

    def record(self, name: str, passed: bool, reason: str = ""):
        if passed:
            self.passed += 1
            print(f"  [OK] {name}")
        else:
            self.failed += 1
            self.errors.append(f"{name}: {reason}")
            print(f"  [FAIL] {name}: {reason}")

    def skip(self, name: str, reason: str):
        self.skipped += 1
        print(f"  [SKIP] {name}: {reason}")


def run_test(results: TestResults, name: str, func):
    params = list(inspect.signature(func).parameters)
    if any(p != "tmp_path" for p in params):
        results.skip(name, "needs pytest fixtures")
        return

    try:
        if params:
            with tempfile.TemporaryDirectory() as tmp:
                func(Path(tmp))
        else:
            func()
    except Exception as e:  # AssertionError included
        if results.verbose:
            traceback.print_exc()
        results.record(name, False, f"{type(e).__name__}: {e}")
    else:
        results.record(name, True)


def run_module(results: TestResults, short_name: str):
    module = importlib.import_module(f"test_{short_name}")
    for name, func in inspect.getmembers(module, inspect.isfunction):
        if name.startswith("test_") and func.__module__ == module.__name__:
            run_test(results, f"{short_name}.{name}", func)


def main():
    parser = argparse.ArgumentParser(
        description="Ginger Suite - Unified Test System",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Print tracebacks')
    parser.add_argument('-m', '--module', choices=MODULES, action='append',
                        help='Run only this module (repeatable)')
    args = parser.parse_args()

    print("╔" + "═"*60 + "╗")
    print("║  GINGER SUITE - UNIFIED TEST SYSTEM" + " "*24 + "║")
    print("║  " + datetime.now().strftime("%Y-%m-%d %H:%M:%S") + " "*39 + "║")
    print("╚" + "═"*60 + "╝")

    results = TestResults(verbose=args.verbose)
    for short_name in args.module or MODULES:
        print("\n" + "═"*60)
        print(f"  MODULE: test_{short_name}.py")
        print("═"*60)
        try:
            run_module(results, short_name)
        except ImportError as e:
            print(f"  [FAIL] Failed to import test_{short_name}: {e}")
            results.failed += 1

    total = results.passed + results.failed + results.skipped
    print("\n" + "═"*60)
    print("FINAL SUMMARY")
    print("═"*60)
    print(f"Total:   {total}")
    print(f"Passed:  {results.passed}")
    print(f"Failed:  {results.failed}")
    print(f"Skipped: {results.skipped}")

    if results.failed == 0:
        print("\nALL TESTS PASSED")
        return 0
    for error in results.errors:
        print(f"  - {error}")
    print(f"\n{results.failed} TESTS FAILED")
    return 1


if __name__ == "__main__":
    sys.exit(main())
