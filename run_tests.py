#!/usr/bin/env python3
"""
Main test runner for the loxparse test suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test() -> bool:
    """Scan, parse and print one expression end to end."""
    print("Testing scan -> parse -> print pipeline...")
    try:
        from loxparse.parser import parse_string, AstPrinter

        result = parse_string("(1 + 2) * -3 == !false")
        if not result.ok:
            print(f"❌ Smoke test produced errors: {result.errors}")
            return False
        print(f"   {AstPrinter().print(result.expression)}")
    except ImportError as e:
        print(f"❌ Failed to import loxparse: {e}")
        return False

    print("✅ Pipeline smoke test PASSED")
    print()
    return True


def run_all_tests() -> bool:
    """Run the smoke test, then every unittest module under tests/."""
    print("🚀 loxparse Test Suite")
    print("=" * 60)

    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
