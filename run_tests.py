#!/usr/bin/env python3
"""
Main test runner for the Dotlin tooling tests.

Runs a quick smoke check of the full front-end pipeline, then every
unittest module under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_smoke_test():
    """Lex, parse, evaluate and quick-fix a small sample."""

    print("🚀 Dotlin Tooling Test Suite")
    print("=" * 60)

    try:
        from dotlin.lexer.lexer import Lexer
        from dotlin.parser.parser import Parser, parse_expression
        from dotlin.evaluator.evaluator import evaluate, default_environment
        from dotlin.analyzer.quickfix import compute_quick_fix_for_uninitialized
        from dotlin.analyzer.errors import UninitializedVariableError

        print("✅ All front-end modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import front-end modules: {e}")
        return False

    print("Testing front-end pipeline...")
    code = """
    package demo;

    fun area(w: Double, h: Double) {
        return w * h;
    }

    val width = 3;
    var height: Int;
    """

    try:
        print("  🔧 Lexing...")
        tokens = Lexer(code).tokenize()
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Parsing...")
        program = Parser(tokens).parse_program()
        print(f"     Generated AST with {len(program.body)} top-level statements")

        print("  🔧 Evaluating...")
        result = evaluate(parse_expression("2 * pi * r^2"), {**default_environment(), "r": 1.5})
        print(f"     2 * pi * r^2 with r = 1.5 -> {result:.4f}")

        print("  🔧 Quick-fix...")
        broken = "val total;\ntotal = 4.5;"
        try:
            Parser(Lexer(broken).tokenize()).parse_program()
            print("     ❌ Expected an uninitialized-variable error")
            return False
        except UninitializedVariableError as e:
            print(f"     Rejected as expected: {e.message}")
        fix = compute_quick_fix_for_uninitialized(broken)
        print(f"     Suggested {fix.suggested!r} at {fix.start}-{fix.end}")

        print()
        print("✅ Front-end pipeline test PASSED")
        print()

    except Exception as e:
        print(f"❌ Front-end pipeline test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    return True


def run_all_tests():
    """Run the smoke check and the unittest suite."""
    if not run_pipeline_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
