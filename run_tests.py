#!/usr/bin/env python3
"""
Main test runner for the toylang front end.

Runs a quick lex/parse smoke check, then the unittest suite under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_checks():
    """Lex and parse a few known inputs and compare canonical output."""

    print("toylang Front End Test Suite")
    print("=" * 60)

    try:
        from toylang.lexer.lexer import tokenize_string
        from toylang.parser.parser import parse_string

        print("✅ Lexer and parser imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import toylang modules: {e}")
        return False

    code = """
    var x = 10;
    var y = add(x, 2 * 3);
    return -x + y;
    """

    print("Testing lex/parse pipeline...")
    print("  🔧 Lexing...")
    tokens = tokenize_string(code)
    print(f"     Generated {len(tokens)} tokens")

    print("  🔧 Parsing...")
    program, errors = parse_string(code)
    if errors:
        print(f"     ❌ Parse errors: {len(errors)}")
        for error in errors:
            print(f"        {error}")
        return False
    print(f"     Generated AST with {len(program.statements)} statements")
    print()
    print(program.to_string())

    print("Testing expression canonical forms...")
    expressions = {
        "1 + 2 * 3": "(1 + (2 * 3))",
        "1 - 2 - 3": "((1 - 2) - 3)",
        "(1 + 2) * 3": "((1 + 2) * 3)",
        "-5 + 10": "((-5) + 10)",
        "add(1, 2 * 3)": "add(1, (2 * 3))",
    }
    for source, expected in expressions.items():
        program, errors = parse_string(source)
        actual = program.statements[0].to_string() if program.statements else ""
        if errors or actual != expected:
            print(f"  ❌ {source} => {actual!r}, expected {expected!r} {errors}")
            return False
        print(f"  ✅ {source} => {actual}")
    print()

    print("Testing error handling...")
    _, errors = parse_string("var x = ;")
    if not errors:
        print("  ❌ Expected errors for 'var x = ;' but got none")
        return False
    print(f"  ✅ Caught {len(errors)} expected error(s): {errors}")
    print()

    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_checks() and run_unit_tests()
    sys.exit(0 if success else 1)
