#!/usr/bin/env python3
"""
Main test runner for the Gillis analyzer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

def run_all_tests():
    """Run the Gillis smoke pipeline, then the unit test suite."""

    print("🚀 Gillis Analyzer Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from gillis.lexer.lexer import tokenize_string
        from gillis.lexer.errors import LexerError
        from gillis.parser.parser import parse_string
        from gillis.parser.errors import ParseError
        from gillis.parser.trace import RecordingTrace
        from gillis.parser.parse_tree import leaves
        from gillis.analyzer.symbol_table import collect_variables

        print("✅ All analyzer modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import analyzer modules: {e}")
        return False

    # Test a simple analysis pipeline
    print("Testing simple analysis pipeline...")
    try:
        code = """
        LET Factorial BE
            IN(n) :
            result = 1 :
            WHILE {0 < n} REPEAT
                result = result * n :
                n = n - 1 :
            END :
            OUT(result) :
        END
        """

        print("  🔧 Lexing...")
        tokens = tokenize_string(code)
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Collecting variables...")
        table = collect_variables(tokens)
        print(f"     Found {len(table)} variables: {', '.join(table)}")

        print("  🔧 Parsing...")
        trace = RecordingTrace()
        tree = parse_string(code, trace)
        print(f"     Applied {len(trace.numbers)} rules")
        print(f"     Rule trace: {' '.join(str(n) for n in trace.numbers)}")

        if len(list(leaves(tree))) != len(tokens) - 1:
            print("     ❌ Parse tree leaves do not match the token stream")
            return False

        print("  ✅ Analysis pipeline successful")
        print()

    except (LexerError, ParseError) as e:
        print(f"❌ Analysis pipeline failed: {e}")
        return False

    # Test error handling
    print("  ❌ Testing error handling...")
    error_cases = [
        ("lexical", "LET P BE x = 1 # 2 : END", LexerError),
        ("syntax", "LET P BE x = : END", ParseError),
        ("trailing input", "LET P BE END x", ParseError),
    ]

    for label, error_code, expected in error_cases:
        try:
            parse_string(error_code)
        except expected as e:
            print(f"     ✅ Caught expected {label} error [{e.code}]")
            continue
        except (LexerError, ParseError) as e:
            print(f"     ❌ {label} case raised the wrong error: {e}")
            return False

        print(f"     ❌ {label} case failed: expected an error but got none")
        return False

    print()

    # Run the unit tests
    print("Running unit tests...")
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)

    if not result.wasSuccessful():
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
        return False

    print()
    print("🎉 All tests PASSED!")
    print()
    print("=" * 60)
    print("✅ Components:")
    print("   🔤 Lexer - Keywords, names, numbers, operators and comments")
    print("   🌳 Parser - LL(1) recursive descent with numbered rule traces")
    print("   📋 Variable table - First line of use of every variable")
    print()

    return True

if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
