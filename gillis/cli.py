#!/usr/bin/env python3
"""
Command-line front end for the Gillis analyzer.

    gillis lex FILE            print tokens, then the variable table
    gillis parse [-v] FILE     print the rule trace of the parse

Author: xwest
"""

import argparse
import os
import sys
from typing import List, Optional

from .lexer.lexer import Lexer
from .lexer.tokens import LexicalUnit
from .lexer.errors import LexerError
from .parser.parser import Parser
from .parser.errors import ParseError
from .parser.trace import FullRuleTrace, RuleNumberTrace
from .analyzer.symbol_table import VariableTable


def lex_command(path: str) -> int:
    """Print every token of a file and the variables it uses."""
    table = VariableTable()

    with open(path, "r", encoding="utf-8") as source:
        with Lexer(source, path) as lexer:
            for symbol in lexer:
                if symbol.kind == LexicalUnit.EOS:
                    break
                print(symbol)
                table.record(symbol)

    print("\nVariables")
    for name, line in table.items():
        print(f"{name}\t{line}")
    return 0


def parse_command(path: str, verbose: bool = False) -> int:
    """Parse a file, printing the applied rules."""
    trace = FullRuleTrace() if verbose else RuleNumberTrace()

    with open(path, "r", encoding="utf-8") as source:
        try:
            Parser(source, trace, path).parse()
        except (LexerError, ParseError):
            # Finish the partial trace line before the diagnostic is shown
            trace.close()
            raise
    return 0


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gillis",
        description="Lexical and syntax analyzer for Gillis programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gillis lex examples/factorial.gls
  gillis parse examples/factorial.gls
  gillis parse -v examples/factorial.gls
        """
    )
    commands = parser.add_subparsers(dest="command", required=True)

    lex = commands.add_parser("lex", help="Print the tokens and variables of a program")
    lex.add_argument("file", help="Path of a Gillis program (.gls)")

    parse = commands.add_parser("parse", help="Parse a program and print the rules used")
    parse.add_argument("file", help="Path of a Gillis program (.gls)")
    parse.add_argument("-v", "--verbose", action="store_true",
                       help="Print full rules instead of rule numbers")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    args = build_argument_parser().parse_args(argv)

    if not os.path.isfile(args.file):
        print(f"Please give a valid Gillis file: {args.file}", file=sys.stderr)
        return 2

    try:
        if args.command == "lex":
            return lex_command(args.file)
        return parse_command(args.file, verbose=args.verbose)
    except (LexerError, ParseError) as e:
        sys.stdout.flush()
        print(e, file=sys.stderr, end="")
        return 1


if __name__ == "__main__":
    sys.exit(main())
