#!/usr/bin/env python3
"""
MiniLang Token Dump
===================

Tokenizes MiniLang source and prints one token per line.

Usage:
    mlc [FILE] [options]

Options:
    -e, --source    Tokenize the given source text instead of a file
    --count         Print only the number of tokens
"""

import argparse
import sys
from typing import List, Optional

from .lexer import LexerError, tokenize_file, tokenize_string


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the token dump command"""

    parser = argparse.ArgumentParser(
        prog="mlc",
        description="Tokenize MiniLang source and print the tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    mlc program.ml                 # Print the tokens of a file
    mlc -e "x := (2 + 3) ** 2"     # Print the tokens of inline source
    mlc program.ml --count         # Print only the token count
        """
    )

    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize')
    parser.add_argument('-e', '--source',
                        help='Source text to tokenize')
    parser.add_argument('--count', action='store_true',
                        help='Print only the number of tokens')

    args = parser.parse_args(argv)

    if (args.file is None) == (args.source is None):
        parser.error("exactly one of FILE or --source is required")

    try:
        if args.source is not None:
            tokens = tokenize_string(args.source)
        else:
            tokens = tokenize_file(args.file)
    except LexerError as e:
        print(str(e), file=sys.stderr, end="")
        return 1
    except OSError as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    if args.count:
        print(len(tokens))
    else:
        for token in tokens:
            print(token)

    return 0


if __name__ == "__main__":
    sys.exit(main())
