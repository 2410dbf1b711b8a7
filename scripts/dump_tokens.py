#!/usr/bin/env python
import argparse
import logging
from pathlib import Path

from wadmergepy.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the token stream of a WadMerge script")
    parser.add_argument("script", type=Path, help="Path to a WadMerge script")
    parser.add_argument(
        "--multiline-strings",
        action="store_true",
        help="Allow string literals to span lines",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    text = args.script.read_text(encoding="utf-8")
    lexer = Lexer(text, allow_multiline_strings=args.multiline_strings)
    tokens = lexer.lex()
    dump_tokens(tokens, text, lexer.diagnostics)
    return 1 if lexer.diagnostics else 0


if __name__ == "__main__":
    raise SystemExit(main())
