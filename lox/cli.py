"""
Command line driver for the Lox front-end.

    pylox                 interactive prompt, one expression per line
    pylox script.lox      scan, parse and print a file
    pylox --tokens ...    print the token stream instead of the tree
    pylox --rpn ...       print the tree in reverse Polish notation

Exit codes follow sysexits: 64 for bad usage, 65 when the input had
errors or is not valid UTF-8, 66 when the script cannot be read.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import Scanner, ErrorReporter
from .parser import Parser
from .printer import AstPrinter, RpnPrinter

logger = logging.getLogger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "
GOODBYE = "Have a great day!"


class Lox:
    """
    Runs source text through the scanner, parser and a printer.

    Holds the one ``ErrorReporter`` shared by every scan and parse it
    starts; ``run_prompt`` resets it after each line.
    """

    def __init__(self, mode: str = "ast", out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None):
        self.mode = mode
        self.out = out if out is not None else sys.stdout
        self.reporter = ErrorReporter(err if err is not None else sys.stderr)
        self.printer = RpnPrinter() if mode == "rpn" else AstPrinter()

    def run(self, source: str):
        tokens = Scanner(source, self.reporter).scan_tokens()

        if self.mode == "tokens":
            for token in tokens:
                self.out.write(f"{token}\n")
            return

        expression = Parser(tokens, self.reporter).parse()
        if self.reporter.had_error or expression is None:
            return

        self.out.write(f"{self.printer.print(expression)}\n")

    def run_file(self, path: str) -> int:
        try:
            with open(path, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            logger.error("cannot read %s: %s", path, e)
            return EX_NOINPUT
        except UnicodeDecodeError as e:
            logger.error("%s is not valid UTF-8: %s", path, e)
            return EX_DATAERR

        self.run(source)
        if self.reporter.had_error:
            logger.info("%s: %d error(s)", path, len(self.reporter.diagnostics))
            return EX_DATAERR
        return EX_OK

    def run_prompt(self, stdin: Optional[TextIO] = None) -> int:
        stdin = stdin if stdin is not None else sys.stdin

        while True:
            self.out.write(PROMPT)
            self.out.flush()
            line = stdin.readline()
            if not line:
                break
            self.run(line.rstrip("\n"))
            self.reporter.reset()

        self.out.write(f"{GOODBYE}\n")
        return EX_OK


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EX_USAGE instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="pylox",
        description="Scan and parse Lox expressions and print the syntax tree.",
    )
    parser.add_argument("script", nargs="?", help="file to run; omit for a prompt")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--tokens", dest="mode", action="store_const", const="tokens",
                        help="print the token stream")
    output.add_argument("--rpn", dest="mode", action="store_const", const="rpn",
                        help="print the tree in reverse Polish notation")
    parser.set_defaults(mode="ast")

    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    lox = Lox(mode=args.mode)
    if args.script is not None:
        return lox.run_file(args.script)
    return lox.run_prompt()


if __name__ == "__main__":
    sys.exit(main())
