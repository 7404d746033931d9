import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from exprcalc.expressions import Expression, render
from exprcalc.parser import ParserError, parse
from exprcalc.runtime import evaluate
from exprcalc.tokenizer import TokenizerError, tokenize
from exprcalc.utils import CalculatorError, format_number

logger = logging.getLogger(__name__)


@dataclass
class ReplConfig:
    prompt: str = "> "
    strict: bool = False
    show_position: bool = False
    log_level: str = "WARNING"


def process_line(code: str, config: ReplConfig) -> tuple[Expression, float]:
    tokens = tokenize(code)
    expression = parse(tokens, allow_trailing=not config.strict)
    return expression, evaluate(expression)


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO, config: ReplConfig) -> int:
    while True:
        stdout.write(config.prompt)
        stdout.flush()

        code = stdin.readline()
        if not code:
            logger.info("input closed, leaving")
            return 0

        try:
            expression, value = process_line(code, config)
        except (TokenizerError, ParserError) as e:
            print_error(e, stderr, config)
            continue

        print(render(expression), file=stdout)
        print(format_number(value), file=stdout)


def print_error(error: CalculatorError, stderr: TextIO, config: ReplConfig) -> None:
    print(error.excerpt() if config.show_position else str(error), file=stderr)


def parse_args(argv: Optional[list[str]] = None) -> ReplConfig:
    parser = argparse.ArgumentParser(prog="exprcalc", description="Interactive arithmetic expression evaluator")
    parser.add_argument("--prompt", default="> ", help="prompt printed before each line")
    parser.add_argument("--strict", action="store_true", help="reject tokens left after a complete expression")
    parser.add_argument(
        "--show-position", action="store_true", help="point at the offending character or token on errors"
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity"
    )
    args = parser.parse_args(argv)
    return ReplConfig(
        prompt=args.prompt,
        strict=args.strict,
        show_position=args.show_position,
        log_level=args.log_level,
    )


def main(argv: Optional[list[str]] = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return run(sys.stdin, sys.stdout, sys.stderr, config)
