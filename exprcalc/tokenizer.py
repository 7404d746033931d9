import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from exprcalc.tokens import NumberToken, Operator, OperatorToken, Token
from exprcalc.utils import CalculatorError, ErrorCategory

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(CalculatorError):
    category: ClassVar[ErrorCategory] = ErrorCategory.TOKENIZER

    errmsg: str
    code: str
    error_char_idx: int

    def excerpt(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                str(self),
                (
                    ("..." if print_ellipsis_pre else "")
                    + self.code[print_start_idx:print_end_idx].rstrip("\n")
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class NoMatch(TokenizerError):
    """Raised by a scanner that does not apply at the current position; nothing is consumed"""


WHITESPACE = frozenset(" \n")

OPERATORS = {
    "+": Operator.PLUS,
    "-": Operator.MINUS,
    "*": Operator.STAR,
    "/": Operator.SLASH,
}

Scanner = Callable[[str, int], tuple[Optional[Token], int]]


def _is_digit(s: str) -> bool:
    # str.isdigit() accepts non-ASCII digits
    return "0" <= s <= "9"


def _scan_number(code: str, i: int) -> tuple[Optional[Token], int]:
    if not _is_digit(code[i]):
        raise NoMatch("cannot parse number", code=code, error_char_idx=i)

    end_idx = i
    seen_dot = False
    while end_idx < len(code):
        c = code[end_idx]
        if c == ".":
            if seen_dot:
                raise TokenizerError("cannot parse number", code=code, error_char_idx=end_idx)
            seen_dot = True
        elif not _is_digit(c):
            break
        end_idx += 1

    return NumberToken(float(code[i:end_idx])), end_idx


def _scan_operator(code: str, i: int) -> tuple[Optional[Token], int]:
    c = code[i]
    if c in OPERATORS:
        return OperatorToken(OPERATORS[c]), i + 1
    elif c in WHITESPACE:
        return None, i + 1
    else:
        raise NoMatch("cannot parse operator", code=code, error_char_idx=i)


SCANNERS: list[Scanner] = [_scan_number, _scan_operator]


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        for scanner in SCANNERS:
            try:
                token, i = scanner(code, i)
            except NoMatch:
                continue
            if token is not None:
                tokens.append(token)
            break
        else:
            raise TokenizerError("unexpected token", code=code, error_char_idx=i)

    logger.debug("tokenized %r into %d token(s)", code, len(tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return " ".join(str(t) for t in tokens)
