import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterable

from exprcalc.cursor import TokenCursor
from exprcalc.expressions import Binary, Expression, Literal, Unary
from exprcalc.tokenizer import untokenize
from exprcalc.tokens import NumberToken, Operator, Token
from exprcalc.utils import CalculatorError, ErrorCategory

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalculatorError):
    category: ClassVar[ErrorCategory] = ErrorCategory.AST_PARSE

    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def excerpt(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens)) + (" " if parsed_tokens else "")
        return "\n".join([str(self), untokenize(self.tokens), filler_whitespace + "^"])


ADDITIVE = (Operator.PLUS, Operator.MINUS)
MULTIPLICATIVE = (Operator.STAR, Operator.SLASH)


class Parser:
    """
    Recursive descent over the grammar

        Program  -> Term
        Term     -> Factor (("+" | "-") Factor)*
        Factor   -> Unary  (("*" | "/") Unary)*
        Unary    -> "-" Literal | Literal
        Literal  -> Number

    Both binary levels are left-associative; unary minus binds tightest.
    """

    def __init__(self, tokens: Iterable[Token], allow_trailing: bool = True) -> None:
        self.tokens = TokenCursor(tokens)
        self.allow_trailing = allow_trailing

    def error(self, errmsg: str) -> ParserError:
        return ParserError(errmsg, tokens=self.tokens.seen(), error_token_idx=self.tokens.position)

    def program(self) -> Expression:
        expression = self.term()
        if not self.allow_trailing and not self.tokens.at_end():
            raise self.error("unexpected trailing token")
        logger.debug("parsed %s", expression)
        return expression

    def term(self) -> Expression:
        return self._binary_level(self.factor, ADDITIVE)

    def factor(self) -> Expression:
        return self._binary_level(self.unary, MULTIPLICATIVE)

    def _binary_level(self, operand: Callable[[], Expression], operators: tuple[Operator, ...]) -> Expression:
        result = operand()
        while (operator := self.tokens.match_operator(*operators)) is not None:
            right = operand()
            result = Binary(left=result, operator=operator, right=right)
        return result

    def unary(self) -> Expression:
        token = self.tokens.peek()
        if token is None:
            raise self.error("syntax error by uncomplete expression")
        elif isinstance(token, NumberToken):
            return self.literal()
        elif token.operator is Operator.MINUS:
            self.tokens.advance()
            return Unary(operator=token, operand=self.literal())
        else:
            raise self.error("syntax error in <unary> expression")

    def literal(self) -> Literal:
        """Terminal: a single number token"""
        token = self.tokens.peek()
        if not isinstance(token, NumberToken):
            raise self.error("unexpected expression")
        self.tokens.advance()
        return Literal(token)


def parse(tokens: Iterable[Token], allow_trailing: bool = True) -> Expression:
    return Parser(tokens, allow_trailing=allow_trailing).program()
