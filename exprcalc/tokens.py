from dataclasses import dataclass

from exprcalc.utils import PrintableEnum, format_number


class Operator(PrintableEnum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberToken:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator

    def __str__(self) -> str:
        return str(self.operator)


Token = NumberToken | OperatorToken


def is_operator(token: Token | None, *operators: Operator) -> bool:
    return isinstance(token, OperatorToken) and token.operator in operators
