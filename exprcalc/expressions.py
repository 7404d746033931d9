from dataclasses import dataclass
from typing import Iterator

from exprcalc.tokens import NumberToken, Operator, OperatorToken


@dataclass(frozen=True)
class Literal:
    token: NumberToken

    def __post_init__(self) -> None:
        if not isinstance(self.token, NumberToken):
            raise ValueError(f"Literal expects a number token, got {self.token!r}")

    def __str__(self) -> str:
        return str(self.token)


@dataclass(frozen=True)
class Unary:
    operator: OperatorToken
    operand: "Expression"

    def __post_init__(self) -> None:
        if self.operator != OperatorToken(Operator.MINUS):
            raise ValueError(f"Unary expects the minus operator, got {self.operator!r}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Binary:
    left: "Expression"
    operator: OperatorToken
    right: "Expression"

    def __post_init__(self) -> None:
        if not isinstance(self.operator, OperatorToken):
            raise ValueError(f"Binary expects an operator token, got {self.operator!r}")

    def __str__(self) -> str:
        return render(self)


Expression = Literal | Unary | Binary


def render(expression: Expression) -> str:
    """
    Canonical fully parenthesized form, e.g. '3 + 4 * 5' renders as '(3 + (4 * 5))'.

    Walks the tree with an explicit stack: chains like '1 + 1 + ... + 1' are as deep as they are long.
    """
    parts: list[str] = []
    stack: list[Expression | str] = [expression]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(str(item.token))
        elif isinstance(item, Unary):
            stack.extend([")", item.operand, f"({item.operator}"])
        else:
            stack.extend([")", item.right, f" {item.operator} ", item.left, "("])
    return "".join(parts)


def iter_nodes(expression: Expression) -> Iterator[Expression]:
    """Pre-order walk over the tree"""
    stack: list[Expression] = [expression]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Unary):
            stack.append(node.operand)
        elif isinstance(node, Binary):
            stack.extend([node.right, node.left])
