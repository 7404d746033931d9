import logging
import math
import operator
from typing import Callable

from exprcalc.expressions import Binary, Expression, Literal, Unary
from exprcalc.tokens import Operator

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[float, float], float]


def ieee_div(a: float, b: float) -> float:
    """True division with IEEE-754 results for a zero divisor instead of ZeroDivisionError"""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, math.copysign(1.0, a) * math.copysign(1.0, b))


binary_impls: dict[Operator, BinaryOperationImpl] = {
    Operator.PLUS: operator.add,
    Operator.MINUS: operator.sub,
    Operator.STAR: operator.mul,
    Operator.SLASH: ieee_div,
}


def evaluate(expression: Expression) -> float:
    result = evaluate_expression(expression)
    logger.debug("%s evaluated to %r", expression, result)
    return result


def evaluate_expression(expression: Expression) -> float:
    # post-order over an explicit stack; a node is pushed again with done=True once its children are queued
    values: list[float] = []
    stack: list[tuple[Expression, bool]] = [(expression, False)]
    while stack:
        node, done = stack.pop()
        if isinstance(node, Literal):
            values.append(node.token.value)
        elif isinstance(node, Unary):
            if done:
                values.append(-values.pop())
            else:
                stack.extend([(node, True), (node.operand, False)])
        elif isinstance(node, Binary):
            if done:
                right_res = values.pop()
                left_res = values.pop()
                values.append(binary_impls[node.operator.operator](left_res, right_res))
            else:
                stack.extend([(node, True), (node.right, False), (node.left, False)])
        else:
            raise TypeError(f"Unexpected expression type: {node!r}")
    return values.pop()
