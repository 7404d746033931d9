import decimal
import enum
import math
from typing import ClassVar


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name.replace("_", " ")

    __repr__ = __str__


class ErrorCategory(PrintableEnum):
    TOKENIZER = enum.auto()
    AST_PARSE = enum.auto()


class CalculatorError(Exception):
    category: ClassVar[ErrorCategory]
    errmsg: str

    def __str__(self) -> str:
        return f"[{self.category} ERROR]: {self.errmsg}"

    def excerpt(self) -> str:
        return str(self)


def format_number(value: float) -> str:
    """Shortest round-tripping digits in positional notation: 3.0 -> '3', 1e16 -> '10000000000000000'"""
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = format(decimal.Decimal(repr(value)), "f")
    return text[:-2] if text.endswith(".0") else text
