from exprcalc.parser import ParserError, parse
from exprcalc.runtime import evaluate
from exprcalc.tokenizer import TokenizerError, tokenize, untokenize
from exprcalc.utils import format_number

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "10 - 2 - 3",
    "4.5 / 2",
    "1 + 2 * 3 - 4 / 2",
    "1 / 0",
    "10 / 5/ 2",
    "1 + + 2",
    "1 + ",
    "1 & 2",
    "1.2.3",
    "--3",
    "1 + 2 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e.excerpt())
        continue

    print(f"tokens: {untokenize(tokens)}")

    try:
        expression = parse(tokens)
    except ParserError as e:
        print(e.excerpt())
        continue
    print(f"ast: {expression}")
    print(f"result: {format_number(evaluate(expression))}")
