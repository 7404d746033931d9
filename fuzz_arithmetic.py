import math
import random
import re
import string
import warnings

from exprcalc.parser import parse
from exprcalc.runtime import evaluate
from exprcalc.tokenizer import tokenize

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(parse(tokenize(code), allow_trailing=False))
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"[-+]\s*[-+]", code):
            continue  # python accepts repeated signs (1 - -2), the grammar does not

        if re.findall(r"(^|[*/])\s*\+", code) or re.findall(r"(^|[^\d])\.", code):
            continue  # unary plus and numbers starting with a dot (.5) are not supported

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, float(res_py)):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, str) and "division by zero" in res_py and isinstance(res_my, float):
            continue  # python raises, IEEE-754 gives inf/nan
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
