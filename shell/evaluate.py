from __future__ import annotations

from dataclasses import dataclass

from core.log import get_logger
from tools.factorial import checked_factorial, factorial, fits_u64
from tools.parsing import extract_int, parse_strict

PROMPT = "Enter a positive integer: "

logger = get_logger("evaluate")


@dataclass(frozen=True)
class Evaluation:
    n: int
    result: int

    @property
    def exact(self) -> bool:
        return fits_u64(self.n)

    def render(self) -> str:
        return format_result(self.n, self.result)


def format_result(n: int, result: int) -> str:
    return f"Factorial of {n} = {result}"


def evaluate(text: str | None, strict: bool = False) -> Evaluation:
    """Turn one line of user input into an ``Evaluation``.

    The default mode reads the line like a stream extraction into an int and
    lets results above 20! wrap at 64 bits. Strict mode rejects anything that
    is not a whole in-range integer and refuses to wrap.

    Raises:
        InvalidInputError:       strict mode, malformed or out-of-range text.
        NegativeInputError:      the integer read is negative (both modes).
        FactorialOverflowError:  strict mode, n > 20.
    """
    logger.debug("input line: %r (strict=%s)", text, strict)
    if strict:
        n = parse_strict(text)
        result = checked_factorial(n)
    else:
        n = extract_int(text)
        result = factorial(n)
    evaluation = Evaluation(n=n, result=result)
    logger.debug("n=%d result=%d", n, result)
    if not evaluation.exact:
        logger.info("%d! wrapped modulo 2**64", n)
    return evaluation
