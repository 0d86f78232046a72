"""Convert infix expressions to postfix and evaluate single-digit postfix."""

from __future__ import annotations

import math
import sys
from typing import Optional

_OPERATORS = frozenset("+-*/%^")
_BLANKS = frozenset(" \t")


class StackUnderflowError(IndexError):
    """Raised when an operator or bracket needs more than the stack holds."""

    def __init__(self) -> None:
        super().__init__("Stack underflow")


def priority(symbol: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    if symbol in "+-":
        return 1
    if symbol in "*/%":
        return 2
    if symbol == "^":
        return 3
    return 0


def _pop(stack: list):
    if not stack:
        raise StackUnderflowError()
    return stack.pop()


def infix_to_postfix(expression: str) -> str:
    """Convert ``expression`` to postfix, ignoring blanks and tabs.

    Operators of equal priority, ``^`` included, associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in expression:
        if symbol in _BLANKS:
            continue
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while (top := _pop(stack)) != "(":
                output.append(top)
        elif symbol in _OPERATORS:
            while stack and priority(stack[-1]) >= priority(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            output.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_div(b: int, a: int) -> int:
    quotient = abs(b) // abs(a)
    return quotient if (b < 0) == (a < 0) else -quotient


def _apply(operator: str, b: int, a: int) -> int:
    if operator == "+":
        return b + a
    if operator == "-":
        return b - a
    if operator == "*":
        return b * a
    if operator == "/":
        return _truncating_div(b, a)
    if operator == "%":
        return b - a * _truncating_div(b, a)
    if operator == "^":
        return b**a if a >= 0 else int(math.pow(b, a))
    raise ValueError(f"unknown operator {operator!r}")


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix string whose operands are single digits.

    Division and remainder truncate toward zero.
    """
    stack: list[int] = []
    for symbol in postfix:
        if "0" <= symbol <= "9":
            stack.append(ord(symbol) - ord("0"))
            continue
        a = _pop(stack)
        b = _pop(stack)
        stack.append(_apply(symbol, b, a))
    return _pop(stack)


def main(argv: Optional[list[str]] = None) -> int:
    """Read an infix expression, print its postfix form and its value."""
    args = sys.argv[1:] if argv is None else argv
    expression = " ".join(args) if args else input("Enter infix : ")
    try:
        postfix = infix_to_postfix(expression)
        print(f"Postfix : {postfix}")
        value = evaluate_postfix(postfix)
    except StackUnderflowError as exc:
        print(exc)
        return 1
    print(f"Value of expression : {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())