"""Check that the brackets in an expression are balanced."""

from __future__ import annotations

import sys
from typing import Optional

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def find_imbalance(expression: str) -> Optional[str]:
    """Return a description of the first bracket problem, or None if balanced."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack:
                return "Right parentheses are more than left parentheses"
            opener = stack.pop()
            if opener != _PAIRS[char]:
                return f"Mismatched parentheses are : {opener} and {char}"
    if stack:
        return "Left parentheses more than right parentheses"
    return None


def check_balanced(expression: str) -> bool:
    """Return True when every bracket is closed by its matching partner."""
    return find_imbalance(expression) is None


def main(argv: Optional[list[str]] = None) -> int:
    """Read an expression and report whether its brackets balance."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        expression = " ".join(args)
    else:
        expression = input("Enter an algebraic expression : ")
    problem = find_imbalance(expression)
    if problem is None:
        print("Balanced Parentheses")
        print("Valid expression")
    else:
        print(problem)
        print("Invalid expression")
    return 0


if __name__ == "__main__":
    sys.exit(main())