"""Infix to postfix conversion and postfix evaluation for integer expressions."""

from __future__ import annotations

import re
import sys

OPERATORS = frozenset("+-*/%^")
_LEXEME_RE = re.compile(r"[0-9]+|.", re.DOTALL)


class ExpressionError(ValueError):
    """Raised for malformed expressions and arithmetic errors."""


def is_operator(ch: str) -> bool:
    """Return True for one of + - * / % ^."""
    return ch in OPERATORS


def validate(infix: str) -> None:
    """Reject empty input, a leading operator other than '-', and unbalanced parentheses."""
    if not infix:
        raise ExpressionError("Empty expression.")
    if is_operator(infix[0]) and infix[0] != "-":
        raise ExpressionError("Expression starts with invalid operator.")

    depth = 0
    for ch in infix:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ExpressionError(
                    "Unbalanced parentheses: too many closing parentheses."
                )
    if depth:
        raise ExpressionError("Unbalanced parentheses: mismatched count.")


def precedence(ch: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    if ch in "+-":
        return 1 if ch else 0
    if ch in ("*", "/", "%"):
        return 2
    if ch == "^":
        return 3
    return 0


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to space-separated postfix tokens."""
    output: list[str] = []
    stack: list[str] = []

    for lexeme in _LEXEME_RE.findall(infix):
        if lexeme.isdigit():
            output.append(lexeme)
        elif lexeme == "(":
            stack.append(lexeme)
        elif lexeme == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(lexeme) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(lexeme)

    while stack:
        top = stack.pop()
        if top in "()":
            raise ExpressionError("Unbalanced parentheses detected at the end.")
        output.append(top)

    return "".join(f"{item} " for item in output)


def _truncated_div(b: int, a: int) -> int:
    quotient = abs(b) // abs(a)
    return -quotient if (b < 0) != (a < 0) else quotient


def _apply(op: str, b: int, a: int) -> int | None:
    if op == "+":
        return b + a
    if op == "-":
        return b - a
    if op == "*":
        return b * a
    if op == "/":
        if a == 0:
            raise ExpressionError("Division by zero error!")
        return _truncated_div(b, a)
    if op == "%":
        if a == 0:
            raise ExpressionError("Modulo by zero error!")
        return b - a * _truncated_div(b, a)
    if op == "^":
        if a >= 0:
            return b**a
        if b == 0:
            raise ExpressionError("Division by zero error!")
        return int(b**a)
    return None


def evaluate_postfix(postfix: str) -> int:
    """Evaluate space-separated postfix integer arithmetic."""
    stack: list[int] = []
    for lexeme in _LEXEME_RE.findall(postfix):
        if lexeme.isdigit():
            stack.append(int(lexeme))
        elif lexeme == " ":
            continue
        else:
            if len(stack) < 2:
                raise ExpressionError(
                    "Invalid postfix expression: insufficient operands."
                )
            a = stack.pop()
            b = stack.pop()
            result = _apply(lexeme, b, a)
            if result is not None:
                stack.append(result)

    if not stack:
        raise ExpressionError("Invalid postfix expression: no result.")
    return stack[-1]


def _read_expression() -> str:
    print("Enter an infix expression: ", end="", flush=True)
    try:
        words = input().split()
    except EOFError:
        return ""
    return words[0] if words else ""


def main(argv: list[str] | None = None) -> int:
    """Read an expression, print its postfix form and its value."""
    args = sys.argv[1:] if argv is None else argv
    infix = args[0] if args else _read_expression()

    try:
        validate(infix)
        postfix = infix_to_postfix(infix)
        print(f"\nPostfix expression: {postfix}")
        print(f"Evaluated Result: {evaluate_postfix(postfix)}")
    except ExpressionError as exc:
        print(f"Error: {exc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())