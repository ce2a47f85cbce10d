"""Evaluation and conversion of infix, postfix and prefix expressions."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Iterator, Optional, Union

_WHITESPACE = " \t\n\v\f\r"
_ARITHMETIC = "+-*/"
_ARITH_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_PRECEDENCE = {**_ARITH_PRECEDENCE, "^": 3}
_NUMBER_OR_CHAR = re.compile(r"[0-9]+|[^0-9]")


class ExpressionError(ValueError):
    """Raised when an expression is malformed."""


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _scan(expression: str) -> Iterator[Union[int, str]]:
    """Yield runs of decimal digits as integers and every other character as is."""
    for match in _NUMBER_OR_CHAR.finditer(expression):
        token = match.group()
        yield int(token) if token[0].isdigit() else token


def _pop(stack: list):
    if not stack:
        raise ExpressionError("missing operand")
    return stack.pop()


def _top(stack: list):
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def _apply(left: int, right: int, op: str) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero")
    # Integer division truncates towards zero.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate_infix(expression: str) -> int:
    """Evaluate an infix expression of non-negative integers and + - * / with parentheses."""
    values: list[int] = []
    ops: list[str] = []

    def reduce() -> None:
        op = ops.pop()
        if op == "(":
            raise ExpressionError("unbalanced parentheses")
        right = _pop(values)
        left = _pop(values)
        values.append(_apply(left, right, op))

    for token in _scan(expression):
        if isinstance(token, int):
            values.append(token)
        elif token == "(":
            ops.append(token)
        elif token == ")":
            while ops and ops[-1] != "(":
                reduce()
            if not ops:
                raise ExpressionError("unbalanced parentheses")
            ops.pop()
        elif token in _ARITH_PRECEDENCE:
            while ops and _ARITH_PRECEDENCE.get(ops[-1], 0) >= _ARITH_PRECEDENCE[token]:
                reduce()
            ops.append(token)

    while ops:
        reduce()
    return _top(values)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-character operands to postfix."""
    output: list[str] = []
    ops: list[str] = []
    for ch in expression:
        if ch in _WHITESPACE:
            continue
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            ops.append(ch)
        elif ch == ")":
            while ops and ops[-1] != "(":
                output.append(ops.pop())
            if not ops:
                raise ExpressionError("unbalanced parentheses")
            ops.pop()
        elif ch in _PRECEDENCE:
            while ops and ops[-1] != "(" and _PRECEDENCE[ops[-1]] >= _PRECEDENCE[ch]:
                output.append(ops.pop())
            ops.append(ch)

    if "(" in ops:
        raise ExpressionError("unbalanced parentheses")
    output.extend(reversed(ops))
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression over single-character operands to prefix."""
    operands: list[str] = []
    ops: list[str] = []

    def reduce() -> None:
        op = ops.pop()
        if op == "(":
            raise ExpressionError("unbalanced parentheses")
        right = _pop(operands)
        left = _pop(operands)
        operands.append(op + left + right)

    for ch in expression:
        if ch in _WHITESPACE:
            continue
        if _is_operand(ch):
            operands.append(ch)
        elif ch == "(":
            ops.append(ch)
        elif ch == ")":
            while ops and ops[-1] != "(":
                reduce()
            if not ops:
                raise ExpressionError("unbalanced parentheses")
            ops.pop()
        elif ch in _PRECEDENCE:
            while ops and _PRECEDENCE.get(ops[-1], 0) >= _PRECEDENCE[ch]:
                reduce()
            ops.append(ch)

    while ops:
        reduce()
    return _top(operands)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression; numbers are separated by any non-digit."""
    stack: list[int] = []
    for token in _scan(expression):
        if isinstance(token, int):
            stack.append(token)
        elif token in _ARITHMETIC:
            right = _pop(stack)
            left = _pop(stack)
            stack.append(_apply(left, right, token))
    return _top(stack)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression; numbers are separated by any non-digit."""
    stack: list[int] = []
    for token in reversed(list(_scan(expression))):
        if isinstance(token, int):
            stack.append(token)
        elif token in _ARITHMETIC:
            left = _pop(stack)
            right = _pop(stack)
            stack.append(_apply(left, right, token))
    return _top(stack)


def _rebuild(
    symbols: Iterator[str], combine: Callable[[str, str, str], str], prefix: bool
) -> str:
    stack: list[str] = []
    for ch in symbols:
        if _is_operand(ch):
            stack.append(ch)
        elif ch in _ARITHMETIC:
            if prefix:
                left = _pop(stack)
                right = _pop(stack)
            else:
                right = _pop(stack)
                left = _pop(stack)
            stack.append(combine(left, ch, right))
    return _top(stack)


def postfix_to_infix(expression: str) -> str:
    """Convert postfix to a fully parenthesised infix expression."""
    return _rebuild(iter(expression), lambda a, op, b: f"({a}{op}{b})", prefix=False)


def postfix_to_prefix(expression: str) -> str:
    """Convert a postfix expression to prefix."""
    return _rebuild(iter(expression), lambda a, op, b: op + a + b, prefix=False)


def prefix_to_infix(expression: str) -> str:
    """Convert prefix to a fully parenthesised infix expression."""
    return _rebuild(reversed(expression), lambda a, op, b: f"({a}{op}{b})", prefix=True)


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix."""
    return _rebuild(reversed(expression), lambda a, op, b: a + b + op, prefix=True)


# operation: (function, prompt, result label, reads a single word)
_OPERATIONS = {
    "evaluate-infix": (
        evaluate_infix,
        "Enter an infix expression : ",
        "Evaluation of this infix expression gives : ",
        False,
    ),
    "infix-to-postfix": (
        infix_to_postfix,
        "Enter an infix expression : ",
        "Postfix form of this expression is : ",
        True,
    ),
    "infix-to-prefix": (
        infix_to_prefix,
        "Enter an infix expression : ",
        "Prefix form of this expression is : ",
        True,
    ),
    "evaluate-postfix": (
        evaluate_postfix,
        "Enter a postfix expression : ",
        "Evaluation of postfix expression gives : ",
        False,
    ),
    "postfix-to-infix": (
        postfix_to_infix,
        "Enter a postfix expression : ",
        "Infix expression of this postfix expression : ",
        False,
    ),
    "postfix-to-prefix": (
        postfix_to_prefix,
        "Enter a postfix expression : ",
        "Prefix expression of this expression is : ",
        False,
    ),
    "evaluate-prefix": (
        evaluate_prefix,
        "Enter a prefix expression : ",
        "Evaluation of this prefix expression gives : ",
        False,
    ),
    "prefix-to-infix": (
        prefix_to_infix,
        "Enter a prefix expression : ",
        "Infix expression of this expression is : ",
        False,
    ),
    "prefix-to-postfix": (
        prefix_to_postfix,
        "Enter a prefix expression : ",
        "Postfix expression of this expression is : ",
        False,
    ),
}


def main(argv: Optional[list[str]] = None) -> int:
    """Evaluate or convert one expression given as an argument or read from stdin."""
    parser = argparse.ArgumentParser(description="Evaluate or convert expressions.")
    parser.add_argument("operation", choices=list(_OPERATIONS))
    parser.add_argument(
        "expression", nargs="?", help="expression to process (default: read from stdin)"
    )
    args = parser.parse_args(argv)
    function, prompt, label, single_word = _OPERATIONS[args.operation]

    expression = args.expression
    if expression is None:
        print(prompt, end="", flush=True)
        line = sys.stdin.readline().rstrip("\n")
        if single_word:
            words = line.split()
            expression = words[0] if words else ""
        else:
            expression = line

    try:
        result = function(expression)
    except (ExpressionError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{label}{result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())