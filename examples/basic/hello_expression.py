"""Validate an expression and point at the first problem."""

import sys

from calclex import CalcLexError, parse

source = sys.argv[1] if len(sys.argv) > 1 else "(1 + 2) * 3"

try:
    expression = parse(source)
except CalcLexError as exc:
    print(source)
    if exc.offset is not None:
        print(" " * exc.offset + "^")
    print(exc)
    sys.exit(1)

print(list(expression))
