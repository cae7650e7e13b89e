'''
Infix calculator.

Reads one line of arithmetic at a time: numbers, + - * / ^ %, parentheses,
unary sign, and a handful of named functions and constants (see -F). Prints
the result, or a one-line error and carries on.

Precedence has two tiers only. + and - bind loosest; * / ^ % share the
upper tier and, like everything else, associate to the left, so 2^3^2 is 64.
A leading sign applies to the next primary alone, so -2^2 is 4. Function
arguments are primaries too: "log 2 8" is 3, "sin 1+1" is sin(1) + 1.

Division by zero, roots of negatives and friends are not errors; they
print inf or NaN.
'''

from .cli import CLI
from .functions import FUNCTIONS
from .node import Node, Const, UnaryExpr, BinaryExpr
from .parser import Parser, read, evaluate
from .scanner import Scanner
from .tokens import Token
from .util import CalcError, LexError, ParseError


__all__ = ('CLI', 'Scanner', 'Parser', 'Token', 'FUNCTIONS',
           'Node', 'Const', 'UnaryExpr', 'BinaryExpr',
           'CalcError', 'LexError', 'ParseError',
           'read', 'evaluate')
