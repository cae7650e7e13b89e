from .functions import FUNCTIONS
from .node import Const, UnaryExpr, BinaryExpr
from .scanner import Scanner
from .tokens import END, OPEN, CLOSE
from .util import (UnknownFunction, UnexpectedToken, ExpectedToken,
                   NestingTooDeep)


class Parser:
    '''
    Operator precedence parser for one line of infix arithmetic.

    Grammar::

        expr    := unary (binop unary)*     precedence climbed
        unary   := ('+' | '-')? primary
        primary := NUMBER | NAME primary{arity} | '(' expr ')'

    Function arguments are primaries, not expressions: sin 1+1 is
    sin(1) + 1. A sign binds to one primary only: -2^2 is (-2)^2.
    '''

    def __init__(self, scanner, strict=True):
        '''
        Drain scanner into a token list.

        :param strict: Reject tokens left over after a complete expression.
        '''
        self.tokens = list(scanner)
        self.offset = 0
        self.strict = strict

    def parse(self):
        '''
        Parse the whole token list into an expression tree.
        '''
        try:
            node = self.parse_expression()
        except RecursionError:
            raise NestingTooDeep() from None
        if self.strict:
            self._expect(END)
        return node

    def parse_expression(self):
        return self.parse_binary(self.parse_unary(), 0)

    # https://en.wikipedia.org/wiki/Operator-precedence_parser
    def parse_binary(self, left, minimum):
        lookahead = self._peek()
        while lookahead.isbinary() and lookahead.precedence >= minimum:
            operator = self._read()
            right = self.parse_unary()
            lookahead = self._peek()
            # Strictly greater: equal precedence associates to the left.
            while (lookahead.isbinary() and
                   lookahead.precedence > operator.precedence):
                right = self.parse_binary(right, lookahead.precedence)
                lookahead = self._peek()
            left = BinaryExpr(left, right, operator)
        return left

    def parse_unary(self):
        token = self._peek()
        if token.isunary():
            self._read()
            return UnaryExpr(self.parse_primary(), token)
        return self.parse_primary()

    def parse_primary(self):
        token = self._read()
        if token == OPEN:
            node = self.parse_expression()
            self._expect(CLOSE)
            return node
        elif token.isnumber():
            return Const(token.value)
        elif token.isname():
            try:
                function = FUNCTIONS[token.value]
            except KeyError:
                raise UnknownFunction(token.value) from None
            # Arguments are evaluated now; the call folds into a constant.
            args = [self.parse_primary().execute()
                    for _
                    in range(function.arity)]
            return Const(function(args))
        raise UnexpectedToken(token)

    def _expect(self, expected):
        token = self._read()
        if token != expected:
            raise ExpectedToken(expected, token)
        return token

    def _peek(self):
        '''
        Next token, or the end token past the last one.
        '''
        if self.offset < len(self.tokens):
            return self.tokens[self.offset]
        return END

    def _read(self):
        token = self._peek()
        self.offset += 1
        return token


def read(line, strict=True):
    '''
    Scan and parse line into an expression tree.
    '''
    return Parser(Scanner(line), strict=strict).parse()


def evaluate(line, strict=True):
    '''
    Scan, parse and evaluate line.
    '''
    return read(line, strict=strict).execute()
