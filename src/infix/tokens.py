from collections import namedtuple
import operator

from . import numeric


class Token(namedtuple('Token', 'kind value')):
    '''
    A lexeme. kind is 'number', 'name', 'end', or the operator or paren
    symbol itself. Only numbers and names carry a value.

    Immutable; equality is structural.
    '''
    __slots__ = ()

    NUMBER = 'number'
    NAME = 'name'
    END = 'end'

    # Symbol: (precedence, apply). Equal precedence left-associates, so all
    # of * / ^ % share a tier.
    BINARY = {
        '+': (1, operator.add),
        '-': (1, operator.sub),
        '*': (2, operator.mul),
        '/': (2, numeric.divide),
        '^': (2, numeric.power),
        '%': (2, numeric.remainder),
    }
    UNARY = {
        '+': operator.pos,
        '-': operator.neg,
    }
    PARENS = '()'
    SYMBOLS = ''.join(BINARY) + PARENS

    def __new__(cls, kind, value=None):
        return super().__new__(cls, kind, value)

    @classmethod
    def number(cls, value):
        return cls(cls.NUMBER, float(value))

    @classmethod
    def name(cls, value):
        return cls(cls.NAME, value)

    def isnumber(self):
        return self.kind == self.NUMBER

    def isname(self):
        return self.kind == self.NAME

    def isunary(self):
        return self.kind in self.UNARY

    def isbinary(self):
        return self.kind in self.BINARY

    @property
    def precedence(self):
        '''
        Binding strength. Binary operators only.
        '''
        return self.BINARY[self.kind][0]

    def apply_binary(self, left, right):
        return self.BINARY[self.kind][1](left, right)

    def apply_unary(self, right):
        return self.UNARY[self.kind](right)

    def __str__(self):
        if self.kind == self.NUMBER:
            return numeric.format_number(self.value)
        elif self.kind == self.NAME:
            return self.value
        elif self.kind == self.END:
            return '<EOF>'
        return self.kind


END = Token(Token.END)
OPEN = Token('(')
CLOSE = Token(')')
