'''
Named functions and constants callable from an expression.

Every function takes a fixed number of arguments, given as an ordered
sequence of floats, and returns one float.
'''

from collections import namedtuple
from types import MappingProxyType
import math

from . import numeric


class Function(namedtuple('Function', 'name arity implementation')):
    __slots__ = ()

    def __call__(self, args):
        assert len(args) == self.arity, (self.name, args)
        return self.implementation(args)

    def __str__(self):
        return '{}/{}'.format(self.name, self.arity)


def _nullary(value):
    return lambda args: value


def _unary(f):
    return lambda args: f(args[0])


def _binary(f):
    return lambda args: f(args[0], args[1])


TABLE = (
    Function('pi', 0, _nullary(math.pi)),
    Function('e', 0, _nullary(math.e)),
    Function('golden', 0, _nullary(numeric.GOLDEN)),
    Function('abs', 1, _unary(math.fabs)),
    Function('sin', 1, _unary(numeric.ieee(math.sin))),
    Function('cos', 1, _unary(numeric.ieee(math.cos))),
    Function('tan', 1, _unary(numeric.ieee(math.tan))),
    Function('round', 1, _unary(numeric.round_half_away)),
    Function('floor', 1, _unary(numeric.floor)),
    Function('ceil', 1, _unary(numeric.ceil)),
    Function('fib', 1, _unary(numeric.fib)),
    Function('sqrt', 1, _unary(numeric.ieee(math.sqrt))),
    # Base first: log 2 8 is 3.
    Function('log', 2, _binary(numeric.log)),
    Function('min', 2, _binary(numeric.minimum)),
    Function('max', 2, _binary(numeric.maximum)),
)

FUNCTIONS = MappingProxyType({function.name: function
                              for function
                              in TABLE})

assert len(FUNCTIONS) == len(TABLE), 'duplicate function names'
