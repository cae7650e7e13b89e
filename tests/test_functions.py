import math

from infix.functions import FUNCTIONS, TABLE, Function

from pytest import raises, approx


def test_arities():
    assert {f.name: f.arity for f in TABLE} == {
        'pi': 0, 'e': 0, 'golden': 0,
        'abs': 1, 'sin': 1, 'cos': 1, 'tan': 1,
        'round': 1, 'floor': 1, 'ceil': 1, 'fib': 1, 'sqrt': 1,
        'log': 2, 'min': 2, 'max': 2,
    }


def test_unique_names():
    assert len({f.name for f in TABLE}) == len(TABLE) == len(FUNCTIONS)


def test_read_only():
    with raises(TypeError):
        FUNCTIONS['tau'] = Function('tau', 0, lambda args: 2 * math.pi)


def test_calls():
    assert FUNCTIONS['pi'](()) == math.pi
    assert FUNCTIONS['golden'](()) == approx((1 + math.sqrt(5)) / 2)
    assert FUNCTIONS['abs']([-3.0]) == 3.0
    assert FUNCTIONS['round']([-1.5]) == -2.0
    assert FUNCTIONS['log']([2.0, 8.0]) == approx(3.0)
    assert FUNCTIONS['min']([3.0, 5.0]) == 3.0
    assert FUNCTIONS['max']([3.0, 5.0]) == 5.0
    assert math.isnan(FUNCTIONS['sqrt']([-4.0]))


def test_str():
    assert str(FUNCTIONS['log']) == 'log/2'
    assert str(FUNCTIONS['e']) == 'e/0'
