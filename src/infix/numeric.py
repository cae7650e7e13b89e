'''
Float arithmetic with IEEE-754 results instead of Python exceptions.

Python's float operators and math module raise on division by zero, domain
errors and overflow. A calculator should print inf or NaN instead, so every
operation the evaluator reaches goes through here.
'''

from decimal import Decimal
from functools import wraps
import math


GOLDEN = 1.618033988749895
SQRT5 = math.sqrt(5)


def _odd(n):
    return n % 2 == 1


def ieee(f):
    '''
    Return NaN where f would raise a domain error.
    '''
    @wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except ValueError:
            return math.nan
    return wrapper


def integral(f):
    '''
    Keep rounding functions in floats, passing inf and NaN through.
    '''
    @wraps(f)
    def wrapper(x):
        if not math.isfinite(x):
            return x
        return math.copysign(float(f(x)), x)
    return wrapper


def divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.copysign(math.inf, base) if _odd(exponent) else math.inf
    except ValueError:
        # 0 to a negative power; anything else is a negative base with a
        # fractional exponent.
        if base == 0:
            return (math.copysign(math.inf, base) if _odd(exponent)
                    else math.inf)
        return math.nan


def remainder(left, right):
    '''
    C fmod: result takes the sign of the dividend.
    '''
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def ln(x):
    if x == 0:
        return -math.inf
    elif x < 0:
        return math.nan
    return math.log(x)


def log(base, value):
    return divide(ln(value), ln(base))


@integral
def round_half_away(x):
    '''
    Round to nearest, ties away from zero (not Python's banker's rounding).
    '''
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return whole


floor = integral(math.floor)
ceil = integral(math.ceil)


def minimum(left, right):
    '''
    Smaller argument, ignoring a single NaN.
    '''
    if math.isnan(left):
        return right
    elif math.isnan(right):
        return left
    return min(left, right)


def maximum(left, right):
    '''
    Larger argument, ignoring a single NaN.
    '''
    if math.isnan(left):
        return right
    elif math.isnan(right):
        return left
    return max(left, right)


def fib(n):
    '''
    Binet's formula, rounded.
    '''
    return round_half_away(power(GOLDEN, n) / SQRT5)


def format_number(value, precision=None):
    '''
    Render a result in plain decimal, no exponent, no trailing ".0".
    '''
    if math.isnan(value):
        return 'NaN'
    elif math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if precision is not None:
        value = round(value, precision)
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
