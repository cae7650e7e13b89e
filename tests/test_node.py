from infix.node import Const, UnaryExpr, BinaryExpr
from infix.tokens import Token

from pytest import raises


class Recorder(Token):
    '''
    Subtraction that logs its operands, to check evaluation order.
    '''
    __slots__ = ()
    seen = []

    def apply_binary(self, left, right):
        self.seen.append((left, right))
        return left - right


def test_const():
    assert Const(2.5).execute() == 2.5


def test_unary():
    assert UnaryExpr(Const(2.0), Token('-')).execute() == -2.0
    assert UnaryExpr(Const(2.0), Token('+')).execute() == 2.0


def test_binary():
    tree = BinaryExpr(Const(7.0), Const(2.0), Token('%'))
    assert tree.execute() == 1.0


def test_left_before_right():
    Recorder.seen.clear()
    minus = Recorder('-')
    # (10 - 3) - (4 - 1)
    tree = BinaryExpr(BinaryExpr(Const(10.0), Const(3.0), minus),
                      BinaryExpr(Const(4.0), Const(1.0), minus),
                      minus)
    assert tree.execute() == 4.0
    assert Recorder.seen == [(10.0, 3.0), (4.0, 1.0), (7.0, 3.0)]


def test_deep_tree():
    tree = Const(0.0)
    for _ in range(50000):
        tree = UnaryExpr(BinaryExpr(tree, Const(1.0), Token('+')),
                         Token('+'))
    assert tree.execute() == 50000.0


def test_operator_must_fit():
    with raises(AssertionError):
        UnaryExpr(Const(1.0), Token('*'))
    with raises(AssertionError):
        BinaryExpr(Const(1.0), Const(2.0), Token('('))


def test_repr():
    tree = BinaryExpr(UnaryExpr(Const(2.0), Token('-')), Const(2.0),
                      Token('^'))
    assert repr(tree) == \
        "BinaryExpr(UnaryExpr(Const(2.0), '-'), Const(2.0), '^')"
