import math

from infix.tokens import Token, END, OPEN, CLOSE


def test_predicates():
    assert Token.number(1).isnumber()
    assert not Token.number(1).isname()
    assert Token.name('pi').isname()
    assert not Token.name('pi').isbinary()
    assert Token('-').isunary() and Token('-').isbinary()
    assert Token('+').isunary() and Token('+').isbinary()
    for kind in '*/^%':
        assert Token(kind).isbinary()
        assert not Token(kind).isunary()
    for token in OPEN, CLOSE, END:
        assert not token.isbinary()
        assert not token.isunary()


def test_precedence():
    assert Token('+').precedence == Token('-').precedence == 1
    assert {Token(kind).precedence for kind in '*/^%'} == {2}


def test_apply():
    assert Token('-').apply_binary(5, 3) == 2
    assert Token('^').apply_binary(2, 10) == 1024
    assert Token('%').apply_binary(-7, 3) == -1
    assert Token('/').apply_binary(1, 0) == math.inf
    assert Token('-').apply_unary(2) == -2
    assert Token('+').apply_unary(2) == 2


def test_equality():
    assert Token.number(1) == Token.number(1.0)
    assert Token.number(1) != Token.number(2)
    assert Token(')') == CLOSE
    assert Token.name('e') != Token.name('pi')


def test_str():
    assert str(Token.number(2)) == '2'
    assert str(Token.number(0.25)) == '0.25'
    assert str(Token.name('sqrt')) == 'sqrt'
    assert str(Token('^')) == '^'
    assert str(END) == '<EOF>'
