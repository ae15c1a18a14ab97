'''
Normalizer and tokenizer tests
'''

import regex

from infixrpn.lexer import (BooleanLiteral, Operand, Paren, normalize,
                            parse_infix, parse_rpn, parse_token,
                            fix_negative_numbers)
from infixrpn.operators import Operator
from infixrpn.util import ErrorKind, ParseError

from pytest import mark, raises


@mark.parametrize('text, expected', [
    ('1+2', '1 + 2'),
    ('(1+2)*3', '( 1 + 2 ) * 3'),
    ('((1))', '( ( 1 ) )'),
    ('1.5*2', '1.5 * 2'),
    ('1!=2', '1 != 2'),
    ('sqrt(4)', 'sqrt ( 4 )'),
    ('1   +\t2', '1 + 2'),
    ('1 + 2', '1 + 2'),
])
def test_normalize(text, expected):
    assert normalize(text) == expected


@mark.parametrize('text', [
    '1+2',
    '(1+2)*3',
    ' 2^ -3\t\t',
    'true & ! false',
])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_normalize_empty():
    assert normalize('') == ''


def test_parse_token():
    assert parse_token('(') is Paren.OPEN
    assert parse_token(')') is Paren.CLOSE
    assert parse_token('12.5') == Operand(12.5)
    assert parse_token('.5') == Operand(0.5)
    assert parse_token('1.') == Operand(1.0)
    assert parse_token('1e3') == Operand(1000.0)
    assert parse_token('true') == BooleanLiteral(True)
    assert parse_token('false') == BooleanLiteral(False)
    assert parse_token('sqrt') is Operator.SQRT
    assert parse_token('>=') is Operator.GE


def test_malformed_number():
    with raises(ParseError, match=regex.escape('Invalid Number: 1.2.3')) as e:
        parse_token('1.2.3')
    assert e.value.kind is ErrorKind.INVALID_NUMBER
    assert e.value.token == '1.2.3'


def test_unknown_operator():
    with raises(ParseError, match=regex.escape('Invalid Operator: $')) as e:
        parse_token('$')
    assert e.value.kind is ErrorKind.INVALID_OPERATOR
    assert e.value.token == '$'


def test_booleans_are_lowercase():
    with raises(ParseError, match='Invalid Operator: True'):
        parse_token('True')


def test_parse_infix_negative_number():
    assert parse_infix('-3 + 4') == [Operand(-3.0),
                                     Operator.ADD,
                                     Operand(4.0)]


def test_parse_infix_subtraction():
    assert parse_infix('5 - 3') == [Operand(5.0),
                                    Operator.SUB,
                                    Operand(3.0)]
    assert parse_infix('5-3') == [Operand(5.0),
                                  Operator.SUB,
                                  Operand(3.0)]


def test_parse_infix_negative_after_operator():
    assert parse_infix('2 * -3') == [Operand(2.0),
                                     Operator.MUL,
                                     Operand(-3.0)]


def test_parse_infix_negative_after_paren():
    assert parse_infix('(-1)') == [Paren.OPEN,
                                   Operand(-1.0),
                                   Paren.CLOSE]


def test_parse_infix_negative_after_close_paren():
    assert parse_infix('(1 + 2) - 3') == [Paren.OPEN,
                                          Operand(1.0),
                                          Operator.ADD,
                                          Operand(2.0),
                                          Paren.CLOSE,
                                          Operand(-3.0)]


def test_parse_infix_negative_after_boolean():
    assert parse_infix('true - 3') == [BooleanLiteral(True),
                                       Operand(-3.0)]


def test_parse_infix_ascii_digits_only():
    with raises(ParseError, match=regex.escape('Invalid Operator: ٣')):
        parse_infix('٣ + 1')
    with raises(ParseError, match=regex.escape('Invalid Operator: ٣')):
        parse_rpn('٣')


def test_parse_infix_trailing_minus():
    assert parse_infix('1 -') == [Operand(1.0), Operator.SUB]
    assert parse_infix('-') == [Operator.SUB]


def test_parse_infix_empty():
    assert parse_infix('') == []
    assert parse_infix('   ') == []


def test_parse_infix_errors():
    with raises(ParseError, match=regex.escape('Invalid Number: 1.2.3')):
        parse_infix('1.2.3 + 1')
    with raises(ParseError, match=regex.escape('Invalid Operator: foo')):
        parse_infix('1 + foo')


def test_fix_negative_numbers_in_place():
    tokens = [Operator.SUB, Operand(2.0), Operator.SUB, Operand(1.0)]
    fix_negative_numbers(tokens)
    assert tokens == [Operand(-2.0), Operator.SUB, Operand(1.0)]


def test_fix_negative_numbers_double_minus():
    tokens = [Operator.SUB, Operator.SUB, Operand(3.0)]
    fix_negative_numbers(tokens)
    assert tokens == [Operator.SUB, Operand(-3.0)]


def test_fix_negative_numbers_empty():
    assert fix_negative_numbers([]) == []


def test_parse_rpn():
    assert parse_rpn('1 2 + 3 *') == [Operand(1.0),
                                      Operand(2.0),
                                      Operator.ADD,
                                      Operand(3.0),
                                      Operator.MUL]


def test_parse_rpn_signed_numbers():
    assert parse_rpn('-3 +4 -') == [Operand(-3.0),
                                    Operand(4.0),
                                    Operator.SUB]


def test_parse_rpn_literals():
    assert parse_rpn('true false ! inf') == [BooleanLiteral(True),
                                             BooleanLiteral(False),
                                             Operator.NOT,
                                             Operand(float('inf'))]


def test_parse_rpn_no_parens():
    with raises(ParseError, match=regex.escape('Invalid Operator: (')):
        parse_rpn('( 1 )')


def test_parse_rpn_is_not_normalized():
    with raises(ParseError, match=regex.escape('Invalid Number: 1+2')):
        parse_rpn('1+2')
