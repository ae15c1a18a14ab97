'''
Turn expression text into tokens, for both notations.
'''

from dataclasses import dataclass
from functools import reduce
from string import digits
import enum
import operator

import regex

from .operators import Operator
from .util import ErrorKind, ParseError


# Integral part of a number
INTEGRAL = r'\d+'
# Fractional part of a number
FRACTIONAL = r'\d+'
# Number, of any kind supported by grammar. Same literals a float accepts,
# minus the underscores.
NUMBER = r'''
          [+-]?
          (?:
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  {INTEGRAL}
                  (?:
                      \.
                      {FRACTIONAL}?
                  )?
              |
                  # .2
                  \.
                  {FRACTIONAL}
              )
              # 1e3, 1.5E-3
              (?:
                  e
                  [+-]?
                  \d+
              )?
          |
              inf(?:inity)?
          |
              nan
          )
          '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)
# Default regex flags for matching lexemes
FLAGS = reduce(operator.__or__,
               {regex.ASCII,
                regex.IGNORECASE,
                regex.VERSION1,
                regex.VERBOSE},
               0)
NUMBER_PATTERN = regex.compile(NUMBER, flags=FLAGS)

BOOLEANS = {
    'true': True,
    'false': False,
}


@dataclass(frozen=True)
class Operand:
    value: float

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool

    def __str__(self):
        return 'true' if self.value else 'false'


class Paren(enum.Enum):
    OPEN = '('
    CLOSE = ')'

    def __str__(self):
        return self.value

    __repr__ = __str__


class _CharClass(enum.Enum):
    NONE = enum.auto()
    NUMBER = enum.auto()
    PAREN = enum.auto()
    OPERATOR = enum.auto()


def _char_class(char):
    if char in digits or char == '.':
        return _CharClass.NUMBER
    elif char in '()':
        return _CharClass.PAREN
    else:
        return _CharClass.OPERATOR


# Which previous classes need a space before a character of this class.
_SEPARATE_AFTER = {
    _CharClass.NUMBER: {_CharClass.OPERATOR, _CharClass.PAREN},
    _CharClass.PAREN: {_CharClass.NUMBER, _CharClass.OPERATOR,
                       _CharClass.PAREN},
    _CharClass.OPERATOR: {_CharClass.NUMBER, _CharClass.PAREN},
}


def normalize(text):
    '''
    Space out adjacent numbers, operators and parentheses.

    So that ``(1+2)*3`` splits like ``( 1 + 2 ) * 3``. Whitespace runs become
    a single space. Normalizing twice changes nothing.
    '''
    result = []
    last = _CharClass.NONE
    for char in text:
        if char.isspace():
            if not result or result[-1] != ' ':
                result.append(' ')
            continue
        current = _char_class(char)
        if last in _SEPARATE_AFTER[current] and result[-1] != ' ':
            result.append(' ')
        result.append(char)
        last = current
    return ''.join(result)


def parse_token(text, parens=True):
    '''
    Parse a single whitespace free token.

    :param parens: Whether parentheses are tokens (infix) or not (RPN).
    :raises ParseError: if the token means nothing.
    '''
    if parens:
        for paren in Paren:
            if text == paren.value:
                return paren
    if NUMBER_PATTERN.fullmatch(text):
        return Operand(float(text))
    if text in BOOLEANS:
        return BooleanLiteral(BOOLEANS[text])
    op = Operator.from_symbol(text)
    if op is not None:
        return op
    # 1.2.3 is a broken number, not an unknown operator.
    if text[:1] in digits:
        raise ParseError(ErrorKind.INVALID_NUMBER, text)
    raise ParseError(ErrorKind.INVALID_OPERATOR, text)


def fix_negative_numbers(tokens):
    '''
    Fold a unary minus into the number right after it, in place.

    ``- 3`` becomes ``-3`` unless the minus directly follows a number, where
    it is a subtraction and stays. Anything else before it, ``)`` and
    booleans included, makes it a sign.
    '''
    i = 0
    while i < len(tokens) - 1:
        if tokens[i] is Operator.SUB:
            unary = i == 0 or not isinstance(tokens[i - 1], Operand)
            following = tokens[i + 1]
            if unary and isinstance(following, Operand):
                tokens[i] = Operand(-following.value)
                del tokens[i + 1]
        i += 1
    return tokens


def parse_infix(text):
    '''
    Tokenize infix text, parentheses included, minus signs folded.
    '''
    tokens = [parse_token(token)
              for token
              in normalize(text).split()]
    return fix_negative_numbers(tokens)


def parse_rpn(text):
    '''
    Tokenize RPN text. No normalization: tokens must already be spaced.
    '''
    return [parse_token(token, parens=False)
            for token
            in text.split()]
