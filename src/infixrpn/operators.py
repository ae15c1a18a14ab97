'''
Value domain and operator table.

Values are either numbers (IEEE doubles) or booleans. Operators are a closed
set, each carrying its symbol, precedence, associativity and arity, plus a
type checked evaluation rule per accepted operand types.
'''

from dataclasses import dataclass
from decimal import Decimal
from typing import Union
import enum
import math

from .util import ErrorKind, ExecError


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self):
        n = self.value
        if math.isnan(n):
            return 'NaN'
        elif math.isinf(n):
            return 'inf' if n > 0 else '-inf'
        # Plain positional notation, never 1e-07 or 7.0.
        d = Decimal(repr(n))
        if n.is_integer():
            d = d.to_integral_value()
        return format(d, 'f')


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self):
        return 'true' if self.value else 'false'


Value = Union[Number, Boolean]


class Associativity(enum.Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Operator(enum.Enum):
    '''
    Operators understood in both notations.

    Member value is ``(symbol, precedence, associativity, arity)``.
    '''
    ADD = ('+', 2, Associativity.LEFT, 2)
    SUB = ('-', 2, Associativity.LEFT, 2)
    MUL = ('*', 3, Associativity.LEFT, 2)
    DIV = ('/', 3, Associativity.LEFT, 2)
    POW = ('^', 4, Associativity.RIGHT, 2)
    SQRT = ('sqrt', 4, Associativity.RIGHT, 1)
    EQ = ('=', 1, Associativity.LEFT, 2)
    NE = ('!=', 1, Associativity.LEFT, 2)
    GT = ('>', 1, Associativity.LEFT, 2)
    GE = ('>=', 1, Associativity.LEFT, 2)
    LT = ('<', 1, Associativity.LEFT, 2)
    LE = ('<=', 1, Associativity.LEFT, 2)
    AND = ('&', 0, Associativity.LEFT, 2)
    OR = ('|', 0, Associativity.LEFT, 2)
    NOT = ('!', 5, Associativity.LEFT, 1)

    def __init__(self, symbol, precedence, associativity, arity):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity

    def __str__(self):
        return self.symbol

    __repr__ = __str__

    @property
    def label(self):
        '''
        Name used in error messages.
        '''
        return _LABELS.get(self, self.symbol)

    @classmethod
    def from_symbol(cls, symbol):
        '''
        Return the operator spelled ``symbol``, or None.
        '''
        return cls.SYMBOLS.get(symbol)

    def apply(self, *operands):
        '''
        Evaluate operator on already evaluated operands, leftmost first.

        :raises ExecError: if no rule accepts the operand types.
        '''
        for types, impl in _RULES[self]:
            if all(isinstance(operand, type_)
                   for operand, type_
                   in zip(operands, types)):
                return impl(*(operand.value for operand in operands))
        raise ExecError(ErrorKind.INVALID_TYPE, self)


Operator.SYMBOLS = {op.symbol: op for op in Operator}

_LABELS = {
    Operator.AND: '&&',
    Operator.OR: '||',
    Operator.NOT: 'not',
}


def _is_odd_integer(n):
    return n.is_integer() and n % 2 == 1


def _divide(x, y):
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _power(x, y):
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if x == 0:
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


def _sqrt(x):
    if x < 0:
        return math.nan
    return math.sqrt(x)


_NUMBERS = (Number, Number)
_BOOLEANS = (Boolean, Boolean)

_RULES = {
    Operator.ADD: [(_NUMBERS, lambda x, y: Number(x + y))],
    Operator.SUB: [(_NUMBERS, lambda x, y: Number(x - y))],
    Operator.MUL: [(_NUMBERS, lambda x, y: Number(x * y))],
    Operator.DIV: [(_NUMBERS, lambda x, y: Number(_divide(x, y)))],
    Operator.POW: [(_NUMBERS, lambda x, y: Number(_power(x, y)))],
    Operator.SQRT: [((Number,), lambda x: Number(_sqrt(x)))],
    Operator.EQ: [(_NUMBERS, lambda x, y: Boolean(x == y)),
                  (_BOOLEANS, lambda x, y: Boolean(x == y))],
    Operator.NE: [(_NUMBERS, lambda x, y: Boolean(x != y)),
                  (_BOOLEANS, lambda x, y: Boolean(x != y))],
    Operator.GT: [(_NUMBERS, lambda x, y: Boolean(x > y))],
    Operator.GE: [(_NUMBERS, lambda x, y: Boolean(x >= y))],
    Operator.LT: [(_NUMBERS, lambda x, y: Boolean(x < y))],
    Operator.LE: [(_NUMBERS, lambda x, y: Boolean(x <= y))],
    # Both sides are values by now, nothing to short-circuit.
    Operator.AND: [(_BOOLEANS, lambda x, y: Boolean(x and y))],
    Operator.OR: [(_BOOLEANS, lambda x, y: Boolean(x or y))],
    Operator.NOT: [((Boolean,), lambda x: Boolean(not x))],
}
