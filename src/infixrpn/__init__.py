'''
Infix and RPN calculator.

Evaluates arithmetic, comparison and logic over numbers and booleans, written
either in infix notation, with parentheses and the usual precedence, or in
Reverse Polish Notation. Infix goes through shunting-yard to RPN, and RPN runs
on a stack machine.

    >>> from infixrpn import evaluate_infix, evaluate_rpn
    >>> print(evaluate_infix('(1+2)*3'))
    9
    >>> print(evaluate_rpn('1 2 < true &'))
    true

Not intended to be a language! No variables, no functions.
'''

from .util import ErrorKind, ExprError, ParseError, ConversionError, ExecError
from .operators import Associativity, Boolean, Number, Operator
from .lexer import (BooleanLiteral, Operand, Paren, normalize, parse_infix,
                    parse_rpn)
from .shunting import infix_to_rpn
from .machine import Machine, evaluate_infix, evaluate_rpn, execute
from .cli import CLI


__all__ = (
    'normalize', 'parse_infix', 'infix_to_rpn', 'parse_rpn', 'execute',
    'evaluate_infix', 'evaluate_rpn',
    'Number', 'Boolean', 'Operator', 'Associativity',
    'Operand', 'BooleanLiteral', 'Paren',
    'ErrorKind', 'ExprError', 'ParseError', 'ConversionError', 'ExecError',
    'Machine', 'CLI',
)
