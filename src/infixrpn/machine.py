'''
RPN execution engine.
'''

from collections import deque
import logging

from .lexer import BooleanLiteral, Operand, parse_infix, parse_rpn
from .operators import Boolean, Number, Operator
from .shunting import infix_to_rpn
from .util import ErrorKind, ExecError

logger = logging.getLogger(__name__)


class Machine:
    '''
    Stack machine running RPN tokens.

    Holds the stack of a single evaluation. Not meant to be reused across
    expressions; see :func:`execute`.
    '''

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def feed(self, token):
        '''
        Stack operand, or apply operator to the stack.
        '''
        if isinstance(token, Operand):
            self._pshstack(Number(token.value))
        elif isinstance(token, BooleanLiteral):
            self._pshstack(Boolean(token.value))
        elif isinstance(token, Operator):
            self._apply(token)
        else:
            raise TypeError('Not an RPN token: {!r}'.format(token))

    def _apply(self, op):
        '''
        Pop operands for ``op``, run it, and push the result.
        '''
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self._popstack(op.arity))
        self._pshstack(op.apply(*args))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise ExecError(ErrorKind.TOO_FEW_OPERANDS)
        return [self.stack.pop() for _ in range(n)]

    def result(self):
        '''
        Return the only value left on the stack.
        '''
        if len(self.stack) != 1:
            raise ExecError(ErrorKind.TOO_MANY_OPERANDS)
        return self.stack[0]


def execute(tokens):
    '''
    Evaluate RPN tokens to a single value.

    :raises ExecError: on too few or too many operands, or bad operand types.
    '''
    machine = Machine()
    for token in tokens:
        machine.feed(token)
    value = machine.result()
    logger.debug('Executed %d tokens to %s', len(tokens), value)
    return value


def evaluate_infix(text):
    '''
    Parse, convert and run infix text.
    '''
    return execute(infix_to_rpn(parse_infix(text)))


def evaluate_rpn(text):
    '''
    Parse and run RPN text.
    '''
    return execute(parse_rpn(text))
