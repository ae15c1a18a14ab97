'''
Infix to RPN conversion, by Dijkstra's shunting-yard algorithm.
'''

import logging

from .lexer import Paren
from .operators import Associativity, Operator
from .util import ConversionError

logger = logging.getLogger(__name__)


def _yields_to(op, top):
    '''
    Return True if ``top``, on the operator stack, must be output before
    ``op`` gets pushed.
    '''
    if op.associativity is Associativity.LEFT:
        return op.precedence <= top.precedence
    return op.precedence < top.precedence


def infix_to_rpn(tokens):
    '''
    Reorder infix tokens into RPN tokens.

    Does not modify ``tokens``.

    :raises ConversionError: on a ``)`` without ``(``, or an unclosed ``(``.
    '''
    stack = []
    output = []
    for token in tokens:
        if isinstance(token, Operator):
            while stack and isinstance(stack[-1], Operator) and \
                    _yields_to(token, stack[-1]):
                output.append(stack.pop())
            stack.append(token)
        elif token is Paren.OPEN:
            stack.append(token)
        elif token is Paren.CLOSE:
            while True:
                if not stack:
                    raise ConversionError()
                top = stack.pop()
                if top is Paren.OPEN:
                    break
                output.append(top)
        else:
            output.append(token)

    while stack:
        top = stack.pop()
        if top is Paren.OPEN:
            raise ConversionError()
        output.append(top)

    logger.debug('Converted %s to %s',
                 ' '.join(map(str, tokens)),
                 ' '.join(map(str, output)))
    return output
