import enum


class ErrorKind(enum.Enum):
    INVALID_NUMBER = 'Invalid Number: {}'
    INVALID_OPERATOR = 'Invalid Operator: {}'
    MISMATCHED_PARENS = 'Mismatched Parentheses'
    TOO_FEW_OPERANDS = 'invalid syntax: too few operands'
    TOO_MANY_OPERANDS = 'invalid syntax: too many operands'
    INVALID_TYPE = 'invalid type: {}'

    def __str__(self):
        return self.name


class ExprError(Exception):
    '''
    Base of every error raised while evaluating an expression.

    The first argument is always the human readable message, so callers can
    just print ``e.args[0]``. Branch on ``kind`` instead of the message.
    '''
    def __init__(self, kind, detail=None):
        super().__init__(kind.value.format(detail))
        self.kind = kind


class ParseError(ExprError):
    '''
    Token text that is neither a number, a boolean, nor an operator.
    '''
    def __init__(self, kind, token):
        super().__init__(kind, token)
        self.token = token


class ConversionError(ExprError):
    '''
    Infix to RPN conversion failed, i.e. unbalanced parentheses.
    '''
    def __init__(self, kind=ErrorKind.MISMATCHED_PARENS):
        super().__init__(kind)


class ExecError(ExprError):
    '''
    Stack depth or operand type violation while running RPN.
    '''
    def __init__(self, kind, operator=None):
        super().__init__(kind, operator.label if operator else None)
        self.operator = operator
