from os import path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ExprError
from .lexer import parse_infix, parse_rpn
from .machine import execute
from .operators import Operator
from .shunting import infix_to_rpn

logger = logging.getLogger(__name__)


class InteractiveInput:
    '''
    Prompting line iterator, ends on EOF or ``quit``.
    '''

    QUIT = 'quit'

    def __init__(self, prompt, history=None, input=None, output=None):
        '''
        :param input: prompt_toolkit input, the terminal by default.
        :param output: prompt_toolkit output, the terminal by default.
        '''
        self.prompt = prompt
        self.history = history
        self.input = input
        self.output = output

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    input=self.input,
                                    output=self.output,
                                    enable_suspend=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                line = session.prompt()
                if line.strip() == self.QUIT:
                    return
                yield line
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix or RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.infixrpn_history'
    BANNERS = {
        'infix': 'Welcome to the Infix calculator!',
        'rpn': 'Welcome to the RPN calculator!',
    }
    LOG_FORMAT = '%(name)s: %(message)s'
    # Pipeline per notation, each step labelled for error reports.
    STAGES = {
        'infix': (('Error parsing infix', parse_infix),
                  ('Error converting to RPN', infix_to_rpn),
                  ('Error executing RPN', execute)),
        'rpn': (('Error parsing RPN', parse_rpn),
                ('Error executing RPN', execute)),
    }

    def __init__(self, notation='infix', input=None, output=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.

        :param notation: ``'infix'`` or ``'rpn'``.
        :param input: prompt_toolkit input for interactive sessions.
        :param output: prompt_toolkit output for interactive sessions.
        '''
        if notation not in self.STAGES:
            raise ValueError('Unknown notation {!r}'.format(notation))
        self.notation = notation
        self.input = input
        self.output = output
        self.argument_parser = ArgumentParser(
            prog=notation,
            description='{} calculator'.format(
                'Infix' if notation == 'infix' else 'RPN'))
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-O', '--operators',
                                       self.operators),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def evaluate(self, line):
        '''
        Evaluate one line, printing its value or its error.
        '''
        result = line
        for stage, step in self.STAGES[self.notation]:
            try:
                result = step(result)
            except ExprError as e:
                logger.debug('%s failed on %r', step.__name__, line,
                             exc_info=True)
                print('{}: {}'.format(stage, e.args[0]), file=sys.stderr)
                return
        print(result, flush=True)

    def executor(self):
        '''
        Evaluate every expression.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\n')
            if not self._interactive() and not line.strip():
                continue
            self.evaluate(line)

    def dumper(self):
        '''
        Dump all tokens and their kind, and the RPN form of infix.
        '''
        print('<token>\t<kind>')
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                if self.notation == 'infix':
                    tokens = parse_infix(line)
                else:
                    tokens = parse_rpn(line)
                for token in tokens:
                    print(token, type(token).__name__, sep='\t')
                if self.notation == 'infix':
                    print('rpn:', *infix_to_rpn(tokens))
            except ExprError as e:
                print(e.args[0], file=sys.stderr)

    def operators(self):
        '''
        Print operator table.
        '''
        print('<symbol>\t<precedence>\t<associativity>\t<arity>')
        for op in Operator:
            print(op.symbol,
                  op.precedence,
                  op.associativity.value,
                  op.arity,
                  sep='\t')

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Plain stdin otherwise.
        '''
        if self.args.prompt or sys.stdin.isatty() and sys.stdout.isatty():
            print(self.BANNERS[self.notation])
            print("Type '{}' or press Ctrl-D to exit.".format(
                InteractiveInput.QUIT))
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history,
                                    input=self.input,
                                    output=self.output)
        else:
            return sys.stdin

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=self.LOG_FORMAT,
            stream=sys.stderr)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        else:
            # Arguments make up a single expression.
            self.args.expressions = [' '.join(self.args.expressions)]
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
