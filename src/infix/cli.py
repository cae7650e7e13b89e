from os import isatty, path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
from traceback import print_exception

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .functions import TABLE
from .numeric import format_number
from .parser import read
from .scanner import Scanner
from .util import CalcError


class InteractiveInput:
    '''
    Iterate over lines typed at a prompt, until end of input.
    '''
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        history = None
        if self.history:
            history = FileHistory(path.expanduser(self.history))
        try:
            session = PromptSession(message=self.prompt,
                                    history=history,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # One line per expression.
                                    multiline=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.infix_history'

    def _report(self, error):
        print(error.args[0], file=sys.stderr)
        if self.args.verbose:
            print_exception(type(error), error, error.__traceback__,
                            file=sys.stderr)

    def _lines(self):
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        for line in self.args.expressions:
            if line.strip():
                yield line

    def dumper(self):
        '''
        Dump the tokens of each line.
        '''
        print('<kind>\t<token>')
        for line in self._lines():
            try:
                for token in Scanner(line):
                    print(token.kind, repr(str(token)), sep='\t')
            except CalcError as e:
                self._report(e)

    def executor(self):
        '''
        Evaluate each line and print its result.
        '''
        for line in self._lines():
            # A bad line is reported and dropped; the next one starts clean.
            try:
                value = read(line, strict=not self.args.lenient).execute()
            except CalcError as e:
                self._report(e)
                continue
            print(format_number(value, self.args.precision))

    def functions(self):
        '''
        Print all callable names, with their arity.
        '''
        print('functions:', *TABLE)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        Otherwise plain stdin.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=self.args.history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round results to PRECISION '
                                               'decimal places')
        self.argument_parser.add_argument('-l', '--lenient',
                                          action='store_true',
                                          help='ignore tokens after a '
                                               'complete expression')
        self.argument_parser.add_argument('--history',
                                          default=self.HISTORY_FILE,
                                          help='interactive history file')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-F', '--functions', self.functions),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's arguments.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
