from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from .console import InteractiveInput, PromptingInput
from .evaluator import Evaluator
from .lexer import Lexer


class CLI:
    '''
    Command line interface to the desk calculator.
    '''

    DEFAULT_PROMPT = '>> '

    def dumper(self):
        '''
        Dump all tokens, kind and text.
        '''
        lexer = Lexer(self._lines())
        print('<kind>\t<repr(text)>')
        for token in lexer.tokens():
            print(token.kind.name, repr(token.text), sep='\t')

    def executor(self):
        '''
        Run the read-eval-print loop.
        '''
        evaluator = Evaluator(Lexer(self._lines()),
                              output=sys.stdout,
                              verbose=self.args.verbose,
                              precision=self.args.precision)
        evaluator.run()

    def _lines(self):
        '''
        Return the line source.

        Expressions given on the command line are not prompted for. Otherwise
        use line editing if both stdin/out are a tty.
        '''
        if self.args.expressions is not None:
            return self.args.expressions
        prompt = self.args.prompt or self.DEFAULT_PROMPT
        if isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=prompt)
        return PromptingInput(sys.stdin, prompt=prompt, output=sys.stdout)

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Desk calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          metavar='N',
                                          help='round results to N decimals')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's, then exit.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
        sys.stdout.flush()
        sys.exit(0)
