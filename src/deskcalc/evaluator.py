'''
Stack machine evaluating one postfix expression per line.
'''

from collections import deque
import sys
import operator
import math

from .lexer import Kind
from .util import (CalcError, EndOfInput, InvalidExpression, BadToken,
                   NotEnoughOperands, TooManyOperands)


# Returned by Evaluator.evaluate() when it is time to quit.
TERMINATE = object()


def _divide(left, right):
    '''
    IEEE-754 division; never raises ZeroDivisionError.
    '''
    try:
        return operator.__truediv__(left, right)
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Evaluator:
    '''
    Evaluate postfix expressions read from a Lexer, one line at a time.

    Results are stored in a variable: whichever was last assigned with
    ``name = ...``, or ``it`` if none ever was.
    '''

    DEFAULT_TARGET = 'it'
    DEFAULT_VALUE = 0.0
    FAREWELL = 'Bye'
    NO_VALUE = 'no value'
    EXIT = 'exit'

    # Arithmetic on the two topmost operands.
    BINARY = {
        Kind.ADD: operator.__add__,
        Kind.SUBTRACT: operator.__sub__,
        Kind.MULTIPLY: operator.__mul__,
        Kind.DIVIDE: _divide,
    }

    def __init__(self, lexer, output=None, verbose=False, precision=None):
        '''
        Create evaluator with empty symbol table.

        :param lexer: Token source.
        :param output: Where results and error reports are written.
        :param verbose: Dump the stack to stderr when a line is aborted.
        :param precision: Round printed results to this many decimals.
        '''
        self.lexer = lexer
        self.output = output or sys.stdout
        self.verbose = verbose
        self.precision = precision
        self.stack = deque()
        self.symbols = dict()
        self.target = type(self).DEFAULT_TARGET

    def _pshstack(self, value):
        self.stack.append(value)

    def _popstack(self, n=1):
        '''
        Pop specified number of operands from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise NotEnoughOperands()
        return [self.stack.pop() for _ in range(n)]

    def load(self, name):
        '''
        Value of variable, 0.0 if never assigned.
        '''
        return self.symbols.get(name, type(self).DEFAULT_VALUE)

    def store(self):
        '''
        Pop the result of the line into the target variable and return it.
        '''
        value, = self._popstack()
        if self.stack:
            raise TooManyOperands()
        self.symbols[self.target] = value
        return value

    def negate(self):
        value, = self._popstack()
        self._pshstack(-value)

    def apply(self, kind):
        '''
        Apply binary operator to the two topmost operands.
        '''
        # Not reversed, unlike dc: the top of the stack is the left
        # operand, so 2 10 / is 5.
        first, second = self._popstack(2)
        self._pshstack(type(self).BINARY[kind](first, second))

    def _leading_variable(self, name, token):
        '''
        Handle the token after a leading variable, whose value is pushed.

        Return the stored result if the line is over, else None.
        '''
        if token.kind is Kind.ASSIGN:
            # name = ...: the variable is the target, not an operand
            self.stack.pop()
            self.target = name
        elif token.kind in {Kind.NEGATE, Kind.SUBTRACT}:
            self.negate()
        elif token.kind is Kind.NUMBER:
            self._pshstack(float(token.text))
        elif token.kind is Kind.VARIABLE:
            self._pshstack(self.load(token.text))
        elif token.kind is Kind.END_OF_LINE:
            return self.store()
        else:
            raise InvalidExpression()
        return None

    def _evaluate(self):
        token = self.lexer.next_token()
        if token.kind is Kind.VARIABLE and \
           token.text.lower() == type(self).EXIT:
            return TERMINATE

        if token.kind is Kind.VARIABLE:
            self._pshstack(self.load(token.text))
            second = self.lexer.next_token()
            result = self._leading_variable(token.text, second)
            if second.kind is Kind.END_OF_LINE:
                return result
            token = self.lexer.next_token()

        while True:
            if token.kind is Kind.NUMBER:
                self._pshstack(float(token.text))
            elif token.kind is Kind.VARIABLE:
                self._pshstack(self.load(token.text))
            elif token.kind is Kind.NEGATE:
                self.negate()
            elif token.kind in type(self).BINARY:
                self.apply(token.kind)
            elif token.kind is Kind.END_OF_LINE:
                return self.store()
            elif token.kind is Kind.INVALID:
                raise BadToken()
            else:
                # = anywhere but right after a leading variable
                raise InvalidExpression()
            token = self.lexer.next_token()

    def evaluate(self):
        '''
        Evaluate a single line of input.

        Return its value, None if there was some sort of error, or TERMINATE
        on exit or end of input.
        '''
        self.stack.clear()
        try:
            return self._evaluate()
        except EndOfInput:
            return TERMINATE
        except CalcError as e:
            self.error(e)
            return None

    def error(self, e):
        '''
        Report error, point at the offending character, and flush the lexer
        in preparation for the next line.
        '''
        if self.verbose:
            print('stack:', *self.stack, file=sys.stderr)
            print(repr(e), file=sys.stderr)
        print(e.args[0] + ':', file=self.output)
        # The line keeps its terminator
        print(self.lexer.line, end='', file=self.output)
        print(' ' * max(self.lexer.index - 1, 0) + '^', file=self.output)
        self.lexer.flush()

    def format(self, value):
        '''
        Render result the way it is printed.
        '''
        if value is None:
            return type(self).NO_VALUE
        elif math.isnan(value):
            return 'NaN'
        elif math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        elif self.precision is not None:
            value = round(value, self.precision)
        return repr(value)

    def run(self):
        '''
        Evaluate and print each line until told to stop.
        '''
        while True:
            value = self.evaluate()
            if value is TERMINATE:
                break
            print(self.format(value), file=self.output)
        print('\n' + type(self).FAREWELL, file=self.output)
        self.output.flush()
