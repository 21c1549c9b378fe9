class CalcError(Exception):
    '''
    Something wrong with the current line. Never fatal.
    '''
    message = 'Error'

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))


class InvalidExpression(CalcError):
    message = 'Invalid expression'


class BadToken(CalcError):
    message = 'Bad token'


class NotEnoughOperands(CalcError):
    message = 'Not enough operands'


class TooManyOperands(CalcError):
    message = 'Too many operands'


class EndOfInput(Exception):
    '''
    No more lines to read. Not an error; time to say goodbye.
    '''
    pass
