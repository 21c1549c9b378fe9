from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import EndOfInput


class Kind(Enum):
    '''
    Token classification.
    '''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    NEGATE = '~'
    ASSIGN = '='
    END_OF_LINE = '@'
    NUMBER = 'number'
    VARIABLE = 'variable'
    INVALID = 'invalid'


Token = namedtuple('Token', ['kind', 'text'])


class Lexer:
    '''
    Scanner for the desk calculator, one token at a time.

    Pulls raw lines from any iterator as it runs out of characters; whoever
    provides the lines is responsible for prompting. Line boundaries are
    plain whitespace here: an expression ends at ``@``, not at the newline.
    '''
    # Terminator appended to every line read
    NEWLINE = '\n'
    DECIMAL_POINT = '.'
    UNDERSCORE = '_'

    # Character classes. Unicode-aware on purpose; ٣ is as good a digit as 3.
    DIGIT = r'\p{Nd}'
    ALPHABETIC = r'\p{Alphabetic}'
    SPACE = r'\s'
    # Default regex flags for classifying characters
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.DOTALL},
                   0)

    # Single character lexemes; anything else is INVALID
    SYMBOLS = {kind.value: kind
               for kind
               in Kind
               if len(kind.value) == 1}

    def __init__(self, lines):
        '''
        :param lines: Iterable of raw lines, with or without terminators.
        '''
        self.lines = iter(lines)
        self.line = ''
        self.index = 0
        self._unreadable = False

    def _isa(self, pattern, ch):
        return regex.fullmatch(pattern, ch, flags=type(self).FLAGS) is not None

    def isdigit(self, ch):
        return self._isa(type(self).DIGIT, ch)

    def isalphabetic(self, ch):
        return self._isa(type(self).ALPHABETIC, ch)

    def isspace(self, ch):
        return self._isa(type(self).SPACE, ch)

    def iswordchar(self, ch):
        return (self.isalphabetic(ch) or
                self.isdigit(ch) or
                ch == type(self).UNDERSCORE)

    def _readline(self):
        '''
        Replace the exhausted line with the next one from input.
        '''
        line = next(self.lines, None)
        if line is None:
            raise EndOfInput()
        self.line = line.rstrip('\r\n') + type(self).NEWLINE
        self.index = 0

    def _nextchar(self):
        '''
        Return the next character, reading a new line when needed.

        Raises EndOfInput when there are no more lines.
        '''
        if self.index == len(self.line):
            self._readline()
        ch = self.line[self.index]
        self.index += 1
        self._unreadable = True
        return ch

    def _unread(self):
        '''
        Put the last character back. Only one character of pushback.
        '''
        assert self._unreadable, 'Cannot unread twice in a row'
        self._unreadable = False
        self.index -= 1

    def next_token(self):
        '''
        Scan and return the next Token.
        '''
        ch = self._nextchar()
        while self.isspace(ch):
            ch = self._nextchar()

        if self.isdigit(ch):
            lexeme = []
            while self.isdigit(ch):
                lexeme.append(ch)
                ch = self._nextchar()
            # At most one decimal point, no exponent, no sign
            if ch == type(self).DECIMAL_POINT:
                lexeme.append(ch)
                ch = self._nextchar()
                while self.isdigit(ch):
                    lexeme.append(ch)
                    ch = self._nextchar()
            self._unread()
            return Token(Kind.NUMBER, ''.join(lexeme))

        if self.isalphabetic(ch):
            lexeme = []
            while self.iswordchar(ch):
                lexeme.append(ch)
                ch = self._nextchar()
            self._unread()
            return Token(Kind.VARIABLE, ''.join(lexeme))

        return Token(type(self).SYMBOLS.get(ch, Kind.INVALID), ch)

    def tokens(self):
        '''
        Yield tokens until input runs out.
        '''
        try:
            while True:
                yield self.next_token()
        except EndOfInput:
            return

    def flush(self):
        '''
        Discard the rest of the current line, e.g., after an error.
        '''
        self.index = len(self.line)
