'''
Desk calculator.

Reads postfix (RPN) expressions, one per line, ending in ``@``:

    >> 3 4 + @
    7.0
    >> x = 2 10 / @
    5.0
    >> x ~ @
    -5.0

The result of each line is stored in ``it``, or in whichever variable was
last assigned to with ``name = ...``. Variables never assigned read as 0.

Note the operand order: the top of the stack is the left operand, so
``2 3 -`` is 1.
'''

from .cli import CLI
from .evaluator import Evaluator, TERMINATE
from .lexer import Lexer, Kind, Token


__all__ = 'Evaluator', 'Lexer', 'Kind', 'Token', 'CLI', 'TERMINATE'
