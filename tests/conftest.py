from io import StringIO

from pytest import Item, fixture

from deskcalc.evaluator import Evaluator
from deskcalc.lexer import Lexer


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, e.g., to audit operand order.

    Use with pytest -rP, and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def output():
    return StringIO()


@fixture
def calc(output):
    '''
    Return a factory of evaluators reading the given lines.
    '''
    def make(*lines, **kwargs):
        return Evaluator(Lexer(lines), output=output, **kwargs)
    return make
