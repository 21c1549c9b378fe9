'''
Line source tests
'''

from io import StringIO

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from deskcalc.console import InteractiveInput, PromptingInput
from deskcalc.evaluator import Evaluator
from deskcalc.lexer import Lexer


def test_prompting_input():
    out = StringIO()
    lines = iter(PromptingInput(StringIO('1\n2\n'), prompt='> ', output=out))
    assert out.getvalue() == ''
    assert next(lines) == '1\n'
    assert out.getvalue() == '> '
    assert next(lines) == '2\n'
    assert out.getvalue() == '> > '
    assert next(lines, None) is None
    assert out.getvalue() == '> > > '


def test_prompt_before_every_read():
    out = StringIO()
    source = PromptingInput(StringIO('3 4 + @\n5 # @\n'), output=out)
    Evaluator(Lexer(source), output=out).run()
    assert out.getvalue() == '\n'.join([
        '>> 7.0',
        '>> Bad token:',
        '5 # @',
        '  ^',
        'no value',
        '>> ',
        'Bye',
        '',
    ])


def test_interactive_input():
    with create_pipe_input() as pipe:
        pipe.send_text('3 4 + @\r')
        with create_app_session(input=pipe, output=DummyOutput()):
            lines = iter(InteractiveInput('>> '))
            assert next(lines) == '3 4 + @'
