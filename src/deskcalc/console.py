'''
Line sources for the Lexer.
'''

import sys

from prompt_toolkit import PromptSession


class InteractiveInput:
    '''
    Lines typed on a terminal, with line editing.
    '''
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # No persistent history
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class PromptingInput:
    '''
    Wrap input stream with a prompt before each line.

    The prompt is also written once more before discovering that the stream
    is exhausted, like a terminal would.
    '''
    def __init__(self, stream=None, prompt='>> ', output=None):
        self.stream = stream or sys.stdin
        self.prompt = prompt
        self.output = output or sys.stdout

    def _show_prompt(self):
        print(self.prompt, end='', flush=True, file=self.output)

    def __iter__(self):
        self._show_prompt()
        for line in self.stream:
            yield line
            self._show_prompt()
