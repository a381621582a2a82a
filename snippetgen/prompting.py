"""
# Snippet-Generator: prompting.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Prompting primitives.

Two protocols are offered to the generation core:
- `ask(prompt, default)`, which renders `«prompt» [«default»]: ` and returns the answer,
  an empty answer accepting «default»;
- `read_multiline_body(instruction)`, which collects raw lines
  until a line consisting of the terminator `.`.
In both, end of input raises `PromptCancelledException`.
"""

import sys
import time
from typing import Optional, TextIO

from snippetgen.constants import MULTILINE_BODY_TERMINATOR
from snippetgen.exceptions import PromptCancelledException


class Prompter:
    """
    Object reading answers from an input stream and writing prompts to an output stream.
    """
    _input_stream: TextIO
    _output_stream: TextIO

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self._input_stream = sys.stdin if input_stream is None else input_stream
        self._output_stream = sys.stdout if output_stream is None else output_stream

    @property
    def output_stream(self) -> TextIO:
        return self._output_stream

    def say(self, message: str = ''):
        self._output_stream.write(f'{message}\n')
        self._output_stream.flush()

    def read_line(self, prompt: str) -> str:
        """
        Write a prompt and read one line (without its line terminator).
        """
        self._output_stream.write(prompt)
        self._output_stream.flush()

        line = self._input_stream.readline()
        if line == '':
            raise PromptCancelledException('end of input received during prompt')

        return line.rstrip('\r\n')

    def prompt_optional(self, prompt: str) -> Optional[str]:
        line = self.read_line(prompt)
        if line == '':
            return None

        return line

    def ask(self, prompt: str, default: str) -> str:
        answer = self.prompt_optional(f'{prompt} [{default}]: ')
        if answer is None:
            return default

        return answer

    def confirm(self, prompt: str, default: str = 'n') -> bool:
        return self.ask(f'{prompt} (y/n)', default) in ('y', 'Y')

    def read_multiline_body(self,
                            instruction: str = f"Enter lines, finish with a single '{MULTILINE_BODY_TERMINATOR}' "
                                               f"on its own line:",
                            ) -> list[str]:
        self.say(instruction)

        lines: list[str] = []
        while True:
            line = self.read_line('> ')
            if line == MULTILINE_BODY_TERMINATOR:
                break
            lines.append(line)

        return lines


class PacedStream:
    """
    Output stream decorator writing one character at a time with a fixed delay.

    Pacing is presentation only; wrapping a stream changes nothing about what is written.
    """
    _stream: TextIO
    _delay_seconds: float

    def __init__(self, stream: TextIO, delay_milliseconds: float):
        self._stream = stream
        self._delay_seconds = max(delay_milliseconds, 0) / 1000

    def write(self, string: str) -> int:
        if self._delay_seconds == 0:
            return self._stream.write(string)

        for character in string:
            self._stream.write(character)
            self._stream.flush()
            time.sleep(self._delay_seconds)

        return len(string)

    def flush(self):
        self._stream.flush()
