"""Line-based terminal I/O shared by the screens."""

import sys
from typing import Callable, TextIO


class Console:
    """Prompts for input and shows output.

    Input and output are injectable so screens can be driven without a
    terminal.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func
        self._output = output

    def ask(self, prompt: str) -> str | None:
        """Read one line; None once input is exhausted."""
        try:
            return (self._input or input)(prompt)
        except EOFError:
            return None

    def show(self, text: str = "") -> None:
        print(text, file=self._output or sys.stdout)
