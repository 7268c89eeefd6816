# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# PROMPT SOURCES
# -----------------------------------------------------------------------------
# Responsibility: Where answers to the installer's questions come from.
#
# - TerminalPrompt: reads from the controlling terminal (/dev/tty), never
#   from stdin. `curl ... | python -` leaves stdin pointing at the script,
#   but /dev/tty still reaches the user.
# - FixedPrompt: returns a preset answer (or each question's default) for
#   unattended runs.
#
# The choice and decision stages depend only on the PromptSource protocol.
# -----------------------------------------------------------------------------

from typing import Protocol, TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from pkgwright.domain.errors import ConfigurationError

DEFAULT_TTY = "/dev/tty"


class PromptSource(Protocol):
    """Anything that can show text to the user and collect one-line answers."""

    def show(self, message: str) -> None:
        ...

    def ask(self, question: str, default: str) -> str:
        ...


class FixedPrompt:
    """
    Non-interactive prompt source.

    Every question is answered with `answer`; when `answer` is None the
    question's own default is used instead.
    """

    def __init__(self, answer: str | None = None) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def show(self, message: str) -> None:
        pass

    def ask(self, question: str, default: str) -> str:
        self.questions.append(question)
        return default if self.answer is None else self.answer


class TerminalPrompt:
    """
    Interactive prompt source bound to the controlling terminal.

    The terminal is opened lazily on first use, so a run that never asks
    anything never needs a terminal.
    """

    def __init__(self, tty_path: str = DEFAULT_TTY) -> None:
        self._tty_path = tty_path
        self._stream: TextIO | None = None
        self._console: Console | None = None

    def _open(self) -> Console:
        if self._console is None:
            try:
                self._stream = open(self._tty_path, "r+", encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(
                    f"Cannot open controlling terminal {self._tty_path}: {e}. "
                    "Set PKGWRIGHT_VARIANT and PKGWRIGHT_ASSUME to run unattended."
                )
            self._console = Console(file=self._stream, force_terminal=True)
        return self._console

    def show(self, message: str) -> None:
        self._open().print(Text(message))

    def ask(self, question: str, default: str) -> str:
        console = self._open()
        answer = Prompt.ask(
            Text(question),
            console=console,
            default=default,
            show_default=False,
            stream=self._stream,
        )
        return answer.strip() or default

    def close(self) -> None:
        """Release the terminal handle, if one was opened."""
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._console = None

    def __enter__(self) -> "TerminalPrompt":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
