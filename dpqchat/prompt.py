"""Cursor placement for the chat input line."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from dpqchat.display import move_to


def prompt_visible_length(prompt: str) -> int:
    """Display width of the prompt, counting the chat emoji as two columns."""
    return sum(2 if ch == "💬" else 1 for ch in prompt)


class InputHandler:
    """Places the cursor after the prompt and wipes typed input."""

    def __init__(self, username: str, stream: Optional[TextIO] = None) -> None:
        self.username = username
        self.stream = stream if stream is not None else sys.stdout

    @property
    def prompt(self) -> str:
        """The prompt text shown before user input."""
        return f"💬 {self.username}@chat > "

    def prompt_width(self) -> int:
        """Display width of the prompt."""
        return prompt_visible_length(self.prompt)

    def _cursor(self, chat_area_height: int) -> str:
        return move_to(2 + self.prompt_width(), 4 + chat_area_height + 1)

    def position_cursor_for_input(self, chat_area_height: int) -> None:
        """Move the cursor to where typed input begins."""
        self.stream.write(self._cursor(chat_area_height))
        self.stream.flush()

    def clear_input_area(self, chat_area_height: int, terminal_width: int) -> None:
        """Blank everything after the prompt and return the cursor there."""
        start = 2 + self.prompt_width()
        cursor = self._cursor(chat_area_height)
        blank = " " * max(terminal_width - (start + 2), 0)
        self.stream.write(f"{cursor}{blank}{cursor}")
        self.stream.flush()