"""The full-screen chat interface tying display, input and messages together."""

from __future__ import annotations

import shutil
import sys
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from dpqchat.display import CLEAR_SCREEN, DisplayManager, move_to
from dpqchat.messages import ChatMessage, MessageManager, MessageType
from dpqchat.prompt import InputHandler

SizeProbe = Callable[[], Tuple[int, int]]

_RESERVED_ROWS = 8


def _terminal_size() -> Tuple[int, int]:
    size = shutil.get_terminal_size()
    return size.columns, size.lines


class ChatUI:
    """Coordinates drawing of the chat screen and its message buffer."""

    def __init__(
        self,
        username: str,
        listen_port: Optional[int] = None,
        max_messages: int = 100,
        stream: Optional[TextIO] = None,
        size: Optional[SizeProbe] = None,
    ) -> None:
        self.username = username
        self.listen_port = listen_port
        self.stream = stream if stream is not None else sys.stdout
        self._size = size if size is not None else _terminal_size
        width, height = self._size()
        self.terminal_width = width
        self.terminal_height = height
        self.chat_area_height = max(height - _RESERVED_ROWS, 0)
        self.connected_peers: List[str] = []
        self.display = DisplayManager(width, height, self.stream)
        self.input_handler = InputHandler(username, self.stream)
        self.message_manager = MessageManager(max_messages)

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        """Messages currently held for display."""
        return self.message_manager.messages

    def _draw(self) -> None:
        self.display.draw_header(self.username, self.listen_port, self.connected_peers)
        self.display.draw_chat_area(self.chat_area_height, self.message_manager.messages)
        self.display.draw_input_area(self.username, self.chat_area_height)

    def initialize(self) -> None:
        """Clear the screen and draw the whole interface."""
        self.stream.write(CLEAR_SCREEN + move_to(0, 0))
        self.stream.flush()
        self._draw()

    def add_message(
        self, sender: str, content: str, message_type: MessageType
    ) -> ChatMessage:
        """Store a message, redraw and return the cursor to the input line."""
        message = self.message_manager.add_message(sender, content, message_type)
        self.refresh_display()
        self.position_cursor_for_input()
        return message

    def update_connected_peers(self, peers: Sequence[str]) -> None:
        """Replace the peer list and redraw the header."""
        self.connected_peers = list(peers)
        self.display.draw_header(self.username, self.listen_port, self.connected_peers)

    def refresh_display(self) -> None:
        """Pick up any terminal resize and redraw everything."""
        try:
            width, height = self._size()
        except OSError:
            pass
        else:
            self.terminal_width = width
            self.terminal_height = height
            self.chat_area_height = max(height - _RESERVED_ROWS, 0)
            self.display.update_size(width, height)
        self._draw()

    def position_cursor_for_input(self) -> None:
        """Move the cursor to the input position."""
        self.input_handler.position_cursor_for_input(self.chat_area_height)

    def clear_input_area(self) -> None:
        """Wipe the typed input after it has been handled."""
        self.input_handler.clear_input_area(self.chat_area_height, self.terminal_width)

    def clear_chat(self) -> None:
        """Drop all messages and redraw an empty chat area."""
        self.message_manager.clear()
        self.refresh_display()
        self.position_cursor_for_input()

    def show_welcome(self) -> None:
        """Show the welcome banner."""
        self.display.show_welcome()