"""Terminal drawing of the chat header, message area and input box."""

from __future__ import annotations

import sys
import zlib
from typing import Iterable, Optional, Sequence, TextIO

from dpqchat.messages import ChatMessage, MessageType

ESC = "\x1b"
RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J"

_WIDE = frozenset("💬🔔🔗❌👤🔍🚀💡👥📜👋🔌")

_BRIGHT_CYAN = "96"
_BRIGHT_GREEN = "92"
_BRIGHT_YELLOW = "93"
_BRIGHT_RED = "91"
_WHITE = "37"
_BOLD = "1"
_DIM = "2"

USER_COLORS = ("94", "92", "95", "96", "33", "91")

_WELCOME = (
    "╔══════════════════════════════════════════════════════════════╗",
    "║                    💬 P2P DPQ Chat                          ║",
    "║                   Welcome to secure chat!                    ║",
    "║                  🔒 Encrypted • 🌐 Peer-to-Peer              ║",
    "╚══════════════════════════════════════════════════════════════╝",
)


def _style(text: str, *codes: str) -> str:
    return f"\x1b[{';'.join(codes)}m{text}{RESET}"


def move_to(column: int, row: int) -> str:
    """Escape sequence placing the cursor at a zero-based column and row."""
    return f"\x1b[{row + 1};{column + 1}H"


def _move_to_column(column: int) -> str:
    return f"\x1b[{column + 1}G"


def visible_length(text: str) -> int:
    """Display width of ``text``, skipping ANSI escapes and widening known emoji."""
    length = 0
    in_escape = False
    for ch in text:
        if ch == ESC:
            in_escape = True
        elif in_escape:
            if ch.isascii() and ch.isalpha():
                in_escape = False
        else:
            length += 2 if ch in _WIDE else 1
    return length


def safe_truncate(text: str, max_width: int) -> str:
    """Shorten ``text`` to about ``max_width`` columns, keeping escapes intact."""
    if visible_length(text) <= max_width:
        return text
    limit = max(max_width - 3, 0)
    out = []
    count = 0
    in_escape = False
    for ch in text:
        if ch == ESC:
            out.append(ch)
            in_escape = True
        elif in_escape:
            out.append(ch)
            if ch.isascii() and ch.isalpha():
                in_escape = False
        else:
            if count >= limit:
                out.append("...")
                break
            out.append(ch)
            count += 1
    return "".join(out)


def user_color(username: str) -> str:
    """A stable SGR colour code chosen from the username."""
    return USER_COLORS[zlib.crc32(username.encode("utf-8")) % len(USER_COLORS)]


class DisplayManager:
    """Draws the chat screen onto a text stream."""

    def __init__(self, width: int, height: int, stream: Optional[TextIO] = None) -> None:
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else sys.stdout

    def update_size(self, width: int, height: int) -> None:
        """Record a new terminal size."""
        self.width = width
        self.height = height

    def _emit(self, parts: Iterable[str]) -> None:
        self.stream.write("".join(parts))
        self.stream.flush()

    def _content_width(self) -> int:
        return max(self.width - 4, 0)

    def _centered_line(self, text: str) -> str:
        content_width = self._content_width()
        visible = visible_length(text)
        left = max(content_width - visible, 0) // 2
        right = max(content_width - left - visible, 0)
        return f"║ {' ' * left}{text}{' ' * right} ║"

    def draw_header(
        self, username: str, listen_port: Optional[int], connected_peers: Sequence[str]
    ) -> None:
        """Draw the framed title and connection status lines."""
        border = "═" * max(self.width - 2, 0)
        if listen_port is not None:
            listen_info = f"🔊 Listening: {listen_port}"
        else:
            listen_info = "🔊 Not listening"
        if connected_peers:
            peer_status = f"🔗 Connected: {', '.join(connected_peers)}"
        else:
            peer_status = "⏳ Waiting for peers..."
        user_info = f"👤 {username} | {listen_info} | {peer_status}"
        self._emit(
            [
                move_to(0, 0),
                _style(f"╔{border}╗", _BRIGHT_CYAN),
                move_to(0, 1),
                self._centered_line("💬 P2P DPQ Chat"),
                move_to(0, 2),
                self._centered_line(user_info),
                move_to(0, 3),
                _style(f"╠{border}╣", _BRIGHT_CYAN),
            ]
        )

    def format_message(self, message: ChatMessage) -> str:
        """The styled text of one chat line."""
        kind = message.message_type
        if kind is MessageType.USER:
            sender = _style(message.sender, _BOLD, user_color(message.sender))
            return (
                f"[{_style(message.timestamp, _DIM)}] {sender}: "
                f"{_style(message.content, _WHITE)}"
            )
        if kind is MessageType.SYSTEM:
            return f"🔔 {_style(message.content, _BRIGHT_YELLOW)}"
        if kind is MessageType.CONNECTION_INFO:
            return f"🔗 {_style(message.content, _BRIGHT_GREEN)}"
        return f"❌ {_style(message.content, _BRIGHT_RED)}"

    def _message_line(self, row: int, message: ChatMessage) -> str:
        content_width = self._content_width()
        text = safe_truncate(self.format_message(message), content_width)
        padding = " " * max(content_width - visible_length(text), 0)
        return f"{move_to(2, row)}{text}{padding}"

    def draw_chat_area(self, chat_area_height: int, messages: Sequence[ChatMessage]) -> None:
        """Blank the message rows and draw the newest messages that fit."""
        edge = _style("║", _BRIGHT_CYAN)
        blank = " " * self._content_width()
        right = max(self.width - 1, 0)
        parts = []
        for row in range(4, 4 + chat_area_height):
            parts.extend(
                [move_to(0, row), edge, move_to(2, row), blank, _move_to_column(right), edge]
            )
        shown = list(messages)[-chat_area_height:] if chat_area_height > 0 else []
        for offset, message in enumerate(shown):
            parts.append(self._message_line(4 + offset, message))
        self._emit(parts)

    def draw_input_area(self, username: str, chat_area_height: int) -> None:
        """Draw the prompt line framed below the message area."""
        row = 4 + chat_area_height
        border = "═" * max(self.width - 2, 0)
        prompt = f"💬 {username}@chat > "
        padding = " " * max(self._content_width() - visible_length(prompt), 0)
        edge = _style("║", _BRIGHT_CYAN)
        self._emit(
            [
                move_to(0, row),
                _style(f"╠{border}╣", _BRIGHT_CYAN),
                move_to(0, row + 1),
                edge,
                move_to(2, row + 1),
                _style(prompt, _BOLD, _BRIGHT_GREEN),
                padding,
                _move_to_column(max(self.width - 1, 0)),
                edge,
                move_to(0, row + 2),
                _style(f"╚{border}╝", _BRIGHT_CYAN),
            ]
        )

    def show_welcome(self) -> None:
        """Clear the screen and print the welcome banner."""
        lines = [CLEAR_SCREEN, move_to(0, 0), "\n"]
        lines.extend(f"{_style(line, _BRIGHT_CYAN)}\n" for line in _WELCOME)
        lines.append("\n")
        self._emit(lines)