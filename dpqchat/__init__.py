"""Terminal peer-to-peer chat toolkit: messages, chat screen, slash commands and menu."""

__version__ = "0.1.0"

__all__ = [
    "messages",
    "display",
    "prompt",
    "chatui",
    "commands",
    "menu",
]