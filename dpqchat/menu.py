"""Keyboard-driven main menu drawn full screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class MenuItem:
    """One entry of the menu."""

    id: int
    title: str
    description: str
    available: bool = True

    @classmethod
    def enabled(cls, item_id: int, title: str, description: str) -> "MenuItem":
        """An item the user can choose."""
        return cls(item_id, title, description, True)

    @classmethod
    def coming_soon(cls, item_id: int, title: str, description: str) -> "MenuItem":
        """A disabled item shown as coming soon."""
        return cls(item_id, title, description, False)


class MenuAction(enum.Enum):
    """What a key press asks the menu to do."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SELECT = "select"
    EXIT = "exit"
    NONE = "none"


_KEY_ACTIONS = {
    "KEY_UP": MenuAction.MOVE_UP,
    "KEY_DOWN": MenuAction.MOVE_DOWN,
    "KEY_ENTER": MenuAction.SELECT,
    "KEY_ESCAPE": MenuAction.EXIT,
}
_CTRL_C = "\x03"

TITLE = "🚀 DPQ Chat Client"
SUBTITLE = "Main Menu"
INSTRUCTIONS = "Use ↑/↓ arrows to navigate, Enter to select, Esc/Ctrl+C to exit"
FOOTER = "DPQ Chat v0.1.0"
COMING_SOON_TAG = " [Coming Soon]"


def default_items() -> List[MenuItem]:
    """The standard entries of the main menu."""
    return [
        MenuItem.enabled(1, "Create P2P Chat", "Start a new peer-to-peer chat session"),
        MenuItem.coming_soon(2, "Join Chat Room", "Join an existing chat room (Coming Soon)"),
        MenuItem.coming_soon(3, "Settings", "Configure application settings (Coming Soon)"),
        MenuItem.enabled(4, "Exit", "Exit the application"),
    ]


class MainMenu:
    """A list of items with a wrapping selection cursor."""

    def __init__(self, items: Optional[Iterable[MenuItem]] = None) -> None:
        self.items: List[MenuItem] = list(items) if items is not None else default_items()
        if not self.items:
            raise ValueError("a menu needs at least one item")
        self.selected_index = 0

    @property
    def selected(self) -> MenuItem:
        """The item under the cursor."""
        return self.items[self.selected_index]

    def move_up(self) -> None:
        """Move the cursor up, wrapping to the last item."""
        self.selected_index = (self.selected_index - 1) % len(self.items)

    def move_down(self) -> None:
        """Move the cursor down, wrapping to the first item."""
        self.selected_index = (self.selected_index + 1) % len(self.items)

    def action_for_key(self, key: object) -> MenuAction:
        """Map a key (a keystroke or its name) to a menu action."""
        name = getattr(key, "name", None) or str(key)
        if name in _KEY_ACTIONS:
            return _KEY_ACTIONS[name]
        if str(key) == _CTRL_C:
            return MenuAction.EXIT
        return MenuAction.NONE

    def select(self) -> Optional[int]:
        """Id of the selected item, or None when it is not available."""
        item = self.selected
        return item.id if item.available else None

    def _layout(self, width: int, height: int) -> List[Tuple[str, str]]:
        content_width = min(70, max(width - 4, 0))
        padding = max(width - content_width, 0) // 2
        inner = max(content_width - 2, 0)
        total_lines = 8 + len(self.items) * 2 + 2
        lines: List[Tuple[str, str]] = [("", "plain")] * (max(height - total_lines, 0) // 2)

        def boxed(text: str) -> str:
            left = max(inner - len(text), 0) // 2
            right = max(inner - left - len(text), 0)
            return f"{' ' * padding}║{' ' * left}{text}{' ' * right}║"

        lines.append((f"{' ' * padding}╔{'═' * inner}╗", "header"))
        lines.append((boxed(TITLE), "header"))
        lines.append((boxed(SUBTITLE), "header"))
        lines.append((f"{' ' * padding}╚{'═' * inner}╝", "header"))
        lines.append(("", "plain"))

        indent = max(content_width - len(INSTRUCTIONS), 0) // 2
        lines.append((" " * (padding + indent) + INSTRUCTIONS, "instructions"))
        lines.append(("", "plain"))

        for index, item in enumerate(self.items):
            is_selected = index == self.selected_index
            prefix = "► " if is_selected else "  "
            tag = "" if item.available else COMING_SOON_TAG
            text = f"{prefix}{item.id}. {item.title}{tag}"
            indent = max(content_width - len(text), 0) // 2
            if is_selected:
                style = "selected"
            elif not item.available:
                style = "disabled"
            else:
                style = "item"
            lines.append((" " * (padding + indent) + text, style))
            if is_selected:
                indent = max(content_width - (len(item.description) + 4), 0) // 2
                lines.append(
                    (" " * (padding + indent) + "    " + item.description, "description")
                )
            lines.append(("", "plain"))

        lines.append(("", "plain"))
        lines.append((" " * padding + "━" * content_width, "footer"))
        indent = max(content_width - len(FOOTER), 0) // 2
        lines.append((" " * (padding + indent) + FOOTER, "footer"))
        return lines

    def render(self, width: int, height: int) -> List[str]:
        """The menu's plain-text lines for a terminal of the given size."""
        return [line for line, _ in self._layout(width, height)]

    def _styled(self, term, width: int, height: int) -> Sequence[str]:
        styles = {
            "header": term.cyan,
            "instructions": term.yellow,
            "selected": term.green,
            "disabled": term.bright_black,
            "item": term.white,
            "description": term.cyan,
            "footer": term.bright_black,
        }
        return [
            styles[style](line) if style in styles and line else line
            for line, style in self._layout(width, height)
        ]

    def show(self) -> Optional[int]:
        """Run the menu full screen; return the chosen id, or None if cancelled."""
        from blessed import Terminal

        term = Terminal()
        with term.fullscreen(), term.raw(), term.hidden_cursor():
            while True:
                body = "\r\n".join(self._styled(term, term.width, term.height))
                print(term.home + term.clear + body, end="", flush=True)
                action = self.action_for_key(term.inkey())
                if action is MenuAction.MOVE_UP:
                    self.move_up()
                elif action is MenuAction.MOVE_DOWN:
                    self.move_down()
                elif action is MenuAction.SELECT:
                    chosen = self.select()
                    if chosen is not None:
                        return chosen
                elif action is MenuAction.EXIT:
                    return None