import io

from dpqchat.display import (
    USER_COLORS,
    DisplayManager,
    safe_truncate,
    user_color,
    visible_length,
)
from dpqchat.messages import ChatMessage, MessageType


def _manager(width=80, height=24):
    stream = io.StringIO()
    return DisplayManager(width, height, stream), stream


def test_visible_length_plain_text():
    assert visible_length("hello") == len("hello")


def test_visible_length_ignores_escapes():
    assert visible_length("\x1b[31mred\x1b[0m") == visible_length("red")


def test_visible_length_wide_emoji_and_other_unicode():
    assert visible_length("💬") == 2
    assert visible_length("é") == 1


def test_safe_truncate_short_text_unchanged():
    assert safe_truncate("short", 10) == "short"


def test_safe_truncate_long_text_fits_and_marks():
    text = "x" * 50
    result = safe_truncate(text, 20)
    assert result.endswith("...")
    assert visible_length(result) <= 20
    assert result.startswith("xxx")


def test_safe_truncate_keeps_leading_escape():
    text = "\x1b[31m" + "y" * 40 + "\x1b[0m"
    result = safe_truncate(text, 10)
    assert result.startswith("\x1b[31m")
    assert result.endswith("...")


def test_user_color_stable_and_in_palette():
    assert user_color("alice") == user_color("alice")
    assert user_color("bob") in USER_COLORS


def test_header_without_peers():
    display, stream = _manager()
    display.draw_header("alice", 40000, [])
    out = stream.getvalue()
    assert "P2P DPQ Chat" in out
    assert "Waiting for peers..." in out
    assert "Listening: 40000" in out
    assert "╔" + "═" * (80 - 2) + "╗" in out


def test_header_with_peers_and_no_port():
    display, stream = _manager()
    display.draw_header("alice", None, ["bob", "carol"])
    out = stream.getvalue()
    assert "Connected: bob, carol" in out
    assert "Not listening" in out


def test_update_size_changes_border():
    display, stream = _manager(80, 24)
    display.update_size(40, 10)
    display.draw_header("a", None, [])
    assert "╔" + "═" * (40 - 2) + "╗" in stream.getvalue()


def test_format_user_message_contains_parts():
    display, _ = _manager()
    message = ChatMessage("12:00:00", "alice", "hello", MessageType.USER)
    text = display.format_message(message)
    assert "12:00:00" in text and "alice" in text and "hello" in text


def test_format_other_message_kinds():
    display, _ = _manager()
    system = display.format_message(ChatMessage("t", "System", "note", MessageType.SYSTEM))
    link = display.format_message(
        ChatMessage("t", "System", "up", MessageType.CONNECTION_INFO)
    )
    error = display.format_message(ChatMessage("t", "System", "bad", MessageType.ERROR))
    assert system.startswith("🔔 ")
    assert link.startswith("🔗 ")
    assert error.startswith("❌ ")


def test_chat_area_shows_only_newest():
    display, stream = _manager()
    messages = [
        ChatMessage("t", "System", content, MessageType.SYSTEM)
        for content in ("first-line", "second-line", "third-line")
    ]
    display.draw_chat_area(2, messages)
    out = stream.getvalue()
    assert "first-line" not in out
    assert "second-line" in out and "third-line" in out


def test_input_area_prompt():
    display, stream = _manager()
    display.draw_input_area("alice", 10)
    out = stream.getvalue()
    assert "alice@chat > " in out
    assert "╚" in out


def test_show_welcome_clears_screen():
    display, stream = _manager()
    display.show_welcome()
    out = stream.getvalue()
    assert out.startswith("\x1b[2J")
    assert "Welcome to secure chat!" in out