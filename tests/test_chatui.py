import io

from dpqchat.chatui import ChatUI
from dpqchat.messages import MessageType


def _ui(width=80, height=24, max_messages=100):
    stream = io.StringIO()
    size = [width, height]
    ui = ChatUI("alice", 40000, max_messages, stream, lambda: tuple(size))
    return ui, stream, size


def test_chat_area_height_reserves_rows():
    ui, _, _ = _ui(80, 24)
    assert ui.chat_area_height == 24 - 8
    small, _, _ = _ui(80, 5)
    assert small.chat_area_height == 0


def test_initialize_clears_and_draws():
    ui, stream, _ = _ui()
    ui.initialize()
    out = stream.getvalue()
    assert out.startswith("\x1b[2J")
    assert "P2P DPQ Chat" in out
    assert "alice@chat > " in out


def test_add_message_stores_and_draws():
    ui, stream, _ = _ui()
    message = ui.add_message("bob", "hello world", MessageType.USER)
    assert ui.messages[-1] == message
    assert "hello world" in stream.getvalue()


def test_max_messages_respected():
    ui, _, _ = _ui(max_messages=2)
    for text in ("a1", "a2", "a3"):
        ui.add_message("System", text, MessageType.SYSTEM)
    assert [m.content for m in ui.messages] == ["a2", "a3"]


def test_clear_chat_empties_messages():
    ui, _, _ = _ui()
    ui.add_message("System", "note", MessageType.SYSTEM)
    ui.clear_chat()
    assert ui.messages == ()


def test_update_connected_peers():
    ui, stream, _ = _ui()
    ui.update_connected_peers(["bob", "carol"])
    assert ui.connected_peers == ["bob", "carol"]
    assert "Connected: bob, carol" in stream.getvalue()


def test_refresh_picks_up_resize():
    ui, _, size = _ui(80, 24)
    size[0], size[1] = 100, 30
    ui.refresh_display()
    assert ui.terminal_width == 100
    assert ui.chat_area_height == 30 - 8
    assert ui.display.width == 100


def test_refresh_keeps_size_when_probe_fails():
    calls = []

    def probe():
        calls.append(1)
        if len(calls) > 1:
            raise OSError("no terminal")
        return (80, 24)

    ui = ChatUI("alice", None, 10, io.StringIO(), probe)
    ui.refresh_display()
    assert ui.terminal_width == 80
    assert ui.chat_area_height == 24 - 8


def test_clear_input_area_ends_at_input_cursor():
    ui, stream, _ = _ui()
    ui.position_cursor_for_input()
    move = stream.getvalue()
    stream.seek(0)
    stream.truncate()
    ui.clear_input_area()
    assert stream.getvalue().endswith(move)


def test_show_welcome():
    ui, stream, _ = _ui()
    ui.show_welcome()
    assert "Welcome to secure chat!" in stream.getvalue()