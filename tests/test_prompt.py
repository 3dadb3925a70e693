import io

from dpqchat.prompt import InputHandler, prompt_visible_length


def test_prompt_visible_length_ascii():
    assert prompt_visible_length("abc") == len("abc")


def test_prompt_visible_length_chat_emoji_is_wide():
    assert prompt_visible_length("💬") == 2


def test_prompt_width_matches_prompt():
    handler = InputHandler("alice", io.StringIO())
    assert handler.prompt == "💬 alice@chat > "
    assert handler.prompt_width() == prompt_visible_length(handler.prompt)


def test_position_cursor_writes_move():
    stream = io.StringIO()
    handler = InputHandler("alice", stream)
    handler.position_cursor_for_input(10)
    out = stream.getvalue()
    assert out.startswith("\x1b[") and out.endswith("H")


def test_clear_input_area_returns_to_prompt():
    move_stream = io.StringIO()
    InputHandler("alice", move_stream).position_cursor_for_input(10)
    move = move_stream.getvalue()

    stream = io.StringIO()
    handler = InputHandler("alice", stream)
    handler.clear_input_area(10, 80)
    out = stream.getvalue()
    assert out.startswith(move) and out.endswith(move)
    blank = out[len(move):-len(move)]
    assert blank.strip() == ""
    assert len(blank) > 0


def test_clear_input_area_narrow_terminal_writes_no_blanks():
    move_stream = io.StringIO()
    InputHandler("bob", move_stream).position_cursor_for_input(3)
    move = move_stream.getvalue()

    stream = io.StringIO()
    InputHandler("bob", stream).clear_input_area(3, 0)
    assert stream.getvalue() == move + move


def test_cursor_row_depends_on_chat_height():
    first = io.StringIO()
    second = io.StringIO()
    InputHandler("x", first).position_cursor_for_input(5)
    InputHandler("x", second).position_cursor_for_input(6)
    assert first.getvalue() != second.getvalue()
    assert first.getvalue().split(";")[1] == second.getvalue().split(";")[1]