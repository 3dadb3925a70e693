# dpqchat

Building blocks for a terminal peer-to-peer chat client:

- **Messages**: timestamped chat lines kept in a bounded buffer, and a bounded
  history of lines the user has sent.
- **Chat screen**: a framed terminal layout with a header, a scrolling message
  area and an input prompt, drawn with ANSI escape sequences onto any text
  stream.
- **Slash commands**: `/help`, `/peers`, `/stats`, `/clear` and `/quit`
  (or `/exit`), as typed into the chat input line.
- **Menu**: a keyboard-driven full-screen main menu navigated with the arrow keys.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Messages

```python
from dpqchat.messages import MessageManager, MessageHistory, MessageType

manager = MessageManager(100)
message = manager.add_message("bob", "hello", MessageType.USER)
print(message.timestamp)   # local time as HH:MM:SS
print(manager.messages)    # tuple of ChatMessage, oldest first
manager.clear()

history = MessageHistory(100)
history.add_message("alice: hi")
print(len(history))
```

`MessageType` has the members `USER`, `SYSTEM`, `CONNECTION_INFO` and `ERROR`.
Both `MessageManager` and `MessageHistory` keep at most their configured number
of entries and drop the oldest first.

## Chat screen

```python
import io
from dpqchat.chatui import ChatUI
from dpqchat.messages import MessageType

stream = io.StringIO()
ui = ChatUI("alice", 40000, 100, stream, lambda: (80, 24))
ui.initialize()
ui.add_message("bob", "hello", MessageType.USER)
ui.update_connected_peers(["bob"])
ui.clear_chat()
```

`ChatUI` takes the username, the listening port (or `None`), the message limit,
the stream to draw on (standard output by default) and a callable returning the
terminal size as `(columns, rows)` (the current terminal size by default). Eight
rows are reserved for the header and input box; the rest show the newest
messages. Every `add_message` redraws the screen and returns the cursor to the
input line.

The lower-level pieces can be used directly:

- `dpqchat.display`: `DisplayManager` draws the header, chat area, input box and
  welcome banner; `visible_length` measures a string's display width, skipping
  ANSI escapes and counting a set of emoji as two columns; `safe_truncate`
  shortens a string while keeping escape sequences intact; `user_color` picks a
  stable colour code for a username; `move_to` builds a cursor-positioning
  escape.
- `dpqchat.prompt`: `InputHandler` places the cursor after the
  `💬 <username>@chat > ` prompt and blanks typed input;
  `prompt_visible_length` measures the prompt.

## Slash commands

```python
from dpqchat.commands import handle_command

connected_peers = {"4f2a9c1e-peer": "bob"}
peer_addresses = {"4f2a9c1e-peer": ("192.0.2.10", 40000)}
handle_command("/peers", ui, connected_peers, peer_addresses, is_owner=True)
```

`connected_peers` maps a peer id to a username and `peer_addresses` maps a peer
id to a `(host, port)` pair. `handle_command` writes its output into the chat as
system messages and returns `True`. `/stats` shows, for each peer, the first
eight characters of its id, its username and its address. `/quit` and `/exit`
print a goodbye, clear the screen and raise `SystemExit(0)`. Any other command
gets an "Unknown command" notice. `show_help`, `show_peers`, `show_stats` and
`format_address` are available on their own as well.

## Menu

```python
from dpqchat.menu import MainMenu

menu = MainMenu(None)   # the default four items
choice = menu.show()    # id of the chosen item, or None on Esc / Ctrl+C
```

`show` runs full screen using `blessed`. Selection wraps around at both ends;
items built with `MenuItem.coming_soon` can be highlighted but not chosen.
`MainMenu.render(width, height)` returns the menu's plain-text lines without a
terminal, and `action_for_key` maps key names such as `"KEY_UP"` to a
`MenuAction`.

## What this package does not do

It has no networking: it does not listen for, discover or connect to peers, and
does not send or receive messages. It does not create, store or verify
cryptographic identities, and it installs no command-line program. It provides
the screen, message buffers, commands and menu that such a client would drive.