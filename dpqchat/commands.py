"""Slash commands typed into the chat input line."""

from __future__ import annotations

import time
from typing import Mapping, Tuple

from dpqchat.chatui import ChatUI
from dpqchat.display import CLEAR_SCREEN, move_to
from dpqchat.messages import MessageType

Address = Tuple[str, int]

SYSTEM = "System"
QUIT_DELAY = 0.5

HELP_LINES = (
    "📖 Available Commands:",
    "/help     - Show this help message",
    "/peers    - List connected peers",
    "/stats    - Show detailed peer statistics",
    "/clear    - Clear chat display",
    "/quit     - Exit the chat",
    "",
    "💡 Tips:",
    "• Just type your message and press Enter to send",
    "• Messages are sent to all connected peers",
    "• Use Ctrl+C to force quit anytime",
)

_HEAVY_RULE = "━" * 77
_LIGHT_RULE = "─" * 77


def format_address(address: Address) -> str:
    """Render a (host, port) pair the way socket addresses are usually shown."""
    host, port = address
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _system(chat_ui: ChatUI, text: str, kind: MessageType = MessageType.SYSTEM) -> None:
    chat_ui.add_message(SYSTEM, text, kind)


def show_help(chat_ui: ChatUI) -> None:
    """List the available commands in the chat area."""
    for line in HELP_LINES:
        _system(chat_ui, line)


def show_peers(
    chat_ui: ChatUI,
    connected_peers: Mapping[str, str],
    peer_addresses: Mapping[str, Address],
) -> None:
    """List connected peers with their addresses where known."""
    if not connected_peers:
        _system(chat_ui, "👥 No peers currently connected")
        return
    _system(chat_ui, f"👥 Connected Peers ({len(connected_peers)}):")
    for peer_id, username in connected_peers.items():
        address = peer_addresses.get(peer_id)
        suffix = f" ({format_address(address)})" if address is not None else ""
        _system(chat_ui, f"  • {username}{suffix}")


def show_stats(
    chat_ui: ChatUI,
    connected_peers: Mapping[str, str],
    peer_addresses: Mapping[str, Address],
) -> None:
    """Show a detailed block for every connected peer."""
    if not connected_peers:
        _system(chat_ui, "📊 No peers currently connected")
        return

    info = MessageType.CONNECTION_INFO
    _system(chat_ui, "📊 Detailed Peer Statistics:")
    _system(chat_ui, _HEAVY_RULE)
    for peer_id, username in connected_peers.items():
        _system(chat_ui, f"🔗 Peer ID: {peer_id[:8]}", info)
        _system(chat_ui, f"👤 Username: {username}", info)
        address = peer_addresses.get(peer_id)
        if address is not None:
            host, port = address
            _system(chat_ui, f"🌐 Host: {host}", info)
            _system(chat_ui, f"🔌 Port: {port}", info)
            _system(chat_ui, f"📍 Full Address: {format_address(address)}", info)
        else:
            _system(chat_ui, "❓ Address: Unknown")
        _system(chat_ui, _LIGHT_RULE)
    _system(chat_ui, f"📈 Total Connected Peers: {len(connected_peers)}")


def _quit(chat_ui: ChatUI, is_owner: bool) -> None:
    if is_owner:
        _system(chat_ui, "👋 Owner disconnecting. Goodbye!")
    else:
        _system(chat_ui, "👋 Goodbye! Exiting program...")
    time.sleep(QUIT_DELAY)
    chat_ui.stream.write(CLEAR_SCREEN + move_to(0, 0))
    chat_ui.stream.flush()
    raise SystemExit(0)


def handle_command(
    command: str,
    chat_ui: ChatUI,
    connected_peers: Mapping[str, str],
    peer_addresses: Mapping[str, Address],
    is_owner: bool,
) -> bool:
    """Run one slash command; returns True to keep the chat running.

    ``/quit`` and ``/exit`` clear the screen and raise ``SystemExit(0)``.
    """
    parts = command.split()
    if not parts:
        return True
    name = parts[0]
    if name == "/help":
        show_help(chat_ui)
    elif name in ("/quit", "/exit"):
        _quit(chat_ui, is_owner)
    elif name == "/peers":
        show_peers(chat_ui, connected_peers, peer_addresses)
    elif name == "/clear":
        chat_ui.clear_chat()
    elif name == "/stats":
        show_stats(chat_ui, connected_peers, peer_addresses)
    else:
        _system(
            chat_ui,
            f"❓ Unknown command: {name}. Type /help for available commands.",
        )
    return True