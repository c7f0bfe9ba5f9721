"""Wire helpers for the sender <-> receiver channel.

Messages are single-line UTF-8 JSON objects terminated by a newline. Inbound
messages are flat ``{"type": ..., **fields}`` objects.
"""

import json

from kivy.logger import Logger

from receiver.core.errors import DecodeError

RECEIVER_READY = "receiver_ready"


def send_json_message(sock, payload):
    """Send one JSON-encoded, newline-terminated message through the socket.

    Args:
        sock: Socket of the destination sender
        payload: Dictionary to encode

    Returns:
        True if the message was written, False on a socket error
    """
    try:
        sock.sendall((json.dumps(payload) + "\n").encode())
        return True
    except OSError as exc:
        Logger.warning(f"Protocol: error sending message: {exc}")
        return False


def parse_json_message(raw_string):
    """Parse a JSON message string.

    Args:
        raw_string: Raw string to parse

    Returns:
        Dictionary with parsed JSON, or None if parsing fails
    """
    try:
        return json.loads(raw_string)
    except (TypeError, ValueError):
        return None


def decode_event(raw_string):
    """Decode an inbound message into its payload dictionary.

    Raises:
        DecodeError: if the text is not a JSON object
    """
    parsed = parse_json_message(raw_string)
    if not isinstance(parsed, dict):
        preview = str(raw_string)[:80]
        raise DecodeError(f"not a JSON object: {preview!r}")
    return parsed


def split_lines(buffer):
    """Split complete newline-delimited messages off a receive buffer.

    Returns:
        Tuple of (messages, remaining_buffer); blank lines are skipped
    """
    messages = []
    while "\n" in buffer:
        message, buffer = buffer.split("\n", 1)
        message = message.strip()
        if message:
            messages.append(message)
    return messages, buffer
