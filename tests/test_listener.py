from __future__ import annotations

import json
import socket
import threading

from receiver.core.listener import SenderListener


def _read_line(sock: socket.socket) -> str:
    data = b""
    while not data.endswith(b"\n"):
        chunk = sock.recv(1024)
        if not chunk:
            break
        data += chunk
    return data.decode()


def _serve(listener: SenderListener, server_side: socket.socket) -> threading.Thread:
    thread = threading.Thread(
        target=listener.handle_sender, args=(server_side, ("test", 0)), daemon=True)
    thread.start()
    return thread


def test_sender_gets_ready_ack_and_messages_arrive_whole() -> None:
    received = []
    attached = []
    detached = threading.Event()
    listener = SenderListener(
        on_message=received.append,
        on_attached=attached.append,
        on_all_detached=detached.set,
    )
    server_side, client = socket.socketpair()
    thread = _serve(listener, server_side)

    assert json.loads(_read_line(client)) == {"type": "receiver_ready"}

    # A message split mid-line and mid-character still arrives whole
    client.sendall(b'{"type": "end"}\n{"type": "lobby", "gameName": "Caf\xc3')
    client.sendall(b'\xa9"}\n\n')
    client.close()

    thread.join(timeout=5)
    assert not thread.is_alive()
    assert attached == ["sender-1"]
    assert received == ['{"type": "end"}', '{"type": "lobby", "gameName": "Café"}']
    assert detached.is_set()
    assert listener.sender_count == 0


def test_end_fires_only_after_the_last_sender() -> None:
    detached = []
    listener = SenderListener(on_message=lambda raw: None, on_all_detached=lambda: detached.append(True))
    a_server, a_client = socket.socketpair()
    b_server, b_client = socket.socketpair()

    a_thread = _serve(listener, a_server)
    _read_line(a_client)
    b_thread = _serve(listener, b_server)
    _read_line(b_client)
    assert listener.sender_count == 2

    a_client.close()
    a_thread.join(timeout=5)
    assert detached == []
    assert listener.sender_count == 1

    b_client.close()
    b_thread.join(timeout=5)
    assert detached == [True]
