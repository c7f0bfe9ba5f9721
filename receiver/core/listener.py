"""TCP listener for sender apps.

Each connected sender gets its own reader thread. Readers never touch
screen state: every complete line is handed to ``on_message``, which the
app forwards to the display thread with ``Clock.schedule_once``.
"""

import codecs
import socket
import threading

from kivy.logger import Logger

from receiver.config import (
    PREFERRED_PORT,
    RECEIVER_HOST,
    RECEIVER_PORT_AUTO_FALLBACK,
    find_available_port,
)
from receiver.core.protocol import RECEIVER_READY, send_json_message, split_lines


class SenderListener:
    """Accepts sender connections and tracks who is attached.

    Args:
        on_message: Called with each raw message line
        on_attached: Called with the sender id after the ready acknowledgment
        on_all_detached: Called when the last attached sender goes away
    """

    def __init__(self, on_message, on_attached=None, on_all_detached=None, host=RECEIVER_HOST):
        self.on_message = on_message
        self.on_attached = on_attached
        self.on_all_detached = on_all_detached
        self.host = host
        self.port = None
        self.clients = {}
        self.clients_lock = threading.Lock()
        self._next_id = 1
        self._server_socket = None
        self._stopped = threading.Event()

    @property
    def sender_count(self):
        with self.clients_lock:
            return len(self.clients)

    def start(self, preferred_port=PREFERRED_PORT, allow_fallback=RECEIVER_PORT_AUTO_FALLBACK):
        """Bind the listening socket and start accepting in the background.

        Returns:
            The bound port, or None if no port was available
        """
        self.port = find_available_port(
            preferred_port, allow_fallback=allow_fallback, host=self.host)
        if self.port is None:
            Logger.error(
                f"Listener: could not find available port starting from {preferred_port}")
            return None

        server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server_socket.bind((self.host, self.port))
        server_socket.listen()
        self._server_socket = server_socket

        Logger.info(f"Listener: waiting for senders on {self.host}:{self.port}")
        threading.Thread(target=self._accept_loop, daemon=True).start()
        return self.port

    def stop(self):
        self._stopped.set()
        if self._server_socket is not None:
            try:
                self._server_socket.close()
            except OSError:
                pass
            self._server_socket = None
        with self.clients_lock:
            sockets = list(self.clients)
        for sock in sockets:
            try:
                sock.close()
            except OSError:
                pass

    def _accept_loop(self):
        while not self._stopped.is_set():
            try:
                client_socket, address = self._server_socket.accept()
            except OSError:
                break
            threading.Thread(
                target=self.handle_sender,
                args=(client_socket, address),
                daemon=True,
            ).start()

    def attach(self, client_socket, address):
        """Register a sender and acknowledge that the display is listening."""
        with self.clients_lock:
            sender_id = f"sender-{self._next_id}"
            self._next_id += 1
            self.clients[client_socket] = sender_id

        Logger.info(f"Listener: [+] {sender_id} connected from {address}")
        send_json_message(client_socket, {"type": RECEIVER_READY})
        if self.on_attached is not None:
            self.on_attached(sender_id)
        return sender_id

    def detach(self, client_socket):
        """Forget a sender; fire ``on_all_detached`` if it was the last one."""
        with self.clients_lock:
            sender_id = self.clients.pop(client_socket, None)
            remaining = len(self.clients)
        try:
            client_socket.close()
        except OSError:
            pass
        if sender_id is None:
            return
        Logger.info(f"Listener: [-] {sender_id} disconnected")
        if remaining == 0 and self.on_all_detached is not None:
            self.on_all_detached()

    def handle_sender(self, client_socket, address):
        """Read newline-delimited messages until the sender goes away."""
        sender_id = self.attach(client_socket, address)
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        buffer = ""
        try:
            while True:
                data = client_socket.recv(4096)
                if not data:
                    break
                buffer += decoder.decode(data)
                messages, buffer = split_lines(buffer)
                for message in messages:
                    self.on_message(message)
        except OSError as exc:
            if not self._stopped.is_set():
                Logger.warning(f"Listener: connection error from {sender_id}: {exc}")
        finally:
            self.detach(client_socket)
