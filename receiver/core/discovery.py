"""UDP presence broadcast so sender apps can find the display.

Every ``DISCOVERY_INTERVAL`` seconds the receiver announces its listener
port on the local network.
"""

import json
import socket
import threading

from kivy.logger import Logger

from receiver.config import DISCOVERY_INTERVAL


def get_local_ip():
    """Resolve a best-effort local IP used for outbound traffic."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(("8.8.8.8", 80))
            return s.getsockname()[0]
    except OSError:
        try:
            return socket.gethostbyname(socket.gethostname())
        except OSError:
            return "127.0.0.1"


def discovery_message(receiver_port, ip):
    return json.dumps({"type": "DISCOVERY", "data": {"port": receiver_port, "ip": ip}})


class PresenceBroadcaster:
    def __init__(self, receiver_port, discovery_port, interval=DISCOVERY_INTERVAL):
        self.receiver_port = receiver_port
        self.discovery_port = discovery_port
        self.interval = interval
        self.ip = None
        self._stop = threading.Event()
        self._thread = None

    def start(self):
        self.ip = get_local_ip()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        Logger.info(
            f"Discovery: announcing {self.ip}:{self.receiver_port} on UDP port {self.discovery_port}")

    def stop(self):
        self._stop.set()

    def _run(self):
        message = discovery_message(self.receiver_port, self.ip).encode()
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        # Allow sharing the port with senders listening on this machine
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if hasattr(socket, 'SO_REUSEPORT'):
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)

        try:
            while not self._stop.is_set():
                try:
                    sock.sendto(message, ("<broadcast>", self.discovery_port))
                except OSError as exc:
                    Logger.debug(f"Discovery: broadcast failed: {exc}")
                self._stop.wait(self.interval)
        finally:
            sock.close()
