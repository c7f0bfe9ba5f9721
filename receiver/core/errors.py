"""Exceptions raised while turning inbound sender messages into events.

Every error here is recoverable: the dispatcher logs it and drops the
message. Nothing is reported back to the sender.
"""


class ReceiverError(Exception):
    """Base class for dropped-message errors."""


class DecodeError(ReceiverError):
    """The message is not a JSON object."""


class UnknownEventType(ReceiverError):
    """The message decoded fine but no handler exists for its type."""

    def __init__(self, event_type):
        super().__init__(f"unknown message type {event_type!r}")
        self.event_type = event_type


class PayloadError(ReceiverError):
    """A required field is missing or has the wrong shape."""
