from .errors import DecodeError, PayloadError, ReceiverError, UnknownEventType
from .models import ScreenName
from .protocol import decode_event, parse_json_message, send_json_message
from .scheduler import KivyScheduler, TimerGroup
from .session import ReceiverSession

__all__ = [
    "DecodeError",
    "PayloadError",
    "ReceiverError",
    "UnknownEventType",
    "ScreenName",
    "decode_event",
    "parse_json_message",
    "send_json_message",
    "KivyScheduler",
    "TimerGroup",
    "ReceiverSession",
]
