"""Protocolos e contratos do core do plugin."""

from .calendar_host import CalendarHostProtocol
from .event_source import EventSourceProtocol
from .http_client import HttpSenderProtocol
from .invocation_io import InvocationIOProtocol
from .normalizer import EventNormalizerProtocol

__all__ = [
    "CalendarHostProtocol",
    "EventNormalizerProtocol",
    "EventSourceProtocol",
    "HttpSenderProtocol",
    "InvocationIOProtocol",
]
