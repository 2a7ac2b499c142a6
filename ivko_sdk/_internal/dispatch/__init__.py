"""Dispatch pipeline for Ivko service calls.

WARNING: This is a system-level module used by IvkoClient.
Do not call directly from user code.
"""

from ivko_sdk._internal.dispatch.classifier import SHAPES, classify
from ivko_sdk._internal.dispatch.client import Dispatcher
from ivko_sdk._internal.dispatch.models import HttpMethod, Outcome, Request
from ivko_sdk._internal.dispatch.transport import HttpTransport, Transport

__all__ = [
    "Dispatcher",
    "HttpTransport",
    "Transport",
    "HttpMethod",
    "Outcome",
    "Request",
    "SHAPES",
    "classify",
]
