"""HTTP plumbing: request/response envelopes and interchangeable transports.

Transport modules are imported lazily by ``select_transport`` so that a
missing HTTP library only matters when it is actually selected.
"""

from trellolib.net.base import Transport
from trellolib.net.request import Request, Response
from trellolib.net.selection import (
    HTTP_CLIENT_PRIORITY,
    HTTP_CLIENTS,
    select_transport,
    select_transport_name,
)

__all__ = [
    "Transport",
    "Request",
    "Response",
    "HTTP_CLIENT_PRIORITY",
    "HTTP_CLIENTS",
    "select_transport",
    "select_transport_name",
]
