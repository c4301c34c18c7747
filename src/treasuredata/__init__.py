"""Client for the Treasure Data Postback API.

Records are posted one at a time to
`https://in.treasuredata.com/postback/v3/event/{db}/{table}` and the outcome
is reported to an optional `(error, data)` callback on a later iteration of
the asyncio event loop.
"""

from .client import TreasureDataClient
from .errors import TreasureDataHttpError
from .transport import RequestsTransport, Transport, TransportResponse

__all__ = [
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "TreasureDataClient",
    "TreasureDataHttpError",
]
