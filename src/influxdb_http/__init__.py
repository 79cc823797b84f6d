"""Public package exports for InfluxDB HTTP client."""

from .async_client import AsyncInfluxDbClient
from .client import InfluxDbClient
from .config import InfluxDbClientConfig
from .query import Timestamp, create_raw_read_query, create_write_query

__all__ = [
    "InfluxDbClient",
    "AsyncInfluxDbClient",
    "InfluxDbClientConfig",
    "Timestamp",
    "create_write_query",
    "create_raw_read_query",
]
