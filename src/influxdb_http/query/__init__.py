"""Query builders for reads (InfluxQL) and writes (line protocol)."""

from .kinds import QueryType
from .read_query import ReadQuery
from .timestamp import TimeUnit, Timestamp
from .valid_query import ValidQuery
from .write_query import FieldValue, WriteQuery

Query = ReadQuery | WriteQuery


def create_write_query(timestamp: Timestamp, measurement: str) -> WriteQuery:
    return WriteQuery(timestamp, measurement)


def create_raw_read_query(statement: str) -> ReadQuery:
    return ReadQuery(statement)


__all__ = [
    "Query",
    "QueryType",
    "ReadQuery",
    "WriteQuery",
    "FieldValue",
    "TimeUnit",
    "Timestamp",
    "ValidQuery",
    "create_write_query",
    "create_raw_read_query",
]
