from __future__ import annotations

import pytest

from influxdb_http.query import ValidQuery


def test_equality_str():
    assert ValidQuery("hello") == "hello"


def test_equality_valid_query():
    assert ValidQuery("hello") == ValidQuery("hello")
    assert ValidQuery("hello") != ValidQuery("world")


def test_get_and_str_return_text():
    query = ValidQuery("SHOW DATABASES")
    assert query.get() == "SHOW DATABASES"
    assert str(query) == "SHOW DATABASES"


def test_rejects_non_str():
    with pytest.raises(TypeError):
        ValidQuery(b"bytes")  # type: ignore[arg-type]
