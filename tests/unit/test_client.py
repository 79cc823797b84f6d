from __future__ import annotations

import httpx
import pytest

from influxdb_http.client import InfluxDbClient
from influxdb_http.config import InfluxDbClientConfig, TransportConfig
from influxdb_http.core.errors import (
    InfluxDbAuthenticationError,
    InfluxDbAuthorizationError,
    InfluxDbClientClosedError,
    InfluxDbConfigurationError,
    InfluxDbConnectionError,
    InfluxDbDatabaseError,
    InfluxDbDeserializationError,
    InfluxDbInvalidQueryError,
    InfluxDbProtocolError,
    InfluxDbUrlConstructionError,
)
from influxdb_http.core.transport import SyncTransport
from influxdb_http.query import Timestamp, create_raw_read_query, create_write_query
from tests.shared.transport import SyncSequencedClient, build_config, make_response

URL = "http://localhost:8086"


def _client(steps, *, url: str = URL, database: str = "test") -> tuple[InfluxDbClient, SyncSequencedClient]:
    fake = SyncSequencedClient(steps)
    client = InfluxDbClient(url, database, transport=SyncTransport(build_config(), client=fake))
    return client, fake


def test_fn_database():
    client = InfluxDbClient("http://localhost:8068", "database")
    assert client.database_name() == "database"
    assert client.database_url() == "http://localhost:8068"
    client.close()


def test_with_auth_returns_new_client():
    client = InfluxDbClient("http://localhost:8068", "database")
    with_auth = client.with_auth("username", "password")
    assert with_auth is not client
    assert client.basic_parameters() == [("db", "database")]
    assert with_auth.basic_parameters() == [
        ("db", "database"),
        ("u", "username"),
        ("p", "password"),
    ]
    assert with_auth.database_name() == "database"
    client.close()


def test_invalid_config_is_rejected():
    config = InfluxDbClientConfig(transport=TransportConfig(timeout_read_seconds=0))
    with pytest.raises(InfluxDbConfigurationError):
        InfluxDbClient(URL, "test", config=config)


def test_read_query_with_select_uses_get():
    client, fake = _client([make_response(200, '{"results":[{"statement_id":0}]}')])
    body = client.query(create_raw_read_query("SELECT * FROM weather"))

    assert body == '{"results":[{"statement_id":0}]}'
    request = fake.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/query"
    assert request.params == [("db", "test"), ("q", "SELECT * FROM weather")]
    assert request.content is None


def test_read_query_without_select_or_show_uses_post():
    client, fake = _client([make_response(200, '{"results":[{"statement_id":0}]}')])
    client.query(create_raw_read_query("CREATE DATABASE test"))
    assert fake.requests[0].method == "POST"
    assert fake.requests[0].url.path == "/query"


def test_base_url_with_trailing_slash_routes_to_endpoint():
    client, fake = _client(
        [make_response(200, '{"results":[{"statement_id":0}]}'), make_response(204, "")],
        url="http://localhost:8086/",
    )
    client.query(create_raw_read_query("SHOW DATABASES"))
    client.query(create_write_query(Timestamp.NOW, "weather").add_field("temperature", 82))

    assert fake.requests[0].url.path == "/query"
    assert fake.requests[1].url.path == "/write"


def test_read_query_sends_credentials_before_statement():
    client, fake = _client([make_response(200, "{}")])
    client.with_auth("admin", "secret").query(
        create_raw_read_query("SHOW DATABASES").add("SHOW MEASUREMENTS")
    )
    assert fake.requests[0].params == [
        ("db", "test"),
        ("u", "admin"),
        ("p", "secret"),
        ("q", "SHOW DATABASES;SHOW MEASUREMENTS"),
    ]


def test_write_query_posts_line_protocol_with_precision():
    client, fake = _client([make_response(204, "")])
    body = client.query(
        create_write_query(Timestamp.seconds(1565000000), "weather")
        .add_tag("location", "us-midwest")
        .add_field("temperature", 82)
    )

    assert body == ""
    request = fake.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/write"
    assert request.params == [("db", "test"), ("precision", "s")]
    assert request.content == b"weather,location=us-midwest temperature=82i 1565000000"


def test_write_query_with_now_omits_precision():
    client, fake = _client([make_response(204, "")])
    client.query(create_write_query(Timestamp.NOW, "weather").add_field("temperature", 82))
    assert fake.requests[0].params == [("db", "test")]


def test_invalid_write_query_fails_before_network():
    client, fake = _client([])
    with pytest.raises(InfluxDbInvalidQueryError, match="fields cannot be empty"):
        client.query(create_write_query(Timestamp.NOW, "weather"))
    assert fake.calls == 0


def test_malformed_base_url_fails_before_network():
    client, fake = _client([], url="not a url")
    with pytest.raises(InfluxDbUrlConstructionError):
        client.query(create_raw_read_query("SELECT * FROM weather"))
    assert fake.calls == 0


def test_transport_failure_is_connection_error():
    client, _ = _client([httpx.ConnectError("connection refused")])
    with pytest.raises(InfluxDbConnectionError) as exc_info:
        client.query(create_raw_read_query("SELECT * FROM weather"))
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.cause == "ConnectError"


@pytest.mark.parametrize(
    ("http_status", "expected_error"),
    [
        (401, InfluxDbAuthorizationError),
        (403, InfluxDbAuthenticationError),
    ],
)
def test_auth_statuses_win_over_body(http_status, expected_error):
    client, _ = _client([make_response(http_status, '{"results":[]}')])
    with pytest.raises(expected_error):
        client.query(create_raw_read_query("SELECT * FROM weather"))


def test_http_200_with_embedded_error_is_database_error():
    body = '{"results":[{"statement_id":0,"error":"database not found: test"}]}'
    client, _ = _client([make_response(200, body)])
    with pytest.raises(InfluxDbDatabaseError, match="database not found"):
        client.query(create_raw_read_query("SELECT * FROM weather"))


def test_non_utf8_body_is_deserialization_error():
    client, _ = _client([make_response(200, b"\xff\xfe\xfa")])
    with pytest.raises(InfluxDbDeserializationError):
        client.query(create_raw_read_query("SELECT * FROM weather"))


def test_other_error_statuses_fall_through_to_body():
    client, _ = _client([make_response(500, "internal failure")])
    assert client.query(create_raw_read_query("SELECT * FROM weather")) == "internal failure"


def test_json_query_decodes_results(fixture_bytes):
    client, fake = _client([make_response(200, fixture_bytes("show_databases.json"))])
    results = client.json_query(create_raw_read_query("SHOW DATABASES"))
    assert fake.requests[0].method == "GET"
    assert results.decode_next().series[0].values == (("_internal",), ("mydb",))


def test_json_query_rejects_mutating_statements_before_network():
    client, fake = _client([])
    with pytest.raises(InfluxDbInvalidQueryError, match="Only SELECT and SHOW"):
        client.json_query(create_raw_read_query("CREATE DATABASE test"))
    assert fake.calls == 0


def test_json_query_rejects_write_queries():
    client, fake = _client([])
    with pytest.raises(InfluxDbInvalidQueryError):
        client.json_query(
            create_write_query(Timestamp.NOW, "weather").add_field("temperature", 1)  # type: ignore[arg-type]
        )
    assert fake.calls == 0


def test_ping_returns_build_and_version():
    client, fake = _client(
        [make_response(204, headers={"X-Influxdb-Build": "OSS", "X-Influxdb-Version": "1.8.10"})]
    )
    result = client.ping()
    assert result == ("OSS", "1.8.10")
    assert result.build == "OSS"
    assert result.version == "1.8.10"
    assert fake.requests[0].method == "GET"
    assert fake.requests[0].url.path == "/ping"


def test_ping_missing_header_is_protocol_error():
    client, _ = _client([make_response(204, headers={"X-Influxdb-Version": "1.8.10"})])
    with pytest.raises(InfluxDbProtocolError, match="X-Influxdb-Build"):
        client.ping()


def test_ping_transport_failure_is_protocol_error():
    client, _ = _client([httpx.ConnectTimeout("timed out")])
    with pytest.raises(InfluxDbProtocolError):
        client.ping()


def test_client_context_manager_closes_transport():
    fake = SyncSequencedClient([])
    transport = SyncTransport(build_config(), client=fake)
    with InfluxDbClient(URL, "test", transport=transport) as client:
        assert client is not None
    with pytest.raises(InfluxDbClientClosedError):
        client.query(create_raw_read_query("SELECT * FROM weather"))


def test_derived_client_shares_closed_state():
    client, _ = _client([])
    with_auth = client.with_auth("admin", "secret")
    client.close()
    with pytest.raises(InfluxDbClientClosedError):
        with_auth.ping()
