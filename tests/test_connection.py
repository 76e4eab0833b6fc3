import pytest

from jsonetl.connection import Connection, ConnectionError_, build_conninfo


class FakeRaw:
    def __init__(self, conninfo):
        self.conninfo = conninfo
        self.close_calls = 0

    def close(self):
        self.close_calls += 1


def failing_connect(conninfo):
    raise OSError("refused")


def test_build_conninfo_format():
    password = "password"
    assert (
        build_conninfo("db.example.com", "shop", "user", password, "5432")
        == "host=db.example.com dbname=shop user=user password=password port=5432"
    )


def test_connection_passes_conninfo_to_driver():
    password = "password"
    conn = Connection("localhost", "shop", "user", password, "5432", connect=FakeRaw)
    assert conn.raw_connection.conninfo == build_conninfo(
        "localhost", "shop", "user", password, "5432"
    )
    assert conn.dbname == "shop"


def test_connection_failure_raises():
    password = "password"
    with pytest.raises(ConnectionError_, match="refused"):
        Connection("localhost", "shop", "user", password, "5432", connect=failing_connect)


def test_from_config_builds_connection():
    config = {"host": "localhost", "dbname": "shop", "user": "user", "password": "password", "port": "5432"}
    conn = Connection.from_config(config, FakeRaw)
    assert "dbname=shop" in conn.raw_connection.conninfo
    assert conn.raw_connection.conninfo.endswith("port=5432")


def test_from_config_missing_key():
    config = {"host": "localhost", "dbname": "shop", "user": "user", "port": "5432"}
    with pytest.raises(ConnectionError_, match="password"):
        Connection.from_config(config, FakeRaw)


def test_from_config_port_must_be_string():
    config = {"host": "localhost", "dbname": "shop", "user": "user", "password": "password", "port": 5432}
    with pytest.raises(ConnectionError_, match="port"):
        Connection.from_config(config, FakeRaw)


def test_context_manager_closes_once():
    password = "password"
    with Connection("localhost", "shop", "user", password, "5432", connect=FakeRaw) as conn:
        raw = conn.raw_connection
    assert raw.close_calls == 1
    assert conn.closed
    conn.close()
    assert raw.close_calls == 1
    assert conn.raw_connection is None