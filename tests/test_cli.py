import json

import pytest

from jsonetl.cli import main, run_etl
from jsonetl.connection import Connection


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self._row = None

    def execute(self, query):
        self.conn.statements.append(query)
        if query.startswith("SELECT"):
            self.description = [("id",)]
            self._row = self.conn.ids.get(query)
        else:
            self.description = None
            self._row = None

    def fetchone(self):
        return self._row

    def fetchall(self):
        return [] if self._row is None else [self._row]

    def close(self):
        pass


class FakeConnection:
    def __init__(self, ids=None):
        self.ids = dict(ids or {})
        self.statements = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


def make_config(data_path):
    password = "password"
    return {
        "database": {
            "host": "localhost",
            "dbname": "etl",
            "user": "user",
            "password": password,
            "port": "5432",
        },
        "dataSource": {"filePath": str(data_path), "rootPath": "root"},
        "globalOptions": {"loadOrder": ["people"]},
        "tables": {
            "people": {
                "generatedPK": True,
                "naturalKey": ["name"],
                "columns": [{"name": "name", "type": "text", "jsonPath": "name"}],
            }
        },
        "relationships": [],
    }


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"root": {"people": [{"name": "Ana"}, {"name": "Luis"}]}}))
    return path


def test_run_etl_creates_and_loads(data_file):
    raw = FakeConnection()
    connection = Connection.from_config(make_config(data_file)["database"], lambda info: raw)
    run_etl(make_config(data_file), connection)
    creates = [s for s in raw.statements if s.startswith("CREATE TABLE IF NOT EXISTS people")]
    assert len(creates) == 1
    assert "id SERIAL PRIMARY KEY" in creates[0]
    [insert] = [s for s in raw.statements if s.startswith("INSERT INTO people")]
    assert "'Ana'" in insert and "'Luis'" in insert
    assert raw.statements.index(creates[0]) < raw.statements.index(insert)
    assert raw.statements[-1] == "COMMIT"


def test_run_etl_missing_data_file_raises(tmp_path):
    config = make_config(tmp_path / "absent.json")
    raw = FakeConnection()
    connection = Connection.from_config(config["database"], lambda info: raw)
    with pytest.raises(RuntimeError):
        run_etl(config, connection)
    assert raw.statements == []


def test_main_missing_config_fails(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "none.json")])
    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_main_without_driver_fails(tmp_path, data_file):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(make_config(data_file)))
    assert main(["--config", str(config_path)]) == 1