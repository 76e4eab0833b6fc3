# jsonetl

A small, configuration-driven ETL tool. It reads a JSON data file, creates
the tables described in a JSON configuration file, inserts the records in
batches, resolves foreign keys through natural-key lookups, and fills
many-to-many junction tables. The SQL it produces is written for PostgreSQL
(`SERIAL`, `::jsonb`, `TRUNCATE ... RESTART IDENTITY CASCADE`).

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What the package does not do

- **It ships no database driver.** Every connection is opened by a
  `connect` callable that you supply: it receives a connection string of the
  form `host=... dbname=... user=... password=... port=...` and must return a
  DB-API connection (with `cursor()` and `close()`). Use it in autocommit
  mode; the loader issues `BEGIN`, `COMMIT` and `ROLLBACK` itself.
- Values are placed into the SQL text as they are, inside single quotes,
  without escaping. Only load data you trust.
- Failures of plain statements (`CREATE TABLE`, `INSERT`, `BEGIN`, ...) are
  logged and do not stop the run; only id lookups and malformed configuration
  raise.
- `jsonetl.transformation.apply_transformation` and
  `SchemaManager.truncate_tables` are available as functions, but the
  pipeline run by `run_etl` does not call them.

## Command line

```
jsonetl --config config/config.json
```

`--config` defaults to `../config/config.json`. The command loads the
configuration, opens the database described under `database`, reads the data
file, creates the tables and junction tables, loads the data in the
configured order, and prints `ETL process completed successfully`. On any
error it prints `Error: <message>` to standard error and exits with status 1.

Because no driver ships with the package, the command needs
`jsonetl.cli.connector` to be set to a `connect` callable first; until then it
stops with `Error: No database driver is available to connect with.` An
application that has a driver installs it and starts the command itself:

```python
from jsonetl import cli

cli.connector = my_connect          # your driver's connect(conninfo) wrapper
status = cli.main(["--config", "config/config.json"])
```

## Configuration

```json
{
  "dataSource": {
    "filePath": "data/library.json",
    "rootPath": "library"
  },
  "database": {
    "host": "localhost",
    "dbname": "library",
    "user": "etl",
    "password": "password",
    "port": "5432"
  },
  "globalOptions": {
    "loadOrder": ["authors", "books"]
  },
  "tables": {
    "authors": {
      "generatedPK": true,
      "naturalKey": ["first_name", "last_name"],
      "columns": [
        {"name": "first_name", "type": "TEXT", "jsonPath": "first_name"},
        {"name": "last_name", "type": "TEXT", "jsonPath": "last_name"}
      ]
    },
    "books": {
      "generatedPK": true,
      "batchSize": 500,
      "naturalKey": ["isbn"],
      "columns": [
        {"name": "isbn", "type": "TEXT", "jsonPath": "isbn", "unique": true},
        {"name": "pages", "type": "int", "jsonPath": "pages"},
        {"name": "author_id", "type": "INTEGER", "jsonPath": "author",
         "lookup": {"table": "authors", "naturalKey": ["first_name", "last_name"]}}
      ]
    }
  },
  "relationships": []
}
```

- All five `database` entries must be strings (the port too).
- Records for each table are read from `data[rootPath][<table name>]`.
- `generatedPK: true` adds `id SERIAL PRIMARY KEY`; `unique: true` adds
  `UNIQUE`.
- `tables.<name>.columns[].type` is used as the SQL column type. Values of
  type `int` are inserted as they are, `jsonb` values are cast with
  `::jsonb`, anything else is quoted. String values lose their JSON quotes;
  other values are written in compact JSON form; missing fields become `''`.
- A column with `lookup` becomes a foreign key to `<table>(id)`. Its JSON
  value is split on spaces and matched against the lookup table's natural key
  columns (paired in the order listed); records whose key cannot be resolved
  are skipped.
- `batchSize` defaults to 1000 rows per `INSERT`.
- Relationships of type `MANY_TO_MANY` name a `junctionTable`, a `fromTable`,
  a `toTable`, the `dataPath` holding the related records inside each
  `fromTable` record, and `columns`. Both tables are found through their
  `naturalKey`. A column whose name contains `_id` must carry
  `source.table` and is filled with that table's id; any other column is read
  from the related record through its `jsonPath`.

## Library use

- `jsonetl.config_loader.load_config(path)` reads a configuration file and
  raises `ConfigError` if it cannot be opened or parsed.
- `jsonetl.extraction.extract_data(path)` parses a JSON file (or returns
  `None` if it cannot be opened); `get_json_records(data, source_path,
  root_path)` follows a dotted path to a list of records;
  `get_value_from_json(record, json_path)` returns one field as text.
- `jsonetl.connection.Connection` opens a connection through the `connect`
  callable it is given (`Connection.from_config(db_config, connect)` reads the
  `database` section), exposes it as `raw_connection`, and closes it on
  `close()` or at the end of a `with` block. Failures raise
  `ConnectionError_`.
- `jsonetl.query_executor.QueryExecutor` runs statements
  (`execute_query`), single-id queries (`execute_query_returning_id`, raising
  `QueryError`) and selects (`execute_select_query`).
- `jsonetl.schema_manager.SchemaManager` creates tables, junction tables and
  truncates tables; `jsonetl.insert_values.InsertValues` looks up ids, inserts
  batches and fills junction tables.
- `jsonetl.utility` holds the string helpers they share.
- `jsonetl.cli.run_etl(config, connection)` runs the whole pipeline against
  an open `Connection`:

```python
from jsonetl.cli import run_etl
from jsonetl.config_loader import load_config
from jsonetl.connection import Connection

config = load_config("config/config.json")
with Connection.from_config(config["database"], my_connect) as connection:
    run_etl(config, connection)
```