import pytest

from conftest import FakeConnection
from errors import ToolValidationError
from tools import mysql_tools


def test_query_rejects_non_select() -> None:
    conn = FakeConnection()
    with pytest.raises(ToolValidationError, match="Only SELECT queries are allowed"):
        mysql_tools.query(conn, {"sql": "DROP TABLE users"})
    assert conn.executed == []


def test_query_accepts_select_case_insensitive_with_leading_whitespace() -> None:
    sql = "  \n select id, name FROM users"
    conn = FakeConnection(results={sql: [{"id": 1, "name": "alice"}]})

    assert mysql_tools.query(conn, {"sql": sql}) == [{"id": 1, "name": "alice"}]
    assert conn.executed == [sql]


def test_select_gate_is_prefix_only() -> None:
    # 先頭が SELECT なら後続のステートメントは検査しない
    sql = "SELECT 1; DROP TABLE users"
    conn = FakeConnection()
    mysql_tools.query(conn, {"sql": sql})
    assert conn.executed == [sql]


def test_execute_rejects_select() -> None:
    conn = FakeConnection()
    with pytest.raises(ToolValidationError, match="Only INSERT, UPDATE, DELETE queries allowed"):
        mysql_tools.execute(conn, {"sql": "SELECT * FROM users"})
    assert conn.executed == []


@pytest.mark.parametrize("sql", [
    "INSERT INTO users (name) VALUES ('bob')",
    "update users set name = 'bob' where id = 2",
    "\tDelete FROM users WHERE id = 3",
])
def test_execute_accepts_mutations(sql) -> None:
    conn = FakeConnection(rowcount=2)
    assert mysql_tools.execute(conn, {"sql": sql}) == {
        "affected_rows": 2,
        "message": "Query executed successfully",
    }


def test_sql_must_be_given_as_string() -> None:
    with pytest.raises(ToolValidationError, match="Missing required argument: sql"):
        mysql_tools.query(FakeConnection(), {})
    with pytest.raises(ToolValidationError):
        mysql_tools.execute(FakeConnection(), {"sql": ["DELETE FROM users"]})


def test_sanitize_table_name() -> None:
    assert mysql_tools.sanitize_table_name("users; DROP TABLE x") == "usersDROPTABLEx"
    assert mysql_tools.sanitize_table_name("order_items2") == "order_items2"
    assert mysql_tools.sanitize_table_name("`users`") == "users"


def test_describe_table_uses_sanitized_name() -> None:
    conn = FakeConnection()
    mysql_tools.describe_table(conn, {"table": "users; DROP TABLE x"})
    assert conn.executed == ["DESCRIBE `usersDROPTABLEx`"]


def test_describe_table_rejects_name_that_sanitizes_to_nothing() -> None:
    conn = FakeConnection()
    with pytest.raises(ToolValidationError, match="Invalid table name"):
        mysql_tools.describe_table(conn, {"table": "`; --"})
    assert conn.executed == []


def test_list_tables_returns_flat_names() -> None:
    conn = FakeConnection(results={
        "SHOW TABLES": [{"Tables_in_shop": "orders"}, {"Tables_in_shop": b"users"}],
    })
    assert mysql_tools.list_tables(conn, {}) == {"tables": ["orders", "users"]}
