# Backend MCP Bridge - MySQL Tools
#
# query / execute の種別チェックは先頭キーワードの正規表現のみで、
# SQLパーサーではない。複数ステートメントや SELECT ... INTO OUTFILE は通過する。

import re
import logging
from typing import Dict, Any, List

from errors import ToolValidationError
from tools.arguments import require_argument
from utils.database import fetch_all, fetch_column, execute_statement

logger = logging.getLogger(__name__)

SELECT_PATTERN = re.compile(r"^\s*SELECT", re.IGNORECASE)
MUTATION_PATTERN = re.compile(r"^\s*(INSERT|UPDATE|DELETE)", re.IGNORECASE)
TABLE_NAME_DISALLOWED = re.compile(r"[^a-zA-Z0-9_]")

def _require_sql(arguments: Dict[str, Any]) -> str:
    sql = require_argument(arguments, "sql")
    if not isinstance(sql, str):
        raise ToolValidationError("Argument sql must be a string")
    return sql

def sanitize_table_name(table: Any) -> str:
    """英数字とアンダースコア以外を除去"""
    return TABLE_NAME_DISALLOWED.sub("", str(table))

def query(conn, arguments: Dict[str, Any]) -> List[Dict[str, Any]]:
    """SELECT のみ実行"""
    sql = _require_sql(arguments)
    if not SELECT_PATTERN.match(sql):
        raise ToolValidationError("Only SELECT queries are allowed in query tool")
    return fetch_all(conn, sql)

def execute(conn, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """INSERT / UPDATE / DELETE のみ実行"""
    sql = _require_sql(arguments)
    if not MUTATION_PATTERN.match(sql):
        raise ToolValidationError("Only INSERT, UPDATE, DELETE queries allowed")

    affected_rows = execute_statement(conn, sql)
    logger.info(f"[execute] {affected_rows} rows affected")
    return {
        "affected_rows": affected_rows,
        "message": "Query executed successfully"
    }

def list_tables(conn, arguments: Dict[str, Any]) -> Dict[str, List[Any]]:
    return {"tables": fetch_column(conn, "SHOW TABLES")}

def describe_table(conn, arguments: Dict[str, Any]) -> List[Dict[str, Any]]:
    table = sanitize_table_name(require_argument(arguments, "table"))
    if not table:
        raise ToolValidationError("Invalid table name")
    return fetch_all(conn, f"DESCRIBE `{table}`")
