# Backend MCP Bridge Database Utilities

import mysql.connector
from config import DB_CONFIG
from errors import DatabaseConnectionError
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

def resolve_db_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """URLパラメータ（None は未指定）で既定の接続設定を上書き"""
    config = dict(DB_CONFIG)
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return config

def get_db_connection(config: Dict[str, Any]):
    """データベース接続を取得"""
    try:
        return mysql.connector.connect(
            host=config['host'],
            port=int(config['port']),
            user=config['user'],
            password=config['password'],
            database=config['database'],
            autocommit=True
        )
    except (mysql.connector.Error, ValueError) as e:
        logger.error(f"Database connection failed: {e}")
        raise DatabaseConnectionError(f"Database connection failed: {e}")

def fetch_all(conn, query: str) -> List[Dict[str, Any]]:
    """SQLクエリを実行して行を辞書のリストで返す"""
    cursor = conn.cursor(dictionary=True)
    try:
        cursor.execute(query)
        return [dict(row) for row in cursor.fetchall()]
    finally:
        cursor.close()

def fetch_column(conn, query: str) -> List[Any]:
    """先頭カラムだけをフラットなリストで返す"""
    cursor = conn.cursor()
    try:
        cursor.execute(query)
        return [decode_value(row[0]) for row in cursor.fetchall()]
    finally:
        cursor.close()

def execute_statement(conn, query: str) -> int:
    """更新系SQLを実行して影響行数を返す"""
    cursor = conn.cursor()
    try:
        cursor.execute(query)
        return cursor.rowcount
    finally:
        cursor.close()

def decode_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return value.decode('utf-8', errors='replace')
    return value
