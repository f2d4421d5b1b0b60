#!/usr/bin/env python3
"""
MySQL MCP Server - MySQL データベース操作を MCP ツールとして公開
"""

import logging
import re
from typing import Any, Dict, List, Optional

from errors import DatabaseConnectionError
from models import MCPRequest, MCPResponse, Resource
from server.mcp_server import MCPServer, error_response
from tools import mysql_tools
from tools_manager import ToolsManager
from utils.database import get_db_connection, resolve_db_config

logger = logging.getLogger(__name__)

# ツール定義（静的データ、全リクエストで共有）
tools_manager = ToolsManager("mysql_tools.json")

class MySQLMCPServer(MCPServer):
    server_name = "mysql-mcp-server"
    resource_uri_pattern = re.compile(r"^mysql://table/(.+)$")

    def fetch_resources(self) -> List[Resource]:
        tables = mysql_tools.list_tables(self.backend, {})["tables"]
        return [
            Resource(
                uri=f"mysql://table/{table}",
                name=table,
                description=f"Table: {table}"
            )
            for table in tables
        ]

    def fetch_resource(self, name: str) -> Any:
        return mysql_tools.describe_table(self.backend, {"table": name})

def handle_mysql_request(mcp_request: MCPRequest, connection_params: Optional[Dict[str, Any]] = None) -> MCPResponse:
    """1リクエスト分の接続生成・ディスパッチ・切断

    接続に失敗した場合はディスパッチせずにエラーを返す。
    """
    config = resolve_db_config(connection_params)
    try:
        conn = get_db_connection(config)
    except DatabaseConnectionError as e:
        return error_response(e, mcp_request.id)

    try:
        server = MySQLMCPServer(conn, tools_manager)
        return server.handle_request(mcp_request)
    finally:
        conn.close()
