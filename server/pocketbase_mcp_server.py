#!/usr/bin/env python3
"""
PocketBase MCP Server - PocketBase REST API を MCP ツールとして公開
"""

import logging
import re
from typing import Any, List

from errors import MCPServerError, INVALID_PARAMS
from models import MCPRequest, MCPResponse, Resource
from server.mcp_server import MCPServer, error_response
from tools import pocketbase_tools
from tools_manager import ToolsManager
from utils.pocketbase_client import PocketBaseClient

logger = logging.getLogger(__name__)

# ツール定義（静的データ、全リクエストで共有）
tools_manager = ToolsManager("pocketbase_tools.json")

class PocketBaseMCPServer(MCPServer):
    server_name = "pocketbase-mcp-server"
    resource_uri_pattern = re.compile(r"^pocketbase://collection/(.+)$")

    def fetch_resources(self) -> List[Resource]:
        collections = pocketbase_tools.list_collections(self.backend, {})
        items = []
        if isinstance(collections, dict):
            items = collections.get("items") or []
        return [
            Resource(
                uri=f"pocketbase://collection/{col['name']}",
                name=col["name"],
                description=f"Collection: {col['name']} (type: {col.get('type')})"
            )
            for col in items
        ]

    def fetch_resource(self, name: str) -> Any:
        return pocketbase_tools.view_collection(self.backend, {"collection": name})

def handle_pocketbase_request(
    mcp_request: MCPRequest,
    url: str,
    token: str = "",
    email: str = "",
    password: str = ""
) -> MCPResponse:
    """1リクエスト分のクライアント生成・認証・ディスパッチ・破棄"""
    if not url:
        return MCPResponse.failure(mcp_request.id, INVALID_PARAMS, "Missing required parameter: url")

    client = PocketBaseClient(url, token)
    try:
        if not token and email and password:
            client.authenticate(email, password)
        server = PocketBaseMCPServer(client, tools_manager)
        return server.handle_request(mcp_request)
    except MCPServerError as e:
        return error_response(e, mcp_request.id)
    finally:
        client.close()
