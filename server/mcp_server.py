"""
MCP Server 共通部 - JSON-RPC ディスパッチとレスポンスエンベロープ

PocketBase / MySQL の各バリアントはこのクラスを継承し、
バックエンド接続（self.backend）とリソース操作だけを実装する。
"""

import json
import logging
from datetime import date, datetime, time
from typing import Any, Callable, Dict, List

from pydantic import ValidationError

from config import MCP_CONFIG
from errors import (
    MCPServerError,
    ParseError,
    InvalidRequestError,
    MethodNotFoundError,
    InvalidParamsError,
    InternalError,
)
from models import MCPRequest, MCPResponse, Resource, ResourceContent
from tools_manager import ToolsManager

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    # Decimal / timedelta など
    return str(value)


def to_pretty_json(data: Any) -> str:
    """結果を整形JSONに変換（非ASCIIはそのまま）"""
    return json.dumps(data, indent=4, ensure_ascii=False, default=_json_default)


def parse_request_body(raw_body: bytes) -> MCPRequest:
    """HTTPボディを MCPRequest に変換（ディスパッチ前のエラー判定）"""
    try:
        payload = json.loads(raw_body)
    except ValueError:
        raise ParseError()

    if not isinstance(payload, dict):
        raise InvalidRequestError()

    try:
        return MCPRequest.model_validate(payload)
    except ValidationError:
        raise InvalidRequestError(request_id=payload.get("id"))


def error_response(error: MCPServerError, request_id: Any = None) -> MCPResponse:
    if request_id is None:
        request_id = error.request_id
    return MCPResponse.failure(request_id, error.code, error.message)


class MCPServer:
    """JSON-RPC メソッドをハンドラーに振り分ける基底クラス"""

    server_name = "mcp-server"
    resource_uri_pattern = None

    def __init__(self, backend: Any, tools_manager: ToolsManager):
        self.backend = backend
        self.tools_manager = tools_manager
        self.handlers: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            "initialize": self.initialize,
            "tools/list": self.list_tools,
            "tools/call": self.call_tool,
            "resources/list": self.list_resources,
            "resources/read": self.read_resource,
        }

    def handle_request(self, request: MCPRequest) -> MCPResponse:
        """MCPリクエストを処理して必ず1つのレスポンスを返す"""
        logger.info(f"[{self.server_name}] method={request.method} id={request.id!r}")

        handler = self.handlers.get(request.method)
        try:
            if handler is None:
                raise MethodNotFoundError(f"Method not found: {request.method}")
            # 配列形式の params は空として扱う
            params = request.params if isinstance(request.params, dict) else {}
            result = handler(params)
        except MCPServerError as e:
            return error_response(e, request.id)

        return MCPResponse.success(request.id, result)

    def initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "protocolVersion": MCP_CONFIG["protocol_version"],
            "capabilities": {
                "tools": {},
                "resources": {}
            },
            "serverInfo": {
                "name": self.server_name,
                "version": MCP_CONFIG["server_version"]
            }
        }

    def list_tools(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": self.tools_manager.get_tools_list()}

    def call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        tool_name = params.get("name") or ""
        arguments = params.get("arguments") or {}

        if not isinstance(tool_name, str) or not self.tools_manager.is_valid_tool(tool_name):
            raise InvalidParamsError(f"Unknown tool: {tool_name}")
        if not isinstance(arguments, dict):
            raise InvalidParamsError("Tool arguments must be an object")

        tool_function = self.tools_manager.get_tool_function(tool_name)
        if tool_function is None:
            raise InternalError(f"Tool function not found: {tool_name}")

        logger.info(f"[{self.server_name}] Calling {tool_name}")
        result = self.run_action(tool_name, lambda: tool_function(self.backend, arguments))

        return {
            "content": [
                {
                    "type": "text",
                    "text": to_pretty_json(result)
                }
            ]
        }

    def list_resources(self, params: Dict[str, Any]) -> Dict[str, Any]:
        resources = self.run_action("resources/list", self.fetch_resources)
        return {"resources": [resource.model_dump() for resource in resources]}

    def read_resource(self, params: Dict[str, Any]) -> Dict[str, Any]:
        uri = params.get("uri") or ""
        match = self.resource_uri_pattern.match(uri) if isinstance(uri, str) else None
        if not match:
            raise InvalidParamsError("Invalid resource URI")

        data = self.run_action("resources/read", lambda: self.fetch_resource(match.group(1)))
        content = ResourceContent(uri=uri, text=to_pretty_json(data))
        return {"contents": [content.model_dump()]}

    def run_action(self, label: str, action: Callable[[], Any]) -> Any:
        """バックエンド処理を実行し、失敗は -32603 に変換"""
        try:
            return action()
        except MCPServerError as e:
            logger.warning(f"[{self.server_name}] {label} failed: {e.message}")
            raise
        except Exception as e:
            logger.error(f"[{self.server_name}] {label} failed: {type(e).__name__}: {e}")
            raise InternalError(str(e))

    def fetch_resources(self) -> List[Resource]:
        raise NotImplementedError

    def fetch_resource(self, name: str) -> Any:
        raise NotImplementedError
