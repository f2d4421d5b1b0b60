# Backend MCP Bridge Errors

from typing import Any

# JSON-RPC エラーコード
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MCPServerError(Exception):
    """JSON-RPC エラーコードを持つ例外の基底クラス"""

    code = INTERNAL_ERROR

    def __init__(self, message: str, request_id: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.request_id = request_id


class ParseError(MCPServerError):
    code = PARSE_ERROR

    def __init__(self, message: str = "Parse error") -> None:
        super().__init__(message)


class InvalidRequestError(MCPServerError):
    code = INVALID_REQUEST

    def __init__(self, message: str = "Invalid Request", request_id: Any = None) -> None:
        super().__init__(message, request_id)


class MethodNotFoundError(MCPServerError):
    code = METHOD_NOT_FOUND


class InvalidParamsError(MCPServerError):
    code = INVALID_PARAMS


class InternalError(MCPServerError):
    code = INTERNAL_ERROR


class BackendError(InternalError):
    """PocketBase の HTTP エラー・通信エラー"""


class AuthenticationError(InternalError):
    pass


class DatabaseConnectionError(InternalError):
    pass


class ToolValidationError(InternalError):
    """ツール引数・SQL種別の検証エラー"""
