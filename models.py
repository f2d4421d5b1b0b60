# Backend MCP Bridge Data Models

from pydantic import BaseModel
from typing import Dict, Any, List, Optional, Union

class MCPRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: Any = None
    method: str = ""
    params: Union[Dict[str, Any], List[Any], None] = None

class MCPError(BaseModel):
    code: int
    message: str

class MCPResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Any = None
    result: Any = None
    error: Optional[MCPError] = None

    @classmethod
    def success(cls, request_id: Any, result: Any) -> "MCPResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str) -> "MCPResponse":
        return cls(id=request_id, error=MCPError(code=code, message=message))

    def to_payload(self) -> Dict[str, Any]:
        """JSON-RPC 2.0形式に変換（result と error は排他、id は null でも含める）"""
        payload = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump()
        else:
            payload["result"] = self.result
        return payload

class ToolDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]

class Resource(BaseModel):
    uri: str
    name: str
    description: str
    mimeType: str = "application/json"

class ResourceContent(BaseModel):
    uri: str
    mimeType: str = "application/json"
    text: str
