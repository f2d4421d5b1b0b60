# Backend MCP Bridge - Tool argument helpers

from typing import Any, Dict, Iterable

from errors import ToolValidationError

def require_argument(arguments: Dict[str, Any], key: str) -> Any:
    """必須引数を取得（キーが無い・None ならエラー）"""
    value = arguments.get(key)
    if value is None:
        raise ToolValidationError(f"Missing required argument: {key}")
    return value

def present_options(arguments: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """空でない値だけを抽出（空文字・0・"0"・None は送らない）"""
    return {key: arguments[key] for key in keys if arguments.get(key) and arguments.get(key) != "0"}
