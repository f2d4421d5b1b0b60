# Backend MCP Bridge - PocketBase Tools

import copy
import logging
from typing import Dict, Any

from errors import ToolValidationError
from tools.arguments import require_argument, present_options
from tools.field_schema_reference import COMMON_FIELD_OPTIONS, FIELD_TYPES, COLLECTION_EXAMPLE
from utils.pocketbase_client import PocketBaseClient, encode_segment

logger = logging.getLogger(__name__)

COLLECTION_RULES = ["listRule", "viewRule", "createRule", "updateRule", "deleteRule"]
LIST_RECORDS_OPTIONS = ["page", "perPage", "sort", "filter", "expand", "fields"]
VIEW_RECORD_OPTIONS = ["expand", "fields"]

def _collection_path(collection: str) -> str:
    return f"/api/collections/{encode_segment(collection)}"

def _records_path(collection: str, record_id: str = None) -> str:
    path = f"{_collection_path(collection)}/records"
    if record_id is not None:
        path += f"/{encode_segment(record_id)}"
    return path

# ヘルスチェック
def health(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    return client.request("GET", "/api/health")

# コレクション
def list_collections(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    return client.request("GET", "/api/collections")

def view_collection(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    return client.request("GET", _collection_path(collection))

def get_field_schema_reference(client: PocketBaseClient, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """フィールド型リファレンスを返す（PocketBase へのリクエストなし）"""
    field_type = arguments.get("type")
    if field_type:
        if field_type not in FIELD_TYPES:
            raise ToolValidationError(f"Unknown field type: {field_type}")
        field_types = {field_type: FIELD_TYPES[field_type]}
    else:
        field_types = FIELD_TYPES

    return copy.deepcopy({
        "common_options": COMMON_FIELD_OPTIONS,
        "field_types": field_types,
        "collection_example": COLLECTION_EXAMPLE
    })

def create_collection(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    name = require_argument(arguments, "name")
    payload = {
        "name": name,
        "type": arguments.get("type") or "base",
        "fields": arguments.get("fields") or []
    }

    # 指定されたルールのみ送信（null / 空文字もそのまま）
    for rule in COLLECTION_RULES:
        if rule in arguments:
            payload[rule] = arguments[rule]

    logger.info(f"[create_collection] Creating collection {name} ({payload['type']})")
    return client.request("POST", "/api/collections", payload)

def update_collection(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    data = require_argument(arguments, "data")
    return client.request("PATCH", _collection_path(collection), data)

def delete_collection(client: PocketBaseClient, arguments: Dict[str, Any]) -> Dict[str, str]:
    collection = require_argument(arguments, "collection")
    client.request("DELETE", _collection_path(collection))
    return {"message": "Collection deleted successfully"}

# レコード
def list_records(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    query = present_options(arguments, LIST_RECORDS_OPTIONS)
    return client.request("GET", _records_path(collection), query=query)

def view_record(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    record_id = require_argument(arguments, "id")
    query = present_options(arguments, VIEW_RECORD_OPTIONS)
    return client.request("GET", _records_path(collection, record_id), query=query)

def create_record(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    data = require_argument(arguments, "data")
    query = present_options(arguments, ["expand"])
    return client.request("POST", _records_path(collection), data, query)

def update_record(client: PocketBaseClient, arguments: Dict[str, Any]) -> Any:
    collection = require_argument(arguments, "collection")
    record_id = require_argument(arguments, "id")
    data = require_argument(arguments, "data")
    query = present_options(arguments, ["expand"])
    return client.request("PATCH", _records_path(collection, record_id), data, query)

def delete_record(client: PocketBaseClient, arguments: Dict[str, Any]) -> Dict[str, str]:
    collection = require_argument(arguments, "collection")
    record_id = require_argument(arguments, "id")
    client.request("DELETE", _records_path(collection, record_id))
    return {"message": "Record deleted successfully"}
