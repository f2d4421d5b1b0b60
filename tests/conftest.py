import json
from typing import Any, Dict, List, Optional
from urllib.parse import unquote, urlsplit

import mysql.connector
import pytest
import requests


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, raw: Optional[bytes] = None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")

    def json(self) -> Any:
        return json.loads(self.content)


class RecordingSession:
    """キューに積んだレスポンスを順番に返す requests.Session の代替"""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({
            "method": method,
            "url": url,
            "params": params,
            "json": json,
            "headers": headers or {},
        })
        response = self.responses.pop(0) if self.responses else FakeResponse(200, {})
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


class FakePocketBase(RecordingSession):
    """コレクション・レコードをメモリ上に持つ PocketBase の代替"""

    def __init__(self):
        super().__init__()
        self.token = "superuser-token"
        self.credentials = {"identity": "admin@example.com", "password": "secret"}
        self.collections = {
            "posts": {"id": "pbc_posts", "name": "posts", "type": "base", "fields": []},
            "users": {"id": "_pb_users_auth_", "name": "users", "type": "auth", "fields": []},
        }
        self.records: Dict[str, Dict[str, Dict[str, Any]]] = {"posts": {}, "users": {}}
        self._next_id = 1

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({
            "method": method,
            "url": url,
            "params": params,
            "json": json,
            "headers": headers or {},
        })
        parts = [unquote(part) for part in urlsplit(url).path.split("/") if part]
        return self._route(method, parts, json)

    def _route(self, method, parts, body):
        not_found = FakeResponse(404, {"status": 404, "message": "The requested resource wasn't found.", "data": {}})

        if parts == ["api", "health"]:
            return FakeResponse(200, {"code": 200, "message": "API is healthy.", "data": {}})
        if parts[:2] != ["api", "collections"]:
            return not_found

        rest = parts[2:]
        if rest == ["_superusers", "auth-with-password"] and method == "POST":
            if body == self.credentials:
                return FakeResponse(200, {"token": self.token, "record": {"email": body["identity"]}})
            return FakeResponse(400, {"status": 400, "message": "Failed to authenticate.", "data": {}})
        if not rest and method == "GET":
            items = list(self.collections.values())
            return FakeResponse(200, {"page": 1, "perPage": 30, "totalItems": len(items), "items": items})
        if not rest or rest[0] not in self.collections:
            return not_found

        name = rest[0]
        if len(rest) == 1 and method == "GET":
            return FakeResponse(200, self.collections[name])
        if rest[1:] == ["records"] and method == "POST":
            record_id = f"rec{self._next_id:012d}"
            self._next_id += 1
            record = {"id": record_id, "collectionName": name, **body, "created": "2024-01-01 00:00:00.000Z"}
            self.records[name][record_id] = record
            return FakeResponse(200, record)
        if len(rest) == 3 and rest[1] == "records" and method == "GET":
            record = self.records[name].get(rest[2])
            return FakeResponse(200, record) if record else not_found
        return not_found


class FakeCursor:
    def __init__(self, connection: "FakeConnection", dictionary: bool = False):
        self.connection = connection
        self.dictionary = dictionary
        self.rowcount = -1
        self._rows: List[Dict[str, Any]] = []
        self.closed = False

    def execute(self, sql):
        self.connection.executed.append(sql)
        if sql in self.connection.errors:
            raise self.connection.errors[sql]
        self._rows = self.connection.results.get(sql, [])
        self.rowcount = self.connection.rowcount

    def fetchall(self):
        if self.dictionary:
            return [dict(row) for row in self._rows]
        return [tuple(row.values()) for row in self._rows]

    def close(self):
        self.closed = True


class FakeConnection:
    """SQL文字列ごとに結果を返す mysql.connector 接続の代替"""

    def __init__(self, results=None, rowcount: int = 0, errors=None):
        self.results = results or {}
        self.rowcount = rowcount
        self.errors = errors or {}
        self.executed: List[str] = []
        self.closed = False

    def cursor(self, dictionary: bool = False):
        return FakeCursor(self, dictionary=dictionary)

    def close(self):
        self.closed = True


@pytest.fixture
def install_session(monkeypatch):
    """PocketBaseClient が生成する Session を差し替える"""
    def install(session):
        monkeypatch.setattr(requests, "Session", lambda: session)
        return session
    return install


@pytest.fixture
def fake_pocketbase(install_session) -> FakePocketBase:
    return install_session(FakePocketBase())


@pytest.fixture
def install_connection(monkeypatch):
    """mysql.connector.connect を差し替え、接続引数を記録する"""
    connect_calls: List[Dict[str, Any]] = []

    def install(connection):
        def fake_connect(**kwargs):
            connect_calls.append(kwargs)
            if isinstance(connection, Exception):
                raise connection
            return connection
        monkeypatch.setattr(mysql.connector, "connect", fake_connect)
        return connect_calls
    return install
