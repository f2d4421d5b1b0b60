#!/usr/bin/env python3
"""
Backend MCP Bridge - PocketBase / MySQL 用 MCP サーバー
Port: 8003
"""

import logging
from datetime import datetime
from typing import Optional
from fastapi import FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response

from config import SERVER_CONFIG
from errors import MCPServerError
from server.mcp_server import parse_request_body, error_response
from server.mysql_mcp_server import handle_mysql_request, tools_manager as mysql_tools_manager
from server.pocketbase_mcp_server import handle_pocketbase_request, tools_manager as pocketbase_tools_manager
from utils.docs_page import render_docs_page

# ログ設定
logging.basicConfig(level=SERVER_CONFIG["log_level"])
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVER_CONFIG["title"],
    version=SERVER_CONFIG["version"]
)

class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """プリフライト応答を空ボディにする（CORSヘッダーとステータスはそのまま）"""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=response.status_code, headers=headers)

# CORS設定
app.add_middleware(
    EmptyPreflightCORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

DOCS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE"]

def _endpoint_url(request: Request) -> str:
    return str(request.url).split("?")[0]

async def _parse(request: Request):
    """ボディ解析。失敗時は (None, エラーレスポンス) を返す"""
    try:
        return parse_request_body(await request.body()), None
    except MCPServerError as e:
        logger.warning(f"[MCP_ENDPOINT] Rejected request body: {e.message}")
        return None, JSONResponse(error_response(e).to_payload())

@app.get("/")
async def root():
    return {
        "service": SERVER_CONFIG["title"],
        "version": SERVER_CONFIG["version"],
        "endpoints": ["/pocketbase", "/mysql"],
        "status": "running",
        "timestamp": datetime.now().isoformat()
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": SERVER_CONFIG["title"],
        "timestamp": datetime.now().isoformat()
    }

# PocketBase
@app.options("/pocketbase")
@app.options("/mysql")
async def preflight():
    return Response(status_code=200)

@app.post("/pocketbase")
async def pocketbase_endpoint(
    request: Request,
    url: str = "",
    token: str = "",
    email: str = "",
    password: str = ""
):
    """PocketBase MCPプロトコルエンドポイント"""
    mcp_request, rejected = await _parse(request)
    if rejected is not None:
        return rejected

    response = await run_in_threadpool(handle_pocketbase_request, mcp_request, url, token, email, password)
    return JSONResponse(response.to_payload())

@app.api_route("/pocketbase", methods=DOCS_METHODS, response_class=HTMLResponse)
async def pocketbase_docs(request: Request):
    return render_docs_page(
        title="PocketBase MCP Server",
        summary="Model Context Protocol server for PocketBase operations.",
        endpoint_url=_endpoint_url(request),
        url_parameters=[
            ("url", "PocketBase server URL (e.g., http://127.0.0.1:8090)", True),
            ("token", "Superuser token for authentication", False),
            ("email", "Superuser email, used with password when no token is given", False),
            ("password", "Superuser password", False),
        ],
        example_query="url=http://127.0.0.1:8090&token=YOUR_ADMIN_TOKEN",
        tools=pocketbase_tools_manager.get_tools_list(),
        resource_uri_format="pocketbase://collection/{collection_name}"
    )

# MySQL
@app.post("/mysql")
async def mysql_endpoint(
    request: Request,
    host: Optional[str] = None,
    port: Optional[str] = None,
    dbname: Optional[str] = None,
    user: Optional[str] = None,
    db_pass: Optional[str] = Query(None, alias="pass")
):
    """MySQL MCPプロトコルエンドポイント"""
    mcp_request, rejected = await _parse(request)
    if rejected is not None:
        return rejected

    connection_params = {
        "host": host,
        "port": port,
        "database": dbname,
        "user": user,
        "password": db_pass
    }
    response = await run_in_threadpool(handle_mysql_request, mcp_request, connection_params)
    return JSONResponse(response.to_payload())

@app.api_route("/mysql", methods=DOCS_METHODS, response_class=HTMLResponse)
async def mysql_docs(request: Request):
    return render_docs_page(
        title="MySQL MCP Server",
        summary="Model Context Protocol server for MySQL database operations.",
        endpoint_url=_endpoint_url(request),
        url_parameters=[
            ("host", "MySQL server host", False),
            ("port", "MySQL server port (default: 3306)", False),
            ("dbname", "Database name", False),
            ("user", "Database username", False),
            ("pass", "Database password", False),
        ],
        example_query="host=localhost&port=3306&dbname=mydb&user=root&pass=secret",
        tools=mysql_tools_manager.get_tools_list(),
        resource_uri_format="mysql://table/{table_name}"
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])
