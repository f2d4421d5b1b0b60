# Backend MCP Bridge Configuration

import os

# サーバー設定
SERVER_CONFIG = {
    "title": "Backend MCP Bridge",
    "version": "1.0.0",
    "host": "0.0.0.0",
    "port": 8003,
    "log_level": os.getenv("LOG_LEVEL", "INFO")
}

# MCPプロトコル設定
MCP_CONFIG = {
    "protocol_version": "2024-11-05",
    "server_version": "1.0.0"
}

# PocketBase設定
POCKETBASE_CONFIG = {
    "timeout": 30,
    "superuser_auth_endpoint": "/api/collections/_superusers/auth-with-password"
}

# データベース設定（URLパラメータで上書き可能）
DB_CONFIG = {
    'host': os.getenv("MYSQL_HOST", "127.0.0.1"),
    'port': os.getenv("MYSQL_PORT", "3306"),
    'database': os.getenv("MYSQL_DATABASE", "ivorie_legacy_erp"),
    'user': os.getenv("MYSQL_USER", "root"),
    'password': os.getenv("MYSQL_PASSWORD", "")
}
