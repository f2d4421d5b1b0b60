# PocketBase API Client

import requests
import logging
from typing import Dict, Any, Optional
from urllib.parse import quote

from config import POCKETBASE_CONFIG
from errors import AuthenticationError, BackendError

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PATCH", "PUT")

def encode_segment(value: Any) -> str:
    """パスセグメントをパーセントエンコード"""
    return quote(str(value), safe="")

class PocketBaseClient:
    """リクエスト単位で生成・破棄される PocketBase REST クライアント"""

    def __init__(self, base_url: str, token: str = "", timeout: float = POCKETBASE_CONFIG["timeout"]):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

    def authenticate(self, email: str, password: str) -> str:
        """スーパーユーザー認証でトークンを取得（認証ヘッダーなしで送信）"""
        try:
            response = self.request(
                "POST",
                POCKETBASE_CONFIG["superuser_auth_endpoint"],
                data={"identity": email, "password": password},
                authenticated=False
            )
        except BackendError as e:
            logger.warning(f"[PocketBaseClient] Superuser auth failed for {self.base_url}: {e}")
            raise AuthenticationError(f"Authentication failed: {e}")

        token = response.get("token") if isinstance(response, dict) else None
        if not token:
            raise AuthenticationError("Authentication failed: no token in response")

        self.token = token
        logger.info(f"[PocketBaseClient] Authenticated as superuser against {self.base_url}")
        return token

    def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        query: Optional[Dict[str, Any]] = None,
        authenticated: bool = True
    ) -> Any:
        """PocketBase APIを呼び出し、デコード済みJSONを返す"""
        url = f"{self.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}
        if authenticated and self.token:
            headers["Authorization"] = self.token

        body = data if data is not None and method in BODY_METHODS else None

        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=body,
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"[PocketBaseClient] {method} {endpoint} failed: {e}")
            raise BackendError(f"HTTP request failed: {e}")

        decoded = self._decode(response)

        if response.status_code >= 400:
            message = decoded.get("message") if isinstance(decoded, dict) else None
            logger.warning(f"[PocketBaseClient] {method} {endpoint} -> HTTP {response.status_code}")
            raise BackendError(message or f"HTTP error {response.status_code}")

        return decoded

    def close(self):
        self.session.close()

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        # 空ボディ・非JSONは None
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None
