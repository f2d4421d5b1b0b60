import json
import importlib
import logging
import os
from typing import Callable, Dict, List, Any, Optional

from models import ToolDescription

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tools", "definitions")

class ToolsManager:
    """ツール定義の一元管理クラス"""

    def __init__(self, config_path: str):
        if not os.path.isabs(config_path):
            config_path = os.path.join(DEFINITIONS_DIR, config_path)
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = json.load(f)

    def get_tools_list(self) -> List[Dict[str, Any]]:
        """tools/list用のツール一覧（定義順）"""
        return [
            ToolDescription(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"]
            ).model_dump()
            for tool in self.config["tools"]
        ]

    def get_tool_function(self, tool_name: str) -> Optional[Callable[..., Any]]:
        """ツール名から関数を動的取得"""
        for tool in self.config["tools"]:
            if tool["name"] == tool_name:
                try:
                    module = importlib.import_module(tool["module_path"])
                    return getattr(module, tool["function_name"])
                except (ImportError, AttributeError) as e:
                    logger.error(f"[ToolsManager] Failed to import {tool_name}: {e}")
                    return None
        return None

    def is_valid_tool(self, tool_name: str) -> bool:
        """ツール名の有効性チェック"""
        return any(tool["name"] == tool_name for tool in self.config["tools"])

    def get_tool_names(self) -> List[str]:
        """全ツール名のリスト"""
        return [tool["name"] for tool in self.config["tools"]]
