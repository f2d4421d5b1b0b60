# Backend MCP Bridge - HTML documentation page

import json
from html import escape
from typing import Any, Dict, List, Tuple

PAGE_STYLE = """
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 900px; margin: 0 auto; padding: 20px; background: #f5f5f5; color: #333; line-height: 1.6; }
h1 { border-bottom: 2px solid #4f46e5; padding-bottom: 10px; }
code { background: #e5e7eb; padding: 2px 6px; border-radius: 4px; }
pre { background: #1e293b; color: #e2e8f0; padding: 15px; border-radius: 8px; overflow-x: auto; }
pre code { background: transparent; color: inherit; }
table { width: 100%; border-collapse: collapse; margin: 15px 0; }
th, td { border: 1px solid #d1d5db; padding: 10px; text-align: left; }
.card { background: white; padding: 20px; border-radius: 8px; margin: 15px 0; }
"""

def render_docs_page(
    title: str,
    summary: str,
    endpoint_url: str,
    url_parameters: List[Tuple[str, str, bool]],
    example_query: str,
    tools: List[Dict[str, Any]],
    resource_uri_format: str
) -> str:
    """エンドポイントの使い方ページ（POST 以外のアクセス時に表示）"""
    param_rows = "\n".join(
        f"<tr><td><code>{escape(name)}</code></td><td>{escape(description)}</td>"
        f"<td>{'Yes' if required else 'No'}</td></tr>"
        for name, description, required in url_parameters
    )
    tool_rows = "\n".join(
        f"<tr><td><code>{escape(tool['name'])}</code></td><td>{escape(tool['description'])}</td></tr>"
        for tool in tools
    )
    client_config = json.dumps({
        "mcpServers": {
            title.lower().replace(" ", "-"): {
                "command": "npx",
                "args": ["mcp-remote", f"{endpoint_url}?{example_query}", "--allow-http"]
            }
        }
    }, indent=2)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape(title)}</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<h1>{escape(title)}</h1>
<p>{escape(summary)} Use with <code>mcp-remote</code> package.</p>
<div class="card">
<h2>URL Parameters</h2>
<table>
<tr><th>Parameter</th><th>Description</th><th>Required</th></tr>
{param_rows}
</table>
</div>
<div class="card">
<h2>MCP Client Configuration</h2>
<pre><code>{escape(client_config)}</code></pre>
</div>
<div class="card">
<h2>Available Tools</h2>
<table>
<tr><th>Tool</th><th>Description</th></tr>
{tool_rows}
</table>
</div>
<div class="card">
<h2>Resources</h2>
<p>Resource URI format: <code>{escape(resource_uri_format)}</code></p>
</div>
</body>
</html>
"""
