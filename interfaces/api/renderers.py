"""响应渲染器

把 (状态码, 响应体) 渲染成 HTTP 响应。默认输出 JSON，
可替换为任何实现了 Renderer 协议的对象来输出带样式的页面。
"""

from html import escape
from typing import Dict, Protocol

from fastapi.responses import HTMLResponse, JSONResponse, Response


class Renderer(Protocol):
    """渲染器协议"""

    def render(self, status_code: int, body: Dict[str, str]) -> Response:
        """渲染响应

        Args:
            status_code: HTTP 状态码
            body: 响应体，包含 message，被拦截时还包含 reason

        Returns:
            HTTP 响应
        """
        ...


class JsonRenderer:
    """JSON 渲染器（默认）"""

    def render(self, status_code: int, body: Dict[str, str]) -> Response:
        return JSONResponse(status_code=status_code, content=body)


class HtmlRenderer:
    """HTML 渲染器

    输出一个简单的结果页面，适合用户在浏览器中点击链接的场景。

    Attributes:
        title: 页面标题
    """

    TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; text-align: center; margin-top: 15vh; color: #222; }}
h1 {{ font-size: 2.5em; margin-bottom: 0.2em; }}
p {{ color: #666; }}
.ok {{ color: #2e7d32; }}
.fail {{ color: #c62828; }}
</style>
</head>
<body>
<h1 class="{css_class}">{message}</h1>
{reason}
</body>
</html>
"""

    def __init__(self, title: str = "Verification"):
        self.title = title

    def render(self, status_code: int, body: Dict[str, str]) -> Response:
        reason = body.get("reason")
        html = self.TEMPLATE.format(
            title=escape(self.title),
            css_class="ok" if status_code < 400 else "fail",
            message=escape(body.get("message", "")),
            reason=f"<p>{escape(reason)}</p>" if reason else "",
        )
        return HTMLResponse(status_code=status_code, content=html)
