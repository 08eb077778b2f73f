"""
API 接口层

提供点击验证服务的 HTTP 接口。

用法：
    from interfaces.api import VerificationServer

    server = VerificationServer()
    server.serve()
"""

from interfaces.api.app import VerificationServer, create_app
from interfaces.api.exceptions import ListenerStartupError
from interfaces.api.renderers import HtmlRenderer, JsonRenderer, Renderer

__all__ = [
    "HtmlRenderer",
    "JsonRenderer",
    "ListenerStartupError",
    "Renderer",
    "VerificationServer",
    "create_app",
]
