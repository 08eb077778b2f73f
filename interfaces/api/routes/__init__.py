"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.verify import build_visit_response, create_verify_router

__all__ = ["build_visit_response", "create_verify_router"]
