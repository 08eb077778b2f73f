"""点击验证 API 路由"""

from http import HTTPStatus
from typing import Callable, Dict, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from application.commands.verification.resolve_visit import (
    ResolveVisitCommand,
    ResolveVisitHandler,
    VisitResult,
)
from domain.verification.value_objects.outcome import Outcome
from interfaces.api.client_address import resolve_client_address
from interfaces.api.renderers import JsonRenderer, Renderer


STATUS_BY_OUTCOME: Dict[Outcome, int] = {
    Outcome.FULFILLED: status.HTTP_200_OK,
    Outcome.TIMED_OUT: status.HTTP_410_GONE,
    Outcome.BLOCKED: status.HTTP_403_FORBIDDEN,
}


# ============ Response DTOs ============


class VerifyResponseDTO(BaseModel):
    """验证访问响应 DTO

    Attributes:
        message: 状态码对应的标准描述
        reason: 拦截原因（仅 403 时有值）
    """

    message: str = Field(..., description="状态码对应的标准描述")
    reason: Optional[str] = Field(None, description="拦截原因（仅 403）")


def build_visit_response(result: VisitResult) -> Tuple[int, Dict[str, str]]:
    """
    把访问处理结果转换为状态码和响应体

    Args:
        result: 访问处理结果

    Returns:
        (状态码, 响应体)
    """
    if not result.found:
        status_code = status.HTTP_401_UNAUTHORIZED
    else:
        status_code = STATUS_BY_OUTCOME[result.outcome]

    body: Dict[str, str] = {}
    if result.outcome == Outcome.BLOCKED and result.reason is not None:
        body["reason"] = result.reason
    body["message"] = HTTPStatus(status_code).phrase
    return status_code, body


def create_verify_router(
    handler_getter: Optional[Callable[[], ResolveVisitHandler]],
    renderer: Optional[Renderer] = None,
    trust_forwarded_headers: bool = False,
) -> APIRouter:
    """
    创建验证路由

    每个服务实例各自持有一个路由，handler 由 DI 容器提供。

    Args:
        handler_getter: ResolveVisitHandler 获取器
        renderer: 响应渲染器，默认 JSON
        trust_forwarded_headers: 是否信任代理转发头

    Returns:
        包含 GET /verify/{identifier} 的路由
    """
    renderer = renderer or JsonRenderer()
    router = APIRouter(tags=["Verification"])

    # ============ Handler 依赖注入 ============

    def get_resolve_visit_handler() -> Optional[ResolveVisitHandler]:
        """获取 ResolveVisitHandler 实例"""
        if handler_getter is None:
            return None
        return handler_getter()

    # ============ API Endpoints ============

    @router.get(
        "/verify/{identifier}",
        responses={
            200: {"model": VerifyResponseDTO, "description": "验证成功"},
            401: {"model": VerifyResponseDTO, "description": "没有等待中的验证（不存在或已完成）"},
            403: {"model": VerifyResponseDTO, "description": "访问者地址被拦截"},
            410: {"model": VerifyResponseDTO, "description": "验证已超时"},
        },
        summary="完成点击验证",
        description="""
        访问验证链接，唤醒正在等待该标识符的调用方。

        **状态说明：**
        - **200 OK**: 验证成功
        - **401 Unauthorized**: 标识符没有等待中的验证（从未注册或已被处理）
        - **403 Forbidden**: 访问者地址在黑名单中，响应包含 reason
        - **410 Gone**: 超过等待时限

        每个标识符只会被处理一次，之后的访问都返回 401。
        """,
    )
    def verify(
        identifier: str,
        request: Request,
        handler: Optional[ResolveVisitHandler] = Depends(get_resolve_visit_handler),
    ):
        """
        完成点击验证

        - 查找标识符对应的等待记录
        - 按 超时 > 黑名单 > 成功 的顺序判定结果并唤醒等待方
        """
        if handler is None:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Handler not configured. Please configure dependency injection.",
            )

        command = ResolveVisitCommand(
            identifier=identifier,
            client_address=resolve_client_address(request, trust_forwarded_headers),
        )
        result = handler.handle(command)

        status_code, body = build_visit_response(result)
        return renderer.render(status_code, body)

    return router
