"""验证 API 路由测试"""

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from application.commands.verification.resolve_visit import (
    ResolveVisitCommand,
    ResolveVisitHandler,
    VisitResult,
)
from domain.verification.value_objects.outcome import Outcome
from interfaces.api.routes.verify import build_visit_response, create_verify_router


@pytest.fixture
def mock_handler():
    """创建 mock handler"""
    return Mock(spec=ResolveVisitHandler)


def make_client(handler_getter, **router_kwargs):
    app = FastAPI()
    app.include_router(create_verify_router(handler_getter, **router_kwargs))
    return TestClient(app)


@pytest.fixture
def client(mock_handler):
    """创建测试客户端"""
    return make_client(lambda: mock_handler)


class TestVerifyRouteStatuses:
    """GET /verify/{identifier} 状态码测试"""

    def test_returns_200_for_fulfilled(self, client, mock_handler):
        """测试验证成功返回 200"""
        mock_handler.handle.return_value = VisitResult(found=True, outcome=Outcome.FULFILLED)

        response = client.get("/verify/abc")

        assert response.status_code == 200
        assert response.json() == {"message": "OK"}

    def test_returns_410_for_timed_out(self, client, mock_handler):
        """测试超时返回 410"""
        mock_handler.handle.return_value = VisitResult(found=True, outcome=Outcome.TIMED_OUT)

        response = client.get("/verify/abc")

        assert response.status_code == 410
        assert response.json() == {"message": "Gone"}

    def test_returns_403_with_reason_for_blocked(self, client, mock_handler):
        """测试被拦截返回 403 并携带原因"""
        mock_handler.handle.return_value = VisitResult(
            found=True, outcome=Outcome.BLOCKED, reason="abuse"
        )

        response = client.get("/verify/abc")

        assert response.status_code == 403
        assert response.json() == {"message": "Forbidden", "reason": "abuse"}

    def test_returns_401_when_not_found(self, client, mock_handler):
        """测试没有等待中的验证返回 401"""
        mock_handler.handle.return_value = VisitResult(found=False)

        response = client.get("/verify/abc")

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}


class TestVerifyRouteCommand:
    """命令构建测试"""

    def test_passes_identifier_and_client_address(self, client, mock_handler):
        """测试传入标识符和访问者地址"""
        mock_handler.handle.return_value = VisitResult(found=False)

        client.get("/verify/some-token_123")

        mock_handler.handle.assert_called_once_with(
            ResolveVisitCommand(identifier="some-token_123", client_address="testclient")
        )

    def test_ignores_forwarded_header_by_default(self, client, mock_handler):
        """测试默认不信任 X-Forwarded-For"""
        mock_handler.handle.return_value = VisitResult(found=False)

        client.get("/verify/abc", headers={"X-Forwarded-For": "9.9.9.9"})

        command = mock_handler.handle.call_args.args[0]
        assert command.client_address == "testclient"

    def test_uses_forwarded_header_when_trusted(self, mock_handler):
        """测试信任代理时使用 X-Forwarded-For"""
        mock_handler.handle.return_value = VisitResult(found=False)
        client = make_client(lambda: mock_handler, trust_forwarded_headers=True)

        client.get("/verify/abc", headers={"X-Forwarded-For": "9.9.9.9, 10.0.0.1"})

        command = mock_handler.handle.call_args.args[0]
        assert command.client_address == "9.9.9.9"


class TestVerifyRouteRenderer:
    """渲染器测试"""

    def test_uses_custom_renderer(self, mock_handler):
        """测试使用自定义渲染器"""
        from fastapi.responses import PlainTextResponse

        mock_handler.handle.return_value = VisitResult(
            found=True, outcome=Outcome.BLOCKED, reason="abuse"
        )
        renderer = Mock()
        renderer.render.return_value = PlainTextResponse("blocked", status_code=403)
        client = make_client(lambda: mock_handler, renderer=renderer)

        response = client.get("/verify/abc")

        renderer.render.assert_called_once_with(403, {"reason": "abuse", "message": "Forbidden"})
        assert response.text == "blocked"


class TestVerifyRouteHandlerNotConfigured:
    """Handler 未配置测试"""

    def test_returns_500_when_handler_not_configured(self):
        """测试 handler 未配置返回 500"""
        client = make_client(None)

        response = client.get("/verify/abc")

        assert response.status_code == 500
        assert "Handler not configured" in response.json()["detail"]


class TestBuildVisitResponse:
    """build_visit_response 测试"""

    @pytest.mark.parametrize(
        "result, expected_status, expected_message",
        [
            (VisitResult(found=True, outcome=Outcome.FULFILLED), 200, "OK"),
            (VisitResult(found=True, outcome=Outcome.TIMED_OUT), 410, "Gone"),
            (VisitResult(found=True, outcome=Outcome.BLOCKED, reason="x"), 403, "Forbidden"),
            (VisitResult(found=False), 401, "Unauthorized"),
        ],
    )
    def test_status_mapping(self, result, expected_status, expected_message):
        """测试结果到状态码的映射"""
        status_code, body = build_visit_response(result)

        assert status_code == expected_status
        assert body["message"] == expected_message

    def test_reason_only_for_blocked(self):
        """测试只有拦截结果包含 reason"""
        _, body = build_visit_response(VisitResult(found=True, outcome=Outcome.FULFILLED))

        assert "reason" not in body
