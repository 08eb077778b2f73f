"""客户端地址解析测试"""

from starlette.requests import Request

from interfaces.api.client_address import resolve_client_address


def make_request(headers=None, client=("1.1.1.1", 12345)):
    """构造请求对象"""
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/verify/abc",
        "headers": [
            (name.lower().encode(), value.encode()) for name, value in (headers or {}).items()
        ],
        "client": client,
    }
    return Request(scope)


class TestResolveClientAddress:
    """resolve_client_address 测试"""

    def test_uses_peer_address(self):
        """测试默认使用直连地址"""
        assert resolve_client_address(make_request()) == "1.1.1.1"

    def test_ignores_forwarded_headers_when_untrusted(self):
        """测试不信任代理时忽略转发头"""
        request = make_request({"X-Forwarded-For": "9.9.9.9", "X-Real-IP": "8.8.8.8"})

        assert resolve_client_address(request) == "1.1.1.1"

    def test_first_forwarded_hop(self):
        """测试取 X-Forwarded-For 第一跳"""
        request = make_request({"X-Forwarded-For": " 9.9.9.9 , 10.0.0.1"})

        assert resolve_client_address(request, trust_forwarded_headers=True) == "9.9.9.9"

    def test_real_ip_fallback(self):
        """测试没有 X-Forwarded-For 时使用 X-Real-IP"""
        request = make_request({"X-Real-IP": "8.8.8.8"})

        assert resolve_client_address(request, trust_forwarded_headers=True) == "8.8.8.8"

    def test_trusted_without_headers_uses_peer(self):
        """测试信任代理但没有转发头时使用直连地址"""
        assert resolve_client_address(make_request(), trust_forwarded_headers=True) == "1.1.1.1"

    def test_missing_client(self):
        """测试无法获取地址"""
        assert resolve_client_address(make_request(client=None)) is None
