"""响应渲染器测试"""

import json

from interfaces.api.renderers import HtmlRenderer, JsonRenderer


class TestJsonRenderer:
    """JsonRenderer 测试"""

    def test_renders_body_as_json(self):
        """测试输出 JSON"""
        response = JsonRenderer().render(403, {"message": "Forbidden", "reason": "abuse"})

        assert response.status_code == 403
        assert response.media_type == "application/json"
        assert json.loads(response.body) == {"message": "Forbidden", "reason": "abuse"}


class TestHtmlRenderer:
    """HtmlRenderer 测试"""

    def test_renders_message_and_reason(self):
        """测试页面包含状态描述和原因"""
        response = HtmlRenderer(title="Gotcha").render(
            403, {"message": "Forbidden", "reason": "abuse"}
        )
        html = response.body.decode()

        assert response.status_code == 403
        assert response.media_type == "text/html"
        assert "<title>Gotcha</title>" in html
        assert "Forbidden" in html
        assert "<p>abuse</p>" in html
        assert 'class="fail"' in html

    def test_escapes_reason(self):
        """测试原因被转义"""
        response = HtmlRenderer().render(403, {"message": "Forbidden", "reason": "<script>"})

        assert "<script>" not in response.body.decode()
        assert "&lt;script&gt;" in response.body.decode()

    def test_success_page_without_reason(self):
        """测试成功页面"""
        html = HtmlRenderer().render(200, {"message": "OK"}).body.decode()

        assert 'class="ok"' in html
        assert "<p>" not in html
