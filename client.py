"""
Gotcha 客户端

模拟用户点击验证链接，便于手动做端到端检查。

使用示例：
    python client.py abc
    python client.py abc --base-url https://verify.example.com
"""

import argparse
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

import httpx

# ========== 配置 ==========
BASE_URL = "http://127.0.0.1:8000"


@dataclass
class VisitResponse:
    """访问结果

    Attributes:
        status_code: HTTP 状态码
        message: 状态描述
        reason: 拦截原因（仅 403）
    """

    status_code: int
    message: str
    reason: Optional[str] = None

    @property
    def fulfilled(self) -> bool:
        return self.status_code == 200


class VerifyClient:
    """Gotcha API 客户端"""

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @staticmethod
    def _verify_path(identifier: str) -> str:
        """验证路径，标识符整体转义（含 / ? # %）"""
        return f"/verify/{quote(identifier, safe='')}"

    def verification_url(self, identifier: str) -> str:
        """生成验证链接"""
        return f"{self.base_url}{self._verify_path(identifier)}"

    def visit(self, identifier: str) -> VisitResponse:
        """访问验证链接"""
        response = self._client.get(self._verify_path(identifier))
        try:
            data = response.json()
        except ValueError:
            # 非 JSON 渲染器（如 HTML）只返回状态码
            data = {}
        return VisitResponse(
            status_code=response.status_code,
            message=data.get("message", response.reason_phrase),
            reason=data.get("reason"),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "VerifyClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def main():
    parser = argparse.ArgumentParser(description="访问点击验证链接")
    parser.add_argument("identifier", help="验证标识符")
    parser.add_argument("--base-url", default=BASE_URL, help="服务地址")
    args = parser.parse_args()

    with VerifyClient(args.base_url) as client:
        print(f"访问 {client.verification_url(args.identifier)}")
        result = client.visit(args.identifier)
        print(f"状态: {result.status_code} {result.message}")
        if result.reason:
            print(f"原因: {result.reason}")


if __name__ == "__main__":
    main()
