"""客户端地址解析"""

from typing import Optional

from fastapi import Request


def resolve_client_address(request: Request, trust_forwarded_headers: bool = False) -> Optional[str]:
    """
    获取访问者地址

    默认使用直连地址。部署在反向代理之后时，开启 trust_forwarded_headers
    优先取 X-Forwarded-For 的第一跳，其次取 X-Real-IP。

    Args:
        request: 请求对象
        trust_forwarded_headers: 是否信任代理转发头

    Returns:
        客户端地址，无法获取时返回 None
    """
    if trust_forwarded_headers:
        xff = (request.headers.get("X-Forwarded-For") or "").split(",")[0].strip()
        if xff:
            return xff
        real_ip = (request.headers.get("X-Real-IP") or "").strip()
        if real_ip:
            return real_ip

    return getattr(request.client, "host", None) or None
