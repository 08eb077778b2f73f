"""
Gotcha - 点击验证服务入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000

配置通过环境变量或 .env 文件提供，例如：
    VERIFY_TIMEOUT_SECONDS=120
    BLOCK_LIST='{"9.9.9.9": "abuse"}'
    USE_TLS=true TLS_CERT=certs/server.crt TLS_KEY=certs/server.key
"""

import sys

from infrastructure.config import configure_logging, get_settings
from interfaces.api import ListenerStartupError, VerificationServer

settings = get_settings()
configure_logging(settings)

# 创建验证服务
server = VerificationServer(settings)

# 导出 FastAPI app (用于 uvicorn)
app = server.fastapi


if __name__ == "__main__":
    print("=" * 50)
    print(f"启动 {settings.app_name}")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  GET  /verify/{identifier}  - 完成点击验证")
    print()
    print(f"监听: {settings.listen_address} (TLS: {'on' if settings.use_tls else 'off'})")
    print(f"等待时限: {settings.verify_timeout_seconds}s, 黑名单: {len(settings.block_list)} 条")
    print("=" * 50)

    try:
        server.serve()
    except ListenerStartupError as e:
        print(f"启动失败: {e}", file=sys.stderr)
        sys.exit(1)
