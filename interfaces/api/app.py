"""
点击验证服务

VerificationServer 持有注册表、配置和渲染器，提供：
- 阻塞等待某个标识符被访问（await_verification）
- 独立监听（serve），可选 TLS
- 挂载到外部 FastAPI 应用或路由（attach），此时不启动监听
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional, Union

import uvicorn
from fastapi import APIRouter, FastAPI

from application.commands.verification import AwaitVerificationCommand
from application.verification.services.expired_wait_sweeper import ExpiredWaitSweeper
from domain.verification.repositories.waiter_registry import WaiterRegistry
from domain.verification.value_objects.outcome import Outcome
from infrastructure.config.settings import Settings
from infrastructure.containers import Bootstrap, bootstrap
from interfaces.api.exceptions import ListenerStartupError
from interfaces.api.renderers import JsonRenderer, Renderer
from interfaces.api.routes.verify import create_verify_router


class VerificationServer:
    """点击验证服务

    用法：
        server = VerificationServer(settings)
        threading.Thread(target=server.serve, daemon=True).start()

        outcome = server.await_verification("abc")  # 阻塞直到 /verify/abc 被访问
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        renderer: Optional[Renderer] = None,
        boot: Optional[Bootstrap] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化服务

        Args:
            settings: 应用配置，默认从环境变量读取
            renderer: 响应渲染器，默认 JSON
            boot: 已装配的容器（测试时可传入 override 过的容器）
            logger: 日志记录器
        """
        self._boot = boot or bootstrap(settings)
        self._logger = logger or logging.getLogger(__name__)
        self.settings: Settings = self._boot.config.settings()
        self.renderer: Renderer = renderer or JsonRenderer()
        self.router = create_verify_router(
            handler_getter=self._boot.app.resolve_visit_handler,
            renderer=self.renderer,
            trust_forwarded_headers=self.settings.trust_forwarded_headers,
        )
        self._fastapi: Optional[FastAPI] = None
        self._attached = False

    @property
    def registry(self) -> WaiterRegistry:
        """等待者注册表"""
        return self._boot.infra.waiter_registry()

    @property
    def sweeper(self) -> Optional[ExpiredWaitSweeper]:
        """过期记录清理服务，未开启时为 None"""
        if not self.settings.sweep_enabled:
            return None
        return self._boot.app.expired_wait_sweeper()

    @property
    def is_attached(self) -> bool:
        """是否已挂载到外部路由"""
        return self._attached

    # ============ 等待 ============

    def await_verification(self, identifier: str) -> Outcome:
        """
        等待 GET /verify/{identifier} 被访问（阻塞）

        Args:
            identifier: 标识符

        Returns:
            FULFILLED、TIMED_OUT 或 BLOCKED

        Raises:
            DuplicateIdentifierException: 同一标识符已有等待中的记录
        """
        handler = self._boot.app.await_verification_handler()
        return handler.handle(AwaitVerificationCommand(identifier=identifier))

    async def await_verification_async(self, identifier: str) -> Outcome:
        """
        在线程中等待，供异步代码使用

        协程被取消时等待线程不会退出，记录会保留到被访问或被清理。
        """
        return await asyncio.to_thread(self.await_verification, identifier)

    def is_pending(self, identifier: str) -> bool:
        """标识符是否有等待中的记录"""
        return self.registry.is_pending(identifier)

    @property
    def pending_count(self) -> int:
        """等待中的记录数量"""
        return self.registry.pending_count

    # ============ HTTP ============

    def attach(self, target: Union[FastAPI, APIRouter]) -> None:
        """
        挂载到外部 FastAPI 应用或路由

        只添加 /verify/{identifier} 路由，不启动监听。
        需要后台清理时由宿主应用负责启动 sweeper。

        Args:
            target: 外部应用或路由
        """
        target.include_router(self.router)
        self._attached = True
        self._logger.info("Verification route attached to external router")

    @property
    def fastapi(self) -> FastAPI:
        """独立运行时使用的 FastAPI 应用"""
        if self._fastapi is None:
            self._fastapi = create_app(self)
        return self._fastapi

    def serve(self) -> None:
        """
        启动 HTTP 服务（阻塞）

        已挂载到外部路由时直接返回。

        Raises:
            ListenerStartupError: 端口绑定失败或 TLS 证书/私钥加载失败
        """
        if self._attached:
            self._logger.info("Attached to external router, not starting listener")
            return

        ssl_options = {}
        if self.settings.use_tls:
            if not (self.settings.tls_cert and self.settings.tls_key):
                raise ListenerStartupError("tls_cert and tls_key are required when use_tls is enabled")
            for path in (self.settings.tls_cert, self.settings.tls_key):
                if not os.path.isfile(path):
                    raise ListenerStartupError(f"TLS file not found: {path}")
            ssl_options = {
                "ssl_certfile": self.settings.tls_cert,
                "ssl_keyfile": self.settings.tls_key,
            }

        config = uvicorn.Config(
            self.fastapi,
            host=self.settings.listen_host,
            port=self.settings.listen_port,
            log_config=None,
            **ssl_options,
        )
        server = uvicorn.Server(config)

        scheme = "https" if self.settings.use_tls else "http"
        self._logger.info(f"Starting verification server on {scheme}://{self.settings.listen_address}")

        try:
            server.run()
        except OSError as e:
            raise ListenerStartupError(
                f"Failed to start listener on {self.settings.listen_address}: {e}"
            ) from e
        except SystemExit as e:
            # uvicorn 绑定端口失败时直接 sys.exit
            raise ListenerStartupError(
                f"Failed to start listener on {self.settings.listen_address}"
            ) from e

        if not server.started:
            raise ListenerStartupError(
                f"Failed to start listener on {self.settings.listen_address}"
            )


def create_app(server: VerificationServer) -> FastAPI:
    """
    创建独立运行的 FastAPI 应用

    开启清理时在应用生命周期内运行 sweeper。

    Args:
        server: 验证服务

    Returns:
        FastAPI 应用
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper = server.sweeper
        if sweeper is not None:
            await sweeper.start()
        try:
            yield
        finally:
            if sweeper is not None:
                await sweeper.stop()

    app = FastAPI(
        title=server.settings.app_name,
        version=server.settings.app_version,
        debug=server.settings.debug,
        lifespan=lifespan,
    )
    app.include_router(server.router)
    return app
