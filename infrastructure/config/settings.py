"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from datetime import timedelta
from typing import Dict, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "Gotcha"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 监听配置 ==========
    listen_host: str = "0.0.0.0"
    listen_port: int = Field(default=8000, ge=0, le=65535)

    # ========== TLS 配置 ==========
    use_tls: bool = False
    tls_cert: str = ""  # 证书文件路径
    tls_key: str = ""  # 私钥文件路径

    # ========== 验证配置 ==========
    verify_timeout_seconds: float = Field(default=300.0, gt=0)
    # 地址 -> 原因，环境变量中使用 JSON，如 BLOCK_LIST='{"9.9.9.9": "abuse"}'
    block_list: Dict[str, str] = Field(default_factory=dict)
    # 是否信任 X-Forwarded-For / X-Real-IP（部署在反向代理之后时开启）
    trust_forwarded_headers: bool = False
    # 过期记录后台清理间隔（秒），0 表示关闭
    sweep_interval_seconds: float = Field(default=0.0, ge=0)

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def verify_timeout(self) -> timedelta:
        """等待时限"""
        return timedelta(seconds=self.verify_timeout_seconds)

    @property
    def listen_address(self) -> str:
        """监听地址 host:port"""
        return f"{self.listen_host}:{self.listen_port}"

    @property
    def sweep_enabled(self) -> bool:
        """是否开启后台清理"""
        return self.sweep_interval_seconds > 0


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
