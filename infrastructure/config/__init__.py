"""配置模块"""

from infrastructure.config.logging import configure_logging
from infrastructure.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
