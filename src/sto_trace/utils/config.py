"""配置管理"""

import logging
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """客户端配置，环境变量前缀 STO_"""
    app_key: str = Field(default="", description="开放平台appKey")
    app_secret: str = Field(default="", description="开放平台appSecret")
    from_code: str = Field(default="", description="开放平台fromCode")
    base_url: str = Field(
        default="https://cloudinter-linkgateway.sto.cn/gateway/link.do",
        description="开放平台网关地址"
    )
    request_timeout: float = Field(default=30.0, gt=0, description="请求超时时间（秒）")
    max_retries: int = Field(default=3, ge=0, description="最大重试次数")
    debug: bool = Field(default=False, description="调试模式")
    log_level: str = Field(default="INFO", description="日志级别")

    model_config = SettingsConfigDict(
        env_prefix="STO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """获取配置实例"""
    global _settings
    if _settings is None:
        env_file_path = Path(".env")
        if not env_file_path.exists():
            logger.debug(f"环境配置文件 {env_file_path.absolute()} 不存在，仅使用环境变量和默认配置")
        else:
            logger.info(f"加载环境配置文件: {env_file_path.absolute()}")

        _settings = Settings()
        logger.info(
            f"配置加载成功 - 网关: {_settings.base_url}, 超时: {_settings.request_timeout}s, "
            f"最大重试: {_settings.max_retries}, 调试模式: {_settings.debug}"
        )

    return _settings


def reset_settings() -> None:
    """清除缓存的配置实例"""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> None:
    """按配置初始化日志"""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
