"""
应用配置
从环境变量 / .env 读取
"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "hotel-manager"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./hotel_manager.db"
    SQL_ECHO: bool = False

    # 表名前缀：同一数据库中承载多个项目时使用，默认不加前缀
    TABLE_PREFIX: str = ""

    # JWT 配置
    SECRET_KEY: str = "hotel-manager-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# 全局设置实例
settings = Settings()
