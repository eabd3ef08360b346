# app/core/config.py
# 應用程式設定 (資料庫連線字串、JWT 秘鑰、GitHub API 等)
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # 資料庫設定 (async driver, e.g. mysql+aiomysql://...)
    DATABASE_URL: str
    # 印出 SQL 語句
    SQL_ECHO: bool = False

    # JWT 設定
    JWT_SECRET_KEY: str
    # JWT 演算法
    JWT_ALGORITHM: str = "HS256"
    # 存取令牌過期時間（分鐘）
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 6000

    # GitHub API (個人檔案頁面的 repo 列表)
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # 環境變數檔案
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# 建立設定實例
settings = Settings()
