import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import create_engine_and_sessionmaker, create_tables
from app.core.exceptions import register_exception_handlers
from app.routers import auth_router, post_router, profile_router, user_router


# 設定基礎日誌
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__) # 建立一個 logger 實例


@asynccontextmanager
async def lifespan(app: FastAPI):
    """啟動時建立資料庫引擎 (放在 app.state)，關閉時釋放連線池"""
    engine, session_factory = create_engine_and_sessionmaker(
        settings.DATABASE_URL, echo=settings.SQL_ECHO
    )
    await create_tables(engine)
    app.state.engine = engine
    app.state.session_factory = session_factory
    logger.info("Database connected")
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Database connection closed")


def create_app() -> FastAPI:
    app = FastAPI(title="DevConnector API", lifespan=lifespan)

    # --- 設定 CORS (跨來源資源共用) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"], # 允許所有 HTTP 方法
        allow_headers=["*"], # 允許所有 HTTP 標頭
    )

    # --- 錯誤處理 (統一轉換為 HTTP 回應) ---
    register_exception_handlers(app)

    # --- 根路徑 ---
    @app.get("/")
    def read_root():
        return {"status": "success", "message": "API running"}

    # --- 載入 API 路由 ---
    app.include_router(auth_router.router)
    app.include_router(user_router.router)
    app.include_router(profile_router.router)
    app.include_router(post_router.router)

    return app


app = create_app()
