# app/core/database.py
from typing import AsyncIterator, Tuple
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
)
from sqlalchemy.orm import declarative_base

# 建立 ORM Model 基底類別
Base = declarative_base()


def create_engine_and_sessionmaker(
    database_url: str, echo: bool = False
) -> Tuple[AsyncEngine, async_sessionmaker]:
    """
    建立非同步引擎與 Session 工廠。
    由 main.py 的 lifespan 呼叫，結果放在 app.state，不使用全域變數。
    """
    engine_kwargs = {"echo": echo}
    if not database_url.startswith("sqlite"):
        # 每次從連線池取連線前，先 PING 一次，確保連線有效
        engine_kwargs["pool_pre_ping"] = True

    engine = create_async_engine(database_url, **engine_kwargs)
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return engine, session_factory


async def create_tables(engine: AsyncEngine) -> None:
    """建立所有資料表 (已存在則略過)"""
    # 匯入所有 Model，讓 Base.metadata 註冊到它們
    from app.models import post, profile, user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# (重要) 取得 DB Session 的 Dependency
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI Dependency: 從 app.state 的 Session 工廠取得非同步 session"""
    session_factory: async_sessionmaker = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
