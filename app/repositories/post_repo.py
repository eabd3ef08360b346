# app/repositories/post_repo.py
import logging
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.post import Post
from app.utils.identifiers import is_valid_id

logger = logging.getLogger(__name__)

class PostRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_post(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.commit()
        # 重新查詢，回傳與 GET 相同的內容
        return await self.get_post_by_id(post.post_id)

    async def get_post_by_id(self, post_id: str) -> Post | None:
        """id 格式錯誤時直接回傳 None (與查無資料相同)"""
        if not is_valid_id(post_id):
            logger.info(f"Malformed post id: {post_id}")
            return None
        stmt = (
            select(Post)
            .where(Post.post_id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_posts(self) -> List[Post]:
        """所有貼文，最新的在前"""
        stmt = select(Post).order_by(Post.date.desc())
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def save_post(self, post: Post) -> Post:
        await self.db.commit()
        return await self.get_post_by_id(post.post_id)

    async def delete_post(self, post: Post) -> None:
        await self.db.delete(post)
        await self.db.commit()

    async def delete_posts_by_user_id(self, user_id: str) -> int:
        result = await self.db.execute(delete(Post).where(Post.user_id == user_id))
        await self.db.commit()
        return result.rowcount
