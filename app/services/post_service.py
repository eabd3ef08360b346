# app/services/post_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.models.post import Post
from app.models.user import User
from app.repositories.post_repo import PostRepository
from app.repositories.user_repo import UserRepository
from app.schemas.post_schema import CommentCreate, PostCreate
from app.utils.embedded_list import find_entry, new_entry, prepend_entry, remove_entry
from app.utils.identifiers import new_id

logger = logging.getLogger(__name__)

class PostService:
    def __init__(self, db: AsyncSession):
        self.post_repo = PostRepository(db)
        self.user_repo = UserRepository(db)

    # 輔助函式：找不到貼文就丟 404
    async def _get_post_or_404(self, post_id: str) -> Post:
        post = await self.post_repo.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        return post

    async def _get_author(self, user_id: str) -> User:
        # Token 有效但帳號已刪除
        user = await self.user_repo.get_user_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def create_post(self, data: PostCreate, user_id: str) -> Post:
        user = await self._get_author(user_id)
        post = Post(
            post_id=new_id(),
            user_id=user.user_id,
            text=data.text,
            # 快照：之後 User 改名不會同步
            name=user.name,
            avatar=user.avatar,
            likes=[],
            comments=[],
        )
        created = await self.post_repo.create_post(post)
        logger.info(f"Post {created.post_id} created by {user_id}")
        return created

    async def list_posts(self) -> List[Post]:
        return await self.post_repo.list_posts()

    async def get_post(self, post_id: str) -> Post:
        return await self._get_post_or_404(post_id)

    async def delete_post(self, post_id: str, user_id: str) -> None:
        post = await self._get_post_or_404(post_id)
        if post.user_id != user_id:
            logger.warning(f"User {user_id} tried to delete post {post_id}")
            raise UnauthorizedError("User not authorized")
        await self.post_repo.delete_post(post)
        logger.info(f"Post {post_id} removed")

    async def like_post(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        post = await self._get_post_or_404(post_id)

        # 同一使用者只能按讚一次 (完全相等比對)
        if find_entry(post.likes, user_id, key="user_id") is not None:
            raise ConflictError("Post already liked")

        post.likes = prepend_entry(post.likes, new_entry(user_id=user_id))
        saved = await self.post_repo.save_post(post)
        return saved.likes

    async def unlike_post(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        post = await self._get_post_or_404(post_id)

        like = find_entry(post.likes, user_id, key="user_id")
        if like is None:
            raise ConflictError("Post has not yet been liked")

        post.likes = remove_entry(post.likes, like)
        saved = await self.post_repo.save_post(post)
        return saved.likes

    async def add_comment(
        self, post_id: str, data: CommentCreate, user_id: str
    ) -> List[Dict[str, Any]]:
        post = await self._get_post_or_404(post_id)
        user = await self._get_author(user_id)

        comment = new_entry(
            user_id=user.user_id,
            text=data.text,
            name=user.name,
            avatar=user.avatar,
            date=datetime.now(timezone.utc).isoformat(),
        )
        post.comments = prepend_entry(post.comments, comment)
        saved = await self.post_repo.save_post(post)
        return saved.comments

    async def delete_comment(
        self, post_id: str, comment_id: str, user_id: str
    ) -> List[Dict[str, Any]]:
        post = await self._get_post_or_404(post_id)

        comment = find_entry(post.comments, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")

        # 只有留言者本人可以刪除
        if comment["user_id"] != user_id:
            logger.warning(f"User {user_id} tried to delete comment {comment_id}")
            raise UnauthorizedError("User not authorized")

        post.comments = remove_entry(post.comments, comment)
        saved = await self.post_repo.save_post(post)
        return saved.comments
