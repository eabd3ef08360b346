# app/routers/post_router.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.common import MessageOut
from app.schemas.post_schema import CommentCreate, CommentOut, LikeOut, PostCreate, PostOut
from app.services.post_service import PostService


router = APIRouter(
    prefix="/api/posts",
    tags=["Posts"],
    # (重要) 整個路由都需要登入
    dependencies=[Depends(get_current_user_id)]
)

@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    建立貼文。name / avatar 取自登入者當下的資料。
    """
    service = PostService(db)
    return await service.create_post(post_data, current_user_id)

@router.get("", response_model=List[PostOut])
async def list_posts(db: AsyncSession = Depends(get_db)):
    """所有貼文，最新的在前"""
    service = PostService(db)
    return await service.list_posts()

@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: str, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    # Service 層會處理 404 (包含 id 格式錯誤)
    return await service.get_post(post_id)

@router.delete("/{post_id}", response_model=MessageOut)
async def delete_post(
    post_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """刪除貼文 (僅限作者)"""
    service = PostService(db)
    await service.delete_post(post_id, current_user_id)
    return {"msg": "Post removed"}

@router.put("/like/{post_id}", response_model=List[LikeOut])
async def like_post(
    post_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = PostService(db)
    return await service.like_post(post_id, current_user_id)

@router.put("/unlike/{post_id}", response_model=List[LikeOut])
async def unlike_post(
    post_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = PostService(db)
    return await service.unlike_post(post_id, current_user_id)

@router.put("/comment/{post_id}", response_model=List[CommentOut])
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """新增留言，回傳整個留言列表 (最新的在前)"""
    service = PostService(db)
    return await service.add_comment(post_id, comment_data, current_user_id)

@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentOut])
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """刪除留言 (僅限留言者本人)"""
    service = PostService(db)
    return await service.delete_comment(post_id, comment_id, current_user_id)
