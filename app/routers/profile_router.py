# app/routers/profile_router.py
from typing import Any, Dict, List
import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import get_current_user_id
from app.schemas.common import MessageOut
from app.schemas.profile_schema import (
    EducationCreate, ExperienceCreate, ProfileOut, ProfileUpsert
)
from app.services.github_service import GithubService, get_http_client
from app.services.profile_service import ProfileService


# (注意) 此模組同時有公開與需登入的 API，登入依賴逐一加在路由上
router = APIRouter(
    prefix="/api/profile",
    tags=["Profile"],
)

@router.get("/me", response_model=ProfileOut)
async def get_my_profile(
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """獲取當前登入者的 Profile，尚未建立回傳 404"""
    service = ProfileService(db)
    return await service.get_my_profile(current_user_id)

@router.post("", response_model=ProfileOut)
async def upsert_my_profile(
    profile_data: ProfileUpsert,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    建立或更新當前登入者的 Profile。
    - status、skills 必填；skills 為逗號分隔字串
    - 未傳入的選填欄位保留原值
    """
    service = ProfileService(db)
    return await service.upsert_profile(current_user_id, profile_data)

@router.get("", response_model=List[ProfileOut])
async def list_profiles(db: AsyncSession = Depends(get_db)):
    """(公開) 所有 Profile"""
    service = ProfileService(db)
    return await service.list_profiles()

@router.get("/user/{user_id}", response_model=ProfileOut)
async def get_profile_by_user_id(user_id: str, db: AsyncSession = Depends(get_db)):
    """(公開) 指定 User ID 的 Profile"""
    service = ProfileService(db)
    return await service.get_profile_by_user_id(user_id)

@router.delete("", response_model=MessageOut)
async def delete_my_account(
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """刪除當前使用者的貼文、Profile 與帳號"""
    service = ProfileService(db)
    await service.delete_account(current_user_id)
    return {"msg": "User deleted"}

@router.put("/experience", response_model=ProfileOut)
async def add_experience(
    experience_data: ExperienceCreate,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = ProfileService(db)
    return await service.add_experience(current_user_id, experience_data)

@router.delete("/experience/{exp_id}", response_model=ProfileOut)
async def delete_experience(
    exp_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = ProfileService(db)
    return await service.delete_experience(current_user_id, exp_id)

@router.put("/education", response_model=ProfileOut)
async def add_education(
    education_data: EducationCreate,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = ProfileService(db)
    return await service.add_education(current_user_id, education_data)

@router.delete("/education/{edu_id}", response_model=ProfileOut)
async def delete_education(
    edu_id: str,
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    service = ProfileService(db)
    return await service.delete_education(current_user_id, edu_id)

@router.get("/github/{username}", response_model=List[Dict[str, Any]])
async def get_github_repos(
    username: str,
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """(公開) 代理 GitHub API，回傳最近建立的 5 個 repos"""
    service = GithubService(client)
    return await service.get_user_repos(username)
