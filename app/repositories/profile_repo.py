# app/repositories/profile_repo.py
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from app.models.profile import Profile
from app.utils.identifiers import is_valid_id


class ProfileRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_profile_by_user_id(self, user_id: str) -> Profile | None:
        """
        依 user_id 取得 Profile (一併載入 owner 的 name / avatar)。
        populate_existing: 一律以資料庫目前的內容為準 (read-modify-write 的 read)
        """
        if not is_valid_id(user_id):
            return None
        stmt = (
            select(Profile)
            .where(Profile.user_id == user_id)
            .options(selectinload(Profile.user))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def list_profiles(self) -> List[Profile]:
        stmt = select(Profile).options(selectinload(Profile.user)).order_by(Profile.date)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_profile(self, profile: Profile) -> Profile:
        self.db.add(profile)
        await self.db.commit()
        # 不用 refresh()，重新查詢以載入 user 關聯
        return await self.get_profile_by_user_id(profile.user_id)

    async def save_profile(self, profile: Profile) -> Profile:
        """整份文件寫回 (子清單不是獨立資源)"""
        await self.db.commit()
        return await self.get_profile_by_user_id(profile.user_id)

    async def delete_profile_by_user_id(self, user_id: str) -> int:
        result = await self.db.execute(delete(Profile).where(Profile.user_id == user_id))
        await self.db.commit()
        return result.rowcount
