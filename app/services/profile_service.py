# app/services/profile_service.py
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.profile import Profile
from app.repositories.post_repo import PostRepository
from app.repositories.profile_repo import ProfileRepository
from app.repositories.user_repo import UserRepository
from app.schemas.profile_schema import EducationCreate, ExperienceCreate, ProfileUpsert
from app.utils.embedded_list import find_entry, new_entry, prepend_entry, remove_entry
from app.utils.identifiers import new_id

logger = logging.getLogger(__name__)

NO_PROFILE = "There is no profile for this user"

class ProfileService:
    def __init__(self, db: AsyncSession):
        self.repo = ProfileRepository(db)
        self.post_repo = PostRepository(db)
        self.user_repo = UserRepository(db)

    async def _get_my_profile_or_404(self, user_id: str) -> Profile:
        # Profile 查詢本身以登入者為範圍，子項目只會在自己的 Profile 中找
        profile = await self.repo.get_profile_by_user_id(user_id)
        if not profile:
            raise NotFoundError(NO_PROFILE)
        return profile

    async def get_my_profile(self, user_id: str) -> Profile:
        return await self._get_my_profile_or_404(user_id)

    async def upsert_profile(self, user_id: str, data: ProfileUpsert) -> Profile:
        """
        建立或更新 Profile。
        - 未傳入的選填欄位不覆蓋 (更新時保留舊值)
        - skills 以逗號切開
        - social 的 key 逐一合併
        """
        # token 在帳號刪除後仍有效，不能替已不存在的 User 建立 Profile
        if not await self.user_repo.get_user_by_id(user_id):
            raise NotFoundError("User not found")

        fields = data.supplied_fields()
        fields["status"] = data.status
        fields["skills"] = data.skill_list()
        social = data.supplied_social()

        profile = await self.repo.get_profile_by_user_id(user_id)

        # 情況 1: 尚未建立
        if profile is None:
            new_profile = Profile(
                profile_id=new_id(),
                user_id=user_id,
                social=social,
                experience=[],
                education=[],
                **fields,
            )
            logger.info(f"Profile created for user {user_id}")
            return await self.repo.create_profile(new_profile)

        # 情況 2: 已存在，只更新有傳入的欄位
        for key, value in fields.items():
            setattr(profile, key, value)
        if social:
            profile.social = {**(profile.social or {}), **social}

        logger.info(f"Profile updated for user {user_id}: {sorted(fields)}")
        return await self.repo.save_profile(profile)

    async def list_profiles(self) -> List[Profile]:
        return await self.repo.list_profiles()

    async def get_profile_by_user_id(self, user_id: str) -> Profile:
        """公開查詢 (id 格式錯誤也回傳 404)"""
        profile = await self.repo.get_profile_by_user_id(user_id)
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    async def delete_account(self, user_id: str) -> None:
        """
        刪除帳號：貼文 -> Profile -> User。
        三個步驟各自 commit，沒有交易；中途失敗會留下部分資料 (已知限制)。
        """
        steps = (
            ("posts", self.post_repo.delete_posts_by_user_id),
            ("profile", self.repo.delete_profile_by_user_id),
            ("user", self.user_repo.delete_user),
        )
        for step_name, delete_step in steps:
            try:
                count = await delete_step(user_id)
            except Exception:
                logger.error(
                    f"Account deletion for {user_id} stopped at step '{step_name}'; "
                    "earlier steps are not rolled back"
                )
                raise
            logger.info(f"Account deletion for {user_id}: removed {count} {step_name}")

    # --- 經歷 ---
    async def add_experience(self, user_id: str, data: ExperienceCreate) -> Profile:
        profile = await self._get_my_profile_or_404(user_id)
        entry = new_entry(**data.model_dump(mode="json", by_alias=True))
        profile.experience = prepend_entry(profile.experience, entry)
        return await self.repo.save_profile(profile)

    async def delete_experience(self, user_id: str, exp_id: str) -> Profile:
        profile = await self._get_my_profile_or_404(user_id)
        entry = find_entry(profile.experience, exp_id)
        if entry is None:
            raise NotFoundError("Experience not found")
        profile.experience = remove_entry(profile.experience, entry)
        return await self.repo.save_profile(profile)

    # --- 學歷 ---
    async def add_education(self, user_id: str, data: EducationCreate) -> Profile:
        profile = await self._get_my_profile_or_404(user_id)
        entry = new_entry(**data.model_dump(mode="json", by_alias=True))
        profile.education = prepend_entry(profile.education, entry)
        return await self.repo.save_profile(profile)

    async def delete_education(self, user_id: str, edu_id: str) -> Profile:
        profile = await self._get_my_profile_or_404(user_id)
        entry = find_entry(profile.education, edu_id)
        if entry is None:
            raise NotFoundError("Education not found")
        profile.education = remove_entry(profile.education, entry)
        return await self.repo.save_profile(profile)
