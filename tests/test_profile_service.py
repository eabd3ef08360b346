import pytest

from app.core.exceptions import NotFoundError
from app.models.post import Post
from app.models.user import User
from app.repositories.post_repo import PostRepository
from app.repositories.user_repo import UserRepository
from app.schemas.profile_schema import ExperienceCreate, ProfileUpsert
from app.services.profile_service import ProfileService
from app.utils.identifiers import new_id


async def make_user(db_session, name="Carol"):
    user = User(
        user_id=new_id(),
        name=name,
        email=f"{name.lower()}@example.com",
        password_hash="$2b$12$fakehash",
        avatar="https://www.gravatar.com/avatar/x",
    )
    return await UserRepository(db_session).create_user(user)


async def test_upsert_creates_then_updates_in_place(db_session):
    user = await make_user(db_session)
    service = ProfileService(db_session)

    created = await service.upsert_profile(
        user.user_id, ProfileUpsert(status="Student", skills=" go ,rust", bio="Bio")
    )
    assert created.skills == ["go", "rust"]

    updated = await service.upsert_profile(
        user.user_id, ProfileUpsert(status="Developer", skills="go")
    )
    assert updated.profile_id == created.profile_id
    assert updated.status == "Developer"
    assert updated.bio == "Bio"


async def test_experience_entries_get_ids(db_session):
    user = await make_user(db_session)
    service = ProfileService(db_session)
    await service.upsert_profile(user.user_id, ProfileUpsert(status="Dev", skills="go"))

    profile = await service.add_experience(
        user.user_id,
        ExperienceCreate.model_validate({"title": "Dev", "company": "Acme", "from": "2020-01-01"}),
    )
    entry = profile.experience[0]
    assert entry["id"]
    assert entry["from"] == "2020-01-01"
    assert entry["current"] is False


async def test_delete_account_failure_is_not_rolled_back(db_session, monkeypatch):
    user = await make_user(db_session)
    service = ProfileService(db_session)
    await service.upsert_profile(user.user_id, ProfileUpsert(status="Dev", skills="go"))
    await PostRepository(db_session).create_post(
        Post(post_id=new_id(), user_id=user.user_id, text="hi", likes=[], comments=[])
    )

    async def broken(user_id):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(service.repo, "delete_profile_by_user_id", broken)

    with pytest.raises(RuntimeError):
        await service.delete_account(user.user_id)

    # 第一步 (貼文) 已經刪除，User 與 Profile 仍在
    assert await PostRepository(db_session).list_posts() == []
    assert await UserRepository(db_session).get_user_by_id(user.user_id) is not None
    assert await service.repo.get_profile_by_user_id(user.user_id) is not None


async def test_upsert_for_missing_user_writes_nothing(db_session):
    service = ProfileService(db_session)
    ghost_id = new_id()

    with pytest.raises(NotFoundError):
        await service.upsert_profile(ghost_id, ProfileUpsert(status="Dev", skills="go"))

    assert await service.repo.get_profile_by_user_id(ghost_id) is None
