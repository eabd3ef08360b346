# app/routers/user_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.services.auth_service import AuthService
from app.schemas.user_schema import TokenOut, UserCreate

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)

@router.post("", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
async def register_new_user(
    user_data: UserCreate, # Request Body 會被 Pydantic 驗證
    db: AsyncSession = Depends(get_db)
):
    """
    註冊新使用者，成功後直接回傳 token

    - 密碼至少 6 個字元
    - 頭像使用 email 的 Gravatar
    """
    auth_service = AuthService(db)
    new_user = await auth_service.register_user(user_data)
    return {"token": auth_service.create_login_token(new_user)}
