import logging
from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.exceptions import UnauthorizedError
from app.core.security import get_current_user_id
from app.services.auth_service import AuthService
from app.schemas.user_schema import Token, TokenOut, UserLogin, UserOut


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth", # 路由前綴
    tags=["Auth"]    # API 文件分類標籤
)


@router.get("", response_model=UserOut)
async def read_current_user(
    current_user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    獲取當前登入使用者的基本資料 (不含密碼)
    """
    auth_service = AuthService(db)
    return await auth_service.get_user(current_user_id)


@router.post("", response_model=TokenOut)
async def login(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    以 email / 密碼 (JSON) 登入，回傳 token
    """
    auth_service = AuthService(db)
    token = await auth_service.login(credentials.email, credentials.password)
    return {"token": token}


@router.post("/token", response_model=Token)
async def login_for_access_token(
    # (重要) 使用 OAuth2PasswordRequestForm 會強制 API 只接受 form-data
    # 格式為 username=...&password=... (供 API 文件頁面的 Authorize 使用)
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """
    提供帳號 (username 欄位傳 email) 和密碼以取得 Access Token
    """
    auth_service = AuthService(db)

    # form_data.username 欄位就是我們的 email
    user = await auth_service.authenticate_user(
        email=form_data.username,
        password=form_data.password
    )

    if not user:
        raise UnauthorizedError("Incorrect email or password")

    logger.info(f"User logged in: {user.user_id}")
    access_token = auth_service.create_login_token(user)

    return {"access_token": access_token, "token_type": "bearer"}
