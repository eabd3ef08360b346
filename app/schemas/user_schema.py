# app/schemas/user_schema.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator
from app.schemas.common import require_value

# 登入請求的格式
class UserLogin(BaseModel):
    email: EmailStr
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator("password")
    @classmethod
    def password_required(cls, v: Optional[str]) -> str:
        return require_value(v, {"password": "Password is required"}, "password")

# OAuth2 表單登入的 Token 回應格式
class Token(BaseModel):
    access_token: str
    token_type: str

# 註冊 / 登入 (JSON) 的回應
class TokenOut(BaseModel):
    token: str

# Token 內的資料
class TokenData(BaseModel):
    user_id: str


# 註冊請求 Body
class UserCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=100, validate_default=True)
    email: EmailStr
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: Optional[str], info: ValidationInfo) -> str:
        return require_value(v, {"name": "Name is required"}, info.field_name).strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> str:
        """密碼至少 6 個字元"""
        if v is None or len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        return v

# 查詢使用者的安全回應 (不含密碼)
class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    date: datetime

# 嵌入在 Profile 回應中的 owner 資訊
class UserBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    name: str
    avatar: Optional[str] = None
