# app/schemas/post_schema.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.schemas.common import require_value

# 建立貼文 / 新增留言 共用的 Request Body
class PostCreate(BaseModel):
    text: Optional[str] = Field(None, validate_default=True)

    @field_validator("text")
    @classmethod
    def text_required(cls, v: Optional[str]) -> str:
        return require_value(v, {"text": "Text is required"}, "text")

class CommentCreate(PostCreate):
    pass

class LikeOut(BaseModel):
    id: str
    user_id: str

class CommentOut(BaseModel):
    id: str
    user_id: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime

class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_id: str
    user_id: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeOut] = []
    comments: List[CommentOut] = []
    date: datetime
