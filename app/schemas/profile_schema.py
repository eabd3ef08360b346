# app/schemas/profile_schema.py
from datetime import date, datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from app.schemas.common import require_value
from app.schemas.user_schema import UserBrief

# 社群連結可接受的 key
SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")
# 一般選填欄位
OPTIONAL_FIELDS = ("company", "website", "location", "bio", "githubusername")

# --- 建立 / 更新 Profile (upsert) ---
class ProfileUpsert(BaseModel):
    # 必填
    status: Optional[str] = Field(None, max_length=255, validate_default=True)
    # 逗號分隔字串，e.g. "js, css, html"
    skills: Optional[str] = Field(None, validate_default=True)

    # 選填：未傳入 (或空字串) 的欄位不會覆蓋既有資料
    company: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None
    githubusername: Optional[str] = Field(None, max_length=100)

    # 社群連結 (攤平傳入)
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status", "skills")
    @classmethod
    def required_fields(cls, v: Optional[str], info: ValidationInfo) -> str:
        messages = {"status": "Status is required", "skills": "Skills is required"}
        return require_value(v, messages, info.field_name)

    def skill_list(self) -> List[str]:
        """將 skills 以逗號切開並去除空白，保持原本順序"""
        return [skill.strip() for skill in self.skills.split(",")]

    def supplied_fields(self) -> Dict[str, str]:
        """只回傳有傳入 (非空) 的選填欄位"""
        return {
            key: getattr(self, key) for key in OPTIONAL_FIELDS if getattr(self, key)
        }

    def supplied_social(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in SOCIAL_FIELDS if getattr(self, key)}


# --- 經歷 (Experience) ---
class ExperienceCreate(BaseModel):
    title: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = Field(None, validate_default=True)
    location: Optional[str] = None
    # 必填；缺少時的錯誤位置為 "from"
    from_date: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("title", "company")
    @classmethod
    def required_fields(cls, v, info: ValidationInfo):
        messages = {
            "title": "Title is required",
            "company": "Company is required",
        }
        return require_value(v, messages, info.field_name)

class ExperienceOut(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


# --- 學歷 (Education) ---
class EducationCreate(BaseModel):
    school: Optional[str] = Field(None, validate_default=True)
    degree: Optional[str] = Field(None, validate_default=True)
    fieldofstudy: Optional[str] = Field(None, validate_default=True)
    # 必填；缺少時的錯誤位置為 "from"
    from_date: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("school", "degree", "fieldofstudy")
    @classmethod
    def required_fields(cls, v, info: ValidationInfo):
        messages = {
            "school": "School is required",
            "degree": "Degree is required",
            "fieldofstudy": "Field of study is required",
        }
        return require_value(v, messages, info.field_name)

class EducationOut(BaseModel):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(..., alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


# --- Profile 回應 ---
class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    profile_id: str
    user_id: str
    # owner 的 name / avatar (帳號刪除後可能為 None)
    user: Optional[UserBrief] = None
    status: str
    skills: List[str] = []
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Dict[str, str] = {}
    experience: List[ExperienceOut] = []
    education: List[EducationOut] = []
    date: datetime
