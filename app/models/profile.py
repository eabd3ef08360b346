# app/models/profile.py
from sqlalchemy import Column, String, TEXT, ForeignKey, JSON, CHAR
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.user import Timestamp, utc_now

class Profile(Base):
    """
    個人檔案文件。
    experience / education 為內嵌子清單 (JSON)，不另外建表，
    只能透過 Profile 讀寫，刪除 Profile 時一併消失。
    """
    __tablename__ = "profiles"
    profile_id = Column(CHAR(36), primary_key=True)
    # 一個 User 最多一個 Profile
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    company = Column(String(255))
    website = Column(String(500))
    location = Column(String(255))
    status = Column(String(255), nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    bio = Column(TEXT)
    githubusername = Column(String(100))
    # {"youtube": url, "twitter": url, ...}，key 皆為選填
    social = Column(JSON, nullable=False, default=dict)
    # 最新的在最前面
    experience = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)
    date = Column(Timestamp, default=utc_now, nullable=False)

    # 只用於回傳 owner 的 name / avatar
    user = relationship("User", lazy="selectin")
