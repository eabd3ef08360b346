# app/models/post.py
from sqlalchemy import Column, String, TEXT, ForeignKey, JSON, CHAR
from app.core.database import Base
from app.models.user import Timestamp, utc_now

class Post(Base):
    """
    貼文文件。likes / comments 內嵌於同一筆資料 (JSON)。
    name / avatar 為建立當下從 User 複製的快照，之後不會同步更新。
    """
    __tablename__ = "posts"

    post_id = Column(CHAR(36), primary_key=True)
    user_id = Column(CHAR(36), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(TEXT, nullable=False)
    name = Column(String(100))
    avatar = Column(String(500))
    # [{"id", "user_id"}]，同一使用者最多一個
    likes = Column(JSON, nullable=False, default=list)
    # [{"id", "user_id", "text", "name", "avatar", "date"}]
    comments = Column(JSON, nullable=False, default=list)
    date = Column(Timestamp, default=utc_now, nullable=False, index=True)
