# models/user.py
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, CHAR
from sqlalchemy.dialects import mysql
from app.core.database import Base

# MySQL 預設的 DATETIME 只到秒，同一秒內建立的資料排序會不穩定
Timestamp = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class User(Base):
    __tablename__ = "users"

    # 基本欄位
    user_id = Column(CHAR(36), primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(500))
    date = Column(Timestamp, default=utc_now, nullable=False)
