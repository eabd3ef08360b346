# app/utils/identifiers.py
import uuid

def new_id() -> str:
    """產生文件 id (UUID 字串，存入 CHAR(36))"""
    return str(uuid.uuid4())

def is_valid_id(value: str) -> bool:
    """檢查 id 格式是否為 UUID；格式錯誤的 id 視同查無資料"""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
