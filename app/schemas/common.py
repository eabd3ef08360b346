# app/schemas/common.py
from typing import Any, Dict
from pydantic import BaseModel

# 單純訊息的回應 (e.g. {"msg": "Post removed"})
class MessageOut(BaseModel):
    msg: str


def require_value(value: Any, messages: Dict[str, str], field_name: str) -> Any:
    """
    必填欄位檢查：None 或空白字串都視為未填。
    messages 為 欄位 -> 錯誤訊息 (e.g. "status" -> "Status is required")
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(messages.get(field_name, f"{field_name} is required"))
    return value
