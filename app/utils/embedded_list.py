# app/utils/embedded_list.py
# 父文件 (Profile / Post) 內嵌子清單的操作：
# experience、education、likes、comments 都是 dict 組成的有序 list，
# 最新的項目永遠放在 index 0。
from typing import Any, Dict, List, Optional

from app.utils.identifiers import new_id

Entry = Dict[str, Any]

def new_entry(**fields: Any) -> Entry:
    """建立子項目並產生新的 id"""
    return {"id": new_id(), **fields}

def prepend_entry(entries: Optional[List[Entry]], entry: Entry) -> List[Entry]:
    """回傳新 list，entry 放在最前面 (不修改原本的 list)"""
    return [entry, *(entries or [])]

def find_entry(
    entries: Optional[List[Entry]], value: Any, key: str = "id"
) -> Optional[Entry]:
    """依 key 找到第一個相符的項目，找不到回傳 None"""
    for entry in entries or []:
        if entry.get(key) == value:
            return entry
    return None

def remove_entry(entries: Optional[List[Entry]], entry: Entry) -> List[Entry]:
    """
    移除 `entry` 這一個項目 (只移除第一個相同物件)，其餘項目順序不變。
    回傳新 list。
    """
    remaining = list(entries or [])
    for index, item in enumerate(remaining):
        if item is entry:
            del remaining[index]
            break
    return remaining
