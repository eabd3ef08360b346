# app/core/exceptions.py
# 應用程式錯誤類型，以及統一的 錯誤 -> HTTP 回應 轉換
import enum
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class AppError(Exception):
    """Service / Repository 層拋出的錯誤基底類別"""
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str = "Server Error"):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """輸入資料格式錯誤 (400)，可指定欄位"""
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT


# 錯誤類型 -> HTTP 狀態碼 (全專案只在這裡定義一次)
STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _field_name(loc: tuple) -> str:
    # loc 例如 ("body", "skills") 或 ("path", "post_id")
    names = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(names) if names else str(loc[0]) if loc else "body"


def _error_message(error: Dict[str, Any], field: str) -> str:
    # field_validator 拋出的 ValueError，只取原始訊息 (去掉 "Value error, " 前綴)
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    if error.get("type") == "missing":
        return f"{field} is required"
    return error.get("msg", "Invalid value")


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """將 Pydantic 錯誤列表轉為 [{field, message}]"""
    formatted = []
    for err in errors:
        # JSON 格式錯誤時 loc 的第二個值是字元位置，不是欄位
        if err.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(tuple(err.get("loc", ())))
        formatted.append({"field": field, "message": _error_message(err, field)})
    return formatted


def error_response(exc: AppError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    if exc.kind == ErrorKind.VALIDATION:
        field = getattr(exc, "field", None)
        return JSONResponse(
            status_code=status_code,
            content={"errors": [{"field": field or "body", "message": exc.message}]},
        )
    return JSONResponse(status_code=status_code, content={"msg": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """將所有錯誤類型註冊到 FastAPI，路由層不需要自行 try/except"""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": format_validation_errors(exc.errors())},
        )

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.kind == ErrorKind.INTERNAL:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            return PlainTextResponse("Server Error", status_code=500)
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        # 不回傳任何內部細節給前端
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return PlainTextResponse("Server Error", status_code=500)
