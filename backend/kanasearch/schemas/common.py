"""
共通スキーマ定義（APIで共通利用する型）

【初心者向け】
- AppError は HTTPException の detail にエラー本体を入れるので、
  実際のレスポンスは { "detail": { "error": { "code", "message" } } } になる
- ErrorResponse はその形をそのまま表す（OpenAPI の responses= に使う）
"""
from pydantic import BaseModel


class ErrorInfo(BaseModel):
    """エラーの中身"""
    code: str  # INVALID_INPUT / NOT_FOUND
    message: str


class ErrorBody(BaseModel):
    """AppError の detail"""
    error: ErrorInfo


class ErrorResponse(BaseModel):
    """エラーレスポンス"""
    detail: ErrorBody
