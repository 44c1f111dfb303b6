"""
APIエラーの共通形式

【初心者向け】
- 検索APIのエラーは必ず { "error": { "code": "...", "message": "..." } } の形で返す
- コードは2種類だけ: 入力が不正（INVALID_INPUT=400）と、楽曲が存在しない（NOT_FOUND=404）
- あいまい検索エンジン本体はどんな文字列でも例外を投げないので、ここを使うのはHTTP層だけ
"""
from typing import Literal, NoReturn, Optional

from fastapi import HTTPException, status

ErrorCode = Literal["INVALID_INPUT", "NOT_FOUND"]

# コード -> (HTTPステータス, 既定メッセージ)
_ERROR_DEFINITIONS: dict[ErrorCode, tuple[int, str]] = {
    "INVALID_INPUT": (status.HTTP_400_BAD_REQUEST, "入力が不正です"),
    "NOT_FOUND": (status.HTTP_404_NOT_FOUND, "指定された楽曲は存在しません"),
}


def error_body(code: ErrorCode, message: str) -> dict[str, dict[str, str]]:
    """AppError の detail に入れる本体（schemas.common.ErrorBody と同じ形）"""
    return {"error": {"code": code, "message": message}}


class AppError(HTTPException):
    """検索APIの共通エラー

    FastAPI は detail をそのままJSONにするので、レスポンスは
    { "detail": { "error": { "code": ..., "message": ... } } } になる。
    """

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        status_code, default_message = _ERROR_DEFINITIONS[code]
        self.code = code
        self.message = message or default_message
        super().__init__(status_code=status_code, detail=error_body(code, self.message))


def raise_invalid_input(message: Optional[str] = None) -> NoReturn:
    """クエリが空などの入力エラー（400）"""
    raise AppError("INVALID_INPUT", message)


def raise_not_found(message: Optional[str] = None) -> NoReturn:
    """存在しない楽曲IDが指定された（404）"""
    raise AppError("NOT_FOUND", message)
