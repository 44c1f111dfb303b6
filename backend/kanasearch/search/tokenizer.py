"""
トークナイザ（文字列 → Token 列）

【初心者向け】
- Token = 元の部分文字列（original）+ 同じ読みの別表記（equivalents）
- 連続する空白は1トークンにまとめ、別表記は半角スペース1つ
- かなは拗音（2文字）を先に、次に1文字を対応表で引いてローマ字を付ける
- 漢字・英字・数字・記号は1文字1トークン（別表記なし）
"""
from dataclasses import dataclass
from typing import List, Tuple

from kanasearch.search.kana import MAX_KANA_LENGTH, romanize

# 空白トークンの別表記
SPACE = " "


@dataclass(frozen=True)
class Token:
    """トークン（不変の値オブジェクト）"""
    original: str                       # 元の部分文字列（空にならない）
    equivalents: Tuple[str, ...] = ()   # 同じ読みの別表記（順序あり）


def fold_case(text: str) -> str:
    """
    1文字ずつ小文字化する

    小文字化で文字数が変わる文字（例: "İ"）はそのまま残す。
    トークンの長さと元の文字列の位置がずれないようにするため。
    """
    return "".join(
        lowered if len(lowered) == 1 else ch
        for ch, lowered in ((ch, ch.lower()) for ch in text)
    )


def leading_whitespace(text: str) -> int:
    """先頭の空白文字数（trimで落とした分）を返す"""
    return len(text) - len(text.lstrip())


def tokenize(text: str) -> List[Token]:
    """
    文字列をトークン列に分割する

    例: "しゃけ  ご飯" -> [しゃ(sha), け(ke), "  "(" "), ご(go), 飯]

    Args:
        text: 元の文字列（どんな文字列でもよい、空文字列も可）

    Returns:
        Tokenのリスト（左から順）
    """
    normalized = fold_case(text).strip()
    tokens: List[Token] = []
    i = 0

    while i < len(normalized):
        ch = normalized[i]

        # 連続する空白は1トークンにまとめる
        if ch.isspace():
            end = i + 1
            while end < len(normalized) and normalized[end].isspace():
                end += 1
            tokens.append(Token(normalized[i:end], (SPACE,)))
            i = end
            continue

        # 長い綴り（拗音）から順に対応表を引く
        for length in range(MAX_KANA_LENGTH, 0, -1):
            chunk = normalized[i:i + length]
            if len(chunk) < length:
                continue
            roman = romanize(chunk)
            if roman:
                tokens.append(Token(chunk, (roman,)))
                i += length
                break
        else:
            tokens.append(Token(ch))
            i += 1

    return tokens
