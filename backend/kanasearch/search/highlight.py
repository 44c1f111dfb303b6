"""
一致範囲の強調表示（検索結果の表示用）
"""
import unicodedata
from typing import List, Optional, Sequence, Tuple


def highlight(
    text: str,
    ranges: Sequence[Tuple[int, int]],
    open_mark: str = "[",
    close_mark: str = "]",
) -> str:
    """
    一致範囲を記号で囲んだ文字列を返す

    例: highlight("しゃけ", [(0, 2)]) -> "[しゃ]け"

    Args:
        text: 元の文字列
        ranges: 一致範囲（開始位置の昇順、重ならないこと）
        open_mark: 範囲の前に付ける記号
        close_mark: 範囲の後に付ける記号

    Returns:
        強調した文字列
    """
    parts = []
    last = 0
    for start, end in ranges:
        parts.append(text[last:start])
        parts.append(open_mark + text[start:end] + close_mark)
        last = end
    parts.append(text[last:])
    return "".join(parts)


def display_width(text: str) -> int:
    """端末上の表示幅（全角・東アジアの広い文字は2として数える）"""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def pad_columns(
    rows: Sequence[Sequence[str]],
    extras: Optional[Sequence[Sequence[str]]] = None,
) -> List[List[str]]:
    """
    表の各列を表示幅の最大値まで空白で埋める

    例: pad_columns([["ryo", "kz"], ["バルーン", "x"]])
        -> [["ryo     ", "kz"], ["バルーン", "x "]]

    Args:
        rows: 行ごとの列の値（どの行も同じ列数）
        extras: 行ごとの追加文字列。その行の幅はすべての列幅の下限になる

    Returns:
        埋めた後の行のリスト
    """
    if not rows:
        return []
    widths = [0] * len(rows[0])
    for index, row in enumerate(rows):
        floor = max((display_width(s) for s in extras[index]), default=0) if extras else 0
        for column, value in enumerate(row):
            widths[column] = max(widths[column], display_width(value), floor)
    return [
        [value + " " * (widths[column] - display_width(value)) for column, value in enumerate(row)]
        for row in rows
    ]
