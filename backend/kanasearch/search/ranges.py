"""
一致範囲の変換（トークン番号 → 元の文字列上の文字位置）
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from kanasearch.search.aligner import MatchingStrategy
from kanasearch.search.tokenizer import Token, leading_whitespace

Range = Tuple[int, int]


@dataclass(frozen=True)
class RangeMapping:
    """範囲変換の結果"""
    query_ranges: List[Range] = field(default_factory=list)    # クエリ文字列上の [start, end)
    target_ranges: List[Range] = field(default_factory=list)   # 対象文字列上の [start, end)
    missed_query_tokens: int = 0
    query_token_weights: List[float] = field(default_factory=list)
    target_token_weights: List[float] = field(default_factory=list)


def merge_ranges(ranges: Iterable[Range]) -> List[Range]:
    """
    範囲を開始位置でソートし、隣接・重複するものをまとめる

    例: [(3, 5), (0, 2), (2, 3)] -> [(0, 5)]
    """
    merged: List[Range] = []
    for start, end in sorted(ranges):
        if merged and merged[-1][1] >= start:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def token_offsets(text: str, tokens: Sequence[Token]) -> List[int]:
    """
    トークン境界の文字位置（累積和）を返す

    先頭は trim で落とした空白の文字数から始まるので、
    offsets[k] がそのまま元の文字列上の位置になる。

    Returns:
        長さ len(tokens) + 1 のリスト
    """
    offsets = [leading_whitespace(text)]
    for token in tokens:
        offsets.append(offsets[-1] + len(token.original))
    return offsets


def map_ranges(
    strategy: MatchingStrategy,
    query: str,
    query_tokens: Sequence[Token],
    target: str,
    target_tokens: Sequence[Token],
) -> RangeMapping:
    """
    対応付けの結果を文字位置の範囲に変換する

    Args:
        strategy: 最良の対応付け
        query: 元のクエリ文字列（trim前）
        query_tokens: クエリのトークン列
        target: 元の対象文字列（trim前）
        target_tokens: 対象のトークン列

    Returns:
        RangeMapping
    """
    merged_query = merge_ranges(match.query_range for match in strategy.matches)
    merged_target = merge_ranges(
        (match.target_index, match.target_index + 1) for match in strategy.matches
    )

    matched_count = sum(end - start for start, end in merged_query)
    missed = len(query_tokens) - matched_count

    query_offsets = token_offsets(query, query_tokens)
    target_offsets = token_offsets(target, target_tokens)

    # トークンごとの最良の重み（グループ一致はトークン数で割る）
    query_weights = [0.0] * len(query_tokens)
    target_weights = [0.0] * len(target_tokens)
    for match in strategy.matches:
        share = match.weight / match.size
        for index in range(match.query_start, match.query_end):
            query_weights[index] = max(query_weights[index], share)
        target_weights[match.target_index] = match.weight

    return RangeMapping(
        query_ranges=[(query_offsets[start], query_offsets[end]) for start, end in merged_query],
        target_ranges=[(target_offsets[start], target_offsets[end]) for start, end in merged_target],
        missed_query_tokens=missed,
        query_token_weights=query_weights,
        target_token_weights=target_weights,
    )
